"""Tests for the pre-publication cleaner."""

from __future__ import annotations

import os
import sys
from pathlib import Path

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

import pytest

from cleaner import DEFAULT_EXCLUDES, ExcludeList, clean_directory, run_clean, validate_excludes

EXCLUDES = ExcludeList(files=("config.txt",), directories=("assets",))


def _yes(_: str) -> str:
    return "y"


def _site(base: Path) -> None:
    (base / "a.html").write_text("<p>a</p>", encoding="utf-8")
    (base / "b.txt").write_text("b", encoding="utf-8")
    (base / "config.txt").write_text("keep", encoding="utf-8")
    (base / "sub").mkdir()
    (base / "sub" / "index.html").write_text("<p>sub</p>", encoding="utf-8")
    (base / "assets").mkdir()
    (base / "assets" / "logo.png").write_bytes(b"png")


def _names(base: Path) -> set[str]:
    return {p.name for p in base.iterdir()}


def test_run_clean_deletes_everything_but_excludes(tmp_path: Path, capsys) -> None:
    _site(tmp_path)

    assert run_clean(tmp_path, EXCLUDES, input_func=_yes) == 0

    assert _names(tmp_path) == {"config.txt", "assets"}
    assert (tmp_path / "assets" / "logo.png").exists()
    out = capsys.readouterr().out
    assert 'File "a.html" deleted' in out
    assert 'File "b.txt" deleted' in out
    assert 'Directory "sub" deleted' in out
    assert out.rstrip().endswith("Operation completed")


def test_clean_directory_reports_files_before_directories(tmp_path: Path) -> None:
    _site(tmp_path)

    assert clean_directory(tmp_path, EXCLUDES) == ["a.html", "b.txt", "sub"]


def test_excludes_match_case_insensitively(tmp_path: Path) -> None:
    _site(tmp_path)
    (tmp_path / "config.txt").rename(tmp_path / "CONFIG.TXT")
    excludes = ExcludeList(files=("Config.Txt",), directories=("ASSETS",))

    assert validate_excludes(tmp_path, excludes) == []
    clean_directory(tmp_path, excludes)

    assert _names(tmp_path) == {"CONFIG.TXT", "assets"}


def test_excluded_names_inside_deleted_directories_are_not_protected(tmp_path: Path) -> None:
    _site(tmp_path)
    (tmp_path / "sub" / "config.txt").write_text("nested", encoding="utf-8")

    clean_directory(tmp_path, EXCLUDES)

    assert not (tmp_path / "sub").exists()


@pytest.mark.parametrize(
    "excludes",
    [
        ExcludeList(files=("config.txt", "missing.json"), directories=("assets",)),
        ExcludeList(files=("config.txt",), directories=("assets", "static")),
        # a file named like an excluded directory does not count
        ExcludeList(files=("config.txt",), directories=("b.txt",)),
    ],
)
def test_missing_exclude_aborts_without_deleting(tmp_path: Path, capsys, excludes) -> None:
    _site(tmp_path)
    before = _names(tmp_path)

    assert run_clean(tmp_path, excludes, input_func=_yes) == 1

    assert _names(tmp_path) == before
    assert "does not exist. Operation aborted." in capsys.readouterr().out


def test_validate_excludes_lists_every_problem(tmp_path: Path) -> None:
    problems = validate_excludes(tmp_path, DEFAULT_EXCLUDES)

    assert problems == [
        'File to exclude "appsettings.json" does not exist. Operation aborted.',
        'File to exclude "web.config" does not exist. Operation aborted.',
        'Directory to exclude "assets" does not exist. Operation aborted.',
    ]


def test_missing_target_directory(tmp_path: Path, capsys) -> None:
    assert run_clean(tmp_path / "nope", EXCLUDES, input_func=_yes) == 1
    assert "Problem with the path to process" in capsys.readouterr().out


@pytest.mark.parametrize("answer", ["", "n", "no", "yes", " y", "whatever"])
def test_non_affirmative_answer_changes_nothing(tmp_path: Path, capsys, answer: str) -> None:
    _site(tmp_path)
    before = _names(tmp_path)

    assert run_clean(tmp_path, EXCLUDES, input_func=lambda _: answer) == 0

    assert _names(tmp_path) == before
    assert "Operation aborted by the user." in capsys.readouterr().out


def test_symlinked_directory_is_unlinked_not_traversed(tmp_path: Path) -> None:
    _site(tmp_path)
    outside = tmp_path.parent / f"{tmp_path.name}-outside"
    outside.mkdir()
    (outside / "precious.txt").write_text("keep", encoding="utf-8")
    try:
        (tmp_path / "link").symlink_to(outside, target_is_directory=True)
    except OSError:
        pytest.skip("symlinks not supported")

    deleted = clean_directory(tmp_path, EXCLUDES)

    assert "link" in deleted
    assert (outside / "precious.txt").exists()


def test_exclude_list_from_names_falls_back_to_defaults() -> None:
    assert ExcludeList.from_names() == DEFAULT_EXCLUDES
    custom = ExcludeList.from_names(["a.txt"], None)
    assert custom.files == ("a.txt",)
    assert custom.directories == DEFAULT_EXCLUDES.directories
