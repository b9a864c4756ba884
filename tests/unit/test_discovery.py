"""Tests for skill file discovery."""

from __future__ import annotations

from pathlib import Path

import pytest

from skillcheck.scanner.discovery import find_skill_files


def test_single_file(tmp_path: Path):
    skill = tmp_path / "SKILL.md"
    skill.write_text("# Skill\n")
    assert find_skill_files(skill) == [str(skill.resolve())]


def test_walks_directories(tmp_path: Path):
    (tmp_path / "a.md").write_text("a")
    (tmp_path / "nested").mkdir()
    (tmp_path / "nested" / "B.MD").write_text("b")
    (tmp_path / "notes.txt").write_text("c")

    files = find_skill_files(tmp_path)
    names = [Path(f).name for f in files]
    assert names == ["a.md", "B.MD"]
    assert all(Path(f).is_absolute() for f in files)


def test_skips_hidden_and_dependency_dirs(tmp_path: Path):
    for skipped in (".git", "node_modules", ".venv"):
        (tmp_path / skipped).mkdir()
        (tmp_path / skipped / "README.md").write_text("x")
    (tmp_path / "skill.md").write_text("x")

    files = find_skill_files(tmp_path)
    assert [Path(f).name for f in files] == ["skill.md"]


def test_empty_directory(tmp_path: Path):
    assert find_skill_files(tmp_path) == []


def test_missing_path(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        find_skill_files(tmp_path / "missing")


def test_build_and_env_dirs_are_walked(tmp_path: Path):
    for name in ("build", "dist", "env"):
        (tmp_path / name).mkdir()
        (tmp_path / name / "skill.md").write_text("x")

    files = find_skill_files(tmp_path)
    assert [Path(f).parent.name for f in files] == ["build", "dist", "env"]
