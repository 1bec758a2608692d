"""Tests for project validation."""

from __future__ import annotations

from pathlib import Path

import pytest

from rustci.core.contracts.exceptions import NotARecognizedProjectError, PathNotFoundError
from rustci.core.contracts.layout import DEFAULT_LAYOUT
from rustci.core.filesystem import LocalFileSystem
from rustci.core.validator import validate_project
from tests.fakes.filesystem import FAKE_PROJECT, FakeFileSystem


class TestValidateProject:
    def test_accepts_directory_with_manifest(self, cargo_project: Path) -> None:
        assert validate_project(cargo_project, layout=DEFAULT_LAYOUT, fs=LocalFileSystem()) == cargo_project

    def test_missing_directory(self, tmp_path: Path) -> None:
        missing = tmp_path / "nope"

        with pytest.raises(PathNotFoundError) as exc_info:
            validate_project(missing, layout=DEFAULT_LAYOUT, fs=LocalFileSystem())

        assert exc_info.value.path == missing
        assert str(missing) in str(exc_info.value)

    def test_regular_file_is_not_a_directory(self, tmp_path: Path) -> None:
        not_dir = tmp_path / "Cargo.toml"
        not_dir.write_text("", encoding="utf-8")

        with pytest.raises(PathNotFoundError):
            validate_project(not_dir, layout=DEFAULT_LAYOUT, fs=LocalFileSystem())

    def test_directory_without_manifest(self, tmp_path: Path) -> None:
        with pytest.raises(NotARecognizedProjectError) as exc_info:
            validate_project(tmp_path, layout=DEFAULT_LAYOUT, fs=LocalFileSystem())

        assert exc_info.value.path == tmp_path
        assert exc_info.value.manifest_name == "Cargo.toml"
        assert "Cargo.toml" in str(exc_info.value)

    def test_manifest_directory_is_not_a_manifest(self, tmp_path: Path) -> None:
        (tmp_path / "Cargo.toml").mkdir()

        with pytest.raises(NotARecognizedProjectError):
            validate_project(tmp_path, layout=DEFAULT_LAYOUT, fs=LocalFileSystem())

    def test_validation_never_mutates(self) -> None:
        fs = FakeFileSystem(dirs=[FAKE_PROJECT])

        with pytest.raises(NotARecognizedProjectError):
            validate_project(FAKE_PROJECT, layout=DEFAULT_LAYOUT, fs=fs)

        assert fs.mkdir_calls == []
        assert fs.write_calls == []
