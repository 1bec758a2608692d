"""Shared test fixtures for rustci tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from tests.fakes.filesystem import FAKE_PROJECT, FakeFileSystem


@pytest.fixture
def cargo_project(tmp_path: Path) -> Path:
    """A real directory containing a minimal Cargo manifest."""
    project = tmp_path / "demo"
    project.mkdir()
    (project / "Cargo.toml").write_text('[package]\nname = "demo"\nversion = "0.1.0"\n', encoding="utf-8")
    return project


@pytest.fixture
def fake_fs() -> FakeFileSystem:
    """An in-memory filesystem holding a Cargo project at ``FAKE_PROJECT``."""
    return FakeFileSystem(files={FAKE_PROJECT / "Cargo.toml": "[package]\n"})
