"""Filesystem adapter contract."""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path


class FileSystem(ABC):
    """Filesystem effects used by the generation pipeline.

    Implementations must let :class:`OSError` propagate; the pipeline performs
    no cleanup or retry on failure.
    """

    @abstractmethod
    def exists(self, path: Path) -> bool: ...  # pragma: no cover

    @abstractmethod
    def is_dir(self, path: Path) -> bool: ...  # pragma: no cover

    @abstractmethod
    def is_file(self, path: Path) -> bool: ...  # pragma: no cover

    @abstractmethod
    def mkdir(self, path: Path) -> None:
        """Create *path* and any missing parents; existing directories are fine."""

    @abstractmethod
    def read_bytes(self, path: Path) -> bytes: ...  # pragma: no cover

    @abstractmethod
    def write_text(self, path: Path, text: str) -> None:
        """Replace the full contents of *path* with *text*."""
