"""Local disk implementation of the filesystem contract."""

from __future__ import annotations

from pathlib import Path

from rustci.core.contracts.filesystem import FileSystem


class LocalFileSystem(FileSystem):
    def exists(self, path: Path) -> bool:
        return path.exists()

    def is_dir(self, path: Path) -> bool:
        return path.is_dir()

    def is_file(self, path: Path) -> bool:
        return path.is_file()

    def mkdir(self, path: Path) -> None:
        path.mkdir(parents=True, exist_ok=True)

    def read_bytes(self, path: Path) -> bytes:
        with path.open("rb") as handle:
            return handle.read()

    def write_text(self, path: Path, text: str) -> None:
        # newline="" keeps the template's LF line endings on every platform.
        with path.open("w", encoding="utf-8", newline="") as handle:
            handle.write(text)
