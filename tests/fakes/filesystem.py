"""In-memory filesystem fake."""

from __future__ import annotations

from pathlib import Path

from rustci.core.contracts.filesystem import FileSystem

FAKE_PROJECT = Path("/work/demo")


class FakeFileSystem(FileSystem):
    """In-memory filesystem with spy tracking and optional write failures."""

    def __init__(self, *, dirs: list[Path] | None = None, files: dict[Path, str] | None = None) -> None:
        self.dirs: set[Path] = set()
        self.files: dict[Path, str] = {}
        for path in dirs or []:
            self._add_dir(path)
        for path, text in (files or {}).items():
            self._add_dir(path.parent)
            self.files[path] = text

        self.mkdir_calls: list[Path] = []
        self.write_calls: list[Path] = []
        self.fail_writes_with: OSError | None = None

    def _add_dir(self, path: Path) -> None:
        self.dirs.add(path)
        self.dirs.update(path.parents)

    def exists(self, path: Path) -> bool:
        return path in self.dirs or path in self.files

    def is_dir(self, path: Path) -> bool:
        return path in self.dirs

    def is_file(self, path: Path) -> bool:
        return path in self.files

    def mkdir(self, path: Path) -> None:
        self.mkdir_calls.append(path)
        if path in self.files or any(parent in self.files for parent in path.parents):
            raise FileExistsError(str(path))
        self._add_dir(path)

    def read_bytes(self, path: Path) -> bytes:
        if path not in self.files:
            raise FileNotFoundError(str(path))
        return self.files[path].encode("utf-8")

    def write_text(self, path: Path, text: str) -> None:
        self.write_calls.append(path)
        if self.fail_writes_with is not None:
            raise self.fail_writes_with
        if path.parent not in self.dirs:
            raise FileNotFoundError(str(path.parent))
        self.files[path] = text
