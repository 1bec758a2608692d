"""Custom exception hierarchy for rustci.

All rustci exceptions inherit from :class:`RustCIError`. Validation failures
share :class:`ProjectValidationError` so callers can stop on either kind with a
single ``except`` clause while the CLI still maps each one to its own exit code.
Filesystem failures during scaffolding or emission are not wrapped and surface
as plain :class:`OSError`.
"""

from __future__ import annotations

from pathlib import Path


class RustCIError(Exception):
    """Base exception for all rustci errors."""


class ProjectValidationError(RustCIError):
    """Raised when a project reference fails a precondition.

    Attributes:
        path: The project path that was checked.
    """

    def __init__(self, path: Path, message: str) -> None:
        self.path = path
        super().__init__(message)


class PathNotFoundError(ProjectValidationError):
    """Raised when the project path does not resolve to an existing directory."""

    def __init__(self, path: Path) -> None:
        super().__init__(path, f"directory not found: {path}")


class NotARecognizedProjectError(ProjectValidationError):
    """Raised when the project directory has no toolchain manifest.

    Attributes:
        manifest_name: File name of the manifest that was expected.
    """

    def __init__(self, path: Path, manifest_name: str) -> None:
        self.manifest_name = manifest_name
        super().__init__(path, f"not a Rust project: no {manifest_name} found in {path}")
