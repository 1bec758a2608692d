"""Core contracts-domain exports."""

from rustci.core.contracts.exceptions import (
    NotARecognizedProjectError,
    PathNotFoundError,
    ProjectValidationError,
    RustCIError,
)
from rustci.core.contracts.filesystem import FileSystem
from rustci.core.contracts.layout import DEFAULT_LAYOUT, ScaffoldLayout
from rustci.core.contracts.result import GenerateResult

__all__ = [
    "DEFAULT_LAYOUT",
    "FileSystem",
    "GenerateResult",
    "NotARecognizedProjectError",
    "PathNotFoundError",
    "ProjectValidationError",
    "RustCIError",
    "ScaffoldLayout",
]
