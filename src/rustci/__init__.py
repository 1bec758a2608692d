"""Public API surface for rustci."""

__version__ = "0.1.0"

from rustci.core import (
    WORKFLOW_TEMPLATE,
    WORKFLOW_TEMPLATE_SHA256,
    LocalFileSystem,
    check_workflow,
    emit_workflow,
    ensure_workflow_dir,
    generate,
    load_template,
    validate_project,
)
from rustci.core.contracts import (
    DEFAULT_LAYOUT,
    FileSystem,
    GenerateResult,
    NotARecognizedProjectError,
    PathNotFoundError,
    ProjectValidationError,
    RustCIError,
    ScaffoldLayout,
)

__all__ = [
    "DEFAULT_LAYOUT",
    "WORKFLOW_TEMPLATE",
    "WORKFLOW_TEMPLATE_SHA256",
    "FileSystem",
    "GenerateResult",
    "LocalFileSystem",
    "NotARecognizedProjectError",
    "PathNotFoundError",
    "ProjectValidationError",
    "RustCIError",
    "ScaffoldLayout",
    "__version__",
    "check_workflow",
    "emit_workflow",
    "ensure_workflow_dir",
    "generate",
    "load_template",
    "validate_project",
]
