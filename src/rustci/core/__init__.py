"""Core generation pipeline."""

from rustci.core.emitter import emit_workflow
from rustci.core.filesystem import LocalFileSystem
from rustci.core.generate import check_workflow, generate, resolve_project
from rustci.core.scaffolder import ensure_workflow_dir
from rustci.core.template import WORKFLOW_TEMPLATE, WORKFLOW_TEMPLATE_SHA256, load_template
from rustci.core.validator import validate_project

__all__ = [
    "WORKFLOW_TEMPLATE",
    "WORKFLOW_TEMPLATE_SHA256",
    "LocalFileSystem",
    "check_workflow",
    "emit_workflow",
    "ensure_workflow_dir",
    "generate",
    "load_template",
    "resolve_project",
    "validate_project",
]
