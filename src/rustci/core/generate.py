"""Generation pipeline: validate, scaffold, emit."""

from __future__ import annotations

import hashlib
import logging
from pathlib import Path

from rustci.core.contracts.exceptions import PathNotFoundError
from rustci.core.contracts.filesystem import FileSystem
from rustci.core.contracts.layout import DEFAULT_LAYOUT, ScaffoldLayout
from rustci.core.contracts.result import GenerateResult
from rustci.core.emitter import emit_workflow
from rustci.core.filesystem import LocalFileSystem
from rustci.core.scaffolder import ensure_workflow_dir
from rustci.core.template import WORKFLOW_TEMPLATE_SHA256
from rustci.core.validator import validate_project

logger = logging.getLogger(__name__)


def resolve_project(project: str | Path | None) -> Path:
    """Expand and absolutize a project reference; ``None`` means the current directory."""
    if project is None:
        return Path.cwd()
    try:
        expanded = Path(project).expanduser()
    except RuntimeError as exc:
        raise PathNotFoundError(Path(project)) from exc
    return expanded.resolve()


def generate(
    project: str | Path | None = None,
    *,
    layout: ScaffoldLayout = DEFAULT_LAYOUT,
    fs: FileSystem | None = None,
    dry_run: bool = False,
) -> GenerateResult:
    """Validate *project* and write the CI workflow into it.

    Validation errors are raised before any mutation. In dry-run mode the
    result describes what a real run would do, and nothing is created or
    written. Filesystem errors propagate without cleanup.
    """
    fs = fs or LocalFileSystem()
    project_dir = validate_project(resolve_project(project), layout=layout, fs=fs)
    output_path = layout.workflow_path(project_dir)
    replaced = fs.exists(output_path)

    if dry_run:
        logger.info("[dry-run] would write %s", output_path)
        return GenerateResult(
            project_dir=project_dir,
            output_path=output_path,
            created_dir=not fs.is_dir(layout.workflow_dir_path(project_dir)),
            replaced=replaced,
            dry_run=True,
        )

    created_dir = ensure_workflow_dir(project_dir, layout=layout, fs=fs)
    written = emit_workflow(project_dir, layout=layout, fs=fs)
    return GenerateResult(
        project_dir=project_dir,
        output_path=written,
        created_dir=created_dir,
        replaced=replaced,
    )


def check_workflow(
    project: str | Path | None = None,
    *,
    layout: ScaffoldLayout = DEFAULT_LAYOUT,
    fs: FileSystem | None = None,
) -> bool:
    """Return whether the project's workflow file already matches the template exactly."""
    fs = fs or LocalFileSystem()
    project_dir = validate_project(resolve_project(project), layout=layout, fs=fs)
    output_path = layout.workflow_path(project_dir)
    if not fs.is_file(output_path):
        logger.debug("No workflow at %s", output_path)
        return False
    return hashlib.sha256(fs.read_bytes(output_path)).hexdigest() == WORKFLOW_TEMPLATE_SHA256
