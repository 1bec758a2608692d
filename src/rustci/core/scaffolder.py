"""Workflow directory scaffolding."""

from __future__ import annotations

import logging
from pathlib import Path

from rustci.core.contracts.filesystem import FileSystem
from rustci.core.contracts.layout import ScaffoldLayout

logger = logging.getLogger(__name__)


def ensure_workflow_dir(project: Path, *, layout: ScaffoldLayout, fs: FileSystem) -> bool:
    """Create the workflow directory tree if missing.

    Returns ``True`` when the leaf directory did not exist beforehand.
    """
    workflow_dir = layout.workflow_dir_path(project)
    created = not fs.is_dir(workflow_dir)
    fs.mkdir(workflow_dir)
    if created:
        logger.debug("Created %s", workflow_dir)
    return created
