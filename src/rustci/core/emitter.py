"""Workflow file emission."""

from __future__ import annotations

import logging
from pathlib import Path

from rustci.core.contracts.filesystem import FileSystem
from rustci.core.contracts.layout import ScaffoldLayout
from rustci.core.template import WORKFLOW_TEMPLATE

logger = logging.getLogger(__name__)


def emit_workflow(project: Path, *, layout: ScaffoldLayout, fs: FileSystem) -> Path:
    """Write the workflow template to its conventional path, replacing any existing file."""
    output = layout.workflow_path(project)
    fs.write_text(output, WORKFLOW_TEMPLATE)
    logger.debug("Wrote %d characters to %s", len(WORKFLOW_TEMPLATE), output)
    return output
