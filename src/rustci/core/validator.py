"""Project precondition checks."""

from __future__ import annotations

import logging
from pathlib import Path

from rustci.core.contracts.exceptions import NotARecognizedProjectError, PathNotFoundError
from rustci.core.contracts.filesystem import FileSystem
from rustci.core.contracts.layout import ScaffoldLayout

logger = logging.getLogger(__name__)


def validate_project(project: Path, *, layout: ScaffoldLayout, fs: FileSystem) -> Path:
    """Ensure *project* is an existing directory holding the manifest marker.

    Returns the project path unchanged. Raises :class:`PathNotFoundError` or
    :class:`NotARecognizedProjectError`; never touches the filesystem beyond
    existence checks.
    """
    if not fs.is_dir(project):
        raise PathNotFoundError(project)

    manifest = layout.manifest_path(project)
    if not fs.is_file(manifest):
        raise NotARecognizedProjectError(project, layout.manifest_name)

    logger.debug("Found manifest %s", manifest)
    return project
