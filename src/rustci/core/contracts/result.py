"""Generation result contracts."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel


class GenerateResult(BaseModel):
    project_dir: Path
    output_path: Path
    created_dir: bool = False
    replaced: bool = False
    dry_run: bool = False

    model_config = {"frozen": True}
