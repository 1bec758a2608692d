"""Project layout conventions."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel


class ScaffoldLayout(BaseModel):
    manifest_name: str = "Cargo.toml"
    workflow_dir: Path = Path(".github/workflows")
    workflow_name: str = "rust-ci.yml"

    model_config = {"frozen": True}

    def manifest_path(self, project: Path) -> Path:
        return project / self.manifest_name

    def workflow_dir_path(self, project: Path) -> Path:
        return project / self.workflow_dir

    def workflow_path(self, project: Path) -> Path:
        return self.workflow_dir_path(project) / self.workflow_name


DEFAULT_LAYOUT = ScaffoldLayout()
