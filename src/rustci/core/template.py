"""Bundled CI workflow template.

The template is shipped as package data and emitted verbatim: no placeholders,
no environment-dependent fields. Re-running the generator always yields the
same bytes.
"""

from __future__ import annotations

import hashlib
from functools import lru_cache
from importlib.resources import files

_TEMPLATE_PACKAGE = "rustci.templates"
_TEMPLATE_NAME = "rust-ci.yml"


@lru_cache(maxsize=1)
def load_template() -> str:
    """Return the workflow template text exactly as bundled."""
    resource = files(_TEMPLATE_PACKAGE).joinpath(_TEMPLATE_NAME)
    with resource.open("r", encoding="utf-8", newline="") as handle:
        return handle.read()


WORKFLOW_TEMPLATE: str = load_template()
WORKFLOW_TEMPLATE_SHA256: str = hashlib.sha256(WORKFLOW_TEMPLATE.encode("utf-8")).hexdigest()
