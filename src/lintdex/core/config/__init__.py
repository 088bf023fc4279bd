"""Tool settings and project configuration."""
from __future__ import annotations

from .project import (
    ProjectConfiguration,
    ResolvedConfiguration,
    load_project_configuration,
    load_resolved_configuration,
    resolve_configuration,
)
from .settings import Settings

__all__ = [
    "Settings",
    "ProjectConfiguration",
    "ResolvedConfiguration",
    "load_project_configuration",
    "load_resolved_configuration",
    "resolve_configuration",
]
