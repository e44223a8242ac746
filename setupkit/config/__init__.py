"""Configuration handling for setup checklists and scaffolding."""

from .models import (
    CheckConfig,
    SectionConfig,
    ChecklistConfig,
    ScaffoldConfig,
)
from .loader import ChecklistLoader, ConfigError

__all__ = [
    "CheckConfig",
    "SectionConfig",
    "ChecklistConfig",
    "ScaffoldConfig",
    "ChecklistLoader",
    "ConfigError",
]
