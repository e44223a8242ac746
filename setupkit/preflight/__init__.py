"""
Setup Validation Module

Runs an ordered checklist against a project directory.
"""

from .models import (
    Check,
    CheckKind,
    CheckResult,
    ChecklistSection,
    ManifestMode,
    RunSummary,
    SectionResult,
)
from .checker import (
    ChecklistValidator,
    ValidatorStartupError,
    run,
    summarize,
    summarize_sections,
)
from .report import ChecklistReport

__all__ = [
    "Check",
    "CheckKind",
    "CheckResult",
    "ChecklistSection",
    "ChecklistValidator",
    "ChecklistReport",
    "ManifestMode",
    "RunSummary",
    "SectionResult",
    "ValidatorStartupError",
    "run",
    "summarize",
    "summarize_sections",
]
