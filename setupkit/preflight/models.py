"""
Checklist Models

Immutable data types for a setup validation run.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Tuple


class CheckKind(str, Enum):
    """Kinds of checks the validator knows how to evaluate."""
    FILE_EXISTS = "file_exists"
    DIR_EXISTS = "dir_exists"
    COMMAND_AVAILABLE = "command_available"
    PACKAGE_DECLARED = "package_declared"
    SCRIPT_DECLARED = "script_declared"

    @property
    def reads_manifest(self) -> bool:
        return self in (CheckKind.PACKAGE_DECLARED, CheckKind.SCRIPT_DECLARED)

    @property
    def reads_filesystem(self) -> bool:
        return self in (CheckKind.FILE_EXISTS, CheckKind.DIR_EXISTS)


class ManifestMode(str, Enum):
    """How package.json is searched for package and script names."""
    SUBSTRING = "substring"
    STRUCTURED = "structured"


@dataclass(frozen=True)
class Check:
    """A single named check against the project tree or manifest."""
    description: str
    kind: CheckKind
    target: str


@dataclass(frozen=True)
class CheckResult:
    """Outcome of evaluating one check."""
    check: Check
    passed: bool

    @property
    def description(self) -> str:
        return self.check.description

    def __str__(self) -> str:
        if self.passed:
            return f"PASS {self.check.description}"
        return f"FAIL {self.check.description} (missing: {self.check.target})"


@dataclass(frozen=True)
class RunSummary:
    """Pass/fail tally over one validation run."""
    passed_count: int = 0
    failed_count: int = 0

    @property
    def total(self) -> int:
        return self.passed_count + self.failed_count

    @property
    def succeeded(self) -> bool:
        return self.failed_count == 0

    @property
    def exit_code(self) -> int:
        return 0 if self.succeeded else 1

    def add(self, result: CheckResult) -> "RunSummary":
        """Return a new summary with the result folded in."""
        if result.passed:
            return RunSummary(self.passed_count + 1, self.failed_count)
        return RunSummary(self.passed_count, self.failed_count + 1)

    def __str__(self) -> str:
        return f"Passed: {self.passed_count}, Failed: {self.failed_count}"


@dataclass(frozen=True)
class ChecklistSection:
    """A titled group of checks, used for display only."""
    title: str
    checks: Tuple[Check, ...] = field(default_factory=tuple)

    def __len__(self) -> int:
        return len(self.checks)


@dataclass(frozen=True)
class SectionResult:
    """Ordered results for one section."""
    section: ChecklistSection
    results: Tuple[CheckResult, ...]
