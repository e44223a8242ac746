"""
Checklist Validator

Main orchestrator for setup validation checks.
"""

import logging
import shutil
from functools import reduce
from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Sequence, Union

from .models import (
    Check,
    CheckKind,
    CheckResult,
    ChecklistSection,
    ManifestMode,
    RunSummary,
    SectionResult,
)
from .checks import Manifest, command_available, dir_exists, file_exists
from .checks.environment import Which

logger = logging.getLogger(__name__)


class ValidatorStartupError(Exception):
    """The project root cannot be inspected at all."""
    pass


def summarize(results: Iterable[CheckResult]) -> RunSummary:
    """Fold results, in order, into a RunSummary."""
    return reduce(lambda summary, result: summary.add(result), results, RunSummary())


class ChecklistValidator:
    """
    Evaluates an ordered checklist against a project directory.

    Every check runs regardless of earlier failures. The validator only
    reads the filesystem and the manifest; it never modifies the project.
    """

    def __init__(
        self,
        project_root: Union[str, Path] = ".",
        manifest_mode: ManifestMode = ManifestMode.SUBSTRING,
        which: Optional[Which] = None,
    ):
        """
        Initialize the validator.

        Args:
            project_root: Directory to inspect
            manifest_mode: How package.json lookups are performed
            which: Executable lookup used by command checks

        Raises:
            ValidatorStartupError: If project_root cannot be read
        """
        self.project_root = Path(project_root)
        self.manifest_mode = ManifestMode(manifest_mode)
        self._which = which or shutil.which
        self._verify_root()
        self.manifest = Manifest(self.project_root, self.manifest_mode)

    def _verify_root(self) -> None:
        root = self.project_root
        if not root.exists():
            raise ValidatorStartupError(f"Project directory does not exist: {root}")
        if not root.is_dir():
            raise ValidatorStartupError(f"Project path is not a directory: {root}")
        try:
            next(iter(root.iterdir()), None)
        except OSError as e:
            raise ValidatorStartupError(f"Cannot read project directory {root}: {e}")

    def evaluate(self, check: Check) -> CheckResult:
        """Evaluate a single check."""
        kind = CheckKind(check.kind)

        if kind == CheckKind.FILE_EXISTS:
            passed = file_exists(self.project_root, check.target)
        elif kind == CheckKind.DIR_EXISTS:
            passed = dir_exists(self.project_root, check.target)
        elif kind == CheckKind.COMMAND_AVAILABLE:
            passed = command_available(check.target, self._which)
        elif kind == CheckKind.PACKAGE_DECLARED:
            passed = self.manifest.declares_package(check.target)
        else:
            passed = self.manifest.declares_script(check.target)

        logger.debug(f"{kind.value}({check.target!r}) -> {'pass' if passed else 'fail'}")
        return CheckResult(check=check, passed=passed)

    def results(self, checks: Iterable[Check]) -> Iterator[CheckResult]:
        """Yield one result per check, in declaration order."""
        for check in checks:
            yield self.evaluate(check)

    def run(self, checks: Sequence[Check]) -> RunSummary:
        """
        Run all checks and tally the outcome.

        Args:
            checks: Ordered checks to evaluate

        Returns:
            RunSummary over every check
        """
        return summarize(self.results(checks))

    def run_sections(self, sections: Sequence[ChecklistSection]) -> List[SectionResult]:
        """
        Run a sectioned checklist.

        Returns:
            One SectionResult per section, preserving order
        """
        return [
            SectionResult(section=section, results=tuple(self.results(section.checks)))
            for section in sections
        ]


def summarize_sections(section_results: Iterable[SectionResult]) -> RunSummary:
    """Fold every result of every section into a RunSummary."""
    return summarize(
        result
        for section_result in section_results
        for result in section_result.results
    )


def run(
    project_root: Union[str, Path],
    checks: Sequence[Check],
    manifest_mode: Optional[ManifestMode] = None,
) -> RunSummary:
    """Convenience wrapper around ChecklistValidator.run."""
    validator = ChecklistValidator(project_root, manifest_mode or ManifestMode.SUBSTRING)
    return validator.run(checks)
