"""
Checklist Report

Renders validation results to the terminal with rich.
"""

from typing import Optional, Sequence

from rich.console import Console
from rich.markup import escape

from .models import CheckResult, RunSummary, SectionResult

BANNER_TITLE = "Next.js + Storybook Setup Validator"
RULE = "=" * 32


class ChecklistReport:
    """Prints per-check lines and the final summary."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console(highlight=False, soft_wrap=True)

    def banner(self) -> None:
        self.console.print(RULE)
        self.console.print(BANNER_TITLE)
        self.console.print(RULE)
        self.console.print()

    def section(self, section_result: SectionResult) -> None:
        """Print a section header, its result lines, and a blank line."""
        title = escape(section_result.section.title)
        self.console.print(f"[yellow]Checking {title}...[/yellow]")
        for result in section_result.results:
            self.result(result)
        self.console.print()

    def result(self, result: CheckResult) -> None:
        description = escape(result.check.description)
        if result.passed:
            self.console.print(f"[green]PASS[/green] {description}")
        else:
            target = escape(result.check.target)
            self.console.print(f"[red]FAIL[/red] {description} (missing: {target})")

    def summary(self, summary: RunSummary) -> None:
        """Print the pass/fail counts and the closing message."""
        self.console.print(RULE)
        self.console.print(f"[green]Passed: {summary.passed_count}[/green]")
        self.console.print(f"[red]Failed: {summary.failed_count}[/red]")
        self.console.print(RULE)
        self.console.print()

        if summary.succeeded:
            self.console.print("[green]All checks passed! Your setup is complete.[/green]")
            self.console.print()
            self.console.print("You can now run:")
            self.console.print("  - pnpm dev          (Start Next.js development server)")
            self.console.print("  - pnpm storybook    (Start Storybook)")
            self.console.print("  - pnpm test         (Run tests)")
        else:
            self.console.print("[red]Some checks failed. Please review the items above.[/red]")
            self.console.print()
            self.console.print("To complete the setup, follow the TUTORIAL.md file.")
        self.console.print()

    def render(self, section_results: Sequence[SectionResult], summary: RunSummary) -> None:
        """Print the complete report."""
        self.banner()
        for section_result in section_results:
            self.section(section_result)
        self.summary(summary)
