"""
Command-line interface for setupkit.

Provides commands for validating a Next.js + Storybook project setup,
scaffolding a new project, and managing checklist files.
"""

import sys
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.prompt import Confirm
from rich.table import Table

from . import __version__
from .config import ChecklistLoader, ConfigError
from .config.loader import CHECKLIST_FILENAMES, parse_scaffold
from .logging_utils import configure_logging
from .preflight import (
    ChecklistReport,
    ChecklistValidator,
    ManifestMode,
    ValidatorStartupError,
    summarize_sections,
)
from .scaffold import CommandError, ScaffoldError, ScaffoldRunner

console = Console(highlight=False, soft_wrap=True)
err_console = Console(stderr=True, highlight=False, soft_wrap=True)

EXIT_STARTUP_ERROR = 2


# ============================================================
# Main CLI Group
# ============================================================

@click.group()
@click.version_option(version=__version__, prog_name="setupkit")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx, verbose: bool):
    """
    Next.js + Storybook project setup kit.

    Scaffold a component-driven web project and validate that every
    setup step has been completed.
    """
    ctx.ensure_object(dict)
    configure_logging(level="DEBUG" if verbose else None)


# ============================================================
# VALIDATE Command
# ============================================================

def _load_checklist(
    project_dir: Path, checklist: Optional[str], component: str = "Button"
) -> ChecklistLoader:
    """Pick the checklist: explicit file, project setupkit.yaml, or built-in default."""
    if checklist:
        return ChecklistLoader(checklist).load()
    if any((project_dir / name).is_file() for name in CHECKLIST_FILENAMES):
        return ChecklistLoader(project_dir).load()
    return ChecklistLoader(component=component)


def run_validation(
    project_dir: Path,
    checklist: Optional[str] = None,
    strict_manifest: bool = False,
    component: str = "Button",
) -> int:
    """
    Validate a project directory and print the report.

    The built-in checklist expects files for the given sample component.

    Returns:
        Process exit code: 0 all passed, 1 failures, 2 startup error
    """
    try:
        loader = _load_checklist(project_dir, checklist, component)
        config = loader.checklist
    except ConfigError as e:
        err_console.print(f"[red]Configuration error: {escape(str(e))}[/red]")
        return EXIT_STARTUP_ERROR

    mode = ManifestMode.STRUCTURED if strict_manifest else config.manifest_mode

    try:
        validator = ChecklistValidator(project_dir, manifest_mode=mode)
    except ValidatorStartupError as e:
        err_console.print(f"[red]Error: {escape(str(e))}[/red]")
        return EXIT_STARTUP_ERROR

    section_results = validator.run_sections(config.to_sections())
    summary = summarize_sections(section_results)

    ChecklistReport(console).render(section_results, summary)
    return summary.exit_code


@cli.command()
@click.argument("project_dir", type=click.Path(file_okay=False), default=".")
@click.option(
    "--checklist",
    "-c",
    type=click.Path(exists=True, dir_okay=False),
    help="Checklist YAML file (defaults to setupkit.yaml in the project, then built-in)",
)
@click.option(
    "--strict-manifest",
    is_flag=True,
    help="Parse package.json and scope package/script lookups to their sections",
)
def validate(project_dir: str, checklist: Optional[str], strict_manifest: bool):
    """Check that a project contains every expected setup artifact."""
    sys.exit(run_validation(Path(project_dir), checklist, strict_manifest))


@click.command(name="validate-setup")
@click.version_option(version=__version__, prog_name="validate-setup")
def validate_setup():
    """Validate the project in the current directory."""
    configure_logging()
    sys.exit(run_validation(Path.cwd()))


# ============================================================
# SCAFFOLD Command
# ============================================================

@cli.command()
@click.option("--name", "-n", type=str, help="Project directory name (default: my-app)")
@click.option("--component", type=str, help="Sample component name (default: Button)")
@click.option(
    "--config",
    "-c",
    "config_file",
    type=click.Path(exists=True, dir_okay=False),
    help="YAML file with a 'scaffold' section",
)
@click.option(
    "--workdir",
    "-w",
    type=click.Path(file_okay=False, exists=True),
    default=".",
    help="Directory in which to create the project",
)
@click.option("--dry-run", is_flag=True, help="Print commands without running them")
@click.option("--skip-tests", is_flag=True, help="Do not run unit tests after setup")
@click.option("--validate", "validate_after", is_flag=True, help="Validate the project when done")
def scaffold(
    name: Optional[str],
    component: Optional[str],
    config_file: Optional[str],
    workdir: str,
    dry_run: bool,
    skip_tests: bool,
    validate_after: bool,
):
    """Generate a Next.js + Storybook project with sample component and tests."""
    try:
        loader = ChecklistLoader(config_file).load() if config_file else ChecklistLoader()
        overrides = loader.scaffold.model_dump()
        if name:
            overrides["project_name"] = name
        if component:
            overrides["component_name"] = component
        if skip_tests:
            overrides["run_tests"] = False
        config = parse_scaffold(overrides)
    except ConfigError as e:
        err_console.print(f"[red]Configuration error: {escape(str(e))}[/red]")
        sys.exit(EXIT_STARTUP_ERROR)

    runner = ScaffoldRunner(config, workdir=workdir, console=console, dry_run=dry_run)
    try:
        result = runner.run()
    except (ScaffoldError, CommandError) as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        sys.exit(1)

    if validate_after and not dry_run:
        console.print()
        sys.exit(run_validation(result.project_dir, component=config.component_name))


# ============================================================
# INIT Command
# ============================================================

@cli.command()
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False),
    default=CHECKLIST_FILENAMES[0],
    help="Checklist file to write",
)
@click.option("--force", "-f", is_flag=True, help="Overwrite without asking")
def init(output: str, force: bool):
    """Write the default checklist to a YAML file for customization."""
    output_path = Path(output)

    if output_path.exists() and not force:
        if not Confirm.ask(f"[yellow]{output} already exists. Overwrite?[/yellow]"):
            console.print("[red]Aborted.[/red]")
            return

    loader = ChecklistLoader()
    loader.save(output_path)

    console.print(Panel.fit(
        f"[green]Checklist written to [cyan]{escape(output)}[/cyan][/green]\n\n"
        f"Contains {loader.checklist.check_count} checks in "
        f"{len(loader.checklist.sections)} sections.\n\n"
        f"[bold]Next steps:[/bold]\n"
        f"1. Edit the checks to match your project\n"
        f"2. Run: [yellow]setupkit validate[/yellow]",
        title="Initialization Complete",
    ))


# ============================================================
# LIST Command
# ============================================================

@cli.command("list")
@click.option(
    "--checklist",
    "-c",
    type=click.Path(exists=True, dir_okay=False),
    help="Checklist YAML file (defaults to built-in)",
)
def list_checks(checklist: Optional[str]):
    """Show the checks that validate would run."""
    try:
        loader = ChecklistLoader(checklist).load() if checklist else ChecklistLoader()
        config = loader.checklist
    except ConfigError as e:
        err_console.print(f"[red]Configuration error: {escape(str(e))}[/red]")
        sys.exit(EXIT_STARTUP_ERROR)

    table = Table(title=f"Checklist: {config.name} ({config.manifest_mode.value} manifest lookups)")
    table.add_column("#", style="dim", justify="right")
    table.add_column("Section", style="cyan")
    table.add_column("Check", style="green")
    table.add_column("Kind")
    table.add_column("Target", style="yellow")

    index = 1
    for section in config.sections:
        for check in section.checks:
            table.add_row(
                str(index),
                escape(section.title),
                escape(check.description),
                check.kind.value,
                escape(check.target),
            )
            index += 1

    console.print(table)


def main():
    cli(obj={})


if __name__ == "__main__":
    main()
