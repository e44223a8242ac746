"""
Filesystem Checks

Existence tests for files and directories under the project root.
"""

from pathlib import Path


def file_exists(project_root: Path, target: str) -> bool:
    """True iff a regular file exists at project_root/target."""
    return (project_root / target).is_file()


def dir_exists(project_root: Path, target: str) -> bool:
    """True iff a directory exists at project_root/target."""
    return (project_root / target).is_dir()
