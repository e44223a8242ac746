"""
External command execution.

Thin wrapper over subprocess for the package manager and generators.
Success is judged only by exit status; output is never parsed.
"""

import logging
import os
import shlex
import subprocess
from pathlib import Path
from typing import Dict, List, Optional, Sequence

logger = logging.getLogger(__name__)


class CommandError(Exception):
    """An external command could not be run or exited non-zero."""

    def __init__(self, args: Sequence[str], message: str, returncode: Optional[int] = None):
        self.args_list = list(args)
        self.returncode = returncode
        super().__init__(f"{format_command(args)}: {message}")


def format_command(args: Sequence[str]) -> str:
    """Shell-quoted rendering of a command for display."""
    return " ".join(shlex.quote(a) for a in args)


def run_command(
    args: List[str],
    cwd: Optional[Path] = None,
    env: Optional[Dict[str, str]] = None,
    timeout: Optional[float] = None,
    capture: bool = False,
) -> subprocess.CompletedProcess:
    """
    Run an external command synchronously.

    Args:
        args: Command and arguments
        cwd: Working directory
        env: Extra environment variables, merged over os.environ
        timeout: Seconds before the command is killed
        capture: Capture stdout/stderr instead of streaming them

    Returns:
        The completed process

    Raises:
        CommandError: If the executable is missing, times out, or exits non-zero
    """
    full_env = None
    if env:
        full_env = dict(os.environ)
        full_env.update(env)

    logger.info(f"Running: {format_command(args)}" + (f" (cwd={cwd})" if cwd else ""))

    try:
        result = subprocess.run(
            args,
            cwd=str(cwd) if cwd else None,
            env=full_env,
            timeout=timeout,
            capture_output=capture,
            text=True,
        )
    except FileNotFoundError:
        raise CommandError(args, "command not found")
    except subprocess.TimeoutExpired:
        raise CommandError(args, f"timed out after {timeout}s")

    if result.returncode != 0:
        detail = ""
        if capture and result.stderr:
            detail = f": {result.stderr.strip()}"
        raise CommandError(args, f"exited with status {result.returncode}{detail}", result.returncode)

    return result


def command_output(args: List[str], timeout: float = 10) -> Optional[str]:
    """
    Return the stripped stdout of a command, or None if it fails.

    Used for informational lookups such as `node --version`.
    """
    try:
        result = run_command(args, timeout=timeout, capture=True)
    except CommandError as e:
        logger.debug(f"Lookup failed: {e}")
        return None
    return (result.stdout or "").strip()
