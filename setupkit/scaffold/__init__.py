"""
Project Scaffolding Module

Drives external generators and writes boilerplate for a new project.
"""

from .commands import CommandError, command_output, run_command
from .runner import ScaffoldError, ScaffoldResult, ScaffoldRunner

__all__ = [
    "CommandError",
    "ScaffoldError",
    "ScaffoldResult",
    "ScaffoldRunner",
    "command_output",
    "run_command",
]
