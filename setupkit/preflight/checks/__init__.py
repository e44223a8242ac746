"""
Check Implementations

Individual test functions for each kind of check.
"""

from .filesystem import file_exists, dir_exists
from .environment import command_available
from .manifest import Manifest, MANIFEST_NAME

__all__ = [
    "file_exists",
    "dir_exists",
    "command_available",
    "Manifest",
    "MANIFEST_NAME",
]
