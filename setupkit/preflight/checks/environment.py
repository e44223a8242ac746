"""
Environment Checks

Looks up executables on the search path.
"""

import shutil
from typing import Callable, Optional

Which = Callable[[str], Optional[str]]


def command_available(name: str, which: Optional[Which] = None) -> bool:
    """
    Check whether an executable is resolvable on PATH.

    Args:
        name: Executable name (e.g. "node")
        which: Lookup function, defaults to shutil.which

    Returns:
        True if the command resolves to a path
    """
    return (which or shutil.which)(name) is not None
