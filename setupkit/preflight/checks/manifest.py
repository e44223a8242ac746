"""
Manifest Checks

Package and script lookups against the project's package.json.

Two modes are supported. The substring mode reproduces the legacy
shell validator: a name counts as declared if its quoted form appears
anywhere in the manifest text, regardless of section. The structured
mode parses the JSON and scopes each lookup to the right section.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

from ..models import ManifestMode

logger = logging.getLogger(__name__)

MANIFEST_NAME = "package.json"

DEPENDENCY_SECTIONS = (
    "dependencies",
    "devDependencies",
    "peerDependencies",
    "optionalDependencies",
)


class Manifest:
    """
    Read-only view of a project's package.json.

    The file is read at most once, on first use.
    """

    def __init__(self, project_root: Path, mode: ManifestMode = ManifestMode.SUBSTRING):
        self.path = Path(project_root) / MANIFEST_NAME
        self.mode = ManifestMode(mode)
        self._loaded = False
        self._text: Optional[str] = None
        self._data: Optional[Dict[str, Any]] = None

    @property
    def text(self) -> Optional[str]:
        """Raw manifest text, or None if it cannot be read."""
        self._load()
        return self._text

    @property
    def data(self) -> Optional[Dict[str, Any]]:
        """Parsed manifest, or None if absent or malformed."""
        self._load()
        return self._data

    def _load(self) -> None:
        if self._loaded:
            return
        self._loaded = True

        if not self.path.is_file():
            logger.debug(f"No manifest at {self.path}")
            return

        try:
            self._text = self.path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"Cannot read {self.path}: {e}")
            return

        if self.mode == ManifestMode.STRUCTURED:
            try:
                parsed = json.loads(self._text)
            except json.JSONDecodeError as e:
                logger.warning(f"Malformed manifest {self.path}: {e}")
                return
            if isinstance(parsed, dict):
                self._data = parsed
            else:
                logger.warning(f"Manifest {self.path} is not a JSON object")

    def mentions(self, name: str) -> bool:
        """True iff the literal quoted name occurs anywhere in the text."""
        text = self.text
        return text is not None and f'"{name}"' in text

    def declares_package(self, name: str) -> bool:
        """Check whether a package is declared."""
        if self.mode == ManifestMode.SUBSTRING:
            return self.mentions(name)
        return any(
            name in _section(self.data, section)
            for section in DEPENDENCY_SECTIONS
        )

    def declares_script(self, name: str) -> bool:
        """Check whether an npm script is declared."""
        if self.mode == ManifestMode.SUBSTRING:
            return self.mentions(name)
        return name in _section(self.data, "scripts")


def _section(data: Optional[Dict[str, Any]], key: str) -> Dict[str, Any]:
    if not data:
        return {}
    value = data.get(key)
    return value if isinstance(value, dict) else {}
