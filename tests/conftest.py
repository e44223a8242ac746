"""Pytest configuration and shared fixtures."""

import json
from pathlib import Path
from typing import Optional
from unittest.mock import patch

import pytest

SCAFFOLDED_FILES = [
    "next.config.ts",
    "tsconfig.json",
    ".storybook/main.ts",
    ".storybook/preview.ts",
    "src/test/setup.ts",
    "vitest.config.ts",
]

COMPONENT_FILES = [
    "src/components/{name}.tsx",
    "src/components/{name}.stories.tsx",
    "src/components/{name}.test.tsx",
]

SCAFFOLDED_DIRS = ["src", "public", ".storybook", "src/components"]

SCAFFOLDED_MANIFEST = {
    "name": "my-app",
    "private": True,
    "scripts": {
        "dev": "next dev",
        "build": "next build",
        "storybook": "storybook dev -p 6006",
        "test": "vitest",
    },
    "devDependencies": {
        "storybook": "^8.4.0",
        "@storybook/react": "^8.4.0",
        "@storybook/nextjs": "^8.4.0",
        "vitest": "^2.1.0",
        "@testing-library/react": "^16.0.0",
        "@testing-library/jest-dom": "^6.6.0",
        "@testing-library/user-event": "^14.5.0",
    },
}


def write_manifest(root: Path, data) -> Path:
    """Write package.json from a dict, or raw text if given a string."""
    path = root / "package.json"
    text = data if isinstance(data, str) else json.dumps(data, indent=2)
    path.write_text(text)
    return path


@pytest.fixture
def empty_project(tmp_path):
    """An empty project directory."""
    root = tmp_path / "empty"
    root.mkdir()
    return root


def build_project(root: Path, component: Optional[str] = "Button") -> Path:
    """Lay out a generated project; component=None leaves out the sample component."""
    root.mkdir(parents=True, exist_ok=True)
    for d in SCAFFOLDED_DIRS:
        (root / d).mkdir(parents=True, exist_ok=True)
    files = list(SCAFFOLDED_FILES)
    if component:
        files += [f.format(name=component) for f in COMPONENT_FILES]
    for f in files:
        path = root / f
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text("// generated\n")
    write_manifest(root, SCAFFOLDED_MANIFEST)
    return root


@pytest.fixture
def scaffolded_project(tmp_path):
    """A project tree with every artifact the default checklist expects."""
    return build_project(tmp_path / "my-app")


@pytest.fixture
def project_builder():
    """Helper that lays out a generated project under a root."""
    return build_project


@pytest.fixture
def all_commands():
    """Every executable resolves on PATH."""
    with patch("shutil.which", side_effect=lambda name: f"/usr/bin/{name}"):
        yield


@pytest.fixture
def no_commands():
    """No executable resolves on PATH."""
    with patch("shutil.which", return_value=None):
        yield


@pytest.fixture
def manifest_writer():
    """Helper that writes package.json into a project root."""
    return write_manifest
