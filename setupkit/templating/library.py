"""
Boilerplate library for generated project files.

Maps each template to its output path inside the project and writes
the rendered files.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from ..config.models import ScaffoldConfig
from .engine import RenderContext, TemplateEngine

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BoilerplateFile:
    """A template and the project-relative path it renders to."""
    template: str
    path: str
    description: str


class BoilerplateLibrary:
    """
    Library of boilerplate files for a component-driven project.

    Component file names follow the configured component name.
    """

    def __init__(self, engine: Optional[TemplateEngine] = None):
        self.engine = engine or TemplateEngine()

    def files(self, context: RenderContext) -> List[BoilerplateFile]:
        """Get the boilerplate files for a render context, in write order."""
        component_dir = "src/components"
        name = context.component
        return [
            BoilerplateFile("component.tsx.j2", f"{component_dir}/{name}.tsx", f"{name} component"),
            BoilerplateFile(
                "component.stories.tsx.j2", f"{component_dir}/{name}.stories.tsx", f"{name} story"
            ),
            BoilerplateFile("vitest.config.ts.j2", "vitest.config.ts", "Vitest configuration"),
            BoilerplateFile("test-setup.ts.j2", context.setup_file, "Test setup file"),
            BoilerplateFile(
                "component.test.tsx.j2", f"{component_dir}/{name}.test.tsx", f"{name} test"
            ),
            BoilerplateFile(
                "component.stories.test.tsx.j2",
                f"{component_dir}/{name}.stories.test.tsx",
                "Storybook-Vitest test",
            ),
            BoilerplateFile("playwright.config.ts.j2", "playwright.config.ts", "Playwright configuration"),
            BoilerplateFile(
                "e2e.spec.ts.j2", f"{context.e2e_dir}/{name.lower()}.spec.ts", "Playwright e2e test"
            ),
        ]

    def write(self, project_root: Path, context: RenderContext) -> List[Path]:
        """
        Render and write every boilerplate file.

        Args:
            project_root: Root of the generated project
            context: Render context

        Returns:
            Paths written, in order
        """
        written = []
        for item in self.files(context):
            target = Path(project_root) / item.path
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(self.engine.render(item.template, context), encoding="utf-8")
            logger.info(f"Wrote {item.description}: {target}")
            written.append(target)
        return written


def context_from_config(config: ScaffoldConfig) -> RenderContext:
    """Build a render context from scaffold settings."""
    return RenderContext(component=config.component_name, dev_port=config.dev_port)


def write_boilerplate(project_root: Path, config: ScaffoldConfig) -> List[Path]:
    """Write all boilerplate files for a scaffold configuration."""
    return BoilerplateLibrary().write(project_root, context_from_config(config))
