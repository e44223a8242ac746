"""
Template rendering engine using Jinja2.

Renders project boilerplate files with project-specific values.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from jinja2 import Environment, PackageLoader, StrictUndefined


@dataclass
class StoryDefinition:
    """One Storybook story for the sample component."""
    name: str
    label: str
    expected_class: str
    variant: Optional[str] = None
    size: Optional[str] = None
    click: bool = False


DEFAULT_STORIES = [
    StoryDefinition("Primary", "Primary Button", "bg-blue-500", variant="primary"),
    StoryDefinition("Secondary", "Secondary Button", "bg-gray-200", variant="secondary"),
    StoryDefinition("Large", "Large Primary Button", "px-6", size="large"),
    StoryDefinition("Interactive", "Click me", "bg-blue-500", variant="primary", click=True),
]

DEFAULT_BROWSERS = [
    ("chromium", "Desktop Chrome"),
    ("firefox", "Desktop Firefox"),
    ("webkit", "Desktop Safari"),
]


@dataclass
class RenderContext:
    """Context for rendering boilerplate templates."""

    component: str = "Button"
    dev_port: int = 3000
    setup_file: str = "src/test/setup.ts"
    e2e_dir: str = "src/e2e"
    stories: List[StoryDefinition] = field(default_factory=lambda: list(DEFAULT_STORIES))
    browsers: List[Tuple[str, str]] = field(default_factory=lambda: list(DEFAULT_BROWSERS))

    @property
    def base_url(self) -> str:
        return f"http://localhost:{self.dev_port}"

    def as_dict(self) -> Dict[str, Any]:
        return {
            "component": self.component,
            "dev_port": self.dev_port,
            "setup_file": self.setup_file,
            "e2e_dir": self.e2e_dir,
            "stories": self.stories,
            "browsers": self.browsers,
            "base_url": self.base_url,
        }


class TemplateEngine:
    """
    Renders boilerplate templates shipped with the package.

    Undefined variables raise instead of rendering as empty strings.
    """

    def __init__(self, environment: Optional[Environment] = None):
        """Initialize the template engine."""
        self.env = environment or Environment(
            loader=PackageLoader("setupkit", "templating/templates"),
            undefined=StrictUndefined,
            keep_trailing_newline=True,
            autoescape=False,
        )

    def render(self, template_name: str, context: RenderContext) -> str:
        """
        Render a template with the given context.

        Args:
            template_name: Template file name (e.g. "component.tsx.j2")
            context: Render context with values

        Returns:
            Rendered file contents
        """
        template = self.env.get_template(template_name)
        return template.render(**context.as_dict())

    def list_templates(self) -> List[str]:
        """Names of all available templates."""
        return sorted(self.env.list_templates(extensions=["j2"]))
