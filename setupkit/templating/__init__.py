"""Template engine and library for project boilerplate."""

from .library import BoilerplateLibrary, BoilerplateFile, write_boilerplate
from .engine import TemplateEngine, RenderContext

__all__ = [
    "BoilerplateLibrary",
    "BoilerplateFile",
    "TemplateEngine",
    "RenderContext",
    "write_boilerplate",
]
