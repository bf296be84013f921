"""Template function registry and its Jinja2 binding."""

from clusterfuncs.render.registry import (
    CATALOG,
    TARGET_ARCH,
    FunctionRegistry,
    TemplateFunction,
)
from clusterfuncs.render.renderer import (
    build_environment,
    render_file,
    render_template,
)

__all__ = [
    "CATALOG",
    "FunctionRegistry",
    "TARGET_ARCH",
    "TemplateFunction",
    "build_environment",
    "render_file",
    "render_template",
]
