"""Jinja2 binding for the template function registry.

Template syntax is handled entirely by Jinja2; this module only wires a
:class:`~clusterfuncs.render.registry.FunctionRegistry` into an
environment's globals.  Templates call functions by their catalog name::

    args:
    {% for arg in DnsControllerArgv() %}
      - "{{ arg }}"
    {% endfor %}

Errors raised by a template function propagate unchanged and abort the
render.  References to names outside the catalog raise
:class:`jinja2.UndefinedError`.
"""

from __future__ import annotations

import logging
from pathlib import Path

from jinja2 import Environment, StrictUndefined

from clusterfuncs.render.registry import FunctionRegistry

logger = logging.getLogger(__name__)


def build_environment(registry: FunctionRegistry) -> Environment:
    """Return a Jinja2 environment whose globals are *registry*'s bindings."""
    env = Environment(
        undefined=StrictUndefined,
        keep_trailing_newline=True,
        trim_blocks=True,
        lstrip_blocks=True,
        autoescape=False,
    )
    registry.populate(env.globals)
    return env


def render_template(template_text: str, registry: FunctionRegistry) -> str:
    """Render *template_text* against *registry*."""
    env = build_environment(registry)
    return env.from_string(template_text).render()


def render_file(template_path: str | Path, registry: FunctionRegistry) -> str:
    """Render the template at *template_path*.

    Raises :class:`FileNotFoundError` if the template does not exist.
    """
    src = Path(template_path)
    if not src.is_file():
        raise FileNotFoundError(f"Template not found: {template_path}")
    logger.debug(
        "Rendering %s for cluster %s", src, registry.context.cluster_name
    )
    return render_template(src.read_text(encoding="utf-8"), registry)
