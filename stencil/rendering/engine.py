"""Template rendering engine."""

from __future__ import annotations

import logging
from typing import Any, Mapping

from jinja2 import Environment, StrictUndefined, Template, TemplateError

from ..core.errors import TemplateRenderError

logger = logging.getLogger(__name__)

_ENVIRONMENT = Environment(
    undefined=StrictUndefined,
    autoescape=False,
    keep_trailing_newline=True,
)


def compile_template(text: str) -> Template:
    """Compile template text into a Jinja2 template.

    Args:
        text: Template source

    Returns:
        Compiled Jinja2 template
    """
    try:
        return _ENVIRONMENT.from_string(text)
    except TemplateError as e:
        raise TemplateRenderError(f"Invalid template: {e}") from e


def render_template(text: str, answers: Mapping[str, Any]) -> str:
    """Render template text with ``answers`` as the only context variable.

    Args:
        text: Template source
        answers: Answers context exposed to the template as ``answers``

    Returns:
        Rendered text
    """
    template = compile_template(text)
    try:
        return template.render(answers=answers)
    except TemplateError as e:
        raise TemplateRenderError(f"Failed to render template: {e}") from e
