from __future__ import annotations

import pytest

from stencil.core.errors import TemplateRenderError
from stencil.rendering.engine import compile_template, render_template


def test_render_substitutes_answers() -> None:
    rendered = render_template("name: {{ answers.name }}", {"name": "demo"})

    assert rendered == "name: demo"
    assert "{{" not in rendered


def test_render_keeps_trailing_newline() -> None:
    assert render_template("{{ answers.x }}\n", {"x": 1}) == "1\n"


def test_render_supports_nested_and_control_flow() -> None:
    text = "{% for dep in answers.deps %}{{ dep }};{% endfor %}{{ answers.meta.owner }}"

    rendered = render_template(text, {"deps": ["a", "b"], "meta": {"owner": "me"}})

    assert rendered == "a;b;me"


def test_render_does_not_escape_html() -> None:
    assert render_template("{{ answers.tag }}", {"tag": "<div>"}) == "<div>"


def test_unresolved_reference_is_an_error() -> None:
    with pytest.raises(TemplateRenderError):
        render_template("{{ answers.name }}", {})


def test_only_answers_is_exposed() -> None:
    with pytest.raises(TemplateRenderError):
        render_template("{{ name }}", {"name": "demo"})


def test_syntax_error_is_an_error() -> None:
    with pytest.raises(TemplateRenderError):
        compile_template("{{ answers.name")
