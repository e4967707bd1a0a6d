import pytest
from django.template import engines

from django_escape_cythonized.safestring import reset_safe_string_class


@pytest.fixture(autouse=True)
def _fresh_safe_string_class():
    reset_safe_string_class()
    yield
    reset_safe_string_class()


@pytest.fixture
def render():
    """Render a template string with the escaping library loaded."""

    def _render(template_string, context=None):
        engine = engines["django"]
        template = engine.from_string("{% load escaping %}" + template_string)
        return template.render(context or {})

    return _render
