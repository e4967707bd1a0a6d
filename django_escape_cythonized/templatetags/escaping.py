from django import template

from django_escape_cythonized.html import escape, soft_str as _soft_str

register = template.Library()


@register.filter
def markup_escape(value):
    """Escape the five HTML special characters and mark the result safe."""
    return escape(value)


@register.filter(is_safe=True)
def soft_str(value):
    """Convert value to a string, keeping safe strings safe."""
    return _soft_str(value)
