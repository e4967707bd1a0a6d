import pytest
from django.utils import html as django_html

from django_escape_cythonized import html as cythonized_html


@pytest.fixture
def cythonized_escape():
    """Our cythonized escape."""
    return cythonized_html.escape


@pytest.fixture
def stock_escape():
    """Stock Django escape for comparison."""
    return django_html.escape
