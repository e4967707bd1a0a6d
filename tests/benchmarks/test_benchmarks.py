"""Benchmarks comparing cythonized vs stock Django HTML escaping.

Run with: uv run pytest tests/benchmarks/ -v
"""

import pytest

AUTHORS = [
    "Alice Smith", "Bob Jones", "Carol White",
    "David Brown", "Eve Davis", "Frank Miller",
]


def _make_values(n, special):
    values = []
    for i in range(n):
        author = AUTHORS[i % len(AUTHORS)]
        if special:
            values.append(f'<a href="/authors/{i}">{author} & "Friends" O\'Brien</a>')
        else:
            values.append(f"The Great Book of Everything Vol. {i + 1} by {author}")
    return values


def _escape_all(escape, values):
    for value in values:
        escape(value)


# --- Mostly-safe text: the common case for template variables ---


@pytest.mark.benchmark(group="plain")
def test_cythonized_plain(benchmark, cythonized_escape):
    benchmark(_escape_all, cythonized_escape, _make_values(1000, special=False))


@pytest.mark.benchmark(group="plain")
def test_stock_plain(benchmark, stock_escape):
    benchmark(_escape_all, stock_escape, _make_values(1000, special=False))


# --- Markup-heavy text: every value needs the build pass ---


@pytest.mark.benchmark(group="markup")
def test_cythonized_markup(benchmark, cythonized_escape):
    benchmark(_escape_all, cythonized_escape, _make_values(1000, special=True))


@pytest.mark.benchmark(group="markup")
def test_stock_markup(benchmark, stock_escape):
    benchmark(_escape_all, stock_escape, _make_values(1000, special=True))


# --- Numbers: passthrough without escaping ---


@pytest.mark.benchmark(group="numbers")
def test_cythonized_numbers(benchmark, cythonized_escape):
    benchmark(_escape_all, cythonized_escape, list(range(1000)))


@pytest.mark.benchmark(group="numbers")
def test_stock_numbers(benchmark, stock_escape):
    benchmark(_escape_all, stock_escape, list(range(1000)))
