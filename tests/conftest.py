"""Pytest fixtures for asciigrid tests."""

import pytest

from asciigrid import Table


@pytest.fixture
def headers() -> list[str]:
    """Headers of the reference people table."""
    return ["Name", "Age", "City"]


@pytest.fixture
def rows() -> list[list[str]]:
    """Rows of the reference people table."""
    return [
        ["Alice", "25", "New York"],
        ["Bob", "30", "Los Angeles"],
        ["Charlie", "35", "Chicago"],
    ]


@pytest.fixture
def people(headers: list[str], rows: list[list[str]]) -> Table:
    """The reference people table."""
    return Table(headers=headers, rows=rows)


@pytest.fixture
def long_text_table() -> Table:
    """Table with descriptions far wider than a typical column cap."""
    return Table(
        headers=["Name", "Description", "Status"],
        rows=[
            [
                "Alice",
                "This is a very long description that contains many words and "
                "should be wrapped to fit within the column width",
                "Active",
            ],
            [
                "Bob",
                "Another extremely long description that demonstrates how the "
                "word wrapping functionality works with different text lengths",
                "Inactive",
            ],
            ["Charlie", "Short description", "Pending"],
        ],
    )
