"""
Generic table renderer with box-drawing borders.

This module renders tabular data as an aligned text block framed by one
of the built-in border styles, wrapping long cells onto several lines
when a maximum column width is configured.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from .layout import cell_text, compute_column_widths, normalize_row, physical_lines
from .models import Alignment, Cell, LayoutOptions, Table, check_table_shape
from .styles import BorderStyle, get_border_style

logger = logging.getLogger(__name__)


def create_border(
    widths: Sequence[int],
    left: str,
    fill: str,
    right: str,
    junction: str,
) -> str:
    """Build a horizontal border line, e.g. ``+-------+-----+``."""
    return left + junction.join(fill * (w + 2) for w in widths) + right


def format_row(
    cells: Sequence[Cell],
    widths: Sequence[int],
    left: str,
    right: str,
    separator: str,
    alignments: Sequence[Alignment] | None = None,
) -> str:
    """
    Format one physical line of cells, e.g. ``| Alice   | 25  |``.

    Each cell is padded to its column width and surrounded by a single
    space on both sides. Missing cells are blank.
    """
    padded = []
    for i, width in enumerate(widths):
        text = cell_text(cells[i]) if i < len(cells) else ""
        align = alignments[i] if alignments and i < len(alignments) else Alignment.LEFT
        padded.append(f" {align.pad(text, width)} ")
    return left + separator.join(padded) + right


class TableRenderer:
    """Render data as a box-drawing table.

    Example output (simple style):
        +---------+-----+-------------+
        | Name    | Age | City        |
        +---------+-----+-------------+
        | Alice   | 25  | New York    |
        | Bob     | 30  | Los Angeles |
        +---------+-----+-------------+
    """

    def __init__(self, options: LayoutOptions | None = None) -> None:
        """Initialize the table renderer.

        Args:
            options: Layout options. Defaults to a bordered, unwrapped,
                left-aligned table in the simple style.
        """
        self._options = options or LayoutOptions()
        self._border = get_border_style(self._options.style)

    @property
    def options(self) -> LayoutOptions:
        return self._options

    @property
    def border(self) -> BorderStyle:
        return self._border

    def _border_line(self, widths: list[int], position: str) -> str:
        b = self._border
        if position == "top":
            return create_border(widths, b.top_left, b.horizontal, b.top_right, b.top_middle)
        if position == "middle":
            return create_border(
                widths, b.middle_left, b.horizontal, b.middle_right, b.middle_middle
            )
        return create_border(
            widths, b.bottom_left, b.horizontal, b.bottom_right, b.bottom_middle
        )

    def _row_lines(self, row: Sequence[Cell], widths: list[int]) -> list[str]:
        v = self._border.vertical
        alignments = [self._options.alignment_for(i) for i in range(len(widths))]
        grid = normalize_row(row, widths, self._options)
        return [format_row(line, widths, v, v, v, alignments) for line in physical_lines(grid)]

    def render(self, headers: Sequence[Cell], rows: Sequence[Sequence[Cell]]) -> str:
        """Render headers and rows as a formatted table.

        Args:
            headers: List of column header cells
            rows: List of rows, each row is a list of cell values

        Returns:
            Formatted table string without a trailing newline, or an
            empty string when there are no headers

        Raises:
            InvalidInputError: If headers or rows are not sequences of cells
        """
        check_table_shape(headers, rows)
        if not headers:
            return ""

        widths = compute_column_widths(headers, rows, self._options.max_column_width)
        show_borders = self._options.show_borders

        lines: list[str] = []
        if show_borders:
            lines.append(self._border_line(widths, "top"))

        lines.extend(self._row_lines(headers, widths))

        if show_borders and rows:
            lines.append(self._border_line(widths, "middle"))

        for row in rows:
            lines.extend(self._row_lines(row, widths))

        if show_borders:
            lines.append(self._border_line(widths, "bottom"))

        logger.debug(
            "Rendered %d columns x %d rows (%s style, widths=%s) into %d lines",
            len(widths),
            len(rows),
            self._options.table_style.value,
            widths,
            len(lines),
        )
        return "\n".join(lines)

    def render_table(self, table: Table) -> str:
        return self.render(table.headers, table.rows)


def render_table(
    table: Table | dict,
    options: LayoutOptions | dict | None = None,
) -> str:
    """
    Render a table as text.

    Args:
        table: A Table, or a ``{"headers": [...], "rows": [...]}`` mapping
        options: LayoutOptions, or a mapping accepted by
            ``LayoutOptions.from_dict``

    Returns:
        The rendered table; an empty string when there are no headers

    Raises:
        InvalidInputError: If the table or options are malformed

    Example:
        >>> print(render_table({"headers": ["Name", "Age"], "rows": [["Alice", 25]]}))
        +-------+-----+
        | Name  | Age |
        +-------+-----+
        | Alice | 25  |
        +-------+-----+
    """
    if not isinstance(table, Table):
        table = Table.from_dict(table)
    if not isinstance(options, LayoutOptions):
        options = LayoutOptions.from_dict(options)
    return TableRenderer(options).render_table(table)
