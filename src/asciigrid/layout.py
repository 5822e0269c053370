"""
Column width negotiation and multi-line cell layout.

The layout stage turns raw cells into a rectangular grid of text lines:
every column gets a fixed width and every cell becomes one or more
physical lines no wider than that width. The renderer only pads and
decorates what this module produces.
"""

from __future__ import annotations

from collections.abc import Sequence

from .models import Cell, LayoutOptions, check_row, check_table_shape, check_width

# Tabs plus every boundary str.splitlines() recognises
_LINE_BREAKS = str.maketrans(dict.fromkeys("\t\n\r\v\f\x1c\x1d\x1e\x85\u2028\u2029", " "))


def cell_text(value: Cell) -> str:
    """
    Render a cell value as text.

    ``None`` becomes the empty string; everything else uses ``str()``.
    Tabs and line breaks are replaced with spaces so a cell always
    occupies exactly the width it reports.
    """
    if value is None:
        return ""
    return str(value).translate(_LINE_BREAKS)


def compute_column_widths(
    headers: Sequence[Cell],
    rows: Sequence[Sequence[Cell]],
    max_column_width: int | None = None,
) -> list[int]:
    """
    Compute the display width of every column.

    The width of column ``i`` is the longest rendered text among the
    header and every row's cell ``i``. Rows shorter than the headers
    contribute empty text for their missing cells.

    Args:
        headers: Header cells; their count fixes the number of columns
        rows: Body rows, possibly ragged
        max_column_width: Optional cap applied to every column

    Returns:
        One width per header, or an empty list when there are no headers

    Raises:
        InvalidInputError: If headers or rows are not sequences of cells,
            or max_column_width is not a positive integer
    """
    check_table_shape(headers, rows)
    check_width("max_column_width", max_column_width)

    widths = [len(cell_text(h)) for h in headers]
    for row in rows:
        for i, cell in enumerate(row[: len(widths)]):
            widths[i] = max(widths[i], len(cell_text(cell)))

    if max_column_width is not None:
        widths = [min(w, max_column_width) for w in widths]
    return widths


def _chunk(text: str, width: int) -> list[str]:
    return [text[i : i + width] for i in range(0, len(text), width)]


def wrap_cell(text: str, width: int, wrap_words: bool = False) -> list[str]:
    """
    Break cell text into lines no longer than ``width``.

    Text that already fits is returned untouched as a single line.
    Otherwise, in character mode the text is cut every ``width``
    characters, spaces included. In word mode the text is split on runs
    of whitespace and the words are packed greedily, separated by single
    spaces; a word longer than ``width`` is hard-broken into chunks that
    each take their own line.

    Word mode is lossy on purpose: joining its output with single spaces
    gives back the input with every whitespace run collapsed to one
    space (and leading/trailing whitespace dropped).

    Args:
        text: Cell text
        width: Maximum line length, must be positive
        wrap_words: Break at whitespace rather than at character offsets

    Returns:
        A non-empty list of lines

    Raises:
        InvalidInputError: If width is not a positive integer

    Example:
        >>> wrap_cell("the quick brown fox", 10, wrap_words=True)
        ['the quick', 'brown fox']
        >>> wrap_cell("the quick brown fox", 10)
        ['the quick ', 'brown fox']
    """
    check_width("wrap width", width)

    if len(text) <= width:
        return [text]
    if not wrap_words:
        return _chunk(text, width)

    lines: list[str] = []
    current = ""
    for word in text.split():
        if len(word) > width:
            if current:
                lines.append(current)
                current = ""
            lines.extend(_chunk(word, width))
        elif not current:
            current = word
        elif len(current) + 1 + len(word) <= width:
            current = f"{current} {word}"
        else:
            lines.append(current)
            current = word
    if current:
        lines.append(current)

    # Whitespace-only text longer than the width
    return lines or [""]


def normalize_row(
    row: Sequence[Cell],
    widths: Sequence[int],
    options: LayoutOptions,
) -> list[list[str]]:
    """
    Lay out one logical row as a rectangular, column-major grid of lines.

    Each column holds the wrapped lines of its cell. Shorter columns are
    padded at the bottom with empty lines so that every column of the row
    spans the same number of physical lines.

    Cells are only wrapped when ``options.max_column_width`` is set.
    Missing trailing cells render as empty text and extra cells are
    dropped.
    """
    check_row(row)
    columns: list[list[str]] = []
    for i, width in enumerate(widths):
        text = cell_text(row[i]) if i < len(row) else ""
        if options.wraps and len(text) > width:
            columns.append(wrap_cell(text, width, options.wrap_words))
        else:
            columns.append([text])

    height = max((len(lines) for lines in columns), default=1)
    for lines in columns:
        lines.extend([""] * (height - len(lines)))
    return columns


def physical_lines(columns: Sequence[Sequence[str]]) -> list[list[str]]:
    """Transpose a column-major row grid into a list of physical lines."""
    return [list(line) for line in zip(*columns)]
