"""
asciigrid: Render tabular data as aligned, bordered text.

This library provides:
- Column width negotiation across headers and ragged rows
- Character or word based wrapping of long cells onto several lines
- Simple (ASCII), double and rounded box-drawing border styles
- Projection of records (mappings or objects) into tables

Example:
    from asciigrid import LayoutOptions, render_table

    print(
        render_table(
            {"headers": ["Name", "Notes"], "rows": [["Alice", "a long note ..."]]},
            LayoutOptions(style="rounded", max_column_width=30, wrap_words=True),
        )
    )
"""

from .exceptions import AsciiGridError, ConfigError, InvalidInputError
from .layout import cell_text, compute_column_widths, normalize_row, wrap_cell
from .models import Alignment, Cell, ColumnSpec, LayoutOptions, Table, TableStyle
from .records import project_records, render_from_records
from .renderer import TableRenderer, create_border, format_row, render_table
from .styles import BORDER_STYLES, BorderStyle, get_border_style

try:
    from ._version import __version__  # type: ignore[import-not-found]
except ImportError:
    __version__ = "0.0.0+unknown"

__all__ = [
    # Version
    "__version__",
    # Rendering
    "render_table",
    "render_from_records",
    "TableRenderer",
    "create_border",
    "format_row",
    # Layout
    "compute_column_widths",
    "wrap_cell",
    "normalize_row",
    "cell_text",
    "project_records",
    # Models
    "Table",
    "Cell",
    "LayoutOptions",
    "ColumnSpec",
    "TableStyle",
    "Alignment",
    "BorderStyle",
    "BORDER_STYLES",
    "get_border_style",
    # Exceptions
    "AsciiGridError",
    "InvalidInputError",
    "ConfigError",
]
