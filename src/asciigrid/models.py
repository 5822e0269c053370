"""Core models for asciigrid."""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass, field, fields
from enum import Enum
from typing import Any

from .exceptions import InvalidInputError

Cell = str | int | float | bool | None


def is_sequence(value: Any) -> bool:
    """Return True for list-like values, excluding text and bytes."""
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray))


def check_width(name: str, width: int | None) -> None:
    """Reject a width that is not None or a positive integer."""
    if width is None:
        return
    if isinstance(width, bool) or not isinstance(width, int):
        raise InvalidInputError(name, "must be an integer", width)
    if width <= 0:
        raise InvalidInputError(name, "must be positive", width)


def check_row(row: Any, name: str = "row") -> None:
    if not is_sequence(row):
        raise InvalidInputError(name, "must be a sequence of cells", row)


def check_table_shape(headers: Any, rows: Any) -> None:
    """
    Reject headers and rows that are not sequences of cells.

    Text is not a sequence here: a bare string passed as headers or as
    a row would otherwise render as one column per character.

    Raises:
        InvalidInputError: On the first structural problem found
    """
    check_row(headers, "headers")
    if not is_sequence(rows):
        raise InvalidInputError("rows", "must be a sequence of rows", rows)
    for index, row in enumerate(rows):
        check_row(row, f"rows[{index}]")


class TableStyle(str, Enum):
    """Named border character sets."""

    SIMPLE = "simple"
    DOUBLE = "double"
    ROUNDED = "rounded"

    @classmethod
    def resolve(cls, value: TableStyle | str | None) -> TableStyle:
        """
        Resolve a style name, falling back to SIMPLE.

        Unknown names are not an error: the table is still rendered,
        just with the plain ASCII border set.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        return cls.SIMPLE


class Alignment(str, Enum):
    """Horizontal alignment of cell text within its column."""

    LEFT = "l"
    RIGHT = "r"
    CENTER = "c"

    def pad(self, text: str, width: int) -> str:
        if self is Alignment.RIGHT:
            return text.rjust(width)
        if self is Alignment.CENTER:
            return text.center(width)
        return text.ljust(width)


@dataclass(frozen=True)
class Table:
    """
    Headers plus rows of scalar cells.

    The number of headers drives the number of columns. Rows shorter
    than the headers are padded with empty cells and extra trailing
    cells are ignored when rendering.

    Attributes:
        headers: Column header cells
        rows: Body rows, each a sequence of cells
    """

    headers: Sequence[Cell]
    rows: Sequence[Sequence[Cell]] = field(default_factory=list)

    def __post_init__(self) -> None:
        check_table_shape(self.headers, self.rows)

    @property
    def column_count(self) -> int:
        return len(self.headers)

    @classmethod
    def from_dict(cls, data: Any) -> Table:
        """
        Build a table from a ``{"headers": [...], "rows": [[...], ...]}`` mapping.

        Missing keys default to empty sequences.

        Raises:
            InvalidInputError: If data is not a mapping or has the wrong shape
        """
        if not isinstance(data, Mapping):
            raise InvalidInputError("table", "must be a mapping with 'headers' and 'rows'", data)
        return cls(headers=data.get("headers", []), rows=data.get("rows", []))

    def to_dict(self) -> dict[str, Any]:
        return {
            "headers": list(self.headers),
            "rows": [list(row) for row in self.rows],
        }


# camelCase spellings accepted by LayoutOptions.from_dict
_OPTION_ALIASES = {
    "showBorders": "show_borders",
    "maxColumnWidth": "max_column_width",
    "wrapWords": "wrap_words",
}


@dataclass(frozen=True)
class LayoutOptions:
    """
    Rendering options for a table.

    Attributes:
        style: Border style name; unknown values fall back to "simple"
        show_borders: Draw top, separator and bottom border lines
        max_column_width: Cap on a column's content width. Cells longer
            than this are wrapped onto several physical lines.
        wrap_words: Break wrapped cells at whitespace instead of at
            arbitrary character offsets
        alignments: Per-column alignment ("l", "r" or "c"). Columns
            without an entry are left-aligned.
    """

    style: TableStyle | str = TableStyle.SIMPLE
    show_borders: bool = True
    max_column_width: int | None = None
    wrap_words: bool = False
    alignments: Sequence[Alignment | str] | None = None

    def __post_init__(self) -> None:
        # Quoted "false" from JSON or YAML would otherwise be truthy
        for name in ("show_borders", "wrap_words"):
            value = getattr(self, name)
            if not isinstance(value, bool):
                raise InvalidInputError(name, "must be a boolean", value)
        check_width("max_column_width", self.max_column_width)
        if self.alignments is not None:
            if not is_sequence(self.alignments) and not isinstance(self.alignments, str):
                raise InvalidInputError(
                    "alignments", "must be a sequence of 'l', 'r' or 'c'", self.alignments
                )
            for value in self.alignments:
                try:
                    Alignment(value)
                except ValueError:
                    raise InvalidInputError(
                        "alignments", f"unknown alignment {value!r}", value
                    ) from None

    @property
    def table_style(self) -> TableStyle:
        return TableStyle.resolve(self.style)

    @property
    def wraps(self) -> bool:
        """True when cells may span several physical lines."""
        return self.max_column_width is not None

    def alignment_for(self, column: int) -> Alignment:
        if self.alignments is None or column >= len(self.alignments):
            return Alignment.LEFT
        return Alignment(self.alignments[column])

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> LayoutOptions:
        """
        Create options from a mapping.

        Accepts the snake_case field names as well as the camelCase
        spellings ``showBorders``, ``maxColumnWidth`` and ``wrapWords``.

        Raises:
            InvalidInputError: On unknown keys or invalid values
        """
        if data is None:
            return cls()
        if not isinstance(data, Mapping):
            raise InvalidInputError("options", "must be a mapping", data)

        known = {f.name for f in fields(cls)}
        kwargs: dict[str, Any] = {}
        for key, value in data.items():
            name = _OPTION_ALIASES.get(key, key)
            if name not in known:
                raise InvalidInputError("options", f"unknown option {key!r}", key)
            kwargs[name] = value
        return cls(**kwargs)

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {
            "style": self.table_style.value,
            "show_borders": self.show_borders,
            "wrap_words": self.wrap_words,
        }
        if self.max_column_width is not None:
            result["max_column_width"] = self.max_column_width
        if self.alignments is not None:
            result["alignments"] = [Alignment(a).value for a in self.alignments]
        return result


@dataclass(frozen=True)
class ColumnSpec:
    """
    Column definition used when projecting records into a table.

    Attributes:
        key: Field name looked up on each record
        title: Header text (defaults to the key)
        transform: Optional hook called with the raw field value, returning
            the cell to display
    """

    key: str
    title: str | None = None
    transform: Callable[[Any], Cell] | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.key, str) or not self.key:
            raise InvalidInputError("column key", "must be a non-empty string", self.key)
        if self.transform is not None and not callable(self.transform):
            raise InvalidInputError("column transform", "must be callable", self.transform)

    @property
    def header(self) -> str:
        return self.title or self.key

    @classmethod
    def from_value(cls, value: ColumnSpec | Mapping[str, Any] | str) -> ColumnSpec:
        """Coerce a ColumnSpec, a ``{key, title?, transform?}`` mapping or a bare key."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            return cls(key=value)
        if isinstance(value, Mapping):
            if "key" not in value:
                raise InvalidInputError("column", "mapping requires a 'key'", value)
            return cls(
                key=value["key"],
                title=value.get("title"),
                transform=value.get("transform"),
            )
        raise InvalidInputError("column", "must be a ColumnSpec, mapping or key string", value)
