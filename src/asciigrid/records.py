"""Projection of structured records into tables."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from .exceptions import InvalidInputError
from .models import Cell, ColumnSpec, LayoutOptions, Table, is_sequence
from .renderer import render_table

ColumnLike = ColumnSpec | Mapping[str, Any] | str


def _field_value(record: Any, key: str) -> Any:
    if isinstance(record, Mapping):
        return record.get(key)
    return getattr(record, key, None)


def project_records(
    records: Sequence[Any],
    columns: Sequence[ColumnLike],
) -> Table:
    """
    Build a table with one row per record and one column per spec.

    Values are looked up with ``record.get(key)`` for mappings and
    ``getattr(record, key)`` for other objects. Only missing or ``None``
    values become empty cells; falsy values such as ``0``, ``False`` and
    ``""`` are kept as they are. When a column has a transform it is
    called with the raw value (``None`` included) and its result is
    displayed instead.

    Args:
        records: Mappings or objects to display
        columns: ColumnSpec instances, ``{key, title?, transform?}``
            mappings, or bare key strings

    Returns:
        A Table whose rows all have exactly ``len(columns)`` cells

    Raises:
        InvalidInputError: If records or columns are not sequences, or a
            column cannot be interpreted
    """
    if not is_sequence(records):
        raise InvalidInputError("records", "must be a sequence", records)
    if not is_sequence(columns):
        raise InvalidInputError("columns", "must be a sequence of column specs", columns)

    specs = [ColumnSpec.from_value(c) for c in columns]
    rows: list[list[Cell]] = []
    for record in records:
        row: list[Cell] = []
        for spec in specs:
            value = _field_value(record, spec.key)
            if spec.transform is not None:
                value = spec.transform(value)
            row.append(value)
        rows.append(row)

    return Table(headers=[spec.header for spec in specs], rows=rows)


def render_from_records(
    records: Sequence[Any],
    columns: Sequence[ColumnLike],
    options: LayoutOptions | Mapping[str, Any] | None = None,
) -> str:
    """
    Render records as a table.

    Example:
        >>> users = [{"id": 1, "name": "Alice"}, {"id": 2, "name": "Bob"}]
        >>> print(render_from_records(users, [{"key": "id", "title": "ID"}, "name"]))
        +----+-------+
        | ID | name  |
        +----+-------+
        | 1  | Alice |
        | 2  | Bob   |
        +----+-------+
    """
    if not isinstance(options, LayoutOptions):
        options = LayoutOptions.from_dict(options)
    return render_table(project_records(records, columns), options)


def infer_columns(records: Sequence[Any]) -> list[ColumnSpec]:
    """Derive columns from the union of mapping keys, in first-seen order."""
    keys: dict[str, None] = {}
    for record in records:
        if not isinstance(record, Mapping):
            raise InvalidInputError("records", "column inference requires mappings", record)
        for key in record:
            keys.setdefault(str(key), None)
    return [ColumnSpec(key=key) for key in keys]
