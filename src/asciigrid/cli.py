"""Command-line interface for asciigrid."""

from __future__ import annotations

import json
import logging
import sys
from typing import Any, TextIO

import click

from .config import load_options, merge_options
from .exceptions import AsciiGridError
from .models import ColumnSpec, LayoutOptions, Table, TableStyle
from .records import infer_columns, project_records
from .renderer import render_table

logger = logging.getLogger(__name__)

_STYLE_NAMES = [s.value for s in TableStyle]

_SAMPLE = Table(
    headers=["Name", "Age", "City"],
    rows=[
        ["Alice", 25, "New York"],
        ["Bob", 30, "Los Angeles"],
        ["Charlie", 35, "Chicago"],
    ],
)


def _parse_column(value: str) -> ColumnSpec:
    key, _, title = value.partition(":")
    return ColumnSpec(key=key, title=title or None)


def _json_cells(value: Any) -> Any:
    """
    Spell decoded JSON scalars the way JSON writes them.

    Booleans become ``true``/``false`` and integral floats lose their
    trailing ``.0``, so ``1.0`` displays as ``1``.
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, list):
        return [_json_cells(v) for v in value]
    if isinstance(value, dict):
        return {k: _json_cells(v) for k, v in value.items()}
    return value


def _build_table(payload: Any, columns: tuple[str, ...]) -> Table:
    if isinstance(payload, dict):
        if columns:
            raise click.UsageError("--column only applies to a JSON array of records")
        return Table.from_dict(payload)
    if isinstance(payload, list):
        specs = [_parse_column(c) for c in columns] if columns else infer_columns(payload)
        return project_records(payload, specs)
    raise click.UsageError(
        "Input must be a {headers, rows} object or an array of records"
    )


@click.group()
@click.version_option(package_name="asciigrid")
@click.option("-v", "--verbose", is_flag=True, help="Log layout details to stderr.")
def cli(verbose: bool) -> None:
    """asciigrid table rendering CLI."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(levelname)s %(name)s %(message)s",
            stream=sys.stderr,
        )


@cli.command()
@click.argument("source", type=click.File("r", encoding="utf-8"), default="-")
@click.option(
    "--style",
    type=click.Choice(_STYLE_NAMES, case_sensitive=False),
    envvar="ASCIIGRID_STYLE",
    help="Border style (default: simple, or $ASCIIGRID_STYLE)",
)
@click.option(
    "--borders/--no-borders",
    default=None,
    help="Draw border lines (vertical separators are always drawn)",
)
@click.option(
    "--max-width",
    type=click.IntRange(min=1),
    help="Maximum column content width; longer cells wrap",
)
@click.option(
    "--wrap-words/--no-wrap-words",
    default=None,
    help="Wrap at word boundaries instead of at character offsets",
)
@click.option(
    "--align",
    help="Per-column alignment letters, e.g. 'lrc' (l=left, r=right, c=center)",
)
@click.option(
    "--column",
    "-c",
    "columns",
    multiple=True,
    help="Column as KEY or KEY:TITLE (record arrays only, repeatable)",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    help="YAML file with layout options (flags take precedence)",
)
def render(
    source: TextIO,
    style: str | None,
    borders: bool | None,
    max_width: int | None,
    wrap_words: bool | None,
    align: str | None,
    columns: tuple[str, ...],
    config_path: str | None,
) -> None:
    """Render JSON table data from SOURCE (default: stdin) as text.

    SOURCE holds either an object with "headers" and "rows", or an array
    of records whose keys become the columns.
    """
    try:
        payload = _json_cells(json.load(source))
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        click.echo(f"Error: malformed JSON input: {e}", err=True)
        sys.exit(1)

    try:
        base = load_options(config_path) if config_path else LayoutOptions()
        options = merge_options(
            base,
            style=style.lower() if style else None,
            show_borders=borders,
            max_column_width=max_width,
            wrap_words=wrap_words,
            alignments=list(align) if align else None,
        )
        table = _build_table(payload, columns)
        output = render_table(table, options)
    except AsciiGridError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    logger.debug("Options: %s", options.to_dict())
    if output:
        click.echo(output)


@cli.command()
def styles() -> None:
    """Show every built-in border style on a sample table."""
    for name in _STYLE_NAMES:
        click.echo(f"{name}:")
        click.echo(render_table(_SAMPLE, LayoutOptions(style=name)))
        click.echo()


if __name__ == "__main__":
    cli()
