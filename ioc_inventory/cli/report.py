"""Inventory rendering as a table or JSON."""

from __future__ import annotations

import json
from collections.abc import Sequence

import click
from rich import box
from rich.cells import cell_len
from rich.console import Console
from rich.table import Table
from rich.text import Text

from ioc_inventory.cli.rich_output import should_use_rich
from ioc_inventory.models import IocRecord

COLUMNS: list[tuple[str, str]] = [
    ("Name", "cyan"),
    ("Description", "white"),
    ("Version", "green"),
    ("Builder", "yellow"),
]
PATH_COLUMN = ("Path", "dim")

# Columns whose values are identifiers and must never be truncated.
UNBROKEN_COLUMNS = frozenset({"Name", "Path"})


def _row(record: IocRecord, show_path: bool) -> list[str]:
    row = [
        record.name,
        record.description,
        record.version,
        "true" if record.builder else "false",
    ]
    if show_path:
        row.append(record.path or "-")
    return row


def table_width(records: Sequence[IocRecord], show_path: bool = False) -> int:
    """Width needed to print every cell of the table on a single line."""
    columns = COLUMNS + [PATH_COLUMN] if show_path else COLUMNS
    widths = [cell_len(name) for name, _ in columns]
    for record in records:
        for i, value in enumerate(_row(record, show_path)):
            widths[i] = max(widths[i], cell_len(value))
    # One space of padding either side of each cell plus a border per column.
    return sum(widths) + 3 * len(widths) + 1


def build_table(
    records: Sequence[IocRecord], show_path: bool = False, styled: bool = True
) -> Table:
    """Build a table with one row per record.

    Cells are plain ``Text`` so README text such as ``[bold]`` is shown
    as written rather than parsed as console markup.
    """
    columns = COLUMNS + [PATH_COLUMN] if show_path else COLUMNS
    table = Table(box=box.SQUARE if styled else box.ASCII)
    for name, style in columns:
        if name in UNBROKEN_COLUMNS:
            table.add_column(name, style=style if styled else None, overflow="fold")
        else:
            table.add_column(name, style=style if styled else None)

    for record in records:
        table.add_row(*(Text(value) for value in _row(record, show_path)))
    return table


def render_inventory(
    records: Sequence[IocRecord],
    show_path: bool = False,
    console: Console | None = None,
) -> None:
    """Print the inventory table to stdout.

    Plain output (pipes, files) is laid out wide enough to keep each record
    on one line; styled output follows the terminal width.
    """
    styled = should_use_rich()
    if console is None:
        if styled:
            console = Console(highlight=False, force_terminal=True)
        else:
            console = Console(
                no_color=True,
                highlight=False,
                width=max(80, table_width(records, show_path=show_path)),
            )
    console.print(build_table(records, show_path=show_path, styled=styled))


def output_json(records: Sequence[IocRecord], pretty: bool = True) -> None:
    """Print the inventory as a JSON array of records."""
    data = [record.to_dict() for record in records]
    click.echo(json.dumps(data, indent=2 if pretty else None))
