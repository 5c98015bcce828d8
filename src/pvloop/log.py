import logging
from rich.logging import RichHandler
from rich.console import Console
from rich.table import Table
from rich.text import Text


def log_table(rich_table):
    """Generate an ascii formatted presentation of a Rich table
    Eliminates any column styling
    """
    console = Console(width=150)
    with console.capture() as capture:
        console.print(rich_table)
    return Text.from_ansi(capture.get())


def dict_table(d: dict, title: str, key_column: str = "Parameter", value_column: str = "Value"):
    """Build a two column table from a (flat) dictionary"""
    table = Table(title=title)
    table.add_column(key_column)
    table.add_column(value_column)
    for k, v in d.items():
        table.add_row(str(k), f"{v:.3f}" if isinstance(v, float) else str(v))
    return table


def setup_logging(level=logging.INFO):
    logging.basicConfig(
        level=level,
        handlers=[RichHandler(console=Console(width=200))],
    )
