"""Rich-based console formatting utilities"""

from typing import Sequence

from rich.console import Console
from rich.table import Table
from rich.text import Text

from .split_policy import Segment

console = Console()

def print_error(message: str) -> None:
    """Print an error message in bold red."""
    text = Text("✗ ", style="bold red") + Text(message, style="bold")
    console.print(text)

def print_header(title: str, width: int = 80) -> None:
    """Print a decorative header."""
    separator = Text("=" * width, style="bold blue")
    padding = (width - len(title)) // 2
    title_line = " " * padding + title
    console.print(separator)
    console.print(title_line, style="bold blue")
    console.print(separator)

def print_info(message: str) -> None:
    """Print an informational message in a subtle style."""
    text = Text("ℹ ", style="bold blue") + Text(message, style="blue")
    console.print(text)

def format_millis(value: int) -> str:
    """Format milliseconds as H:MM:SS.mmm"""
    seconds, millis = divmod(value, 1000)
    minutes, seconds = divmod(seconds, 60)
    hours, minutes = divmod(minutes, 60)
    return f"{hours}:{minutes:02d}:{seconds:02d}.{millis:03d}"

def print_segments(segments: Sequence[Segment], title: str = "Segments") -> None:
    """Print segments as a table."""
    table = Table(title=title)
    table.add_column("#", justify="right", style="bold")
    table.add_column("Start (ms)", justify="right")
    table.add_column("End (ms)", justify="right")
    table.add_column("Duration (ms)", justify="right")
    table.add_column("Range", style="blue")
    for index, segment in enumerate(segments):
        table.add_row(
            str(index),
            str(segment.start),
            str(segment.end),
            str(segment.duration),
            f"{format_millis(segment.start)} → {format_millis(segment.end)}"
        )
    console.print(table)
