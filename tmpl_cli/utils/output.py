"""
Output utilities for tmpl CLI using Rich
"""

from typing import Any, Dict, List, Optional

from rich.console import Console
from rich.markup import escape
from rich.table import Table

console = Console()


def print_success(message: str):
    """Print success message with green checkmark"""
    console.print(f"✓ {escape(message)}", style="bold green")


def print_info(message: str):
    """Print info message with blue icon"""
    console.print(f"ℹ {escape(message)}", style="bold blue")


def print_header(text: str):
    """Print section header"""
    console.print(f"\n[bold cyan]{escape(text)}[/bold cyan]")


def print_table(data: List[Dict[str, Any]], headers: List[str], title: Optional[str] = None):
    """
    Print data as a formatted table

    Args:
        data: List of dictionaries with row data
        headers: List of column headers
        title: Optional table title
    """
    table = Table(title=title, show_header=True, header_style="bold cyan")

    for header in headers:
        table.add_column(header)

    for row in data:
        table.add_row(*[escape(str(row.get(h, ""))) for h in headers])

    console.print(table)


def format_tags(tags) -> str:
    """Render a tag collection as a sorted, comma-separated string"""
    return ", ".join(sorted(tags)) if tags else "-"
