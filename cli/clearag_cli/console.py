from __future__ import annotations

from typing import Any

from rich.console import Console
from rich.markup import escape

console = Console()


def print_payload(data: Any) -> None:
    """Print an API payload: JSON structures pretty-printed, text as-is."""
    if isinstance(data, bytes):
        console.print(f"<{len(data)} bytes>")
    elif isinstance(data, str):
        console.print(escape(data), highlight=False)
    else:
        console.print_json(data=data)


def ok(msg: str) -> None:
    console.print(f"[bold green]OK[/] {escape(msg)}")


def warn(msg: str) -> None:
    console.print(f"[bold yellow]WARN[/] {escape(msg)}")


def err(msg: str) -> None:
    console.print(f"[bold red]ERR[/] {escape(msg)}", highlight=False)
