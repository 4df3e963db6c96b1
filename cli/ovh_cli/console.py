from __future__ import annotations

from rich.console import Console
from rich.markup import escape

console = Console()


def err(msg: str) -> None:
    console.print(f"[bold red]ERR[/] {escape(msg)}")
