# cli/ui.py
from __future__ import annotations
from typing import Any, List

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

# --- Rich render (captured to plain text so it always shows) ------------------
_console = Console(force_terminal=True, soft_wrap=True)


def _capture(renderable: Any) -> str:
    with _console.capture() as cap:
        _console.print(renderable)
    return cap.get()


def _rich_table(title: str, headers: List[str], rows: List[List[str]]) -> str:
    table = Table(title=title, show_header=True, show_lines=True)
    for h in headers:
        table.add_column(h)
    for r in rows:
        table.add_row(*[Text(str(x)) for x in r])
    return _capture(table)


def _rich_panel(text: str, title: str | None = None) -> str:
    # Text, not markup: descriptions and errors may contain [brackets]
    return _capture(Panel.fit(Text(text), title=title))


# --- unified printers ---------------------------------------------------------
def _print_table(title: str, headers: List[str], rows: List[List[str]]) -> None:
    print(_rich_table(title, headers, rows), end="", flush=True)


def _print_panel(text: str, title: str | None = None) -> None:
    print(_rich_panel(text, title), end="", flush=True)


# --- public helpers -----------------------------------------------------------
def show_menu(menu: str) -> None:
    _print_panel(menu)


def show_scripts(name: str, scripts: List[List[str]]) -> None:
    _print_table(name, ["ID", "Description"], scripts)


def show_success(description: str) -> None:
    _print_panel(f"OK\nScript: {description}")


def show_failure(description: str, message: str) -> None:
    _print_panel(f"Script: {description}\nError: {message}", title="FAILED")
