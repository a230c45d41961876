# Interactive driver: show the menu, read one id, run that script.
# Kept out of ScriptManager so the manager itself never does I/O.

from __future__ import annotations

from typing import Callable

from prsm.errors import InvalidSelection
from prsm.manager import ScriptManager

PROMPT = "Enter script ID"


def parse_selection(raw: str, manager: ScriptManager) -> int:
    """Turn a line of operator input into an id the manager holds, or raise InvalidSelection."""
    text = (raw or "").strip()
    try:
        script_id = int(text)
    except ValueError:
        raise InvalidSelection(f"invalid script id: {text!r}", raw) from None
    if script_id not in manager:
        raise InvalidSelection(
            f"unknown script id: {script_id} (choose from {list(manager.ids)})", raw)
    return script_id


def prompt_selection(
    manager: ScriptManager,
    read: Callable[[str], str] = input,
    write: Callable[[str], None] = print,
) -> int:
    write(manager.render() + "\n")
    return parse_selection(read(f"{PROMPT}: "), manager)


def run_menu(
    manager: ScriptManager,
    read: Callable[[str], str] = input,
    write: Callable[[str], None] = print,
) -> str | None:
    """
    Print the menu, read an id and run that script.
    Returns None on success or the failure text; bad input raises InvalidSelection.
    """
    return manager.run_script(prompt_selection(manager, read, write))
