from __future__ import annotations

import json
from typing import Callable, Optional

import typer

from prsm.catalog import Catalog
from prsm.errors import InvalidSelection
from prsm.manager import ScriptManager
from prsm.menu import PROMPT, parse_selection, prompt_selection
from utils.audit import audit_log
from utils.changelog import write_tag_action_changes

from cli.ui import show_failure, show_menu, show_scripts, show_success

app = typer.Typer(help="Project script manager")

EXIT_FAILED = 1
EXIT_BAD_SELECTION = 2


def build_manager(changes: str = "", changelog: Optional[str] = None) -> ScriptManager:
    """The project's scripts. Arguments are captured here and used only when a script runs."""
    return (
        Catalog()
        .add(1, "Update CHANGELOG", write_tag_action_changes, changes, changelog)
        .build()
    )


def _select(pick: Callable[[], int]) -> int:
    try:
        return pick()
    except InvalidSelection as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(code=EXIT_BAD_SELECTION)


def _invoke(manager: ScriptManager, script_id: int, pretty: bool) -> None:
    description = manager[script_id].description
    error = manager.run_script(script_id)
    audit_log(event="run", manager=manager.name, script_id=script_id,
              description=description, ok=error is None, error=error)
    if error is None:
        if pretty:
            show_success(description)
        return
    if pretty:
        show_failure(description, error)
    else:
        typer.echo(error, err=True)
    raise typer.Exit(code=EXIT_FAILED)


@app.command("list")
def cmd_list(
    pretty: bool = typer.Option(False, "--pretty/--no-pretty"),
    json_out: bool = typer.Option(True, "--json/--no-json"),
) -> None:
    manager = build_manager()
    rows = [[str(i), sc.description] for i, sc in manager]
    if pretty:
        show_scripts(manager.name, rows)
    if json_out and not pretty:
        data = {"name": manager.name,
                "scripts": [{"id": i, "description": sc.description} for i, sc in manager]}
        typer.echo(json.dumps(data, indent=2))


@app.command("menu")
def cmd_menu(
    changes: str = typer.Argument("", help="Formatted changes for the CHANGELOG script."),
    changelog: Optional[str] = typer.Option(None, "--changelog", help="CHANGELOG.md path."),
    pretty: bool = typer.Option(False, "--pretty/--no-pretty"),
) -> None:
    manager = build_manager(changes, changelog)
    write = (lambda text: show_menu(text.rstrip("\n"))) if pretty else typer.echo
    script_id = _select(lambda: prompt_selection(
        manager, read=lambda _: typer.prompt(PROMPT, type=str), write=write))
    _invoke(manager, script_id, pretty)


@app.command("run")
def cmd_run(
    script_id: str = typer.Argument(..., help="Script ID as shown by `list`."),
    changes: str = typer.Argument("", help="Formatted changes for the CHANGELOG script."),
    changelog: Optional[str] = typer.Option(None, "--changelog", help="CHANGELOG.md path."),
    pretty: bool = typer.Option(False, "--pretty/--no-pretty"),
) -> None:
    manager = build_manager(changes, changelog)
    _invoke(manager, _select(lambda: parse_selection(script_id, manager)), pretty)
