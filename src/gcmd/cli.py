# cli.py
from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from typing import Optional

import click

from .errors import GcmdError, ValidationError
from .model import Recipe
from .pipeline import format_pipeline, parse
from .runner import execute
from .store import RecipeStore, resolve_dir
from .ui.console import Console, get_console, set_console


@dataclass(frozen=True)
class Invocation:
    """Parsed command line: mode flags plus the two positionals."""
    list_mode: bool = False
    remove_mode: bool = False
    save_mode: bool = False
    echo_mode: bool = False
    stdin_mode: bool = False
    name: Optional[str] = None
    pipeline: Optional[str] = None


def _require_name(name: Optional[str], message: str) -> str:
    if not name:
        raise ValidationError(message)
    return name


def _check_new_name(name: str) -> None:
    if any(sep and sep in name for sep in (os.sep, os.altsep)) or name.startswith("."):
        raise ValidationError(f"Invalid command name: {name}")


def dispatch(inv: Invocation, store: Optional[RecipeStore] = None) -> int:
    """
    Pick the action for an invocation and run it.

    Priority: -ls, then -rm, then -save, then echo/run by name.

    Returns:
        Process exit status (the subshell's status in run mode)

    Raises:
        GcmdError: on any user-visible failure
    """
    console = get_console()

    if store is None:
        store = RecipeStore(resolve_dir())
    console.print_debug(f"command directory: {store.root}")

    if inv.list_mode:
        console.print_lines(store.names())
        return 0

    if inv.remove_mode:
        name = _require_name(inv.name, "Provide a command")
        store.remove(name)
        console.print_info("Command removed")
        return 0

    if inv.save_mode:
        name = _require_name(inv.name, "Name cannot be empty")
        _check_new_name(name)
        recipe = Recipe(steps=parse(inv.pipeline or ""), stdin=inv.stdin_mode)
        path = store.save(name, recipe)
        console.print_debug(f"wrote {path}")
        console.print_info("Command saved")
        return 0

    name = _require_name(inv.name, "Provide a command")
    recipe = store.load(name)
    cmd = format_pipeline(recipe)

    if inv.echo_mode:
        console.print_info(cmd)
        return 0

    return execute(cmd, needs_stdin=recipe.stdin)


@click.command()
@click.option("-ls", "list_mode", is_flag=True, default=False, help="list available commands")
@click.option("-save", "save_mode", is_flag=True, default=False, help="save a command")
@click.option("-rm", "remove_mode", is_flag=True, default=False, help="remove a command")
@click.option(
    "-echo",
    "echo_mode",
    is_flag=True,
    default=False,
    help="prints the command rather than executing it",
)
@click.option(
    "-i",
    "stdin_mode",
    is_flag=True,
    default=False,
    help="take input from stdin (optional, for -save only)",
)
@click.option(
    "--debug",
    is_flag=True,
    default=False,
    help="Enable debug mode (show stack traces and detailed output)",
)
@click.argument("name", required=False)
@click.argument("pipeline", required=False)
def cli(list_mode, save_mode, remove_mode, echo_mode, stdin_mode, debug, name, pipeline):
    """gcmd - save shell pipelines under a name and run them later.

    \b
    Examples:
      gcmd -save count -i "grep foo | wc -l"
      cat log.txt | gcmd count
      gcmd -echo count
      gcmd -ls
      gcmd -rm count
    """
    console = Console(debug=debug)
    set_console(console)

    inv = Invocation(
        list_mode=list_mode,
        remove_mode=remove_mode,
        save_mode=save_mode,
        echo_mode=echo_mode,
        stdin_mode=stdin_mode,
        name=name,
        pipeline=pipeline,
    )

    try:
        code = dispatch(inv)
    except GcmdError as e:
        if debug:
            console.print_exception(e)
        else:
            console.print_error(e.message)
        sys.exit(e.exit_code)
    except KeyboardInterrupt:
        console.print_error("Interrupted")
        sys.exit(130)

    sys.exit(code)


if __name__ == "__main__":
    cli()
