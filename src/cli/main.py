"""CLI de mlog (Typer).

Por qué así:
- Cada comando carga la configuración, arma el cliente de monday.com, delega
  en `core.services.board_service` e imprime.
- Todo `CLIError` termina en `_exit_on_error`, el único lugar que decide cómo
  se muestra un fallo (mensaje corto, o traza completa con `--debug`).
"""

from __future__ import annotations

import functools
import logging
from typing import Any, Callable, NoReturn, TypeVar

import tomli_w
import typer
from rich.console import Console

from adapters.http_client import build_client
from adapters.json_exporter import items_to_json, summaries_to_json
from adapters.monday_client import MondayAPIClient
from cli import setup as setup_cmd
from cli.ui_components import build_items_table, build_summary_table
from core.config import AppSettings, load_settings, resolve_conf_paths
from core.domain.models import BoardsConf, UserConf
from core.errors import CLIError, ErrorKind
from core.log_setup import configure_logging
from core.resources_loader import load_conf, update_boards_conf
from core.services import board_service

__version__ = "0.3.0"

F = TypeVar("F", bound=Callable[..., Any])

app = typer.Typer(
    name="mlog",
    help="mlog (Monday logging CLI) is a tool to help create log pulses on Monday.",
    no_args_is_help=True,
    pretty_exceptions_enable=False,
)

_console = Console()
_err_console = Console(stderr=True)


def _exit_on_error(err: CLIError, *, debug: bool) -> NoReturn:
    match err.kind:
        case ErrorKind.VALIDATION:
            style = "yellow"
        case _:
            style = "red"

    if debug:
        _err_console.print_exception()
        _err_console.print(f"[{err.kind.value}] exit code {err.exit_code}", style="dim", markup=False)
    _err_console.print(err.message, style=style, markup=False, highlight=False, soft_wrap=True)
    raise typer.Exit(code=err.exit_code)


def handle_errors(func: F) -> F:
    """Turn `CLIError` into a printed message and a non-zero exit code."""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except CLIError as err:
            _exit_on_error(err, debug=logging.getLogger().isEnabledFor(logging.DEBUG))

    return wrapper  # type: ignore[return-value]


def _command(name: str, *aliases: str) -> Callable[[F], F]:
    """Register a command under its name plus hidden short aliases."""

    def decorator(func: F) -> F:
        wrapped = handle_errors(func)
        app.command(name)(wrapped)
        for alias in aliases:
            app.command(alias, hidden=True)(wrapped)
        return func

    return decorator


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"mlog version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    debug: bool = typer.Option(False, "--debug", "-d", help="Show full error traces and debug logs."),
    version: bool = typer.Option(
        False, "--version", "-v", callback=_version_callback, is_eager=True, help="Print the version."
    ),
) -> None:
    """mlog (Monday logging CLI) is a tool to help create log pulses on Monday."""

    configure_logging(debug=debug)


def _load() -> tuple[AppSettings, UserConf, BoardsConf]:
    settings = load_settings()
    user_conf, boards_conf = load_conf(resolve_conf_paths(settings))
    return settings, user_conf, boards_conf


def _api(settings: AppSettings, user_conf: UserConf, boards_conf: BoardsConf) -> MondayAPIClient:
    return MondayAPIClient(
        api_access_token=user_conf.api_access_token,
        logging_user_id=user_conf.logging_user_id,
        person_column_id=boards_conf.person_column_id,
        hours_column_id=boards_conf.hours_column_id,
        settings=settings,
    )


_command("setup")(setup_cmd.setup)


@_command("update", "u")
def update() -> None:
    """Fetch the latest boards.toml configuration."""

    settings = load_settings()
    paths = resolve_conf_paths(settings)
    with build_client(settings) as client:
        result = update_boards_conf(paths.boards_conf, url=settings.boards_update_url, client=client)

    typer.echo(f"GET {result.url} ({result.size} bytes) - successful")
    typer.echo(f"Saved to {result.path}")
    if result.description:
        typer.echo(f"Description: {result.description}")
    typer.echo("Update complete without errors.")


@_command("get-board-items", "gbi")
def get_board_items(
    month: str = typer.Argument(..., metavar="<yyyy-mm>", help="Month of the board to read."),
    as_json: bool = typer.Option(False, "--json", help="Print JSON instead of a table."),
) -> None:
    """Get the logging user's items from the given month's board."""

    settings, user_conf, boards_conf = _load()
    with _api(settings, user_conf, boards_conf) as api:
        items = board_service.get_board_items(api, boards_conf, month)

    if as_json:
        typer.echo(items_to_json(items))
    else:
        _console.print(build_items_table(items))


@_command("get-board-item-summary", "gbis")
def get_board_item_summary(
    month: str = typer.Argument(..., metavar="<yyyy-mm>", help="Month of the board to read."),
    as_json: bool = typer.Option(False, "--json", help="Print JSON instead of a table."),
) -> None:
    """Get the logging user's item summary from the given month's board."""

    settings, user_conf, boards_conf = _load()
    with _api(settings, user_conf, boards_conf) as api:
        groups = board_service.get_board_item_summary(api, boards_conf, month)

    if as_json:
        typer.echo(summaries_to_json(groups))
    else:
        _console.print(build_summary_table(groups))


@_command("create-one", "co")
def create_one(
    day: str = typer.Argument(..., metavar="<yyyy-mm-dd>", help="Day the work was done."),
    description: str = typer.Argument(..., metavar="<item-description>", help="Pulse name."),
    hours: str = typer.Argument(..., metavar="<hours>", help="Hours spent, e.g. 2.5"),
) -> None:
    """Create one log entry with info provided on the command line."""

    settings, user_conf, boards_conf = _load()
    with _api(settings, user_conf, boards_conf) as api:
        created = board_service.create_one(api, boards_conf, day, description, hours)
    typer.echo(board_service.pulse_url(settings.board_host, created.relative_link))


@_command("pulse-link", "pl")
def pulse_link(
    pulse_id: str = typer.Argument(..., metavar="<pulse-id>"),
) -> None:
    """Print the pulse link for a given pulse ID."""

    settings, user_conf, boards_conf = _load()
    with _api(settings, user_conf, boards_conf) as api:
        typer.echo(board_service.get_pulse_link(api, settings.board_host, pulse_id))


@_command("admin-get-board-by-id", "agbid")
def admin_get_board_by_id(
    board_id: str = typer.Argument(..., metavar="<board-id>"),
) -> None:
    """(Admin command) get board information by board-id to populate boards.toml."""

    settings, user_conf, boards_conf = _load()
    with _api(settings, user_conf, boards_conf) as api:
        board = api.fetch_board(board_id)
    typer.echo(tomli_w.dumps(board_service.board_month_stub(board)), nl=False)


def run() -> None:
    app()


if __name__ == "__main__":
    run()
