"""Comando `setup`: diagnóstico de los dos documentos de configuración."""

from __future__ import annotations

from rich.console import Console

from cli.ui_components import build_setup_table
from core.config import load_settings, resolve_conf_paths
from core.errors import validation_error
from core.resources_loader import check_setup

_console = Console()

MSG_INVALID_USER_CONF = (
    "The user configuration has one or more validation errors.\n"
    "Refer to github.com/denis-engcom/mlog - config.example.toml for how to configure the file properly."
)
MSG_INVALID_BOARDS_CONF = (
    "The boards configuration has one or more validation errors.\n"
    "Run `mlog update` to fetch the latest board configuration."
)


def setup() -> None:
    """Check the configuration files needed by the other mlog commands."""

    settings = load_settings()
    report = check_setup(resolve_conf_paths(settings))

    _console.print(build_setup_table(report.user))
    _console.print(build_setup_table(report.boards))

    if not report.user.ok:
        raise validation_error(MSG_INVALID_USER_CONF)
    if not report.boards.ok:
        raise validation_error(MSG_INVALID_BOARDS_CONF)
    _console.print("Setup complete without errors.")
