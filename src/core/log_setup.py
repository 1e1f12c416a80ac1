"""Configuración de logging compartida por todos los comandos."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler


def configure_logging(*, debug: bool = False, console: Console | None = None) -> None:
    """Route stdlib logging through Rich on stderr.

    Only errors are shown unless `--debug` is set.
    """

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=debug,
        rich_tracebacks=True,
    )
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.ERROR,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[handler],
        force=True,
    )
    # httpx logs every request at INFO; keep it quiet outside debug mode.
    logging.getLogger("httpx").setLevel(logging.DEBUG if debug else logging.WARNING)
