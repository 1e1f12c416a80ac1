"""Error único de la CLI.

Todo fallo que debe llegar al usuario viaja como `CLIError`: un tipo (kind),
el mensaje corto para la terminal y la causa original (encadenada con
`raise ... from exc`) para la traza de `--debug`.
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    """Categories of user-facing failures."""

    VALIDATION = "validation"
    REMOTE = "remote"
    IO = "io"


class CLIError(Exception):
    """Tagged error carrying a short message and an optional wrapped cause."""

    def __init__(
        self,
        kind: ErrorKind,
        message: str,
        *,
        cause: BaseException | None = None,
        exit_code: int = 1,
    ) -> None:
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.cause = cause
        self.exit_code = exit_code

    def __str__(self) -> str:
        if self.cause is not None:
            return f"{self.message}\nExit code: {self.exit_code}\n{self.cause}"
        return f"{self.message}\nExit code: {self.exit_code}"


def validation_error(message: str, cause: BaseException | None = None) -> CLIError:
    return CLIError(ErrorKind.VALIDATION, message, cause=cause)


def remote_error(message: str, cause: BaseException | None = None) -> CLIError:
    return CLIError(ErrorKind.REMOTE, message, cause=cause)


def io_error(message: str, cause: BaseException | None = None) -> CLIError:
    return CLIError(ErrorKind.IO, message, cause=cause)
