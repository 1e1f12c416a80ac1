"""Cargador de los documentos de configuración.

Este módulo vive en `core/` porque:
- centraliza la lectura/validación de `config.toml` (usuario) y `boards.toml`
  sin acoplarse a la CLI;
- implementa `update`: descarga `boards.toml` a un temporal y solo lo renombra
  sobre el archivo real cuando la descarga completa es válida.
"""

from __future__ import annotations

import logging
import os
import tomllib
from pathlib import Path
from typing import Any

import httpx
from pydantic import BaseModel, ValidationError

from core.config import ConfPaths
from core.domain.models import BoardsConf, SetupCheck, SetupReport, SetupSection, UpdateResult, UserConf
from core.errors import io_error, remote_error, validation_error

logger = logging.getLogger(__name__)

MSG_UNABLE_TO_PARSE_USER_CONF = "Unable to parse user configuration file.\nRun `mlog setup` for error details."
MSG_UNABLE_TO_PARSE_BOARDS_CONF = "Unable to parse boards configuration file.\nRun `mlog setup` for error details."


def load_toml(path: Path) -> dict[str, Any]:
    with path.open("rb") as f:
        return tomllib.load(f)


def _load_model(path: Path, model: type[BaseModel]) -> Any:
    return model.model_validate(load_toml(path))


def load_user_conf(path: Path) -> UserConf:
    try:
        user_conf = _load_model(path, UserConf)
    except (OSError, tomllib.TOMLDecodeError, ValidationError) as exc:
        raise validation_error(MSG_UNABLE_TO_PARSE_USER_CONF, exc) from exc
    missing = user_conf.missing_fields()
    if missing:
        raise validation_error(
            f"User configuration is missing: {', '.join(missing)}.\nRun `mlog setup` for error details."
        )
    return user_conf


def load_boards_conf(path: Path) -> BoardsConf:
    try:
        boards_conf = _load_model(path, BoardsConf)
    except (OSError, tomllib.TOMLDecodeError, ValidationError) as exc:
        raise validation_error(MSG_UNABLE_TO_PARSE_BOARDS_CONF, exc) from exc
    missing = boards_conf.missing_fields()
    if missing:
        raise validation_error(
            f"Boards configuration is missing: {', '.join(missing)}.\nRun `mlog setup` for error details."
        )
    return boards_conf


def load_conf(paths: ConfPaths) -> tuple[UserConf, BoardsConf]:
    """Load and validate both documents; the month mapping may be empty."""

    return load_user_conf(paths.user_conf), load_boards_conf(paths.boards_conf)


def _check_section(name: str, path: Path, model: type[BaseModel], fields: tuple[str, ...]) -> SetupSection:
    try:
        conf = _load_model(path, model)
    except (OSError, tomllib.TOMLDecodeError, ValidationError) as exc:
        logger.debug("setup: unable to parse %s: %s", path, exc)
        return SetupSection(
            name=name,
            path=path,
            parsed=False,
            checks=[SetupCheck(label=field, ok=False, detail="Missing") for field in fields],
        )

    missing = set(conf.missing_fields())
    checks = [
        SetupCheck(label=field, ok=field not in missing, detail="Missing" if field in missing else "Present")
        for field in fields
    ]
    return SetupSection(
        name=name,
        path=path,
        parsed=True,
        checks=checks,
        description=getattr(conf, "description", ""),
    )


def check_setup(paths: ConfPaths) -> SetupReport:
    """Validate both documents independently; never raises on missing data."""

    return SetupReport(
        user=_check_section(
            "User configuration", paths.user_conf, UserConf, ("api_access_token", "logging_user_id")
        ),
        boards=_check_section(
            "Boards configuration", paths.boards_conf, BoardsConf, ("person_column_id", "hours_column_id")
        ),
    )


def update_boards_conf(path: Path, *, url: str, client: httpx.Client) -> UpdateResult:
    """Descarga `boards.toml` y reemplaza el archivo real como último paso.

    Reglas:
    - El cuerpo se escribe en `<path>.tmp`.
    - Solo si llegó completo (Content-Length), es TOML válido y trae los campos
      obligatorios se hace `os.replace`.
    - Ante cualquier fallo se borra el temporal y el archivo previo queda intacto.
    """

    tmp_path = path.with_name(path.name + ".tmp")
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise io_error(f"Unable to create directory {path.parent}. Exiting.", exc) from exc

    size = 0
    try:
        with client.stream("GET", url) as response:
            response.raise_for_status()
            expected = response.headers.get("Content-Length")
            with tmp_path.open("wb") as f:
                for chunk in response.iter_bytes():
                    f.write(chunk)
                    size += len(chunk)
                # With a Content-Encoding, Content-Length counts the encoded bytes.
                received = response.num_bytes_downloaded if "Content-Encoding" in response.headers else size
        if expected is not None and expected.isdigit() and int(expected) != received:
            raise httpx.ReadError(f"incomplete body: received {received} of {expected} bytes")

        boards_conf = _load_model(tmp_path, BoardsConf)
        missing = boards_conf.missing_fields()
        if missing:
            _discard(tmp_path)
            raise validation_error(
                f"The boards configuration downloaded from {url} is missing: {', '.join(missing)}. "
                "Existing file kept. Exiting."
            )
        os.replace(tmp_path, path)
    except httpx.HTTPError as exc:
        _discard(tmp_path)
        raise remote_error(f"Unable to download the boards configuration from {url}. Exiting.", exc) from exc
    except (tomllib.TOMLDecodeError, ValidationError) as exc:
        _discard(tmp_path)
        raise validation_error(
            f"The boards configuration downloaded from {url} is not valid. Existing file kept. Exiting.", exc
        ) from exc
    except OSError as exc:
        _discard(tmp_path)
        raise io_error(f"Unable to write the boards configuration to {path}. Exiting.", exc) from exc

    return UpdateResult(url=url, size=size, path=path, description=boards_conf.description)


def _discard(tmp_path: Path) -> None:
    try:
        tmp_path.unlink(missing_ok=True)
    except OSError:
        logger.debug("could not remove %s", tmp_path)
