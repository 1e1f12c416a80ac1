"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Nos da validación estricta al leer los documentos TOML y las respuestas del
  API sin acoplar el Core a librerías de I/O.

Nota:
- Estos modelos describen *qué* es la información, no *cómo* se obtiene.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class UserConf(BaseModel):
    """Credentials and identity of the person logging time."""

    model_config = ConfigDict(extra="ignore", frozen=True, coerce_numbers_to_str=True)

    api_access_token: str = Field(
        default="",
        description="Personal API token for the board service.",
    )
    logging_user_id: str = Field(
        default="",
        description="Identifier of the user the pulses are attributed to.",
    )

    def missing_fields(self) -> list[str]:
        missing = []
        if not self.api_access_token:
            missing.append("api_access_token")
        if not self.logging_user_id:
            missing.append("logging_user_id")
        return missing


class MonthEntry(BaseModel):
    """One month of the boards document: a board and its day groups."""

    model_config = ConfigDict(extra="ignore", frozen=True, coerce_numbers_to_str=True)

    board_id: str = Field(
        default="",
        description="Board identifier (numeric, kept as a string).",
    )
    name: str | None = Field(
        default=None,
        description="Board name, informational only.",
    )
    days: dict[str, str] = Field(
        default_factory=dict,
        description="Two-digit day ('01'..'31') -> group identifier.",
    )


class BoardsConf(BaseModel):
    """Mapping from months to boards and days to groups, plus column ids."""

    model_config = ConfigDict(extra="ignore", frozen=True, coerce_numbers_to_str=True)

    person_column_id: str = Field(default="")
    hours_column_id: str = Field(default="")
    description: str = Field(default="")
    months: dict[str, MonthEntry] = Field(default_factory=dict)

    def missing_fields(self) -> list[str]:
        missing = []
        if not self.person_column_id:
            missing.append("person_column_id")
        if not self.hours_column_id:
            missing.append("hours_column_id")
        return missing


class Column(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: str
    title: str


class Group(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: str = ""
    title: str


class Board(BaseModel):
    """Board definition as returned by the remote service."""

    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)

    id: str
    name: str
    columns: list[Column] = Field(default_factory=list)
    groups: list[Group] = Field(default_factory=list)


class ColumnValue(BaseModel):
    model_config = ConfigDict(extra="ignore")

    text: str | None = None


class BoardItem(BaseModel):
    """One logged pulse.

    `day` is not part of the API payload: it is attached from the month's day
    mapping so ordering never has to parse it out of the group title.
    """

    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)

    id: str
    name: str
    group: Group
    column_values: list[ColumnValue] = Field(default_factory=list)
    day: int | None = Field(
        default=None,
        description="Day of month of the owning group, when known.",
    )

    @property
    def hours_text(self) -> str:
        if not self.column_values:
            return ""
        return self.column_values[0].text or ""


class GroupSummary(BaseModel):
    """Total hours and pulse count for one group (day)."""

    group: str
    day: int | None = None
    total_hours: float = 0.0
    pulse_count: int = 0


class SetupCheck(BaseModel):
    label: str
    ok: bool
    detail: str = ""


class SetupSection(BaseModel):
    """Diagnostic result for one configuration document."""

    name: str
    path: Path
    parsed: bool
    checks: list[SetupCheck] = Field(default_factory=list)
    description: str = ""

    @property
    def ok(self) -> bool:
        return self.parsed and all(check.ok for check in self.checks)


class SetupReport(BaseModel):
    user: SetupSection
    boards: SetupSection

    @property
    def ok(self) -> bool:
        return self.user.ok and self.boards.ok


class UpdateResult(BaseModel):
    url: str
    size: int
    path: Path
    description: str = ""
