"""Cliente GraphQL de monday.com.

Cuatro operaciones, un request síncrono cada una. Los fallos de transporte,
las respuestas no-2xx y los payloads de error GraphQL salen como un
`CLIError` REMOTE cuya causa conserva la excepción original para `--debug`.
"""

from __future__ import annotations

import json
import logging
import math
import re
from typing import Any

import httpx
from pydantic import ValidationError

from adapters.http_client import build_api_client
from core.config import AppSettings
from core.domain.models import Board, BoardItem
from core.errors import remote_error, validation_error
from core.interfaces.board_api import BoardAPI

logger = logging.getLogger(__name__)

ITEMS_PAGE_LIMIT = 100

_HOURS_RE = re.compile(r"[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?", re.ASCII)

MSG_REMOTE_PROBLEM = "A problem occurred when contacting monday.com. Exiting."
MSG_REMOTE_PROBLEM_ON_CREATE = (
    "A problem occurred when contacting monday.com. "
    "Please verify on monday.com whether a log entry was created or not. Exiting."
)

GET_BOARD_QUERY = """
query ($board_ids: [ID!]) {
  boards(ids: $board_ids) {
    id
    name
    columns { id title }
    groups { id title }
  }
}
"""

# Only the first page is read; the cursor is returned but never followed.
GET_BOARD_ITEMS_QUERY = (
    """
query ($board_ids: [ID!], $person_column_id: ID!, $logging_user_id: CompareValue!, $hours_column_id: [String!]) {
  boards(ids: $board_ids) {
    id
    name
    items_page(limit: %d, query_params: {rules: [{column_id: $person_column_id, compare_value: $logging_user_id}]}) {
      cursor
      items {
        id
        name
        group { id title }
        column_values(ids: $hours_column_id) { text }
      }
    }
  }
}
"""
    % ITEMS_PAGE_LIMIT
)

CREATE_ITEM_MUTATION = """
mutation ($board_id: ID!, $group_id: String!, $item_name: String!, $column_values: JSON!) {
  create_item(board_id: $board_id, group_id: $group_id, item_name: $item_name, column_values: $column_values) {
    id
    relative_link
  }
}
"""

GET_PULSE_LINK_QUERY = """
query ($pulse_ids: [ID!]) {
  items(ids: $pulse_ids) {
    id
    relative_link
  }
}
"""


class GraphQLError(Exception):
    """The service answered, but with an error payload instead of data."""

    def __init__(self, errors: Any) -> None:
        super().__init__(json.dumps(errors, ensure_ascii=False, default=str))
        self.errors = errors


def parse_hours(hours: str) -> float | int:
    """Validate an hours argument; integers stay integers in the payload.

    Only plain decimal notation is accepted: no spaces, no digit separators.
    """

    if not _HOURS_RE.fullmatch(hours):
        raise validation_error(f"hours = {hours} (third arg): unable to parse hours as a number. Exiting.")
    value = float(hours)
    if not math.isfinite(value):
        raise validation_error(f"hours = {hours} (third arg): unable to parse hours as a number. Exiting.")
    return int(value) if value.is_integer() else value


def build_column_values(person_column_id: str, logging_user_id: str, hours_column_id: str, hours: float | int) -> str:
    """JSON-encoded column values; hours stays a bare number."""

    return json.dumps({person_column_id: logging_user_id, hours_column_id: hours})


class MondayAPIClient(BoardAPI):
    """Client bound to one user and the column ids of the boards document."""

    def __init__(
        self,
        *,
        api_access_token: str,
        logging_user_id: str,
        person_column_id: str,
        hours_column_id: str,
        settings: AppSettings | None = None,
        http: httpx.Client | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._http = http or build_api_client(self._settings, api_access_token=api_access_token)
        self.logging_user_id = logging_user_id
        self.person_column_id = person_column_id
        self.hours_column_id = hours_column_id

    def close(self) -> None:
        self._http.close()

    def __enter__(self) -> "MondayAPIClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _execute(self, query: str, variables: dict[str, Any]) -> dict[str, Any]:
        response = self._http.post(
            self._settings.api_url,
            json={"query": query, "variables": variables},
        )
        response.raise_for_status()
        payload = response.json()
        if payload.get("errors"):
            raise GraphQLError(payload["errors"])
        if payload.get("error_message"):
            raise GraphQLError({k: v for k, v in payload.items() if k.startswith("error")})
        data = payload.get("data")
        if not isinstance(data, dict):
            raise GraphQLError({"error_message": "response has no data"})
        return data

    def _query(self, query: str, variables: dict[str, Any], *, message: str = MSG_REMOTE_PROBLEM) -> dict[str, Any]:
        try:
            return self._execute(query, variables)
        except (httpx.HTTPError, GraphQLError, ValueError) as exc:
            raise remote_error(message, exc) from exc

    def fetch_board(self, board_id: str) -> Board:
        logger.debug("GetBoardByID boardID=%s", board_id)
        data = self._query(GET_BOARD_QUERY, {"board_ids": [board_id]})
        boards = data.get("boards") or []
        if not boards:
            raise remote_error(f"Board {board_id} was not found on monday.com. Exiting.")
        try:
            return Board.model_validate(boards[0])
        except ValidationError as exc:
            raise remote_error(MSG_REMOTE_PROBLEM, exc) from exc

    def fetch_board_items(self, board_id: str) -> list[BoardItem]:
        logger.debug("GetBoardItems boardID=%s", board_id)
        variables = {
            "board_ids": [board_id],
            "person_column_id": self.person_column_id,
            "logging_user_id": ["person-" + self.logging_user_id],
            "hours_column_id": [self.hours_column_id],
        }
        data = self._query(GET_BOARD_ITEMS_QUERY, variables)
        boards = data.get("boards") or []
        if not boards:
            raise remote_error(f"Board {board_id} was not found on monday.com. Exiting.")
        page = boards[0].get("items_page") or {}
        if page.get("cursor"):
            logger.debug("GetBoardItems: more than %d items, cursor not followed", ITEMS_PAGE_LIMIT)
        try:
            return [BoardItem.model_validate(item) for item in page.get("items") or []]
        except ValidationError as exc:
            raise remote_error(MSG_REMOTE_PROBLEM, exc) from exc

    def create_log_item(self, board_id: int, group_id: str, item_name: str, hours: str) -> str:
        number = parse_hours(hours)
        column_values = build_column_values(
            self.person_column_id, self.logging_user_id, self.hours_column_id, number
        )
        logger.debug(
            "CreateLogItem boardID=%s groupID=%s itemName=%r hours=%s", board_id, group_id, item_name, hours
        )
        variables = {
            "board_id": str(board_id),
            "group_id": group_id,
            "item_name": item_name,
            "column_values": column_values,
        }
        data = self._query(CREATE_ITEM_MUTATION, variables, message=MSG_REMOTE_PROBLEM_ON_CREATE)
        created = data.get("create_item") or {}
        link = created.get("relative_link")
        if link:
            return link
        if created.get("id"):
            return f"/boards/{board_id}/pulses/{created['id']}"
        raise remote_error(MSG_REMOTE_PROBLEM_ON_CREATE, GraphQLError(data))

    def fetch_pulse_relative_link(self, pulse_id: str) -> str:
        logger.debug("GetPulseRelativeLink pulseID=%s", pulse_id)
        data = self._query(GET_PULSE_LINK_QUERY, {"pulse_ids": [pulse_id]})
        items = data.get("items") or []
        if not items or not items[0].get("relative_link"):
            raise remote_error(f"Pulse {pulse_id} was not found on monday.com. Exiting.")
        return items[0]["relative_link"]
