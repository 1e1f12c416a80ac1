"""Exportación JSON de items y resúmenes.

Por qué JSON:
- Interoperabilidad con otras herramientas (jq, hojas de cálculo, scripts).
"""

from __future__ import annotations

import json
from typing import Sequence

from pydantic import BaseModel

from core.domain.models import BoardItem, GroupSummary


def _dump(models: Sequence[BaseModel]) -> str:
    payload = [model.model_dump(mode="json") for model in models]
    return json.dumps(payload, ensure_ascii=False, indent=2, sort_keys=True)


def items_to_json(items: Sequence[BoardItem]) -> str:
    """Items con formato estable; `hours` se expone como texto plano."""

    payload = [
        {
            "id": item.id,
            "name": item.name,
            "group": item.group.title,
            "group_id": item.group.id,
            "day": item.day,
            "hours": item.hours_text,
        }
        for item in items
    ]
    return json.dumps(payload, ensure_ascii=False, indent=2, sort_keys=True)


def summaries_to_json(groups: Sequence[GroupSummary]) -> str:
    return _dump(groups)
