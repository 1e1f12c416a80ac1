"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar tablas en múltiples comandos.
"""

from __future__ import annotations

from rich import box
from rich.table import Table

from core.domain.models import BoardItem, GroupSummary, SetupSection


def format_hours(value: float) -> str:
    return f"{value:g}"


def _plain_table() -> Table:
    # Column-aligned text: no borders, no colors, header row only.
    return Table(box=box.SIMPLE_HEAD, show_edge=False, pad_edge=False)


def build_items_table(items: list[BoardItem]) -> Table:
    """Tabla GROUP / HOURS / DESCRIPTION / PULSE ID."""

    table = _plain_table()
    table.add_column("GROUP", no_wrap=True)
    table.add_column("HOURS", justify="right")
    table.add_column("DESCRIPTION")
    table.add_column("PULSE ID", no_wrap=True)
    for item in items:
        table.add_row(item.group.title, item.hours_text, item.name, item.id)
    return table


def build_summary_table(groups: list[GroupSummary]) -> Table:
    """Tabla GROUP / TOTAL HOURS / PULSE COUNT."""

    table = _plain_table()
    table.add_column("GROUP", no_wrap=True)
    table.add_column("TOTAL HOURS", justify="right")
    table.add_column("PULSE COUNT", justify="right")
    for group in groups:
        table.add_row(group.group, format_hours(group.total_hours), str(group.pulse_count))
    return table


def build_setup_table(section: SetupSection) -> Table:
    """Tabla de diagnóstico para un documento de configuración."""

    table = Table(title=f"{section.name}: {section.path}")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    table.add_row(
        "File",
        "OK" if section.parsed else "FAIL",
        "Parsed" if section.parsed else "Unable to parse file (missing or incorrectly formatted)",
    )
    for check in section.checks:
        table.add_row(check.label, "OK" if check.ok else "FAIL", check.detail)
    if section.description:
        table.add_row("description", "OK", section.description)
    return table
