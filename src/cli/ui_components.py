"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar tablas/paneles en múltiples comandos.
"""

from __future__ import annotations

from rich.console import Console
from rich.table import Table
from rich.text import Text

from core.domain.bindings import KeyBinding
from core.domain.models import ExecutionOutcome


def print_outcome(console: Console, outcome: ExecutionOutcome) -> None:
    """Una línea verde/roja por resultado de despacho."""

    if outcome.ok:
        env = outcome.environment.value if outcome.environment else "?"
        action = outcome.action.value if outcome.action else "check"
        console.print(Text.assemble(("OK ", "bold green"), f"{env} {action}"))
        return
    kind = outcome.kind.value if outcome.kind else "error"
    console.print(Text.assemble(("FAIL ", "bold red"), (f"[{kind}] ", "dim"), outcome.message))


def build_bindings_table(bindings: list[KeyBinding]) -> Table:
    table = Table(title="Tab Key Bindings")
    table.add_column("Chord", style="cyan", no_wrap=True)
    table.add_column("Action", style="white")
    for binding in bindings:
        table.add_row(binding.chord(), binding.target_label())
    return table


def build_doctor_table() -> Table:
    table = Table(title="tab-dispatch Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")
    return table
