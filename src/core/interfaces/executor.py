"""Contrato de ejecución de comandos externos.

Por qué Protocol:
- "Ejecutar un comando, capturar estado de salida y stderr" es la única
  frontera con el sistema operativo; se inyecta en los servicios.
- Los tests usan ejecutores falsos con resultados guionizados sin tocar el SO.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol, runtime_checkable

from core.domain.models import ProcessResult


@runtime_checkable
class CommandExecutor(Protocol):
    """Contrato mínimo para lanzar un proceso externo.

    Reglas de diseño:
    - `run` es bloqueante: vuelve cuando el proceso termina.
    - Si el proceso no se puede lanzar (binario ausente, permisos) se
      propaga `OSError`; si vence `timeout`, `subprocess.TimeoutExpired`.
    """

    def run(self, argv: Sequence[str], *, timeout: float | None = None) -> ProcessResult:
        """Ejecuta `argv` y devuelve código de salida, stdout y stderr."""

        ...
