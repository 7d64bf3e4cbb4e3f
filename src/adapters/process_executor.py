"""Ejecutor de procesos basado en `subprocess`.

Por qué un adaptador:
- Es la única pieza que toca el SO; los servicios reciben un
  `CommandExecutor` y se prueban con dobles.
"""

from __future__ import annotations

import subprocess
from collections.abc import Sequence

from core.domain.models import ProcessResult
from core.interfaces.executor import CommandExecutor


class SubprocessExecutor(CommandExecutor):
    """Lanza el proceso, espera a que termine y captura su salida."""

    def __init__(self, *, encoding: str = "utf-8") -> None:
        self._encoding = encoding

    def run(self, argv: Sequence[str], *, timeout: float | None = None) -> ProcessResult:
        completed = subprocess.run(
            list(argv),
            stdin=subprocess.DEVNULL,
            capture_output=True,
            text=True,
            encoding=self._encoding,
            # Equivalente a `from_utf8_lossy`: stderr nunca rompe el decodificado.
            errors="replace",
            timeout=timeout,
            check=False,
        )
        return ProcessResult(
            returncode=completed.returncode,
            stdout=completed.stdout or "",
            stderr=completed.stderr or "",
        )
