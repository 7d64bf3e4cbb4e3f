"""Excepciones del Core.

Solo se lanzan para defectos de programación (p.ej. una consulta al registro
para un par que no existe). Los fallos en tiempo de ejecución viajan como
`ExecutionOutcome`.
"""

from __future__ import annotations


class TabDispatchError(Exception):
    """Base de los errores propios del proyecto."""


class UnsupportedEnvironmentError(TabDispatchError, LookupError):
    def __init__(self, environment: object, action: object | None = None) -> None:
        self.environment = environment
        self.action = action
        if action is None:
            message = f"No registry entry for desktop environment {environment!r}"
        else:
            message = f"No call template for {environment!r} / {action!r}"
        super().__init__(message)
