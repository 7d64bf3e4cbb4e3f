"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Nos da modelos inmutables (frozen) y validados para las plantillas de
  llamada, sin acoplar el Core a `subprocess`.
- Los resultados (`ExecutionOutcome`) se pueden serializar tal cual para la
  CLI o para logs estructurados.

Nota:
- Estos modelos describen *qué* llamada externa se hace, no *cómo* se ejecuta.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class DesktopEnvironment(str, Enum):
    """Entornos de escritorio con protocolo de control externo.

    El valor es también el marcador que se busca en la variable de sesión.
    """

    GNOME = "GNOME"
    KDE = "KDE"

    @property
    def marker(self) -> str:
        return self.value

    @classmethod
    def parse(cls, raw: str) -> "DesktopEnvironment":
        """Acepta el nombre sin distinguir mayúsculas (útil para `--env`)."""

        try:
            return cls(raw.strip().upper())
        except ValueError:
            names = ", ".join(member.value for member in cls)
            raise ValueError(f"Unknown desktop environment {raw!r} (expected one of: {names})") from None


class TabAction(str, Enum):
    """Las tres acciones de pestaña que el núcleo sabe despachar."""

    CREATE_TAB = "create-tab"
    SELECT_NEXT_TAB = "next-tab"
    SELECT_PREVIOUS_TAB = "previous-tab"

    @property
    def description(self) -> str:
        """Texto usado en los mensajes de fallo ("GNOME tab creation failed: ...")."""

        return _ACTION_DESCRIPTIONS[self]


_ACTION_DESCRIPTIONS = {
    TabAction.CREATE_TAB: "tab creation",
    TabAction.SELECT_NEXT_TAB: "next tab selection",
    TabAction.SELECT_PREVIOUS_TAB: "previous tab selection",
}


class BusCall(BaseModel):
    """Invocación estructurada por el bus de sesión (vía `gdbus`)."""

    model_config = ConfigDict(frozen=True)

    executable: str = Field(
        default="gdbus",
        min_length=1,
        description="Cliente de bus usado para emitir la llamada.",
    )
    service: str = Field(
        ...,
        min_length=1,
        description="Nombre del servicio destino (p.ej. 'org.gnome.Shell').",
    )
    object_path: str = Field(
        ...,
        min_length=1,
        description="Ruta del objeto en el bus (p.ej. '/org/gnome/Shell').",
    )
    method: str = Field(
        ...,
        min_length=1,
        description="Interfaz.método a invocar.",
    )
    payload: str = Field(
        ...,
        description="Expresión/argumento único que se envía al método.",
    )

    @property
    def tool(self) -> str:
        return self.executable

    def argv(self) -> list[str]:
        return [
            self.executable,
            "call",
            "--session",
            "--dest",
            self.service,
            "--object-path",
            self.object_path,
            "--method",
            self.method,
            self.payload,
        ]


class CommandCall(BaseModel):
    """Invocación directa de un binario con argumentos posicionales."""

    model_config = ConfigDict(frozen=True)

    executable: str = Field(
        ...,
        min_length=1,
        description="Binario a ejecutar (p.ej. 'qdbus').",
    )
    args: tuple[str, ...] = Field(
        default_factory=tuple,
        description="Argumentos posicionales, en orden.",
    )

    @property
    def tool(self) -> str:
        return self.executable

    def argv(self) -> list[str]:
        return [self.executable, *self.args]


CallTemplate = BusCall | CommandCall


class ProcessResult(BaseModel):
    """Resultado crudo de un proceso externo ya terminado."""

    model_config = ConfigDict(frozen=True)

    returncode: int
    stdout: str = ""
    stderr: str = ""

    @property
    def succeeded(self) -> bool:
        return self.returncode == 0


class ErrorKind(str, Enum):
    """Taxonomía de fallos que se devuelven como valores."""

    UNSUPPORTED_ENVIRONMENT = "unsupported_environment"
    TOOL_UNAVAILABLE = "tool_unavailable"
    DISPATCH_FAILURE = "dispatch_failure"


class ExecutionOutcome(BaseModel):
    """Resultado de un intento de despacho (o de una comprobación).

    Por qué un valor y no una excepción:
    - El llamador decide si notifica, registra o ignora; nada aquí es fatal
      para el proceso anfitrión.
    """

    model_config = ConfigDict(frozen=True)

    ok: bool = Field(
        ...,
        description="True si el proceso externo terminó con estado 0.",
    )
    kind: ErrorKind | None = Field(
        default=None,
        description="Tipo de fallo; None en caso de éxito.",
    )
    message: str = Field(
        default="",
        description="Diagnóstico legible (vacío en caso de éxito).",
    )
    environment: DesktopEnvironment | None = None
    action: TabAction | None = None

    @classmethod
    def success(
        cls,
        environment: DesktopEnvironment | None = None,
        action: TabAction | None = None,
    ) -> "ExecutionOutcome":
        return cls(ok=True, environment=environment, action=action)

    @classmethod
    def failure(
        cls,
        kind: ErrorKind,
        message: str,
        *,
        environment: DesktopEnvironment | None = None,
        action: TabAction | None = None,
    ) -> "ExecutionOutcome":
        return cls(ok=False, kind=kind, message=message, environment=environment, action=action)

    def __bool__(self) -> bool:
        return self.ok
