"""Registro de entornos de escritorio y plantillas de llamada.

Por qué data-driven:
- El conjunto de entornos es pequeño y cerrado; una tabla (entorno, acción)
  es más fácil de probar que una jerarquía de clases.
- Añadir un entorno = nuevo miembro en `DesktopEnvironment`, su herramienta
  de sondeo y sus tres plantillas. Ningún otro componente cambia.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from core.domain.models import (
    BusCall,
    CallTemplate,
    CommandCall,
    DesktopEnvironment,
    TabAction,
)
from core.errors import UnsupportedEnvironmentError

GNOME_SHELL_SERVICE = "org.gnome.Shell"
GNOME_SHELL_PATH = "/org/gnome/Shell"
GNOME_SHELL_EVAL = "org.gnome.Shell.Eval"
_GNOME_FOCUS = "global.display.focus_window"

KONSOLE_SERVICE = "org.kde.konsole"
KONSOLE_PATH = "/Konsole"


def _gnome_eval(method: str) -> BusCall:
    return BusCall(
        service=GNOME_SHELL_SERVICE,
        object_path=GNOME_SHELL_PATH,
        method=GNOME_SHELL_EVAL,
        payload=f"{_GNOME_FOCUS} && {_GNOME_FOCUS}.{method}()",
    )


def _konsole(method: str) -> CommandCall:
    return CommandCall(
        executable="qdbus",
        args=(KONSOLE_SERVICE, KONSOLE_PATH, f"org.kde.KMainWindow.{method}"),
    )


class Registry:
    """Tabla inmutable (entorno, acción) -> plantilla."""

    def __init__(
        self,
        templates: Mapping[tuple[DesktopEnvironment, TabAction], CallTemplate],
        probe_tools: Mapping[DesktopEnvironment, str],
    ) -> None:
        self._templates = MappingProxyType(dict(templates))
        self._probe_tools = MappingProxyType(dict(probe_tools))

    def environments(self) -> tuple[DesktopEnvironment, ...]:
        """Entornos en orden de registro (define el desempate en la detección)."""

        return tuple(self._probe_tools)

    def template_for(self, env: DesktopEnvironment, action: TabAction) -> CallTemplate:
        try:
            return self._templates[(env, action)]
        except KeyError:
            raise UnsupportedEnvironmentError(env, action) from None

    def probe_tool(self, env: DesktopEnvironment) -> str:
        try:
            return self._probe_tools[env]
        except KeyError:
            raise UnsupportedEnvironmentError(env) from None

    def __contains__(self, key: object) -> bool:
        return key in self._templates

    def __len__(self) -> int:
        return len(self._templates)


def build_default_registry() -> Registry:
    return Registry(
        templates={
            (DesktopEnvironment.GNOME, TabAction.CREATE_TAB): _gnome_eval("new_tab"),
            (DesktopEnvironment.GNOME, TabAction.SELECT_NEXT_TAB): _gnome_eval("switch_to_next_tab"),
            (DesktopEnvironment.GNOME, TabAction.SELECT_PREVIOUS_TAB): _gnome_eval("switch_to_previous_tab"),
            (DesktopEnvironment.KDE, TabAction.CREATE_TAB): _konsole("newTab"),
            (DesktopEnvironment.KDE, TabAction.SELECT_NEXT_TAB): _konsole("nextTab"),
            (DesktopEnvironment.KDE, TabAction.SELECT_PREVIOUS_TAB): _konsole("previousTab"),
        },
        probe_tools={
            DesktopEnvironment.GNOME: "gdbus",
            DesktopEnvironment.KDE: "qdbus",
        },
    )


DEFAULT_REGISTRY = build_default_registry()
