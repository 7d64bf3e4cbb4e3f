"""Desktop session detection.

Reads the variable that advertises the current desktop session and maps it
onto a registered `DesktopEnvironment`. Nothing is cached: each call reads
the environment again.
"""

from __future__ import annotations

import os
from collections.abc import Mapping

from core.config import AppSettings
from core.domain.models import DesktopEnvironment
from core.logging import get_logger
from core.registry import DEFAULT_REGISTRY, Registry

logger = get_logger(__name__)


class EnvironmentProbe:
    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        registry: Registry | None = None,
        environ: Mapping[str, str] | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._registry = registry if registry is not None else DEFAULT_REGISTRY
        self._environ = environ

    @property
    def variable(self) -> str:
        return self._settings.desktop_env_var

    def raw_value(self) -> str | None:
        environ = self._environ if self._environ is not None else os.environ
        return environ.get(self.variable)

    def detect(self) -> DesktopEnvironment | None:
        """Return the first registered environment whose marker occurs in the value.

        Matching is a case-sensitive substring test, so "ubuntu:GNOME" maps
        to GNOME. When several markers match, registry order decides and the
        ambiguity is logged.
        """

        value = self.raw_value()
        if not value:
            return None

        matches = [env for env in self._registry.environments() if env.marker in value]
        if not matches:
            logger.debug("desktop_unrecognised", variable=self.variable, value=value)
            return None
        if len(matches) > 1:
            logger.warning(
                "desktop_ambiguous",
                variable=self.variable,
                value=value,
                candidates=[env.value for env in matches],
                chosen=matches[0].value,
            )
        return matches[0]


def detect_desktop_environment(
    settings: AppSettings | None = None,
    *,
    environ: Mapping[str, str] | None = None,
) -> DesktopEnvironment | None:
    return EnvironmentProbe(settings, environ=environ).detect()
