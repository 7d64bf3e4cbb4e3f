"""Best-effort check that a desktop environment's control tool is installed.

A positive answer is advisory: the tool can disappear between the check and
the dispatch.
"""

from __future__ import annotations

import subprocess

from core.config import AppSettings
from core.domain.models import DesktopEnvironment, ErrorKind, ExecutionOutcome
from core.interfaces.executor import CommandExecutor
from core.logging import get_logger
from core.registry import DEFAULT_REGISTRY, Registry

logger = get_logger(__name__)


class AvailabilityChecker:
    def __init__(
        self,
        executor: CommandExecutor,
        settings: AppSettings | None = None,
        *,
        registry: Registry | None = None,
    ) -> None:
        self._executor = executor
        self._settings = settings or AppSettings()
        self._registry = registry if registry is not None else DEFAULT_REGISTRY

    def is_available(self, env: DesktopEnvironment) -> bool:
        """True only if the presence probe runs and exits successfully; never raises."""

        tool = self._registry.probe_tool(env)
        argv = [self._settings.presence_probe, tool]
        try:
            result = self._executor.run(argv, timeout=self._settings.dispatch_timeout_seconds)
        except (OSError, subprocess.SubprocessError) as exc:
            logger.info("presence_probe_failed", environment=env.value, tool=tool, error=str(exc))
            return False

        if not result.succeeded:
            logger.info(
                "tool_missing",
                environment=env.value,
                tool=tool,
                returncode=result.returncode,
            )
        return result.succeeded

    def check(self, env: DesktopEnvironment) -> ExecutionOutcome:
        if self.is_available(env):
            return ExecutionOutcome.success(environment=env)
        tool = self._registry.probe_tool(env)
        return ExecutionOutcome.failure(
            ErrorKind.TOOL_UNAVAILABLE,
            f"{env.value} control tool '{tool}' was not found on PATH",
            environment=env,
        )
