"""Tab action dispatch.

Maps a (desktop environment, tab action) pair onto its call template and
runs it exactly once through the injected `CommandExecutor`. Every runtime
failure comes back as an `ExecutionOutcome`; only a pair missing from the
registry raises, since that is a defect in the registry itself.

No retries: tab actions are user-triggered and a retry could open two tabs.
"""

from __future__ import annotations

import subprocess

from core.config import AppSettings
from core.domain.models import (
    DesktopEnvironment,
    ErrorKind,
    ExecutionOutcome,
    TabAction,
)
from core.interfaces.executor import CommandExecutor
from core.logging import get_logger
from core.registry import DEFAULT_REGISTRY, Registry
from core.services.environment_probe import EnvironmentProbe

logger = get_logger(__name__)


def format_failure(env: DesktopEnvironment, action: TabAction, detail: str) -> str:
    return f"{env.value} {action.description} failed: {detail.strip()}"


class TabDispatcher:
    def __init__(
        self,
        executor: CommandExecutor,
        settings: AppSettings | None = None,
        *,
        registry: Registry | None = None,
        probe: EnvironmentProbe | None = None,
    ) -> None:
        self._executor = executor
        self._settings = settings or AppSettings()
        self._registry = registry if registry is not None else DEFAULT_REGISTRY
        self._probe = probe or EnvironmentProbe(self._settings, registry=self._registry)

    def dispatch(self, env: DesktopEnvironment, action: TabAction) -> ExecutionOutcome:
        template = self._registry.template_for(env, action)
        argv = template.argv()
        log = logger.bind(environment=env.value, action=action.value, tool=template.tool)
        log.debug("dispatch_start", argv=argv)

        try:
            result = self._executor.run(argv, timeout=self._settings.dispatch_timeout_seconds)
        except subprocess.TimeoutExpired as exc:
            detail = f"timed out after {exc.timeout:g}s"
            log.warning("dispatch_timeout", timeout=exc.timeout)
            return self._failure(env, action, detail)
        except OSError as exc:
            log.warning("dispatch_spawn_failed", error=str(exc))
            return self._failure(env, action, str(exc))

        if result.succeeded:
            log.info("dispatch_ok")
            return ExecutionOutcome.success(environment=env, action=action)

        detail = result.stderr.strip() or f"exit status {result.returncode}"
        log.warning("dispatch_failed", returncode=result.returncode, stderr=result.stderr.strip())
        return self._failure(env, action, detail)

    def dispatch_detected(self, action: TabAction) -> ExecutionOutcome:
        env = self._probe.detect()
        if env is None:
            value = self._probe.raw_value()
            shown = repr(value) if value else "unset"
            return ExecutionOutcome.failure(
                ErrorKind.UNSUPPORTED_ENVIRONMENT,
                f"No supported desktop environment detected ({self._probe.variable}={shown})",
                action=action,
            )
        return self.dispatch(env, action)

    def create_tab(self, env: DesktopEnvironment) -> ExecutionOutcome:
        return self.dispatch(env, TabAction.CREATE_TAB)

    def select_next_tab(self, env: DesktopEnvironment) -> ExecutionOutcome:
        return self.dispatch(env, TabAction.SELECT_NEXT_TAB)

    def select_previous_tab(self, env: DesktopEnvironment) -> ExecutionOutcome:
        return self.dispatch(env, TabAction.SELECT_PREVIOUS_TAB)

    @staticmethod
    def _failure(env: DesktopEnvironment, action: TabAction, detail: str) -> ExecutionOutcome:
        return ExecutionOutcome.failure(
            ErrorKind.DISPATCH_FAILURE,
            format_failure(env, action, detail),
            environment=env,
            action=action,
        )
