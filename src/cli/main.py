"""CLI principal (Typer).

Por qué una CLI:
- Permite enlazar atajos del gestor de ventanas o del terminal a
  `tab-dispatch next-tab` sin escribir código.
- Traduce `ExecutionOutcome` a códigos de salida: 0 éxito, 1 fallo de
  despacho, 2 entorno no soportado o atajo sin llamada externa.
"""

from __future__ import annotations

from typing import Callable, Optional

import typer
from rich.console import Console
from rich.markup import escape

from adapters.process_executor import SubprocessExecutor
from cli import doctor
from cli.ui_components import build_bindings_table, print_outcome
from core.config import AppSettings
from core.domain.bindings import TabSelection, default_bindings, resolve_binding
from core.domain.models import DesktopEnvironment, ErrorKind, ExecutionOutcome, TabAction
from core.interfaces.executor import CommandExecutor
from core.logging import configure_logging
from core.services.availability import AvailabilityChecker
from core.services.environment_probe import EnvironmentProbe
from core.services.tab_dispatcher import TabDispatcher

app = typer.Typer(
    no_args_is_help=True,
    help="Create and switch terminal tabs through the desktop environment's control bus.",
)
app.add_typer(doctor.app, name="doctor")

_console = Console()
_err_console = Console(stderr=True)

# Sustituible en tests por un ejecutor falso.
executor_factory: Callable[[], CommandExecutor] = SubprocessExecutor

EXIT_DISPATCH_FAILED = 1
EXIT_UNSUPPORTED = 2


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log dispatch details to stderr."),
) -> None:
    settings = AppSettings()
    if verbose:
        settings = settings.model_copy(update={"log_level": "DEBUG"})
    configure_logging(settings, force=True)


def _resolve_env(probe: EnvironmentProbe, env_name: str | None) -> DesktopEnvironment:
    if env_name:
        try:
            return DesktopEnvironment.parse(env_name)
        except ValueError as exc:
            raise typer.BadParameter(str(exc), param_hint="--env") from None

    detected = probe.detect()
    if detected is None:
        value = probe.raw_value()
        shown = f"{probe.variable}={value!r}" if value else f"{probe.variable} is unset"
        _err_console.print(f"[red]No supported desktop environment detected[/red] ({shown})")
        raise typer.Exit(code=EXIT_UNSUPPORTED)
    return detected


def _exit_for(outcome: ExecutionOutcome) -> None:
    if outcome.ok:
        return
    if outcome.kind is ErrorKind.UNSUPPORTED_ENVIRONMENT:
        raise typer.Exit(code=EXIT_UNSUPPORTED)
    raise typer.Exit(code=EXIT_DISPATCH_FAILED)


def _run_action(action: TabAction, env_name: str | None, pre_check: bool) -> None:
    settings = AppSettings()
    executor = executor_factory()
    probe = EnvironmentProbe(settings)
    env = _resolve_env(probe, env_name)

    if pre_check and not AvailabilityChecker(executor, settings).is_available(env):
        # Solo advertencia: la comprobación es orientativa y no bloquea el despacho.
        _err_console.print(f"[yellow]Warning:[/yellow] the {env.value} control tool does not look installed")

    outcome = TabDispatcher(executor, settings, probe=probe).dispatch(env, action)
    print_outcome(_console if outcome.ok else _err_console, outcome)
    _exit_for(outcome)


_ENV_OPTION = typer.Option(None, "--env", "-e", help="Override detection (GNOME or KDE).")
_CHECK_OPTION = typer.Option(False, "--check", help="Warn first if the control tool is missing.")


@app.command()
def detect() -> None:
    """Print the detected desktop environment."""

    probe = EnvironmentProbe(AppSettings())
    env = _resolve_env(probe, None)
    _console.print(env.value)


@app.command(name="new-tab")
def new_tab(env: Optional[str] = _ENV_OPTION, check: bool = _CHECK_OPTION) -> None:
    """Create a new tab."""

    _run_action(TabAction.CREATE_TAB, env, check)


@app.command(name="next-tab")
def next_tab(env: Optional[str] = _ENV_OPTION, check: bool = _CHECK_OPTION) -> None:
    """Switch to the next tab."""

    _run_action(TabAction.SELECT_NEXT_TAB, env, check)


@app.command(name="prev-tab")
def prev_tab(env: Optional[str] = _ENV_OPTION, check: bool = _CHECK_OPTION) -> None:
    """Switch to the previous tab."""

    _run_action(TabAction.SELECT_PREVIOUS_TAB, env, check)


@app.command()
def key(
    chord: str = typer.Argument(..., help='Key chord, e.g. "Control+Shift+T".'),
    env: Optional[str] = _ENV_OPTION,
) -> None:
    """Resolve a key chord through the default bindings and dispatch it."""

    try:
        binding = resolve_binding(chord)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="CHORD") from None

    if binding is None:
        _err_console.print(f"[red]No tab binding for[/red] {escape(chord)}")
        raise typer.Exit(code=EXIT_UNSUPPORTED)

    if isinstance(binding.target, TabSelection):
        _err_console.print(
            f"[yellow]{binding.chord()}[/yellow] ({binding.target.label()}) "
            "has no desktop control call; it is handled by the terminal itself"
        )
        raise typer.Exit(code=EXIT_UNSUPPORTED)

    _run_action(binding.target, env, False)


@app.command()
def bindings() -> None:
    """List the default tab key bindings."""

    _console.print(build_bindings_table(default_bindings()))


def run() -> None:
    app()


if __name__ == "__main__":
    run()
