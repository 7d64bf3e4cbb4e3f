"""Doctor command for environment diagnostics."""

from __future__ import annotations

import shlex

import typer
from rich.console import Console

from adapters.process_executor import SubprocessExecutor
from cli.ui_components import build_doctor_table
from core.config import AppSettings
from core.domain.models import DesktopEnvironment, TabAction
from core.registry import DEFAULT_REGISTRY
from core.services.availability import AvailabilityChecker
from core.services.environment_probe import EnvironmentProbe

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and tool availability checks.")

_console = Console()


@app.command()
def run(
    show_commands: bool = typer.Option(False, "--commands", help="Also list the rendered external calls."),
) -> None:
    """Run baseline diagnostics and show recommended fixes."""

    settings = AppSettings()
    probe = EnvironmentProbe(settings)
    checker = AvailabilityChecker(SubprocessExecutor(), settings)

    table = build_doctor_table()

    raw = probe.raw_value()
    table.add_row(probe.variable, "SET" if raw else "UNSET", raw or "-")

    detected = probe.detect()
    if detected is None:
        table.add_row("Desktop", "UNSUPPORTED", "No GNOME/KDE marker found -> tab actions disabled")
    else:
        table.add_row("Desktop", "OK", detected.value)

    available: dict[DesktopEnvironment, bool] = {}
    for env in DEFAULT_REGISTRY.environments():
        tool = DEFAULT_REGISTRY.probe_tool(env)
        ok = available[env] = checker.is_available(env)
        status = "OK" if ok else ("FAIL" if env is detected else "MISSING")
        table.add_row(f"{env.value} tool", status, tool)

    timeout = settings.dispatch_timeout_seconds
    table.add_row("Dispatch timeout", "OK", f"{timeout:g}s" if timeout else "none (waits indefinitely)")

    _console.print(table)

    if show_commands:
        for env in DEFAULT_REGISTRY.environments():
            for action in TabAction:
                argv = DEFAULT_REGISTRY.template_for(env, action).argv()
                _console.print(f"[cyan]{env.value}[/cyan] {action.value}: [dim]{shlex.join(argv)}[/dim]")

    if detected is not None and not available[detected]:
        tool = DEFAULT_REGISTRY.probe_tool(detected)
        _console.print(
            f"\n[yellow]Note:[/yellow] install '{tool}' so {detected.value} tab actions can be dispatched."
        )
