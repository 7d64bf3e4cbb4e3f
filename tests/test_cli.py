"""CLI regression coverage (Typer CliRunner with a fake executor)."""

import pytest
from typer.testing import CliRunner

from cli import main as cli_main
from conftest import FakeExecutor
from core.domain.models import ProcessResult

runner = CliRunner()


@pytest.fixture
def executor(monkeypatch):
    fake = FakeExecutor(ProcessResult(returncode=0))
    monkeypatch.setattr(cli_main, "executor_factory", lambda: fake)
    return fake


def test_detect_prints_environment(monkeypatch):
    monkeypatch.setenv("XDG_CURRENT_DESKTOP", "ubuntu:GNOME")

    result = runner.invoke(cli_main.app, ["detect"])

    assert result.exit_code == 0
    assert "GNOME" in result.output


def test_detect_unsupported_exits_2(monkeypatch):
    monkeypatch.setenv("XDG_CURRENT_DESKTOP", "XFCE")

    result = runner.invoke(cli_main.app, ["detect"])

    assert result.exit_code == 2


def test_next_tab_dispatches_detected_environment(monkeypatch, executor):
    monkeypatch.setenv("XDG_CURRENT_DESKTOP", "KDE")

    result = runner.invoke(cli_main.app, ["next-tab"])

    assert result.exit_code == 0
    assert executor.calls == [["qdbus", "org.kde.konsole", "/Konsole", "org.kde.KMainWindow.nextTab"]]


def test_env_option_overrides_detection(monkeypatch, executor):
    monkeypatch.delenv("XDG_CURRENT_DESKTOP", raising=False)

    result = runner.invoke(cli_main.app, ["new-tab", "--env", "gnome"])

    assert result.exit_code == 0
    assert executor.calls[0][0] == "gdbus"


def test_dispatch_failure_exits_1_with_message(monkeypatch, executor):
    monkeypatch.setenv("XDG_CURRENT_DESKTOP", "GNOME")
    executor.result = ProcessResult(returncode=1, stderr="no such window")

    result = runner.invoke(cli_main.app, ["prev-tab"])

    assert result.exit_code == 1
    assert "no such window" in result.output


def test_check_flag_warns_but_still_dispatches(monkeypatch, executor):
    monkeypatch.setenv("XDG_CURRENT_DESKTOP", "GNOME")
    executor.result = ProcessResult(returncode=1)

    result = runner.invoke(cli_main.app, ["new-tab", "--check"])

    assert executor.calls[0] == ["which", "gdbus"]
    assert len(executor.calls) == 2
    assert result.exit_code == 1


def test_key_chord_dispatches_bound_action(monkeypatch, executor):
    monkeypatch.setenv("XDG_CURRENT_DESKTOP", "KDE")

    result = runner.invoke(cli_main.app, ["key", "Control+Shift+T"])

    assert result.exit_code == 0
    assert executor.calls[0][-1] == "org.kde.KMainWindow.newTab"


def test_key_ordinal_selection_has_no_external_call(monkeypatch, executor):
    monkeypatch.setenv("XDG_CURRENT_DESKTOP", "KDE")

    result = runner.invoke(cli_main.app, ["key", "Alt+3"])

    assert result.exit_code == 2
    assert executor.calls == []


def test_bindings_lists_default_table():
    result = runner.invoke(cli_main.app, ["bindings"])

    assert result.exit_code == 0
    assert "Control+Shift+T" in result.output


def test_doctor_reports_without_failing(monkeypatch):
    monkeypatch.setenv("XDG_CURRENT_DESKTOP", "ubuntu:GNOME")

    result = runner.invoke(cli_main.app, ["doctor", "run", "--commands"])

    assert result.exit_code == 0
    assert "gdbus" in result.output
    assert "org.kde.KMainWindow.newTab" in result.output


def test_unbound_chord_exits_2_without_dispatching(executor):
    result = runner.invoke(cli_main.app, ["key", "Control+Shift+Q"])

    assert result.exit_code == 2
    assert executor.calls == []
