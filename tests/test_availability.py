"""Tests for the control-tool availability checker."""

import subprocess

import pytest

from core.domain.models import DesktopEnvironment, ErrorKind
from core.errors import UnsupportedEnvironmentError
from core.registry import Registry
from core.services.availability import AvailabilityChecker


def test_available_when_probe_succeeds(settings, make_executor):
    executor = make_executor(returncode=0)

    assert AvailabilityChecker(executor, settings).is_available(DesktopEnvironment.GNOME) is True
    assert executor.calls == [["which", "gdbus"]]


def test_probes_the_kde_tool(settings, make_executor):
    executor = make_executor(returncode=0)

    AvailabilityChecker(executor, settings).is_available(DesktopEnvironment.KDE)

    assert executor.calls == [["which", "qdbus"]]


def test_unavailable_when_probe_exits_non_zero(settings, make_executor):
    executor = make_executor(returncode=1)

    assert AvailabilityChecker(executor, settings).is_available(DesktopEnvironment.KDE) is False


def test_unavailable_when_probe_cannot_spawn(settings, make_executor):
    executor = make_executor(error=FileNotFoundError(2, "No such file or directory", "which"))

    assert AvailabilityChecker(executor, settings).is_available(DesktopEnvironment.GNOME) is False


def test_unavailable_when_probe_times_out(settings, make_executor):
    executor = make_executor(error=subprocess.TimeoutExpired(["which", "gdbus"], 1.0))

    assert AvailabilityChecker(executor, settings).is_available(DesktopEnvironment.GNOME) is False


def test_check_returns_tool_unavailable_outcome(settings, make_executor):
    outcome = AvailabilityChecker(make_executor(returncode=1), settings).check(DesktopEnvironment.KDE)

    assert not outcome.ok
    assert outcome.kind is ErrorKind.TOOL_UNAVAILABLE
    assert "qdbus" in outcome.message


def test_check_success(settings, make_executor):
    outcome = AvailabilityChecker(make_executor(), settings).check(DesktopEnvironment.GNOME)

    assert outcome.ok
    assert outcome.environment is DesktopEnvironment.GNOME


def test_empty_registry_has_no_probe_tool(settings, make_executor):
    executor = make_executor()
    checker = AvailabilityChecker(executor, settings, registry=Registry(templates={}, probe_tools={}))

    with pytest.raises(UnsupportedEnvironmentError):
        checker.is_available(DesktopEnvironment.GNOME)
    assert executor.calls == []
