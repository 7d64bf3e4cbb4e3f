"""Pytest configuration and fixtures for tab-dispatch tests."""

from __future__ import annotations

from collections.abc import Sequence

import pytest

from core.config import AppSettings
from core.logging import reset_logging
from core.domain.models import ProcessResult


class FakeExecutor:
    """Scripted `CommandExecutor`: returns a result or raises, and records every argv."""

    def __init__(self, result: ProcessResult | None = None, *, error: BaseException | None = None):
        self.result = result or ProcessResult(returncode=0)
        self.error = error
        self.calls: list[list[str]] = []
        self.timeouts: list[float | None] = []

    def run(self, argv: Sequence[str], *, timeout: float | None = None) -> ProcessResult:
        self.calls.append(list(argv))
        self.timeouts.append(timeout)
        if self.error is not None:
            raise self.error
        return self.result


@pytest.fixture
def settings():
    return AppSettings(_env_file=None)


@pytest.fixture
def make_executor():
    def _make(returncode: int = 0, stderr: str = "", *, error: BaseException | None = None):
        return FakeExecutor(ProcessResult(returncode=returncode, stderr=stderr), error=error)

    return _make


@pytest.fixture(autouse=True)
def quiet_logging():
    """Each test starts and ends with the silent import-time logging setup."""
    reset_logging()
    yield
    reset_logging()
