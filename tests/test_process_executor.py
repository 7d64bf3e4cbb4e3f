"""Tests for the subprocess-backed executor (spawns real short-lived processes)."""

import subprocess
import sys

import pytest

from adapters.process_executor import SubprocessExecutor
from core.interfaces.executor import CommandExecutor


def test_satisfies_the_executor_contract():
    assert isinstance(SubprocessExecutor(), CommandExecutor)


def test_captures_exit_status_and_stderr():
    script = "import sys; sys.stderr.write('no such window'); sys.exit(3)"

    result = SubprocessExecutor().run([sys.executable, "-c", script])

    assert result.returncode == 3
    assert not result.succeeded
    assert result.stderr == "no such window"


def test_success():
    result = SubprocessExecutor().run([sys.executable, "-c", "print('ok')"])

    assert result.succeeded
    assert result.stdout.strip() == "ok"


def test_missing_binary_raises_os_error():
    with pytest.raises(OSError):
        SubprocessExecutor().run(["tab-dispatch-definitely-missing-binary"])


def test_timeout_propagates():
    with pytest.raises(subprocess.TimeoutExpired):
        SubprocessExecutor().run([sys.executable, "-c", "import time; time.sleep(5)"], timeout=0.2)
