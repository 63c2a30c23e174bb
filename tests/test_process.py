import sys
import time

import pytest

from retrolaunch.process import (
    PlatformProcess,
    close_application_running,
    create_process,
    is_application_running,
)

SLEEPER = f'"{sys.executable}" -c "import time; time.sleep(30)"'
QUICK = f'"{sys.executable}" -c "pass"'


def _wait_until(predicate, timeout=15.0):
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        if predicate():
            return True
        time.sleep(0.05)
    return predicate()


@pytest.fixture
def started():
    pids = []
    yield pids
    for pid in pids:
        close_application_running(pid)
        _wait_until(lambda: not is_application_running(pid))


def test_running_process_can_be_closed(started):
    pid = create_process(SLEEPER, "")
    started.append(pid)
    assert pid > 0
    assert is_application_running(pid) is True
    assert close_application_running(pid) is True
    assert _wait_until(lambda: not is_application_running(pid)) is True


def test_quick_process_finishes(started):
    pid = create_process(QUICK, "")
    started.append(pid)
    assert _wait_until(lambda: not is_application_running(pid)) is True


def test_working_directory_is_used(tmp_path, started):
    command = f'"{sys.executable}" -c "open(\'marker.txt\', \'w\').close()"'
    pid = create_process(command, str(tmp_path))
    started.append(pid)
    assert _wait_until(lambda: not is_application_running(pid)) is True
    assert (tmp_path / "marker.txt").exists()


def test_unknown_pid_is_not_running():
    assert is_application_running(0) is False
    assert close_application_running(0) is False


def test_missing_program_raises(tmp_path):
    with pytest.raises(OSError):
        create_process(str(tmp_path / "no-such-program"), "")


def test_empty_command_raises():
    with pytest.raises(ValueError):
        create_process("   ", "")


def test_platform_process_callbacks(started):
    events = []
    tracker = PlatformProcess(
        on_open=lambda: events.append("open"), on_close=lambda: events.append("close")
    )
    assert tracker.create_proc(SLEEPER, "") is True
    started.append(tracker.process_id)
    tracker.tick()
    tracker.tick()
    assert events == ["open"]
    assert tracker.running is True
    pid = tracker.process_id
    assert tracker.close() is True
    assert _wait_until(lambda: not is_application_running(pid)) is True
    tracker.tick()
    assert events == ["open", "close"]
    assert tracker.running is False
    assert tracker.process_id == 0


def test_platform_process_failed_launch(tmp_path):
    tracker = PlatformProcess()
    assert tracker.create_proc(str(tmp_path / "missing"), "") is False
    assert tracker.process_id == 0
    tracker.tick()
    assert tracker.running is False
    assert tracker.close() is False