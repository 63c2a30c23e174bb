"""Starting, watching and stopping launched emulator processes."""

from __future__ import annotations

import logging
import os
import shlex
import signal
import subprocess
import threading
from typing import Callable

__all__ = [
    "create_process",
    "is_application_running",
    "close_application_running",
    "PlatformProcess",
]

log = logging.getLogger(__name__)

_children: dict[int, subprocess.Popen] = {}
_lock = threading.Lock()


def _command(full_path: str) -> str | list[str]:
    if os.name == "nt":
        return full_path
    return shlex.split(full_path)


def create_process(full_path: str, working_directory: str = "") -> int:
    """Start a command line and return the new process id.

    Raises OSError when the program cannot be started and ValueError for an
    empty command line.
    """
    if not full_path.strip():
        raise ValueError("empty command line")
    process = subprocess.Popen(_command(full_path), cwd=working_directory or None)
    with _lock:
        _children[process.pid] = process
    log.info("started process %d", process.pid)
    return process.pid


def is_application_running(pid: int) -> bool:
    """Whether a process started here is still running."""
    with _lock:
        process = _children.get(pid)
    if process is None:
        return False
    code = process.poll()
    if code is None:
        return True
    log.info("process %d ended with status %d", pid, code)
    with _lock:
        _children.pop(pid, None)
    return False


def close_application_running(pid: int) -> bool:
    """Ask a process to terminate; True when the request was delivered."""
    if pid == 0:
        return False
    with _lock:
        process = _children.get(pid)
    try:
        if process is not None:
            process.terminate()
        else:
            os.kill(pid, signal.SIGTERM)
    except OSError as exc:
        log.error("could not close process %d: %s", pid, exc)
        return False
    log.info("termination requested for process %d", pid)
    return True


class PlatformProcess:
    """Tracks one launched program and reports when it opens and closes."""

    def __init__(
        self,
        on_open: Callable[[], None] | None = None,
        on_close: Callable[[], None] | None = None,
    ) -> None:
        self.on_open = on_open
        self.on_close = on_close
        self.process_id = 0
        self.running = False

    def create_proc(self, full_path: str, working_directory: str = "") -> bool:
        """Launch a program; on failure log it and keep the previous id."""
        try:
            self.process_id = create_process(full_path, working_directory)
        except (OSError, ValueError) as exc:
            log.error("error creating a process: %s", exc)
            return False
        return True

    def tick(self) -> None:
        """Check the process and fire the open or close callback on changes."""
        if is_application_running(self.process_id):
            if not self.running:
                self.running = True
                log.info("application opened")
                if self.on_open is not None:
                    self.on_open()
        elif self.running:
            self.running = False
            self.process_id = 0
            log.info("application closed")
            if self.on_close is not None:
                self.on_close()

    def close(self) -> bool:
        """Ask the tracked process to terminate."""
        return close_application_running(self.process_id)