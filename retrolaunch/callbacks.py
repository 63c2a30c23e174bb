"""A queue that lets worker threads hand results back to the main loop."""

from __future__ import annotations

import threading
from collections import deque
from typing import Any, Callable, Optional

__all__ = ["CallbackQueue"]


class CallbackQueue:
    """Collects argument tuples from any thread and runs a callback on them later."""

    def __init__(self) -> None:
        self._callback: Optional[Callable[..., Any]] = None
        self._pending: deque[tuple[Any, ...]] = deque()
        self._lock = threading.Lock()

    def set_callback(self, callback: Callable[..., Any]) -> None:
        self._callback = callback

    def notify(self, *args: Any) -> None:
        """Queue a call of the callback with these arguments; thread-safe."""
        with self._lock:
            self._pending.append(args)

    def execute(self) -> None:
        """Run every queued call, including ones queued while running.

        Raises RuntimeError when calls are queued but no callback is set.
        """
        while True:
            with self._lock:
                if not self._pending:
                    return
                args = self._pending.popleft()
            if self._callback is None:
                raise RuntimeError("no callback set")
            self._callback(*args)

    def start_thread(self, target: Callable[..., Any], *args: Any) -> threading.Thread:
        """Run ``target`` on a background daemon thread."""
        thread = threading.Thread(target=target, args=args, daemon=True)
        thread.start()
        return thread