"""
Cooperative cancellation for long ensembles.

The runner checks the token between runs, so the worst-case latency after
cancel() is one trajectory.
"""

from __future__ import annotations

import threading


class CancellationToken:
    """Thread-safe flag another thread (e.g. a UI) can set to stop a running ensemble."""

    def __init__(self) -> None:
        self._event = threading.Event()

    def cancel(self) -> None:
        self._event.set()

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()
