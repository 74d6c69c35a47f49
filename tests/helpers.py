"""Test helpers shared by the Qt-driven tests."""

from __future__ import annotations

from PySide6.QtCore import QEventLoop, QTimer

# 2026-03-14 09:30:00 UTC
BASE_MS = 1_773_480_600_000


class FakeClock:
    """Callable clock returning epoch milliseconds that only moves when told to."""

    def __init__(self, start_ms: int = BASE_MS) -> None:
        self.now = start_ms

    def __call__(self) -> int:
        return self.now

    def advance(self, ms: int) -> None:
        self.now += ms


def spin(ms: int) -> None:
    """Run the Qt event loop for roughly *ms* milliseconds."""
    loop = QEventLoop()
    QTimer.singleShot(ms, loop.quit)
    loop.exec()
