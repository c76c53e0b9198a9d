"""Countdown between sets. Nothing here is persisted."""
from __future__ import annotations
import asyncio
from typing import Callable, Optional

TICK_SECONDS = 1


def format_time(seconds: int) -> str:
    seconds = max(seconds, 0)
    return f"{seconds // 60}:{seconds % 60:02d}"


class RestTimer:
    """
    Counts down once per tick and calls `on_end` exactly once, either when the
    count reaches zero or when the rest is skipped.
    """

    def __init__(self, duration: int, on_end: Optional[Callable[[], None]] = None):
        self.duration = duration
        self.on_end = on_end
        self.remaining = duration
        self.running = False
        self.ended = False

    def start(self, duration: int | None = None) -> None:
        if duration is not None:
            self.duration = duration
        self.remaining = self.duration
        self.ended = False
        self.running = True
        if self.remaining <= 0:
            self._finish()

    def tick(self) -> int:
        if not self.running:
            return self.remaining
        self.remaining -= 1
        if self.remaining <= 0:
            self.remaining = 0
            self._finish()
        return self.remaining

    def skip(self) -> None:
        if self.running:
            self._finish()

    def cancel(self) -> None:
        """Stop without firing `on_end` (the card went away)."""
        self.running = False

    @property
    def display(self) -> str:
        return format_time(self.remaining)

    def _finish(self) -> None:
        self.running = False
        if self.ended:
            return
        self.ended = True
        if self.on_end is not None:
            self.on_end()

    async def run(self, tick_seconds: float = TICK_SECONDS) -> None:
        """Drive the countdown on the event loop; cancel the task to abandon it."""
        if not self.running:
            self.start()
        while self.running:
            await asyncio.sleep(tick_seconds)
            self.tick()
