"""Frame-counting timers that call back when they run out."""

from __future__ import annotations

from collections.abc import Callable

PAL_TICKS_PER_SECOND = 50
NTSC_TICKS_PER_SECOND = 60


def ticks_per_second(pal: bool) -> int:
    """Frames per second for a PAL or an NTSC system."""
    return PAL_TICKS_PER_SECOND if pal else NTSC_TICKS_PER_SECOND


def seconds_to_ticks(seconds: int, pal: bool) -> int:
    """Number of frames in ``seconds`` seconds."""
    return seconds * ticks_per_second(pal)


class Timer:
    """Counts frames and calls ``callback`` once ``seconds`` have passed."""

    def __init__(
        self,
        seconds: int,
        callback: Callable[[], object],
        repeat: bool = False,
        pal: bool = False,
    ) -> None:
        self.duration = seconds_to_ticks(seconds, pal)
        self.callback = callback
        self.repeat = repeat
        self.ticks = 0
        self.running = False

    def start(self) -> None:
        self.ticks = 0
        self.running = True

    def stop(self) -> None:
        self.ticks = 0
        self.running = False

    def pause(self) -> None:
        self.running = False

    def update(self) -> None:
        """Count one frame; fire the callback when the duration is reached."""
        if not self.running:
            return
        self.ticks += 1
        if self.ticks >= self.duration:
            self.callback()
            if self.repeat:
                self.ticks = 0
            else:
                self.running = False