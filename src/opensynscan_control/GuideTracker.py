"""
Derive the "currently guiding" flag from the duration of the last command.

There is no feedback from the controller, if a command is lost the tracker
will still report guiding until the deadline has passed.
"""
import time
from typing import Callable


class GuideTracker:
    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self.clock = clock
        self.deadline = clock()

    def update(self, duration_ms: int) -> None:
        self.deadline = self.clock() + duration_ms / 1000

    def is_guiding(self) -> bool:
        return self.clock() < self.deadline

    def remaining(self) -> float:
        return max(0.0, self.deadline - self.clock())
