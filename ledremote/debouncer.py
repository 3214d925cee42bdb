"""Time-based debouncing of a two-state input such as a push button."""

from __future__ import annotations

import enum
import time
from collections.abc import Callable


def _monotonic_ms() -> int:
    return int(time.monotonic() * 1000)


class DebouncerState(enum.Enum):
    """The two logical states of a debounced input."""

    BASE = "base"
    ACTIVE = "active"


class Debouncer:
    """Filter a noisy 0/1 input so that only stable changes come through.

    The input must hold a new value for longer than ``delay`` milliseconds
    before the debounced output follows it.
    """

    def __init__(
        self,
        delay: int,
        active_low: bool = False,
        clock: Callable[[], int] | None = None,
    ) -> None:
        if active_low:
            self._base_state, self._active_state = 1, 0
        else:
            self._base_state, self._active_state = 0, 1
        self._clock = clock if clock is not None else _monotonic_ms
        self._delay = delay
        self._last_unstable = self._base_state
        self._last_stable = self._base_state
        self._previous_stable = self._base_state
        self._last_toggle_time = 0

    @property
    def delay(self) -> int:
        """Milliseconds an input must stay unchanged to be accepted."""
        return self._delay

    @property
    def state(self) -> int:
        """The current debounced output, 0 or 1."""
        return self._last_stable

    def debounce(self, input_state: int) -> int:
        """Feed one raw reading and return the debounced state (0 or 1)."""
        input_state = int(input_state)
        now = self._clock()
        if input_state != self._last_unstable:
            self._last_toggle_time = now
            self._last_unstable = input_state

        self._previous_stable = self._last_stable

        if now - self._last_toggle_time > self._delay:
            self._last_stable = input_state

        return self._last_stable

    def was_toggled(self) -> bool:
        """Whether the last call to :meth:`debounce` changed the output."""
        return self._previous_stable != self._last_stable

    def debounce_and_toggled(self, input_state: int) -> bool:
        """Debounce a reading and report whether the output changed."""
        self.debounce(input_state)
        return self.was_toggled()

    def was_switched_to_state(self, state: DebouncerState) -> bool:
        """Whether the output just changed into the given logical state."""
        if not self.was_toggled():
            return False
        if state is DebouncerState.ACTIVE:
            return self._last_stable == self._active_state
        return self._last_stable == self._base_state

    def debounce_and_switched_to(
        self, input_state: int, target_state: DebouncerState
    ) -> bool:
        """Debounce a reading and report a change into ``target_state``."""
        self.debounce(input_state)
        return self.was_switched_to_state(target_state)

    def debounce_and_pressed(self, input_state: int) -> bool:
        """Debounce a reading and report a change into the active state."""
        return self.debounce_and_switched_to(input_state, DebouncerState.ACTIVE)