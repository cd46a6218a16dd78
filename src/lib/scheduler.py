"""
Debounce scheduler

Coalesces a burst of events into one deferred callback. The scheduler has
two states:

    idle  --arm()-->  armed  --arm()-->  armed   (old timer cancelled)
    armed --fire--->  idle
    armed --cancel()-> idle

Only one timer is ever pending; arming cancels and replaces it, so the
callback runs once per quiescence window, after the last event.

Timers are asyncio TimerHandles on a single event loop, which gives the
cooperative single-threaded model the host editor expects: a fire runs to
completion before any later arm() is processed.
"""

import asyncio
from typing import Callable, Optional

from .log import LOG


class DebounceScheduler:
    """
    Single-slot, cancel-and-replace timer

    Attributes:
        callback: Function run when the quiescence window closes
        delay: Quiescence window in seconds
        loop: Event loop timers are scheduled on (None: resolved at arm time)
    """

    def __init__(
        self,
        callback: Callable[[], None],
        delay: float,
        loop: Optional[asyncio.AbstractEventLoop] = None,
    ) -> None:
        self.callback = callback
        self.delay = delay
        self.loop = loop
        self._handle: Optional[asyncio.TimerHandle] = None

    @property
    def armed(self) -> bool:
        return self._handle is not None

    @property
    def handle(self) -> Optional[asyncio.TimerHandle]:
        return self._handle

    def loop_get(self) -> asyncio.AbstractEventLoop:
        """Event loop to schedule on; requires a running loop if none was given"""
        if self.loop is None:
            self.loop = asyncio.get_running_loop()
        return self.loop

    def arm(self) -> asyncio.TimerHandle:
        """
        Start (or restart) the quiescence window

        Returns:
            The new pending timer handle
        """
        if self._handle is not None:
            self._handle.cancel()
            LOG("Debounce timer re-armed", level=3)
        else:
            LOG("Debounce timer armed", level=3)
        self._handle = self.loop_get().call_later(self.delay, self._fire)
        return self._handle

    def cancel(self) -> None:
        """Drop the pending timer, if any"""
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None
            LOG("Debounce timer cancelled", level=3)

    def _fire(self) -> None:
        # Back to idle before the callback so it may re-arm
        self._handle = None
        LOG("Debounce timer fired", level=3)
        self.callback()
