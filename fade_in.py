from __future__ import annotations

import enum
import logging
from typing import Callable, Optional, Protocol

logger = logging.getLogger(__name__)

TRANSITION = "opacity 1s ease"


class Visibility(enum.Enum):
    HIDDEN = "hidden"
    VISIBLE = "visible"


class PendingFrame:
    """
    One-shot handle for a callback queued on a frame scheduler.

    The remover passed in by the scheduler is invoked at most once, and only
    while the callback is still pending. Cancelling twice, or after the
    callback already ran, does nothing.
    """

    def __init__(self, callback: Callable[[], None], remover: Optional[Callable[[], None]] = None):
        self._callback = callback
        self._remover = remover
        self._active = True

    @property
    def active(self) -> bool:
        return self._active

    def attach(self, remover: Callable[[], None]) -> None:
        self._remover = remover

    def fire(self) -> None:
        if not self._active:
            return
        self._active = False
        self._remover = None
        callback, self._callback = self._callback, None
        callback()

    def cancel(self) -> None:
        if not self._active:
            return
        self._active = False
        remover, self._remover = self._remover, None
        self._callback = None
        if remover is not None:
            remover()


class FrameScheduler(Protocol):
    def request(self, callback: Callable[[], None]) -> PendingFrame:
        ...


class FadeInController:
    def __init__(self, scheduler: FrameScheduler, on_change: Optional[Callable[[Visibility], None]] = None):
        self._scheduler = scheduler
        self._on_change = on_change
        self._state = Visibility.HIDDEN
        self._pending: Optional[PendingFrame] = None
        self._mounted = False
        self._torn_down = False

    @property
    def state(self) -> Visibility:
        return self._state

    @property
    def opacity(self) -> int:
        return 1 if self._state is Visibility.VISIBLE else 0

    @property
    def transition(self) -> str:
        return TRANSITION

    @property
    def mounted(self) -> bool:
        return self._mounted

    @property
    def pending(self) -> bool:
        return self._pending is not None and self._pending.active

    def mount(self) -> None:
        if self._torn_down:
            raise RuntimeError("FadeInController cannot be mounted again after unmount")
        if self._mounted:
            return
        self._mounted = True
        self._pending = self._scheduler.request(self._on_frame)
        logger.debug("Fade-in scheduled for next frame")

    def unmount(self) -> None:
        if self._torn_down:
            return
        self._torn_down = True
        self._mounted = False
        if self._pending is not None:
            if self._pending.active:
                logger.debug("Fade-in cancelled before first frame")
            self._pending.cancel()
            self._pending = None

    def _on_frame(self) -> None:
        self._pending = None
        if not self._mounted or self._state is Visibility.VISIBLE:
            return
        self._state = Visibility.VISIBLE
        logger.debug("Fade-in: hidden -> visible")
        if self._on_change is not None:
            self._on_change(self._state)
