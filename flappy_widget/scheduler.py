"""
scheduler.py: The display-refresh callback queue.

Widgets ask for their next frame with request_frame(); whoever owns the
display calls flush() once per refresh. Callbacks requested during a flush
run on the next one, so each widget gets at most one tick per refresh.
"""

import itertools
import logging
from typing import Callable, Dict

logger = logging.getLogger(__name__)

FrameCallback = Callable[[], None]


class FrameScheduler:

    def __init__(self):
        self._pending: Dict[int, FrameCallback] = {}
        self._handles = itertools.count(1)
        self.frames = 0

    def request_frame(self, callback: FrameCallback) -> int:
        handle = next(self._handles)
        self._pending[handle] = callback
        return handle

    def cancel_frame(self, handle: int) -> bool:
        return self._pending.pop(handle, None) is not None

    @property
    def pending(self) -> int:
        return len(self._pending)

    def flush(self) -> int:
        """
        Runs every callback requested before this call. Returns how many ran.
        A callback that raises is logged and dropped; the rest still run.
        """
        due, self._pending = self._pending, {}
        self.frames += 1
        for handle, callback in due.items():
            try:
                callback()
            except Exception:
                logger.exception("Frame callback %d failed", handle)
        return len(due)
