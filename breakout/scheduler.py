"""Per-frame callback scheduling.

``FrameScheduler`` plays the part of the browser's animation-frame queue: a
callback requested now runs on the next frame, and a callback requested while
a frame is running waits for the frame after that. The owner decides when a
frame happens, either from a ``pygame.time.Clock`` loop or one env step at a
time.
"""

import itertools
import logging

logger = logging.getLogger(__name__)


class FrameScheduler:
    def __init__(self):
        self._callbacks = {}
        self._ids = itertools.count(1)
        self.frame_count = 0

    @property
    def pending(self):
        return len(self._callbacks)

    def request(self, callback):
        handle = next(self._ids)
        self._callbacks[handle] = callback
        return handle

    def cancel(self, handle):
        # Unknown, already-run and already-canceled handles are ignored
        if self._callbacks.pop(handle, None) is not None:
            logger.debug("Canceled frame request %s", handle)

    def run_frame(self):
        """Runs every callback requested before this call. Returns how many ran."""
        self.frame_count += 1
        due = list(self._callbacks.items())
        ran = 0
        for handle, callback in due:
            # An earlier callback in this frame may have canceled this one
            if self._callbacks.pop(handle, None) is None:
                continue
            callback()
            ran += 1
        return ran
