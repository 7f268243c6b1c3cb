"""Transient status-message sink shown on the editor's message line."""

from __future__ import annotations

import logging
import time
from typing import Callable

logger = logging.getLogger(__name__)

MESSAGE_TIMEOUT = 5.0
MAX_MESSAGE_LEN = 79


class StatusMessage:
    """Most recent status message plus the time it was set.

    The clock is injectable so tests can age messages without sleeping.
    """

    def __init__(
        self,
        timeout: float = MESSAGE_TIMEOUT,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self.timeout = timeout
        self._clock = clock
        self.text: str = ""
        self.time: float = 0.0

    def set(self, fmt: str, *args: object) -> None:
        """Format and store a message, truncated to the message-line limit."""
        text = fmt % args if args else fmt
        self.text = text[:MAX_MESSAGE_LEN]
        self.time = self._clock()
        if self.text:
            logger.debug("status: %s", self.text)

    def clear(self) -> None:
        self.set("")

    def current(self) -> str:
        """Return the message if it is still fresh, else an empty string."""
        if self.text and self._clock() - self.time < self.timeout:
            return self.text
        return ""
