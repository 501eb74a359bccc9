"""Transient status-line message."""

from __future__ import annotations

import time
from typing import Callable, Optional

from textrighter.config import STATUS_MESSAGE_SECONDS


class StatusMessage:
    def __init__(
        self,
        text: str = "",
        *,
        show_seconds: float = STATUS_MESSAGE_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.text = text
        self.show_seconds = show_seconds
        self._clock = clock
        self._born_at = clock()

    def reset(self, text: Optional[str] = None) -> None:
        """Restart the display timer, optionally replacing the text."""

        if text is not None:
            self.text = text
        self._born_at = self._clock()

    def is_showing(self) -> bool:
        return self._clock() - self._born_at < self.show_seconds

    def render(self, width: int) -> str:
        return self.text[:width].ljust(width)
