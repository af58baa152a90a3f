"""SRT timecode value type."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional, Tuple

# HH:MM:SS,mmm，前导空白可接受，后缀忽略
TIMECODE_PATTERN = re.compile(r"\s*([0-9]{2}):([0-9]{2}):([0-9]{2}),([0-9]{3})")

MS_PER_SECOND = 1000
MS_PER_MINUTE = 60 * MS_PER_SECOND
MS_PER_HOUR = 60 * MS_PER_MINUTE

UNSET = -1


@dataclass(order=True)
class Timecode:
    """A point in time in milliseconds. ``-1`` means the value is not set."""

    milliseconds: int = UNSET

    @classmethod
    def parse(cls, text: str) -> Optional["Timecode"]:
        """
        Parse the ``HH:MM:SS,mmm`` form at the start of ``text``.

        Args:
            text: Text beginning with a timecode

        Returns:
            Timecode, or None if the text does not start with one
        """
        match = TIMECODE_PATTERN.match(text)
        if not match:
            return None
        hours, minutes, seconds, millis = (int(g) for g in match.groups())
        return cls.from_components(hours, minutes, seconds, millis)

    @classmethod
    def from_components(
        cls, hours: int, minutes: int, seconds: int, milliseconds: int
    ) -> "Timecode":
        """Build a timecode from its components, clamped to zero."""
        total = (
            milliseconds
            + seconds * MS_PER_SECOND
            + minutes * MS_PER_MINUTE
            + hours * MS_PER_HOUR
        )
        return cls(max(total, 0))

    @property
    def is_valid(self) -> bool:
        return self.milliseconds >= 0

    def components(self) -> Tuple[int, int, int, int]:
        """Split into (hours, minutes, seconds, milliseconds)."""
        remainder = max(self.milliseconds, 0)
        hours, remainder = divmod(remainder, MS_PER_HOUR)
        minutes, remainder = divmod(remainder, MS_PER_MINUTE)
        seconds, millis = divmod(remainder, MS_PER_SECOND)
        return hours, minutes, seconds, millis

    def offset(self, delta_ms: int) -> None:
        """Shift in place by ``delta_ms``; never goes below zero."""
        self.milliseconds = max(self.milliseconds + delta_ms, 0)

    def __str__(self) -> str:
        hours, minutes, seconds, millis = self.components()
        return f"{hours:02d}:{minutes:02d}:{seconds:02d},{millis:03d}"
