"""In-memory SRT document and the operations applied to it."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterator, List

from .models import SrtEntry, write_line

logger = logging.getLogger(__name__)


@dataclass
class SrtDocument:
    """Ordered subtitle entries plus the unrecognized text that trails them."""

    entries: List[SrtEntry] = field(default_factory=list)
    extra: str = ""

    @property
    def is_valid(self) -> bool:
        return len(self.entries) > 0

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[SrtEntry]:
        return iter(self.entries)

    def __getitem__(self, index: int) -> SrtEntry:
        return self.entries[index]

    def offset_in_milliseconds(self, offset: int) -> int:
        """
        Shift every entry by ``offset`` milliseconds.

        A positive offset makes subtitles appear later, a negative one
        sooner. A negative offset is limited so the first entry stops at
        zero; the same effective offset is then applied to all entries.

        Returns:
            The offset actually applied
        """
        if offset == 0 or not self.entries:
            return 0

        if offset < 0:
            first_start = self.entries[0].start.milliseconds
            if -offset > first_start:
                logger.debug(f"Offset {offset}ms limited to -{first_start}ms")
            offset = max(offset, -first_start)

        for entry in self.entries:
            entry.offset_in_milliseconds(offset)
        return offset

    def renumber(self, start_index: int = 1) -> int:
        """
        Renumber all entries sequentially starting at ``start_index``.

        Returns:
            The index of the last entry
        """
        index = max(start_index, 1)
        for entry in self.entries:
            entry.index = index
            index += 1
        return index - 1

    def to_srt(self, ignore_extra: bool = False) -> str:
        """
        Serialize the document.

        Args:
            ignore_extra: Drop all text that is not part of an entry

        Returns:
            SRT text, or an empty string if the document is invalid
        """
        if not self.is_valid:
            return ""

        out: List[str] = []
        for i, entry in enumerate(self.entries):
            if i > 0:
                write_line(out, "\n")
            out.append(entry.to_srt(ignore_extra))

        if not ignore_extra:
            write_line(out, self.extra)
        return "".join(out)
