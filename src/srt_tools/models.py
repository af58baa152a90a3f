"""Data models for SRT subtitle entries."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from .timecode import Timecode

TIMECODE_ARROW = "-->"


def write_line(out: List[str], text: str) -> None:
    """
    Append ``text`` as one output line.

    Empty text writes nothing; a newline is added unless the text
    already ends with one.
    """
    if not text:
        return
    out.append(text)
    if not text.endswith("\n"):
        out.append("\n")


@dataclass
class SrtEntry:
    """Represents a single subtitle entry in SRT format."""

    index: int = -1
    start: Timecode = field(default_factory=Timecode)
    end: Timecode = field(default_factory=Timecode)
    position: str = ""
    text_lines: List[str] = field(default_factory=list)
    # 条目之前无法识别的原始文本，原样保留
    extra: str = ""

    @property
    def is_valid(self) -> bool:
        """An entry is usable once it has an index and both timecodes."""
        return self.index >= 0 and self.start.is_valid and self.end.is_valid

    @property
    def timecode(self) -> str:
        """Return the timecode line in SRT format."""
        line = f"{self.start} {TIMECODE_ARROW} {self.end}"
        if self.position:
            line += f" {self.position}"
        return line

    @property
    def text(self) -> str:
        return "\n".join(self.text_lines)

    def add_extra(self, line: str) -> None:
        self.extra += line + "\n"

    def offset_in_milliseconds(self, offset: int) -> None:
        self.start.offset(offset)
        self.end.offset(offset)

    def to_srt(self, ignore_extra: bool = False) -> str:
        """
        Convert entry to SRT format string.

        Args:
            ignore_extra: Drop the unrecognized text that preceded the entry

        Returns:
            The entry block, each line newline-terminated, or an empty
            string for an invalid entry
        """
        if not self.is_valid:
            return ""

        out: List[str] = []
        if not ignore_extra:
            write_line(out, self.extra)
        write_line(out, str(self.index))
        write_line(out, self.timecode)
        for line in self.text_lines:
            write_line(out, line)
        return "".join(out)
