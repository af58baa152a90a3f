"""SRT parsing, loading and saving utilities."""

from __future__ import annotations

import re
import logging
from pathlib import Path
from typing import List, Optional, Tuple

from .config import MAX_FILE_SIZE, SUPPORTED_EXTENSIONS
from .document import SrtDocument
from .models import SrtEntry, TIMECODE_ARROW
from .timecode import Timecode

logger = logging.getLogger(__name__)

INDEX_PATTERN = re.compile(r"\s*([0-9]+)\s*")
BLANK_CHARS = " \t\n\v\f\r"

# 读取时去掉 BOM
SRT_ENCODING = "utf-8-sig"

# 时间码后面至少还要有这么多字符才算坐标信息（",mmm " 本身占 5 个）
POSITION_OFFSET = 5


class LineCursor:
    """Read position over a list of logical lines, with one-line rewind."""

    def __init__(self, lines: List[str]):
        self._lines = lines
        self._pos = 0

    @property
    def position(self) -> int:
        return self._pos

    def at_end(self) -> bool:
        return self._pos >= len(self._lines)

    def peek_line(self) -> Optional[str]:
        if self.at_end():
            return None
        return self._lines[self._pos]

    def read_line(self) -> Optional[str]:
        """Return the next line, or None at end of input."""
        line = self.peek_line()
        if line is not None:
            self._pos += 1
        return line

    def unread(self) -> None:
        """Step back over the line just read."""
        if self._pos > 0:
            self._pos -= 1


def split_lines(content: str) -> List[str]:
    """
    Split text into logical lines.

    CR and CRLF are normalized to LF; a final line terminator does not
    produce an extra empty line.
    """
    if not content:
        return []
    content = content.replace("\r\n", "\n").replace("\r", "\n")
    lines = content.split("\n")
    if content.endswith("\n"):
        lines.pop()
    return lines


def is_blank_line(line: str) -> bool:
    return not line.strip(BLANK_CHARS)


def parse_timing_line(line: str) -> Optional[Tuple[Timecode, Timecode]]:
    """
    Parse a ``start --> end`` line.

    Returns:
        (start, end) timecodes, or None if the line is not a timing line
    """
    arrow_pos = line.find(TIMECODE_ARROW)
    if arrow_pos == -1:
        return None

    start = Timecode.parse(line[:arrow_pos])
    end = Timecode.parse(line[arrow_pos + len(TIMECODE_ARROW):])
    if start is None or end is None:
        return None
    return start, end


def parse_position(line: str) -> str:
    """Return the coordinate annotation trailing a timing line, if any."""
    last_comma = line.rfind(",")
    if last_comma != -1 and last_comma + POSITION_OFFSET < len(line):
        return line[last_comma + POSITION_OFFSET:]
    return ""


def parse_index(line: str) -> Optional[int]:
    """Parse a subtitle index line; None if it is not a plain number."""
    if not any(c in "0123456789" for c in line):
        return None
    match = INDEX_PATTERN.fullmatch(line)
    if not match:
        return None
    return int(match.group(1))


def parse_entry(cursor: LineCursor) -> SrtEntry:
    """
    Read the next subtitle entry from ``cursor``.

    Timing lines are the anchor: the line before a timing line is taken
    as its index. Lines that do not fit are kept in ``entry.extra``.
    The blank line that ends the entry text is left unread.

    Args:
        cursor: Shared read position over the input lines

    Returns:
        The parsed entry; invalid if the input ran out first
    """
    entry = SrtEntry()
    last_line: Optional[str] = None

    while True:
        line = cursor.read_line()
        if line is None:
            if last_line is not None:
                entry.add_extra(last_line)
            return entry

        timing = parse_timing_line(line)
        if timing is None:
            if last_line is not None:
                entry.add_extra(last_line)
            last_line = line
            continue

        index = parse_index(last_line) if last_line is not None else None
        if index is None:
            logger.debug(f"Timing line without index at line {cursor.position}: {line!r}")
            if last_line is not None:
                entry.add_extra(last_line)
            entry.add_extra(line)
            last_line = None
            continue

        start, end = timing
        if end < start:
            logger.debug(f"End time {end} before start {start} at line {cursor.position}")
            end = Timecode(start.milliseconds + 1)

        entry.index = index
        entry.start = start
        entry.end = end
        entry.position = parse_position(line)
        break

    # 读取字幕文本，遇到空行停止（空行留给下一次解析）
    while True:
        text_line = cursor.read_line()
        if text_line is None:
            break
        if is_blank_line(text_line):
            cursor.unread()
            break
        entry.text_lines.append(text_line)

    return entry


def parse_srt(content: str) -> SrtDocument:
    """
    Parse SRT file content into an SrtDocument.

    Args:
        content: Raw SRT file content as string

    Returns:
        Parsed document; check ``is_valid`` before using it

    Note:
        Whitespace-only separator lines between entries count as one
        blank line and are written back as an empty line.
    """
    document = SrtDocument()
    cursor = LineCursor(split_lines(content))
    separator = ""

    while True:
        entry = parse_entry(cursor)
        if not entry.is_valid:
            document.extra = separator + entry.extra
            break

        document.entries.append(entry)

        # 条目之间的空行由文档消耗，序列化时重新写出
        separator = ""
        if not cursor.at_end():
            cursor.read_line()
            separator = "\n"

    if not document.is_valid:
        logger.warning("No valid SRT entries found in content")
    elif document.extra.strip():
        logger.debug(f"Kept {len(document.extra)} chars of trailing text")

    return document


def validate_srt_file(path: Path) -> Optional[str]:
    """
    Validate SRT file before processing.

    Args:
        path: Path to SRT file

    Returns:
        Error message if invalid, None if valid
    """
    if not path.exists():
        return f"File not found: {path}"

    if not path.is_file():
        return f"Not a file: {path}"

    suffix = path.suffix.lower()
    if suffix not in SUPPORTED_EXTENSIONS:
        return f"Invalid file extension: {suffix} (expected .srt)"

    # 检查文件大小
    size = path.stat().st_size
    if size == 0:
        return "File is empty"
    if size > MAX_FILE_SIZE:
        return f"File too large: {size / 1024 / 1024:.1f}MB (max {MAX_FILE_SIZE // 1024 // 1024}MB)"

    return None


def read_srt_text(path: Path) -> str:
    """Read SRT text. A UTF-8 BOM is ignored."""
    return path.read_text(encoding=SRT_ENCODING)


def load_srt(path: Path) -> SrtDocument:
    """Read and parse an SRT file."""
    return parse_srt(read_srt_text(path))


def save_srt(document: SrtDocument, path: Path, ignore_extra: bool = False) -> None:
    """
    Save an SrtDocument to an SRT file.

    Args:
        document: Document to save
        path: Output file path
        ignore_extra: Drop text that is not part of an entry
    """
    write_srt_text(document.to_srt(ignore_extra), path)
    logger.info(f"Saved {len(document)} entries to {path}")


def write_srt_text(text: str, path: Path) -> None:
    """Write SRT text with LF line endings."""
    # 确保父目录存在
    path.parent.mkdir(parents=True, exist_ok=True)

    with path.open("w", encoding="utf-8", newline="\n") as f:
        f.write(text)
