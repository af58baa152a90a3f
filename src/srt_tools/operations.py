"""Apply SRT operations to a text blob."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .config import SrtToolsConfig
from .document import SrtDocument
from .parser import parse_srt

logger = logging.getLogger(__name__)


@dataclass
class ProcessResult:
    """Output of one processing run."""

    text: str
    valid: bool
    entry_count: int = 0


def apply_operations(document: SrtDocument, config: SrtToolsConfig) -> None:
    """
    Mutate ``document`` according to ``config``.

    The offset is always applied before renumbering.
    """
    if config.apply_offset and config.offset_ms != 0:
        applied = document.offset_in_milliseconds(config.offset_ms)
        logger.info(f"Offset {len(document)} entries by {applied}ms")

    if config.apply_renumber:
        if config.renumber_start > 0:
            last = document.renumber(config.renumber_start)
            logger.info(f"Renumbered entries {config.renumber_start}-{last}")
        else:
            logger.warning(f"Ignoring renumber start {config.renumber_start}")


def process_srt(content: str, config: SrtToolsConfig) -> ProcessResult:
    """
    Parse ``content``, apply the configured operations and serialize.

    Args:
        content: Raw SRT text
        config: Operations to apply

    Returns:
        ProcessResult; when no entry is found the input text is returned
        unchanged with ``valid`` False
    """
    document = parse_srt(content)
    if not document.is_valid:
        return ProcessResult(text=content, valid=False)

    logger.debug(f"Parsed {len(document)} subtitle entries")
    apply_operations(document, config)

    text = document.to_srt(ignore_extra=bool(config.strip_extraneous))
    return ProcessResult(text=text, valid=True, entry_count=len(document))
