"""
SRT Tools - Offset, renumber and clean up SRT subtitle files.

Features:
- Tolerant parser that keeps unrecognized text intact
- Time offset that never pushes the first subtitle below zero
- Sequential renumbering from any start index
- Optional removal of text that is not part of a subtitle
"""

__version__ = "1.0.0"

from .timecode import Timecode
from .models import SrtEntry
from .document import SrtDocument
from .parser import parse_srt, parse_entry, load_srt, save_srt, validate_srt_file, LineCursor
from .operations import process_srt, apply_operations, ProcessResult
from .config import SrtToolsConfig

__all__ = [
    # Models
    "Timecode",
    "SrtEntry",
    "SrtDocument",
    "SrtToolsConfig",
    "ProcessResult",
    # Parsing
    "LineCursor",
    "parse_srt",
    "parse_entry",
    "load_srt",
    "save_srt",
    "validate_srt_file",
    # Operations
    "process_srt",
    "apply_operations",
]
