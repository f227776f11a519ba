"""Timeline and text transformations for subtitle packs."""

from subpack.core import (
    InvalidArgumentError,
    Position,
    SubPackError,
    SubtitleEntry,
    SubtitlePack,
    SubtitleStats,
)
from subpack.formats import SRTParseError, parse_srt, serialize_srt

__all__ = [
    "InvalidArgumentError",
    "Position",
    "SRTParseError",
    "SubPackError",
    "SubtitleEntry",
    "SubtitlePack",
    "SubtitleStats",
    "parse_srt",
    "serialize_srt",
]
