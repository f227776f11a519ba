"""Subtitle format handlers."""

from subpack.formats.srt import SRTParseError, parse_srt, serialize_srt

__all__ = [
    "SRTParseError",
    "parse_srt",
    "serialize_srt",
]
