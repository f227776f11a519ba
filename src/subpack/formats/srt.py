"""SRT format parser and serializer."""

import re
from datetime import timedelta

import structlog

from subpack.core.errors import SubPackError
from subpack.core.pack import SubtitlePack
from subpack.core.subtitle import Position, SubtitleEntry

logger = structlog.get_logger()

_TIMING = re.compile(
    r"(\d{1,2}):(\d{2}):(\d{2})[,.](\d{3})\s*-->\s*(\d{1,2}):(\d{2}):(\d{2})[,.](\d{3})"
)


class SRTParseError(SubPackError):
    """Exception raised when SRT parsing fails."""


def _to_timedelta(hours: str, minutes: str, seconds: str, millis: str) -> timedelta:
    return timedelta(
        hours=int(hours),
        minutes=int(minutes),
        seconds=int(seconds),
        milliseconds=int(millis),
    )


def _format_timestamp(value: timedelta) -> str:
    # SRT can't express negative times
    total_millis = max(value // timedelta(milliseconds=1), 0)
    total_seconds, millis = divmod(total_millis, 1000)
    hours, rest = divmod(total_seconds, 3600)
    minutes, seconds = divmod(rest, 60)
    return f"{hours:02d}:{minutes:02d}:{seconds:02d},{millis:03d}"


def parse_srt(content: str) -> SubtitlePack:
    """Parse SRT format string into a SubtitlePack.

    Args:
        content: SRT format string content

    Returns:
        SubtitlePack containing parsed entries, in file order

    Raises:
        SRTParseError: If content is malformed
    """
    content = content.lstrip("\ufeff").replace("\r\n", "\n").replace("\r", "\n")
    if not content.strip():
        return SubtitlePack()

    # Split into blocks by blank lines
    blocks = re.split(r"\n\s*\n", content.strip())

    entries = []
    for block_num, block in enumerate(blocks, start=1):
        lines = block.strip().split("\n")

        if len(lines) < 2:
            raise SRTParseError(
                f"Block {block_num}: Invalid format, expected at least 2 lines "
                f"(index, timing), got {len(lines)}"
            )

        try:
            int(lines[0].strip())
        except ValueError as e:
            raise SRTParseError(
                f"Block {block_num}: Invalid index '{lines[0].strip()}', "
                "must be integer"
            ) from e

        timing_line = lines[1].strip()
        timing_match = _TIMING.match(timing_line)
        if not timing_match:
            raise SRTParseError(
                f"Block {block_num}: Invalid timing format '{timing_line}', "
                f"expected 'HH:MM:SS,mmm --> HH:MM:SS,mmm'"
            )

        groups = timing_match.groups()
        try:
            entry = SubtitleEntry(
                start=_to_timedelta(*groups[:4]),
                end=_to_timedelta(*groups[4:]),
                lines=[line.rstrip() for line in lines[2:]],
            )
        except ValueError as e:
            raise SRTParseError(f"Block {block_num}: {e}") from e
        entries.append(entry)

    logger.debug("srt_parsed", entries=len(entries))
    return SubtitlePack(entries)


def serialize_srt(pack: SubtitlePack) -> str:
    """Serialize a SubtitlePack to SRT format string.

    Entries are numbered from 1 in their current order. Position is written
    as a ``{\\anN}`` tag and color as a ``<font color>`` tag. Blank lines
    are left out.

    Args:
        pack: SubtitlePack to serialize

    Returns:
        SRT format string
    """
    blocks = []

    for index, entry in enumerate(pack, start=1):
        timing = f"{_format_timestamp(entry.start)} --> {_format_timestamp(entry.end)}"

        # A blank line would end the block early
        text = "\n".join(line for line in entry.lines if line.strip())
        if entry.color:
            text = f'<font color="{entry.color}">{text}</font>'
        if entry.position != Position.NOT_SPECIFIED:
            text = f"{{\\an{entry.position.value}}}{text}"

        blocks.append(f"{index}\n{timing}\n{text}")

    if not blocks:
        return ""
    return "\n\n".join(blocks) + "\n"
