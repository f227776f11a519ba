"""Subtitle entry model and per-entry text/timing operations."""

import math
import re
from dataclasses import dataclass, field
from datetime import timedelta
from enum import IntEnum

from subpack.core.errors import InvalidArgumentError

_HTML_TAG = re.compile(r"<[^>]*>")
_CONTROL_TAG = re.compile(r"\{\\[^}]*\}")
_HI_GROUP = r"(?:\[[^\]]*\]|\([^)]*\))"
# Whole line of sound descriptions, optionally after a dash or speaker label
_HI_LINE = re.compile(
    rf"^\s*-?\s*(?:[A-Z][A-Z0-9 .'\-]*:\s*)?{_HI_GROUP}(?:\s*{_HI_GROUP})*\s*$"
)


class Position(IntEnum):
    """Screen position of a subtitle, numbered like the numpad (SSA ``\\anN``)."""

    NOT_SPECIFIED = 0
    BOTTOM_LEFT = 1
    BOTTOM_CENTER = 2
    BOTTOM_RIGHT = 3
    MIDDLE_LEFT = 4
    MIDDLE_CENTER = 5
    MIDDLE_RIGHT = 6
    TOP_LEFT = 7
    TOP_CENTER = 8
    TOP_RIGHT = 9


def check_factor(factor: float) -> None:
    """Validate a timing multiplier.

    Raises:
        InvalidArgumentError: If factor is not a positive finite number
    """
    if not math.isfinite(factor) or factor <= 0:
        raise InvalidArgumentError(f"Factor must be positive and finite, got {factor}")


@dataclass(eq=False)
class SubtitleEntry:
    """Single subtitle entry with timing, text lines and display attributes.

    Entries compare by identity: the same entry object may be shared by
    several packs after concatenation or merging.
    """

    start: timedelta
    end: timedelta
    lines: list[str] = field(default_factory=list)
    position: Position = Position.NOT_SPECIFIED
    color: str = ""

    def __post_init__(self):
        """Validate subtitle entry constraints."""
        if self.start > self.end:
            raise InvalidArgumentError(
                f"Start time {self.start} must not be after end time {self.end}"
            )

    @property
    def text(self) -> str:
        """Lines joined with newlines."""
        return "\n".join(self.lines)

    def display_duration(self) -> timedelta:
        """Return how long the entry is visible."""
        return self.end - self.start

    def shift(self, delta: timedelta) -> None:
        """Move the entry on the timeline; negative results are allowed."""
        self.start += delta
        self.end += delta

    def scale(self, factor: float) -> None:
        """Multiply both timestamps by factor (display duration scales too)."""
        check_factor(factor)
        self.start *= factor
        self.end *= factor

    def lengthen(self, factor: float) -> None:
        """Multiply the display duration by factor, keeping the start time."""
        check_factor(factor)
        self.end = self.start + self.display_duration() * factor

    def remove_html(self) -> bool:
        """Strip HTML formatting tags such as ``<i>`` or ``<font ...>``.

        Returns:
            True if any tag was removed
        """
        return self._substitute(_HTML_TAG)

    def remove_control(self) -> bool:
        """Strip inline override blocks such as ``{\\an8}`` or ``{\\pos(10,20)}``.

        Returns:
            True if any control block was removed
        """
        return self._substitute(_CONTROL_TAG)

    def remove_hi(self) -> bool:
        """Remove hearing impaired lines like ``[PHONE RINGING]`` or ``(sighs)``.

        Only lines made up entirely of bracketed descriptions are removed,
        optionally after a dialogue dash or a speaker label
        (``- JOHN: [whispers]``). Other lines are left untouched, so
        ``lines`` ends up empty only if every line was hearing impaired.

        Returns:
            True if any line was removed
        """
        kept = [line for line in self.lines if not _HI_LINE.match(line)]
        removed = len(kept) != len(self.lines)
        self.lines = kept
        return removed

    def _substitute(self, pattern: re.Pattern[str]) -> bool:
        changed = False
        for i, line in enumerate(self.lines):
            cleaned = pattern.sub("", line)
            if cleaned != line:
                self.lines[i] = cleaned
                changed = True
        return changed
