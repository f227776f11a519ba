"""Subtitle pack: a collection of subtitle entries and its transformations."""

from bisect import bisect_left
from collections.abc import Iterable, Iterator
from datetime import timedelta

import structlog

from subpack.core.stats import SubtitleStats, compute_stats
from subpack.core.subtitle import Position, SubtitleEntry, check_factor

logger = structlog.get_logger()


def _start_time(entry: SubtitleEntry) -> timedelta:
    return entry.start


class SubtitlePack:
    """Subtitles of a movie, an ordered collection of subtitle entries.

    The pack owns its list of entries, not the entries themselves:
    concatenate() and merge() take entries over by reference, so an entry
    may be shared with another pack. Every transformation mutates the pack
    in place.
    """

    def __init__(self, entries: Iterable[SubtitleEntry] | None = None) -> None:
        self.entries: list[SubtitleEntry] = list(entries) if entries else []

    def __len__(self) -> int:
        """Return number of entries."""
        return len(self.entries)

    def __iter__(self) -> Iterator[SubtitleEntry]:
        """Iterate over entries."""
        return iter(self.entries)

    def __getitem__(self, index: int) -> SubtitleEntry:
        """Get entry by index (0-based)."""
        return self.entries[index]

    def __repr__(self) -> str:
        return f"SubtitlePack({len(self.entries)} entries)"

    def sort(self) -> None:
        """Sort entries by start time; entries starting together keep their order."""
        self.entries.sort(key=_start_time)

    def shift(self, delta: timedelta) -> None:
        """Shift all entries by delta (which may be negative)."""
        for entry in self.entries:
            entry.shift(delta)

    def scale(self, factor: float) -> None:
        """Multiply all timestamps by factor, e.g. to fix a frame rate mismatch.

        Display durations scale along with the timestamps.

        Raises:
            InvalidArgumentError: If factor is not a positive finite number
        """
        check_factor(factor)
        for entry in self.entries:
            entry.scale(factor)

    def set_position(self, position: Position) -> None:
        """Set the screen position of all entries."""
        for entry in self.entries:
            entry.position = position

    def set_color(self, color: str) -> None:
        """Set the color of all entries."""
        for entry in self.entries:
            entry.color = color

    def remove_html(self) -> None:
        """Remove HTML formatting from all entries."""
        for entry in self.entries:
            entry.remove_html()

    def remove_control(self) -> None:
        """Remove control tags such as ``{\\an8}`` from all entries."""
        for entry in self.entries:
            entry.remove_control()

    def lengthen(self, factor: float) -> None:
        """Multiply the display duration of all entries by factor.

        Raises:
            InvalidArgumentError: If factor is not a positive finite number
        """
        check_factor(factor)
        for entry in self.entries:
            entry.lengthen(factor)

    def remove_hi(self) -> None:
        """Remove hearing impaired text (e.g. "[PHONE RINGING]") from entries.

        Entries left without any line are removed from the pack.
        """
        before = len(self.entries)
        # Walk backwards so deleting an entry doesn't move unvisited ones
        for i in range(len(self.entries) - 1, -1, -1):
            entry = self.entries[i]
            entry.remove_hi()
            if not entry.lines:
                del self.entries[i]
        logger.debug(
            "pack_hi_removed", removed=before - len(self.entries), kept=len(self)
        )

    def concatenate(self, other: "SubtitlePack", second_part_start: timedelta) -> None:
        """Append the subtitles of a movie's second part to this pack.

        Entries of other are shifted by second_part_start (usually the length
        of the first part) and appended by reference, then the pack is sorted
        since the two parts may overlap. other is left with shifted entries.

        Args:
            other: Subtitles of the second part
            second_part_start: Where the second part begins in the whole movie
        """
        other.shift(second_part_start)
        self.entries.extend(other.entries)
        self.sort()
        logger.debug(
            "pack_concatenated",
            second_part_start=str(second_part_start),
            appended=len(other),
            total=len(self),
        )

    def merge(self, other: "SubtitlePack") -> None:
        """Merge another pack into this one to create a dual subtitle.

        Both packs are sorted first. Entries are interleaved by start time;
        on equal start times this pack's entries come first. Entries are
        taken over by reference.

        Args:
            other: Subtitles to display alongside this pack's, e.g. another
                language
        """
        self.sort()
        other.sort()

        left, right = self.entries, other.entries
        merged: list[SubtitleEntry] = []
        i = j = 0
        while i < len(left) and j < len(right):
            if left[i].start <= right[j].start:
                merged.append(left[i])
                i += 1
            else:
                merged.append(right[j])
                j += 1
        merged.extend(left[i:])
        merged.extend(right[j:])

        self.entries = merged
        logger.debug("pack_merged", left=len(left), right=len(right))

    def split(self, at: timedelta) -> "SubtitlePack":
        """Split this pack into two at the specified time.

        The pack is sorted first. Entries starting before at stay here;
        the rest move to a new pack whose timeline is shifted to start at
        zero (at becomes 0).

        Args:
            at: Time to split at, usually the length of the movie's first part

        Returns:
            New pack holding the entries starting at or after at
        """
        self.sort()
        idx = bisect_left(self.entries, at, key=_start_time)

        second = SubtitlePack(self.entries[idx:])
        del self.entries[idx:]
        second.shift(-at)

        logger.debug("pack_split", at=str(at), kept=len(self), moved=len(second))
        return second

    def stats(self) -> SubtitleStats:
        """Analyze the pack and return its statistics.

        Counting strips control tags, HTML and hearing impaired text from
        the entries, so the pack should not be saved after calling this.
        Sort the pack first for a meaningful visible ratio.
        """
        return compute_stats(self.entries)
