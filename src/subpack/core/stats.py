"""Aggregate statistics over subtitle entries."""

from collections.abc import Sequence
from dataclasses import asdict, dataclass
from datetime import timedelta

import structlog

from subpack.core.subtitle import SubtitleEntry

logger = structlog.get_logger()


@dataclass(frozen=True)
class SubtitleStats:
    """Statistics snapshot of a subtitle pack.

    Averages whose denominator is zero are reported as 0.

    Attributes:
        subs: Number of entries
        lines: Number of text lines (counted before any cleanup)
        avg_lines_per_sub: lines / subs
        chars: Characters in all lines, spaces included
        chars_no_space: Characters of all words, spaces excluded
        avg_chars_per_line: chars_no_space / lines
        words: Whitespace-delimited words
        avg_words_per_line: words / lines
        avg_chars_per_word: chars_no_space / words
        total_disp_dur: Sum of all display durations
        sub_visible_ratio: total_disp_dur / end time of the last entry
        avg_disp_dur_per_non_space_char: total_disp_dur / chars_no_space
        htmls: Entries that had HTML formatting
        controls: Entries that had control tags
        his: Entries that had hearing impaired text
    """

    subs: int = 0
    lines: int = 0
    avg_lines_per_sub: float = 0.0
    chars: int = 0
    chars_no_space: int = 0
    avg_chars_per_line: float = 0.0
    words: int = 0
    avg_words_per_line: float = 0.0
    avg_chars_per_word: float = 0.0
    total_disp_dur: timedelta = timedelta(0)
    sub_visible_ratio: float = 0.0
    avg_disp_dur_per_non_space_char: timedelta = timedelta(0)
    htmls: int = 0
    controls: int = 0
    his: int = 0

    def as_dict(self) -> dict[str, int | float | timedelta]:
        """Return the snapshot as a plain dict."""
        return asdict(self)


def _ratio(numerator: float, denominator: float) -> float:
    return numerator / denominator if denominator else 0.0


def compute_stats(entries: Sequence[SubtitleEntry]) -> SubtitleStats:
    """Analyze entries and return their statistics.

    Counting strips control tags, HTML formatting and hearing impaired text
    from every entry in place, so the entries should not be serialized
    afterwards if the original formatting matters.

    Args:
        entries: Entries in timeline order; the ratio of visible time uses
            the end time of the last one

    Returns:
        Statistics snapshot
    """
    total_disp_dur = timedelta(0)
    lines = chars = chars_no_space = words = 0
    htmls = controls = his = 0

    for entry in entries:
        total_disp_dur += entry.display_duration()
        lines += len(entry.lines)

        if entry.remove_control():
            controls += 1
        if entry.remove_html():
            htmls += 1

        for line in entry.lines:
            chars += len(line)
            fields = line.split()
            words += len(fields)
            chars_no_space += sum(len(word) for word in fields)

        if entry.remove_hi():
            his += 1

    sub_visible_ratio = 0.0
    if entries and entries[-1].end:
        sub_visible_ratio = total_disp_dur / entries[-1].end

    avg_disp_dur_per_char = timedelta(0)
    if chars_no_space > 0:
        avg_disp_dur_per_char = total_disp_dur / chars_no_space

    stats = SubtitleStats(
        subs=len(entries),
        lines=lines,
        avg_lines_per_sub=_ratio(lines, len(entries)),
        chars=chars,
        chars_no_space=chars_no_space,
        avg_chars_per_line=_ratio(chars_no_space, lines),
        words=words,
        avg_words_per_line=_ratio(words, lines),
        avg_chars_per_word=_ratio(chars_no_space, words),
        total_disp_dur=total_disp_dur,
        sub_visible_ratio=sub_visible_ratio,
        avg_disp_dur_per_non_space_char=avg_disp_dur_per_char,
        htmls=htmls,
        controls=controls,
        his=his,
    )
    logger.debug("stats_computed", subs=stats.subs, lines=stats.lines)
    return stats
