"""Core subtitle pack engine."""

from subpack.core.errors import InvalidArgumentError, SubPackError
from subpack.core.pack import SubtitlePack
from subpack.core.stats import SubtitleStats, compute_stats
from subpack.core.subtitle import Position, SubtitleEntry

__all__ = [
    "InvalidArgumentError",
    "Position",
    "SubPackError",
    "SubtitleEntry",
    "SubtitlePack",
    "SubtitleStats",
    "compute_stats",
]
