"""Word/phoneme interval tiers and TextGrid loading.

Tiers are indexed 1..N, matching how Praat numbers intervals. Time lookups
are left-closed, right-open (``start <= t < end``) except for the last
interval of a tier, whose right edge also belongs to it.
"""

import bisect
import logging
from pathlib import Path
from typing import Literal

import textgrid
from textgrid.exceptions import TextGridError

from fricatives.errors import AnnotationError
from fricatives.types import Interval

logger = logging.getLogger(__name__)

TierKind = Literal["words", "phonemes"]


class Tier:
    """An ordered, non-overlapping sequence of intervals."""

    def __init__(self, name: str, intervals: list[Interval]):
        if not intervals:
            raise AnnotationError(f"Tier '{name}' has no intervals")
        self.name = name
        self.intervals = list(intervals)
        self._starts = [iv.start for iv in self.intervals]

    def __len__(self) -> int:
        return len(self.intervals)

    def __iter__(self):
        return iter(self.intervals)

    @property
    def start(self) -> float:
        return self.intervals[0].start

    @property
    def end(self) -> float:
        return self.intervals[-1].end

    def interval_at(self, index: int) -> Interval:
        """Return the interval at 1-based ``index``."""
        if not 1 <= index <= len(self.intervals):
            raise IndexError(
                f"Interval {index} out of range for tier '{self.name}' "
                f"(1..{len(self.intervals)})"
            )
        return self.intervals[index - 1]

    def index_at_time(self, t: float) -> int:
        """Return the 1-based index of the interval containing ``t``."""
        if t < self.start or t > self.end:
            raise ValueError(
                f"Time {t} outside tier '{self.name}' [{self.start}, {self.end}]"
            )
        # Rightmost interval starting at or before t; a boundary time belongs
        # to the interval that starts there.
        i = bisect.bisect_right(self._starts, t) - 1
        return i + 1


class AnnotationGrid:
    """A word tier and a phoneme tier sharing one timeline."""

    def __init__(self, words: Tier, phonemes: Tier):
        self.words = words
        self.phonemes = phonemes

    def tier(self, kind: TierKind) -> Tier:
        if kind == "words":
            return self.words
        if kind == "phonemes":
            return self.phonemes
        raise ValueError(f"Unknown tier kind: {kind!r}")

    def interval_at(self, kind: TierKind, index: int) -> Interval:
        return self.tier(kind).interval_at(index)

    def interval_count(self, kind: TierKind) -> int:
        return len(self.tier(kind))

    def interval_containing_time(self, kind: TierKind, t: float) -> int:
        return self.tier(kind).index_at_time(t)


def _tier_from_textgrid(tg: textgrid.TextGrid, index: int, path: Path) -> Tier:
    """Convert the 1-based ``index``-th tier of ``tg`` into a Tier."""
    if not 1 <= index <= len(tg.tiers):
        raise AnnotationError(
            f"{path.name}: tier {index} requested but file has {len(tg.tiers)} tier(s)"
        )
    source = tg.tiers[index - 1]
    if not isinstance(source, textgrid.IntervalTier):
        raise AnnotationError(f"{path.name}: tier {index} is not an interval tier")
    intervals = [
        Interval(
            label=(iv.mark or "").strip(),
            start=float(iv.minTime),
            end=float(iv.maxTime),
        )
        for iv in source.intervals
    ]
    return Tier(source.name or f"tier{index}", intervals)


def load_grid(path: str | Path, word_tier: int = 1, phoneme_tier: int = 2) -> AnnotationGrid:
    """Read a Praat TextGrid and select its word and phoneme tiers.

    Args:
        path: TextGrid file.
        word_tier: 1-based index of the word tier.
        phoneme_tier: 1-based index of the phoneme tier.

    Raises:
        FileNotFoundError: if the file does not exist.
        AnnotationError: if the file cannot be parsed or a tier index is invalid.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"File not found: {path}")

    try:
        tg = textgrid.TextGrid.fromFile(str(path))
    except (TextGridError, ValueError, IndexError, StopIteration, UnicodeDecodeError) as e:
        raise AnnotationError(f"{path.name}: cannot parse TextGrid: {e}") from e

    grid = AnnotationGrid(
        words=_tier_from_textgrid(tg, word_tier, path),
        phonemes=_tier_from_textgrid(tg, phoneme_tier, path),
    )
    logger.debug(
        f"Loaded {path.name}: {len(grid.words)} word and "
        f"{len(grid.phonemes)} phoneme intervals"
    )
    return grid
