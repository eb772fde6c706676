"""Forward context scan from one fricative to the next."""

from collections.abc import Collection

from fricatives.grid import Tier
from fricatives.symbols import DEFAULT_FRICATIVES, DEFAULT_PAUSES
from fricatives.types import NextFricative


def scan_to_next_fricative(
    phonemes: Tier,
    index: int,
    fricatives: Collection[str] = DEFAULT_FRICATIVES,
    pauses: Collection[str] = DEFAULT_PAUSES,
) -> NextFricative:
    """Count phonemes between the fricative at ``index`` and the next one.

    Pause intervals are stepped over without being counted. The gap runs
    from the end of the current fricative to the start of the next.

    When no fricative follows, the result is zero phonemes and no gap: the
    partial count up to the end of the tier is discarded.
    """
    current = phonemes.interval_at(index)
    count = 0
    for j in range(index + 1, len(phonemes) + 1):
        candidate = phonemes.interval_at(j)
        if candidate.label in fricatives:
            return NextFricative(phonemes_between=count, gap=candidate.start - current.end)
        if candidate.label not in pauses:
            count += 1
    return NextFricative(phonemes_between=0, gap=None)
