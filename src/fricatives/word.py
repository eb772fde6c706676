"""Locate a fricative inside its enclosing word."""

from collections.abc import Collection

from fricatives.errors import AlignmentAssumptionViolation
from fricatives.grid import AnnotationGrid
from fricatives.symbols import DEFAULT_PAUSES
from fricatives.types import Interval, WordPlacement


def phonemes_in_word(
    grid: AnnotationGrid,
    word: Interval,
    pauses: Collection[str] = DEFAULT_PAUSES,
) -> list[Interval]:
    """Phoneme intervals lying entirely inside ``word``.

    Pauses at either edge of the word are dropped; they are never counted
    as phonemes.

    Raises:
        AlignmentAssumptionViolation: if a pause sits between two phonemes
            of the word.
    """
    first = grid.interval_containing_time("phonemes", word.start)
    inside = []
    for index in range(first, grid.interval_count("phonemes") + 1):
        phoneme = grid.interval_at("phonemes", index)
        if phoneme.start >= word.end:
            break
        if phoneme.start >= word.start and phoneme.end <= word.end:
            inside.append(phoneme)

    spoken = [i for i, phoneme in enumerate(inside) if phoneme.label not in pauses]
    if not spoken:
        return []
    inside = inside[spoken[0]:spoken[-1] + 1]

    for phoneme in inside:
        if phoneme.label in pauses:
            raise AlignmentAssumptionViolation(
                f"Word '{word.label}' [{word.start}, {word.end}] contains pause "
                f"'{phoneme.label}' at {phoneme.start}"
            )
    return inside


def locate_in_word(
    grid: AnnotationGrid,
    fricative: Interval,
    pauses: Collection[str] = DEFAULT_PAUSES,
) -> WordPlacement:
    """Find the word enclosing ``fricative`` and the fricative's place in it.

    The word is the one containing the fricative's midpoint. The position
    is found by matching label, start and end exactly, so a word holding
    the same symbol twice still resolves to the right occurrence.

    Raises:
        AlignmentAssumptionViolation: if the word's phonemes do not include
            the fricative, or a pause splits the word.
    """
    word_index = grid.interval_containing_time("words", fricative.midpoint)
    word = grid.interval_at("words", word_index)
    phonemes = phonemes_in_word(grid, word, pauses)

    for position, phoneme in enumerate(phonemes, start=1):
        if phoneme == fricative:
            return WordPlacement(word=word.label, length=len(phonemes), position=position)

    raise AlignmentAssumptionViolation(
        f"Fricative '{fricative.label}' [{fricative.start}, {fricative.end}] "
        f"not found among phonemes of word '{word.label}' [{word.start}, {word.end}]"
    )
