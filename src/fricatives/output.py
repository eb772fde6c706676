"""Tab-separated output of feature records."""

import csv
from collections.abc import Iterable
from typing import TextIO

from fricatives.types import FeatureRecord

# Written in place of a time to the next fricative when none follows.
UNDEFINED = "--undefined--"

HEADER = [
    "SoundName",
    "Fricative(SAMPA)",
    "MiddleTime(s)",
    "Duration(ms)",
    "MeanIntensity(dB)",
    "CentreOfGravity(Hz)",
    "PhonemesToNextFricative",
    "DurationToNextFricative(s)",
    "InWord",
    "WordLength",
    "FricativePositionInWord",
]


def format_row(record: FeatureRecord) -> list[str]:
    """Render a record as strings, in header order, with fixed precision."""
    gap = UNDEFINED if record.time_to_next is None else f"{record.time_to_next:.6f}"
    return [
        record.sound_name,
        record.fricative,
        f"{record.middle_time:.6f}",
        f"{record.duration_ms:.3f}",
        f"{record.intensity_db:.3f}",
        f"{record.centre_of_gravity:.3f}",
        str(record.phonemes_to_next),
        gap,
        record.word,
        str(record.word_length),
        str(record.position_in_word),
    ]


class RecordWriter:
    """Writes the header once, then one line per record."""

    def __init__(self, stream: TextIO):
        self._writer = csv.writer(stream, delimiter="\t", lineterminator="\n")
        self._writer.writerow(HEADER)
        self.count = 0

    def write(self, record: FeatureRecord) -> None:
        self._writer.writerow(format_row(record))
        self.count += 1

    def write_all(self, records: Iterable[FeatureRecord]) -> None:
        for record in records:
            self.write(record)
