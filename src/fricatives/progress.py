"""Progress observers notified while files and fricatives are processed."""

import logging

from fricatives.types import FeatureRecord, FilePair, Interval

logger = logging.getLogger(__name__)


class ProgressObserver:
    """Receives progress events; every hook is a no-op by default."""

    def file_started(self, pair: FilePair) -> None:
        pass

    def fricative_measured(self, record: FeatureRecord) -> None:
        pass

    def fricative_skipped(self, sound_name: str, fricative: Interval, reason: str) -> None:
        pass

    def file_finished(self, pair: FilePair, n_records: int) -> None:
        pass

    def file_failed(self, pair: FilePair, error: str) -> None:
        pass


class LoggingObserver(ProgressObserver):
    """Reports progress through the ``logging`` module."""

    def __init__(self, log: logging.Logger | None = None):
        self.log = log or logger

    def file_started(self, pair: FilePair) -> None:
        self.log.info(f"Processing {pair.audio.name} with {pair.annotation.name}")

    def fricative_measured(self, record: FeatureRecord) -> None:
        gap = "undefined" if record.time_to_next is None else f"{record.time_to_next:.3f}s"
        self.log.debug(
            f"  {record.fricative} at {record.middle_time:.3f}s: "
            f"{record.duration_ms:.1f} ms, {record.intensity_db:.1f} dB, "
            f"CoG {record.centre_of_gravity:.0f} Hz, "
            f"next +{record.phonemes_to_next} ({gap}), "
            f"'{record.word}' {record.position_in_word}/{record.word_length}"
        )

    def fricative_skipped(self, sound_name: str, fricative: Interval, reason: str) -> None:
        self.log.warning(
            f"{sound_name}: skipping '{fricative.label}' at {fricative.start:.3f}s: {reason}"
        )

    def file_finished(self, pair: FilePair, n_records: int) -> None:
        self.log.info(f"{pair.audio.name}: {n_records} fricative(s)")

    def file_failed(self, pair: FilePair, error: str) -> None:
        self.log.error(f"{pair.audio.name}: {error}")
