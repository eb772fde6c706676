"""Core data types for fricatives."""

from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class Interval:
    """A labelled stretch of one annotation tier."""
    label: str       # SAMPA symbol, word, or pause marker
    start: float     # seconds
    end: float       # seconds

    @property
    def midpoint(self) -> float:
        return (self.start + self.end) / 2

    @property
    def duration(self) -> float:
        return self.end - self.start


@dataclass
class Acoustics:
    """Acoustic descriptors of one fricative slice."""
    intensity_db: float
    centre_of_gravity: float    # Hz


@dataclass
class NextFricative:
    """Forward context from one fricative to the next one in the tier."""
    phonemes_between: int
    gap: float | None           # seconds; None when no fricative follows


@dataclass
class WordPlacement:
    """Where a fricative sits inside its enclosing word."""
    word: str
    length: int                 # phonemes in the word
    position: int               # 1-based


@dataclass
class FeatureRecord:
    """One output row per fricative occurrence."""
    sound_name: str
    fricative: str
    middle_time: float          # seconds
    duration_ms: float
    intensity_db: float
    centre_of_gravity: float    # Hz
    phonemes_to_next: int
    time_to_next: float | None  # seconds
    word: str
    word_length: int
    position_in_word: int


@dataclass
class FilePair:
    """An audio file and the annotation that belongs to it."""
    audio: Path
    annotation: Path

    @property
    def name(self) -> str:
        return self.audio.name


@dataclass
class FileFailure:
    """A file whose processing raised, with the reason."""
    pair: FilePair
    error: str


@dataclass
class BatchResult:
    """Output of a batch run."""
    records: list[FeatureRecord] = field(default_factory=list)
    processed: list[FilePair] = field(default_factory=list)
    failures: list[FileFailure] = field(default_factory=list)
    interrupted: bool = False
