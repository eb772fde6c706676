"""Per-file fricative extraction: phoneme traversal and record assembly."""

from dataclasses import dataclass

from fricatives.analysis import Signal, analyze
from fricatives.context import scan_to_next_fricative
from fricatives.errors import ComputationError
from fricatives.grid import AnnotationGrid, load_grid
from fricatives.progress import ProgressObserver
from fricatives.symbols import DEFAULT_FRICATIVES, DEFAULT_PAUSES
from fricatives.types import (
    Acoustics,
    FeatureRecord,
    FilePair,
    Interval,
    NextFricative,
    WordPlacement,
)
from fricatives.word import locate_in_word


@dataclass
class ExtractionConfig:
    """Settings shared by every file of a run."""
    fricatives: frozenset[str] = DEFAULT_FRICATIVES
    pauses: frozenset[str] = DEFAULT_PAUSES
    cog_power: float = 2.0
    word_tier: int = 1              # 1-based tier indices
    phoneme_tier: int = 2
    annotation_suffix: str = ""
    annotation_ext: str = ".TextGrid"
    audio_ext: str = ".wav"


def build_record(
    sound_name: str,
    fricative: Interval,
    acoustics: Acoustics,
    context: NextFricative,
    placement: WordPlacement,
) -> FeatureRecord:
    """Assemble one output row from the measurements of a fricative."""
    return FeatureRecord(
        sound_name=sound_name,
        fricative=fricative.label,
        middle_time=fricative.midpoint,
        duration_ms=fricative.duration * 1000,
        intensity_db=acoustics.intensity_db,
        centre_of_gravity=acoustics.centre_of_gravity,
        phonemes_to_next=context.phonemes_between,
        time_to_next=context.gap,
        word=placement.word,
        word_length=placement.length,
        position_in_word=placement.position,
    )


def extract_features(
    sound_name: str,
    grid: AnnotationGrid,
    signal: Signal,
    config: ExtractionConfig | None = None,
    observer: ProgressObserver | None = None,
) -> list[FeatureRecord]:
    """Measure every fricative of the phoneme tier, in tier order.

    A fricative whose slice cannot be measured is reported to the observer
    and left out. Alignment violations propagate and abort the file.
    """
    config = config or ExtractionConfig()
    observer = observer or ProgressObserver()
    phonemes = grid.phonemes

    records = []
    for index in range(1, len(phonemes) + 1):
        fricative = phonemes.interval_at(index)
        if fricative.label not in config.fricatives:
            continue

        try:
            acoustics = analyze(
                signal.slice(fricative.start, fricative.end), power=config.cog_power,
            )
        except ComputationError as e:
            observer.fricative_skipped(sound_name, fricative, str(e))
            continue

        context = scan_to_next_fricative(
            phonemes, index, fricatives=config.fricatives, pauses=config.pauses,
        )
        placement = locate_in_word(grid, fricative, pauses=config.pauses)

        record = build_record(sound_name, fricative, acoustics, context, placement)
        observer.fricative_measured(record)
        records.append(record)

    return records


def extract_pair(
    pair: FilePair,
    config: ExtractionConfig | None = None,
    observer: ProgressObserver | None = None,
) -> list[FeatureRecord]:
    """Load one audio/annotation pair and extract its records."""
    config = config or ExtractionConfig()
    grid = load_grid(pair.annotation, config.word_tier, config.phoneme_tier)
    signal = Signal.from_file(pair.audio)
    return extract_features(pair.name, grid, signal, config, observer)
