"""Fricatives — per-fricative acoustic and positional features from aligned speech."""

import logging
from pathlib import Path

from fricatives.batch import run_batch
from fricatives.extract import ExtractionConfig
from fricatives.output import RecordWriter
from fricatives.pairs import find_pairs
from fricatives.progress import LoggingObserver, ProgressObserver
from fricatives.types import BatchResult

logger = logging.getLogger(__name__)


def process(
    input_dir: str | Path,
    output_path: str | Path,
    config: ExtractionConfig | None = None,
    annotation_dir: str | Path | None = None,
    jobs: int = 1,
    observer: ProgressObserver | None = None,
) -> BatchResult:
    """Run the extraction over a directory and write one TSV file.

    Args:
        input_dir: Directory of audio files.
        output_path: TSV file to create (parent directories are created).
        config: Extraction settings; defaults to the SAMPA fricative set.
        annotation_dir: Where annotations live, if not beside the audio.
        jobs: Worker processes.
        observer: Progress observer; logs through ``logging`` by default.
    """
    config = config or ExtractionConfig()
    observer = observer or LoggingObserver()

    pairs = find_pairs(
        input_dir,
        suffix=config.annotation_suffix,
        audio_ext=config.audio_ext,
        annotation_ext=config.annotation_ext,
        annotation_dir=annotation_dir,
    )

    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "w", encoding="utf-8", newline="") as f:
        writer = RecordWriter(f)
        result = run_batch(pairs, config, observer, sink=writer, jobs=jobs)

    logger.info(
        f"Wrote {len(result.records)} record(s) from {len(result.processed)} file(s) "
        f"to {output_path}"
    )
    if result.failures:
        logger.warning(f"{len(result.failures)} file(s) failed")
    return result
