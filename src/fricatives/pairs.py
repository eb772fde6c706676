"""Discover audio/annotation file pairs by naming rule."""

import logging
from pathlib import Path

from fricatives.types import FilePair

logger = logging.getLogger(__name__)


def annotation_path_for(
    audio: Path,
    suffix: str = "",
    annotation_ext: str = ".TextGrid",
    annotation_dir: Path | None = None,
) -> Path:
    """Annotation path for ``audio``: stem + suffix + annotation extension.

    'speaker1.wav' with suffix '_aligned' -> 'speaker1_aligned.TextGrid'.
    """
    directory = annotation_dir if annotation_dir is not None else audio.parent
    return directory / f"{audio.stem}{suffix}{annotation_ext}"


def find_pairs(
    audio_dir: str | Path,
    suffix: str = "",
    audio_ext: str = ".wav",
    annotation_ext: str = ".TextGrid",
    annotation_dir: str | Path | None = None,
) -> list[FilePair]:
    """List audio files in ``audio_dir`` that have a matching annotation.

    Audio files without one are logged and skipped. Pairs are sorted by
    audio file name.

    Raises:
        FileNotFoundError: if ``audio_dir`` does not exist.
    """
    audio_dir = Path(audio_dir)
    if not audio_dir.is_dir():
        raise FileNotFoundError(f"Directory not found: {audio_dir}")
    ann_dir = Path(annotation_dir) if annotation_dir is not None else None

    ext = audio_ext.lower()
    pairs = []
    for audio in sorted(audio_dir.iterdir()):
        if not audio.is_file() or audio.suffix.lower() != ext:
            continue
        annotation = annotation_path_for(audio, suffix, annotation_ext, ann_dir)
        if not annotation.exists():
            logger.warning(f"No annotation for {audio.name} (expected {annotation.name})")
            continue
        pairs.append(FilePair(audio=audio, annotation=annotation))

    logger.info(f"Found {len(pairs)} audio/annotation pair(s) in {audio_dir}")
    return pairs
