"""Shared fixtures: small aligned grids and synthetic fricative audio."""

from pathlib import Path

import numpy as np
import pytest
import scipy.io.wavfile as wavfile

from fricatives.grid import AnnotationGrid, Tier
from fricatives.types import Interval

SR = 16000


def make_grid(words: list[tuple], phonemes: list[tuple]) -> AnnotationGrid:
    """Build a grid from (label, start, end) tuples."""
    return AnnotationGrid(
        words=Tier("words", [Interval(*w) for w in words]),
        phonemes=Tier("phonemes", [Interval(*p) for p in phonemes]),
    )


def make_noise(duration: float, sr: int = SR, seed: int = 0, amplitude: float = 0.3) -> np.ndarray:
    """Uniform white noise, a stand-in for frication."""
    rng = np.random.RandomState(seed)
    return amplitude * rng.uniform(-1.0, 1.0, int(round(duration * sr)))


def write_textgrid(path: Path, tiers: list[tuple[str, list[tuple]]]) -> Path:
    """Write a long-format Praat TextGrid with the given interval tiers."""
    xmax = max(ivs[-1][2] for _, ivs in tiers)
    lines = [
        'File type = "ooTextFile"',
        'Object class = "TextGrid"',
        "",
        "xmin = 0",
        f"xmax = {xmax}",
        "tiers? <exists>",
        f"size = {len(tiers)}",
        "item []:",
    ]
    for n, (name, intervals) in enumerate(tiers, start=1):
        lines += [
            f"    item [{n}]:",
            '        class = "IntervalTier"',
            f'        name = "{name}"',
            "        xmin = 0",
            f"        xmax = {xmax}",
            f"        intervals: size = {len(intervals)}",
        ]
        for i, (label, start, end) in enumerate(intervals, start=1):
            lines += [
                f"        intervals [{i}]:",
                f"            xmin = {start}",
                f"            xmax = {end}",
                f'            text = "{label}"',
            ]
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


# The worked example: "bas" then "atS", with a pause before "a".
EXAMPLE_WORDS = [("bas", 0.0, 0.3), ("atS", 0.3, 0.7)]
EXAMPLE_PHONEMES = [
    ("b", 0.0, 0.1),
    ("a", 0.1, 0.2),
    ("s", 0.2, 0.3),
    ("<p:>", 0.3, 0.4),
    ("a", 0.4, 0.5),
    ("t", 0.5, 0.6),
    ("S", 0.6, 0.7),
]


@pytest.fixture
def example_grid() -> AnnotationGrid:
    return make_grid(EXAMPLE_WORDS, EXAMPLE_PHONEMES)


@pytest.fixture
def example_pair(tmp_path):
    """WAV + TextGrid on disk for the worked example."""
    samples = make_noise(0.7)
    int16 = (np.clip(samples, -1.0, 1.0) * 32767).astype(np.int16)
    wavfile.write(str(tmp_path / "bas.wav"), SR, int16)
    write_textgrid(
        tmp_path / "bas.TextGrid",
        [("words", EXAMPLE_WORDS), ("phonemes", EXAMPLE_PHONEMES)],
    )
    return tmp_path / "bas.wav", tmp_path / "bas.TextGrid"
