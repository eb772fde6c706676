"""Waveform access and acoustic measures: WAV I/O, slicing, intensity, centre of gravity.

All functions operate on numpy arrays (float64, normalized to [-1, 1]).
WAV I/O uses scipy.io.wavfile; spectra use numpy.fft.
"""

import math
from pathlib import Path

import numpy as np
import scipy.io.wavfile as wavfile

from fricatives.errors import AudioError, ComputationError
from fricatives.types import Acoustics

# Praat's auditory threshold: samples are read as pascals, dB re 20 uPa.
REFERENCE_PRESSURE = 2e-5

# Tolerance when mapping times to sample indices, absorbs float noise
# like 0.2 * 16000 == 3200.0000000000005.
_INDEX_EPSILON = 1e-6


# ---------------------------------------------------------------------------
# WAV I/O
# ---------------------------------------------------------------------------

def read_wav(path: str | Path) -> tuple[np.ndarray, int]:
    """Read a WAV file and return (samples, sample_rate).

    - Normalizes int16/int32 to float64 in [-1, 1]
    - Centres unsigned 8-bit PCM on 128 before scaling
    - Passes through float WAVs as float64
    - Takes the first channel if stereo

    Raises:
        FileNotFoundError: if the file does not exist.
        AudioError: if the file is not a readable WAV.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"File not found: {path}")

    try:
        sr, data = wavfile.read(str(path))
    # scipy hits an UnboundLocalError on a RIFF header with no fmt chunk
    except (ValueError, EOFError, UnboundLocalError) as e:
        raise AudioError(f"{path.name}: cannot read WAV: {e}") from e

    if data.ndim > 1:
        data = data[:, 0]

    if data.dtype == np.uint8:
        samples = (data.astype(np.float64) - 128.0) / 128.0
    elif np.issubdtype(data.dtype, np.integer):
        info = np.iinfo(data.dtype)
        samples = data.astype(np.float64) / max(abs(info.min), abs(info.max))
    else:
        samples = data.astype(np.float64)

    return samples, sr


# ---------------------------------------------------------------------------
# Signal
# ---------------------------------------------------------------------------

class Signal:
    """A mono waveform with its sample rate.

    ``start_time`` is the time of the first sample, so slices keep the
    timeline of the file they came from.
    """

    def __init__(self, samples: np.ndarray, sample_rate: int, start_time: float = 0.0):
        if sample_rate <= 0:
            raise ValueError(f"Invalid sample rate: {sample_rate}")
        self.samples = np.asarray(samples, dtype=np.float64)
        self.sample_rate = sample_rate
        self.start_time = start_time

    @classmethod
    def from_file(cls, path: str | Path) -> "Signal":
        samples, sr = read_wav(path)
        return cls(samples, sr)

    def __len__(self) -> int:
        return len(self.samples)

    @property
    def duration(self) -> float:
        return len(self.samples) / self.sample_rate

    def _index(self, t: float) -> int:
        """First sample index whose time is at or after ``t``, clamped."""
        i = math.ceil((t - self.start_time) * self.sample_rate - _INDEX_EPSILON)
        return min(max(i, 0), len(self.samples))

    def slice(self, start: float, end: float) -> "Signal":
        """Return the samples whose times fall in ``[start, end)``."""
        if end < start:
            raise ValueError(f"Slice end {end} before start {start}")
        first = self._index(start)
        last = max(self._index(end), first)
        return Signal(
            self.samples[first:last],
            self.sample_rate,
            start_time=self.start_time + first / self.sample_rate,
        )


# ---------------------------------------------------------------------------
# Intensity
# ---------------------------------------------------------------------------

def compute_rms(samples: np.ndarray) -> float:
    """Compute RMS energy of the entire signal."""
    if len(samples) == 0:
        return 0.0
    return float(np.sqrt(np.mean(samples ** 2)))


def mean_intensity_db(signal: Signal) -> float:
    """Mean intensity of the signal in dB re REFERENCE_PRESSURE.

    Raises:
        ComputationError: for an empty or fully silent slice.
    """
    if len(signal) == 0:
        raise ComputationError("Cannot compute intensity of an empty slice")
    rms = compute_rms(signal.samples)
    if rms == 0.0:
        raise ComputationError("Cannot compute intensity of a silent slice")
    return 20.0 * math.log10(rms / REFERENCE_PRESSURE)


# ---------------------------------------------------------------------------
# Spectral centre of gravity
# ---------------------------------------------------------------------------

def _next_power_of_two(n: int) -> int:
    return 1 << (n - 1).bit_length()


def magnitude_spectrum(signal: Signal) -> tuple[np.ndarray, np.ndarray]:
    """Return (frequencies, magnitudes) from 0 Hz to Nyquist.

    The slice is zero-padded to the next power of two before the FFT, as
    Praat's Sound-to-Spectrum does; padding changes bin spacing but not
    where the spectral mass sits.
    """
    n_fft = _next_power_of_two(max(len(signal), 1))
    magnitudes = np.abs(np.fft.rfft(signal.samples, n=n_fft))
    freqs = np.fft.rfftfreq(n_fft, d=1.0 / signal.sample_rate)
    return freqs, magnitudes


def centre_of_gravity(signal: Signal, power: float = 2.0) -> float:
    """Magnitude-weighted mean frequency of the slice in Hz.

    Each bin is weighted by ``|X(f)| ** power``; power 2 weights by the
    power spectrum.

    Raises:
        ComputationError: for an empty slice or one with zero spectral energy.
    """
    if len(signal) == 0:
        raise ComputationError("Cannot compute centre of gravity of an empty slice")
    freqs, magnitudes = magnitude_spectrum(signal)
    weights = magnitudes ** power
    total = float(np.sum(weights))
    if total == 0.0 or not math.isfinite(total):
        raise ComputationError("Cannot compute centre of gravity of a silent slice")
    return float(np.sum(freqs * weights) / total)


def analyze(signal: Signal, power: float = 2.0) -> Acoustics:
    """Measure intensity and centre of gravity of one fricative slice."""
    return Acoustics(
        intensity_db=mean_intensity_db(signal),
        centre_of_gravity=centre_of_gravity(signal, power=power),
    )
