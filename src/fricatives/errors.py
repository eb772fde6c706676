"""Exceptions raised while extracting fricative features."""


class FricativesError(Exception):
    """Base class for extraction errors."""


class AnnotationError(FricativesError):
    """The annotation file cannot be read or a tier selection is invalid."""


class AudioError(FricativesError):
    """The audio file cannot be decoded."""


class AlignmentAssumptionViolation(FricativesError):
    """Word and phoneme tiers do not line up the way extraction assumes."""


class ComputationError(FricativesError):
    """An acoustic measure is undefined for the given waveform slice."""
