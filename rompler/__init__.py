"""A terminal sample player that pitches audio samples across one octave."""

__version__ = "0.1.0"