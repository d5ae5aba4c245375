"""Sample loading, pitch shifting and playback through the pygame mixer."""

from __future__ import annotations

import os
from pathlib import Path

import numpy as np

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

_MIXER_CHANNELS = 32


def resample(samples, ratio):
    """Play ``samples`` back ``ratio`` times faster, raising the pitch accordingly.

    The first axis is time; any further axes (audio channels) are kept.
    The result has the same dtype as the input.
    """
    if ratio <= 0:
        raise ValueError("speed ratio must be positive")
    data = np.asarray(samples)
    if data.ndim == 0:
        raise ValueError("samples must have a time axis")
    count = data.shape[0]
    if count == 0:
        return data.copy()

    positions = np.arange(0.0, count, ratio)
    lower = np.floor(positions).astype(np.intp)
    upper = np.minimum(lower + 1, count - 1)
    fraction = positions - lower
    if data.ndim > 1:
        fraction = fraction.reshape((-1,) + (1,) * (data.ndim - 1))

    source = data.astype(np.float64)
    mixed = source[lower] * (1.0 - fraction) + source[upper] * fraction
    if np.issubdtype(data.dtype, np.integer):
        limits = np.iinfo(data.dtype)
        mixed = np.clip(np.rint(mixed), limits.min, limits.max)
    return mixed.astype(data.dtype)


def _ensure_mixer() -> None:
    if pygame.mixer.get_init() is None:
        pygame.mixer.init()


def load_samples(path):
    """Decode an audio file into an array laid out for the running mixer."""
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"no such sound file: {path}")
    _ensure_mixer()
    try:
        sound = pygame.mixer.Sound(file=str(path))
    except pygame.error as exc:
        raise ValueError(f"cannot decode {path}: {exc}") from exc
    return pygame.sndarray.array(sound)


class Player:
    """Plays sample arrays on the default audio output, mixing overlapping notes."""

    def __init__(self):
        _ensure_mixer()
        pygame.mixer.set_num_channels(_MIXER_CHANNELS)
        _frequency, _format, self.channels = pygame.mixer.get_init()

    def play(self, samples, speed):
        """Start playing ``samples`` at ``speed`` and return the playing sound."""
        data = resample(samples, speed)
        if data.ndim == 1 and self.channels > 1:
            data = np.repeat(data[:, np.newaxis], self.channels, axis=1)
        elif data.ndim == 2 and self.channels == 1:
            data = data[:, 0]
        sound = pygame.sndarray.make_sound(np.ascontiguousarray(data))
        sound.play()
        return sound