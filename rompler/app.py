"""Instrument bank and the state of the on-screen keyboard."""

from __future__ import annotations

import threading
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable

NOTES = ("c", "c#", "d", "d#", "e", "f", "f#", "g", "g#", "a", "a#", "b")

KEY_NOTES = {
    "q": "c",
    "z": "c#",
    "s": "d",
    "e": "d#",
    "d": "e",
    "f": "f",
    "t": "f#",
    "g": "g",
    "y": "g#",
    "h": "a",
    "u": "a#",
    "j": "b",
}

# Pitch ratios of the chromatic scale starting from C.
NOTE_PITCHES = {
    "c": 1.0,
    "c#": 17.0 / 16.0,
    "d": 9.0 / 8.0,
    "d#": 6.0 / 5.0,
    "e": 5.0 / 4.0,
    "f": 4.0 / 3.0,
    "f#": 45.0 / 32.0,
    "g": 3.0 / 2.0,
    "g#": 8.0 / 5.0,
    "a": 5.0 / 3.0,
    "a#": 7.0 / 4.0,
    "b": 15.0 / 8.0,
}

RELEASE_DELAY = 0.1
SOUND_EXTENSIONS = (".mp3", ".wav")


@dataclass
class Instrument:
    """A named sample that the keyboard plays at different pitches."""

    name: str
    samples: Any


class App:
    """Instruments, the selected one, and which notes are currently held."""

    def __init__(self, instruments):
        self.instruments = list(instruments)
        if not self.instruments:
            raise ValueError("No instrument found in the sound bank.")
        self.current_index = 0
        self._lock = threading.Lock()
        self._pressed = dict.fromkeys(NOTES, False)

    def note_for_key(self, char):
        """Return the note bound to keyboard key ``char``, or None."""
        return KEY_NOTES.get(char)

    def is_pressed(self, note):
        with self._lock:
            return self._pressed[note]

    def press_note(self, note):
        """Mark ``note`` as held; it is released again after a short delay."""
        timer = self.release_note_after_delay(note, RELEASE_DELAY)
        with self._lock:
            self._pressed[note] = True
        return timer

    def release_note_after_delay(self, note, delay):
        """Release ``note`` after ``delay`` seconds on a background timer."""

        def release():
            with self._lock:
                self._pressed[note] = False

        timer = threading.Timer(delay, release)
        timer.daemon = True
        timer.start()
        return timer

    def next_instrument(self):
        self.current_index = (self.current_index + 1) % len(self.instruments)

    def prev_instrument(self):
        self.current_index = (self.current_index - 1) % len(self.instruments)

    def current_instrument(self):
        return self.instruments[self.current_index]


def load_instruments(directory, loader: Callable[[Path], Any]):
    """Build an instrument for every mp3 or wav file in ``directory``, by name."""
    paths = sorted(
        path
        for path in Path(directory).iterdir()
        if path.is_file() and path.suffix in SOUND_EXTENSIONS
    )
    return [Instrument(name=path.name, samples=loader(path)) for path in paths]