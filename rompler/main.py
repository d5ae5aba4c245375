"""Terminal sampler: play the sound bank from the computer keyboard."""

from __future__ import annotations

import argparse
import curses
import os
import sys
from pathlib import Path

import pygame

from .app import NOTE_PITCHES, App, load_instruments
from .audio import Player, load_samples
from .ui import draw

_ESCAPE = "\x1b"


def run_app(screen, app, player):
    """Draw and handle key presses until Escape is pressed."""
    while True:
        draw(screen, app)
        key = screen.get_wch()
        if key == _ESCAPE:
            break
        if key == curses.KEY_LEFT:
            app.prev_instrument()
        elif key == curses.KEY_RIGHT:
            app.next_instrument()
        elif isinstance(key, str):
            note = app.note_for_key(key)
            if note is not None:
                instrument = app.current_instrument()
                app.press_note(note)
                player.play(instrument.samples, NOTE_PITCHES[note])


def _session(screen, app, player):
    try:
        curses.curs_set(0)
    except curses.error:
        pass
    run_app(screen, app, player)


def main(argv=None):
    parser = argparse.ArgumentParser(prog="rompler", description="Play a bank of samples from the keyboard.")
    parser.add_argument(
        "--sounds",
        type=Path,
        default=Path("sounds"),
        help="directory holding the mp3 and wav instruments (default: sounds)",
    )
    args = parser.parse_args(argv)

    player = Player()
    try:
        app = App(load_instruments(args.sounds, load_samples))
        os.environ.setdefault("ESCDELAY", "25")
        try:
            curses.wrapper(_session, app, player)
        except pygame.error as exc:
            print(exc)
    finally:
        pygame.mixer.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())