"""Terminal drawing of the title bar and the one-octave piano."""

from __future__ import annotations

import curses
import enum
from dataclasses import dataclass
from itertools import pairwise

from .app import NOTES

TITLE_HEIGHT = 3


class KeyKind(enum.Enum):
    WHITE = "white"
    BLACK = "black"
    SPACER = "spacer"


@dataclass(frozen=True)
class KeyCell:
    """A rectangle of the piano drawn in one style."""

    note: str
    kind: KeyKind
    x: int
    y: int
    width: int
    height: int
    pressed: bool = False

    @property
    def label(self) -> str:
        return self.note.upper()


def title_text(app):
    instrument = app.current_instrument()
    return (
        f'Playing "{instrument.name}" ({app.current_index + 1}/{len(app.instruments)}). '
        "Press <ESC> to quit, use arrows to change instrument."
    )


def split_ratio(start, length, parts):
    """Split ``length`` cells from ``start`` into ``parts`` near-equal spans as (start, size)."""
    if parts <= 0:
        raise ValueError("parts must be positive")
    length = max(0, length)
    edges = [start + (2 * length * i + parts) // (2 * parts) for i in range(parts + 1)]
    return [(low, high - low) for low, high in pairwise(edges)]


def piano_layout(app, x, y, width, height):
    """Lay out the twelve keys; black keys take the top half of their column."""
    cells = []
    for note, (column_x, column_width) in zip(NOTES, split_ratio(x, width, len(NOTES))):
        if "#" in note:
            (top_y, top_h), (bottom_y, bottom_h) = split_ratio(y, height, 2)
            cells.append(KeyCell(note, KeyKind.BLACK, column_x, top_y, column_width, top_h, app.is_pressed(note)))
            cells.append(KeyCell(note, KeyKind.SPACER, column_x, bottom_y, column_width, bottom_h))
        else:
            cells.append(KeyCell(note, KeyKind.WHITE, column_x, y, column_width, height, app.is_pressed(note)))
    return cells


_PAIR_NUMBERS = {
    (KeyKind.WHITE, False): 1,
    (KeyKind.WHITE, True): 2,
    (KeyKind.BLACK, False): 3,
    (KeyKind.BLACK, True): 4,
    (KeyKind.SPACER, False): 5,
    (KeyKind.SPACER, True): 5,
}


def _colours(kind, pressed):
    dark = 8 if getattr(curses, "COLORS", 0) >= 16 else curses.COLOR_BLUE
    if kind is KeyKind.WHITE:
        return (curses.COLOR_WHITE, dark) if pressed else (dark, curses.COLOR_WHITE)
    if kind is KeyKind.BLACK:
        return (curses.COLOR_BLACK, dark) if pressed else (dark, curses.COLOR_BLACK)
    return curses.COLOR_WHITE, curses.COLOR_WHITE


def _attr(cell):
    pair = _PAIR_NUMBERS[(cell.kind, cell.pressed)]
    try:
        curses.init_pair(pair, *_colours(cell.kind, cell.pressed))
        return curses.color_pair(pair)
    except curses.error:
        return curses.A_NORMAL


def _put(screen, y, x, text, attr=0):
    if not text:
        return
    try:
        screen.addstr(y, x, text, attr)
    except curses.error:
        # Writing the bottom-right cell moves the cursor off screen.
        pass


def _box(screen, y, x, width, height):
    if width < 2 or height < 2:
        return
    inner = width - 2
    _put(screen, y, x, "┌" + "─" * inner + "┐")
    for row in range(y + 1, y + height - 1):
        _put(screen, row, x, "│")
        _put(screen, row, x + width - 1, "│")
    _put(screen, y + height - 1, x, "└" + "─" * inner + "┘")


def draw(screen, app):
    """Render one frame of the interface onto a curses window."""
    height, width = screen.getmaxyx()
    screen.erase()
    title_height = min(TITLE_HEIGHT, height)
    _box(screen, 0, 0, width, title_height)
    if title_height >= 2 and width > 2:
        _put(screen, 1, 1, title_text(app)[: width - 2])

    for cell in piano_layout(app, 0, TITLE_HEIGHT, width, height - TITLE_HEIGHT):
        if cell.width <= 0 or cell.height <= 0:
            continue
        attr = _attr(cell)
        for row in range(cell.y, cell.y + cell.height):
            _put(screen, row, cell.x, " " * cell.width, attr)
        _put(screen, cell.y, cell.x, cell.label[: cell.width], attr)
    screen.refresh()