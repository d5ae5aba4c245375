import pytest

from rompler.app import App, Instrument
from rompler.ui import KeyKind, draw, piano_layout, split_ratio, title_text


@pytest.fixture
def app():
    return App([Instrument("piano.wav", None), Instrument("organ.wav", None)])


class RecordingScreen:
    def __init__(self, size=(24, 80)):
        self.size = size
        self.writes = []
        self.refreshes = 0

    def getmaxyx(self):
        return self.size

    def erase(self):
        self.writes.clear()

    def addstr(self, y, x, text, attr=0):
        self.writes.append((y, x, text))

    def refresh(self):
        self.refreshes += 1


def test_title_text(app):
    assert title_text(app) == (
        'Playing "piano.wav" (1/2). Press <ESC> to quit, use arrows to change instrument.'
    )


def test_title_follows_instrument(app):
    app.next_instrument()
    assert '"organ.wav" (2/2)' in title_text(app)


@pytest.mark.parametrize("start,length,parts", [(0, 80, 12), (5, 7, 12), (3, 21, 2), (0, 0, 4)])
def test_split_ratio_tiles_the_span(start, length, parts):
    spans = split_ratio(start, length, parts)
    assert len(spans) == parts
    assert spans[0][0] == start
    assert sum(size for _, size in spans) == length
    for (first_start, first_size), (second_start, _) in zip(spans, spans[1:]):
        assert first_start + first_size == second_start


def test_split_ratio_even_split():
    assert split_ratio(0, 12, 12) == [(i, 1) for i in range(12)]


def test_split_ratio_rejects_zero_parts():
    with pytest.raises(ValueError):
        split_ratio(0, 10, 0)


def test_piano_layout_key_counts(app):
    cells = piano_layout(app, 0, 3, 80, 20)
    kinds = [cell.kind for cell in cells]
    assert kinds.count(KeyKind.WHITE) == 7
    assert kinds.count(KeyKind.BLACK) == 5
    assert kinds.count(KeyKind.SPACER) == 5


def test_piano_layout_geometry(app):
    cells = piano_layout(app, 2, 3, 60, 21)
    assert cells[0].note == "c" and cells[0].x == 2
    whites = [cell for cell in cells if cell.kind is KeyKind.WHITE]
    assert all(cell.height == 21 and cell.y == 3 for cell in whites)
    blacks = [cell for cell in cells if cell.kind is KeyKind.BLACK]
    spacers = [cell for cell in cells if cell.kind is KeyKind.SPACER]
    for black, spacer in zip(blacks, spacers):
        assert black.height + spacer.height == 21
        assert black.y + black.height == spacer.y
        assert black.x == spacer.x
    columns = [cell for cell in cells if cell.kind is not KeyKind.SPACER]
    assert sum(cell.width for cell in columns) == 60


def test_piano_layout_shows_pressed_notes(app):
    app.press_note("f#").cancel()
    pressed = {cell.note for cell in piano_layout(app, 0, 0, 24, 10) if cell.pressed}
    assert pressed == {"f#"}


def test_key_label_is_upper_case(app):
    labels = [cell.label for cell in piano_layout(app, 0, 0, 24, 10) if cell.kind is KeyKind.WHITE]
    assert labels == ["C", "D", "E", "F", "G", "A", "B"]


def test_draw_writes_title_and_keys(app):
    screen = RecordingScreen()
    draw(screen, app)
    texts = [text for _, _, text in screen.writes]
    assert any(text.startswith('Playing "piano.wav"') for text in texts)
    assert "C" in texts and "A#" in texts
    assert screen.refreshes == 1