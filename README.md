# rompler

A tiny sample-based instrument for the terminal. Each audio file in a sound
bank becomes an instrument, and twelve keys on your keyboard play it back at
the pitches of one chromatic octave, starting from C.

The screen is drawn with Python's `curses` module and sound goes out through
the pygame mixer, so you need a platform where `curses` is available and a
working audio output.

## Installation

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Sound bank

Put `.wav` or `.mp3` files in a directory (by default `sounds/` in the
directory you start the program from). Each file becomes one instrument,
named after the file; instruments are ordered by file name. If no audio files
are found, the program stops with the error
`No instrument found in the sound bank.`

## Playing

```
rompler
rompler --sounds path/to/bank
```

`--sounds` chooses the sound bank directory (default: `sounds`).

The top line shows the current instrument, its position in the bank, and a
short reminder of the controls. Below it a one-octave piano is drawn; a key
lights up for about a tenth of a second when played.

| Key | Note |
|-----|------|
| `q` | C    |
| `z` | C#   |
| `s` | D    |
| `e` | D#   |
| `d` | E    |
| `f` | F    |
| `t` | F#   |
| `g` | G    |
| `y` | G#   |
| `h` | A    |
| `u` | A#   |
| `j` | B    |

Notes are tuned in just intonation relative to the sample's own pitch
(C plays the sample unchanged, G plays it at 3/2 speed, and so on).
Notes played in quick succession overlap rather than cutting each other off.

- Left / Right arrows: previous / next instrument (wrapping around)
- Esc: quit

## Using it as a library

The pieces of the program can be used on their own:

- `rompler.audio.load_samples(path)` decodes an audio file into a numpy
  array laid out for the running mixer, and
  `rompler.audio.resample(samples, ratio)` plays samples back `ratio` times
  faster by linear interpolation, keeping the dtype.
  `rompler.audio.Player().play(samples, speed)` resamples and plays them.
- `rompler.app.load_instruments(directory, loader)` builds a list of
  `Instrument(name, samples)` from the mp3 and wav files in a directory,
  calling `loader` on each path. `rompler.app.App(instruments)` keeps track of
  the current instrument (`current_instrument()`, `next_instrument()`,
  `prev_instrument()`) and of which notes are sounding (`press_note(note)`,
  `is_pressed(note)`); it raises `ValueError` when given no instruments.
  `rompler.app.KEY_NOTES` and `rompler.app.NOTE_PITCHES` hold the key
  bindings and pitch ratios.
- `rompler.ui.title_text(app)` and `rompler.ui.piano_layout(app, x, y, width, height)`
  compute what the screen shows as text and `KeyCell` rectangles, and
  `rompler.ui.draw(screen, app)` draws it on a curses window.
- `rompler.main.run_app(screen, app, player)` runs the key loop on an
  existing curses window; `rompler.main.main(argv)` is the `rompler` command.