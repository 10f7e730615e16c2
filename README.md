# harmonylab

A small desktop tool, built on pygame, for exploring music theory on an
88-key piano (A0 to C8) and a 24-fret, six-string guitar in standard tuning.

Choose a root note and a scale. The tool then lights every note of the scale,
each in its own colour. Click one of the scale degrees to see the chord built
on it from the scale, using a chord pattern such as triad, seventh, sus4 or
quartal. Clicking a key or a fret position plays the note as a short
synthesised piano or guitar tone.

## Installation

```
pip install .
```

## Running

```
harmonylab
harmonylab --settings path/to/settings.json
```

The window opens on the screen you had open last, or on the home screen the
first time. The home screen has buttons for the piano and the guitar, and the
twelve note colours. The instrument screens have:

- a `< HOME` button that goes back to the home screen;
- `<` and `>` buttons to step through the root, the scale and the chord
  pattern (changing the root or the scale clears the chosen chord);
- a circle of fifths: clicking a major key selects it with the major scale,
  clicking a minor key selects it with the natural minor scale;
- one button per scale degree, labelled with its Roman numeral and chord
  name; clicking it shows that chord, and clicking it again clears it.

The audio output is opened when the window starts; if no output device can be
opened, the program stops with an error.

When the window closes, the note colours and the open screen are written as
JSON to `settings.json` in your user configuration directory (see
`harmonylab.settings.default_path()`), or to the file given with
`--settings`. A missing or damaged file falls back to the defaults.

## Features

- Twenty-two scales and modes, from Ionian to Hirajoshi, plus a plain
  chromatic view ("None (Standard)") that lights every note.
- Sixteen chord patterns: built in thirds, suspended, added, power chord,
  quartal and cluster.
- Roman-numeral labels for each degree: major, minor, diminished or
  augmented, and `?` for anything else.
- Tones synthesised from harmonics with a decaying envelope: two seconds for
  the piano, three for the guitar, at 44100 Hz.

## Using it as a library

The music-theory parts work without a window:

```python
from harmonylab.theory import ChordPattern, chord_notes, degree_chords, scale_notes

scale_notes(0, 1)                           # C major: [0, 2, 4, 5, 7, 9, 11]
chord_notes(0, 1, 4, ChordPattern.SEVENTH)  # G7 within C major: [7, 11, 2, 5]
[c.label for c in degree_chords(9, 6)]      # degree chords of A minor
```

Other modules you can use on their own:

- `harmonylab.selection.Selection` holds the root, scale, chord pattern and
  chosen degree, and answers `is_active(chroma)`.
- `harmonylab.keyboard.generate_keys()` lists the 88 piano keys with their
  names, pitch classes and frequencies.
- `harmonylab.fretboard.fretboard_notes(selection)` lists the lit guitar
  positions.
- `harmonylab.circle.circle_slots(cx, cy)` and `hit_test(...)` lay out and
  hit-test the circle of fifths.
- `harmonylab.audio.PianoWave` and `GuitarWave` produce samples as floats or
  as 16-bit PCM with `to_pcm16()`.

## Limitations

- The palette has no colour picker. Each colour swatch on the home screen is
  split into three bands; clicking the top, middle or bottom band raises the
  red, green or blue channel by 32, wrapping past 255. A reset button
  restores the default colours.
- Scale and pattern choices are made with step buttons, not drop-down lists,
  and they are not saved between runs.
- The piano is scaled to the window width and the guitar neck is drawn at a
  fixed size; neither scrolls.
- Only mouse clicks are handled; there is no keyboard or MIDI input.

## Development

```
pip install -e ".[test]"
pytest
```