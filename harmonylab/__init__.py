"""Piano and guitar explorer for scales, chords and the circle of fifths."""

__version__ = "0.1.0"