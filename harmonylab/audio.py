"""Synthesised plucked-note waveforms and a small playback helper."""

from __future__ import annotations

import math
from array import array
from collections.abc import Iterator

import pygame

SAMPLE_RATE = 44100
_PCM_SCALE = 32767


class Wave:
    """A finite mono waveform at ``SAMPLE_RATE`` samples per second."""

    SAMPLE_RATE = SAMPLE_RATE
    SECONDS = 1

    def __init__(self, freq: float) -> None:
        self.freq = freq

    def _sample(self, t: float) -> float:
        raise NotImplementedError

    def __iter__(self) -> Iterator[float]:
        for n in range(len(self)):
            yield self._sample(n / self.SAMPLE_RATE)

    def __len__(self) -> int:
        return self.SAMPLE_RATE * self.SECONDS

    def duration(self) -> float:
        """Length of the wave in seconds."""
        return float(self.SECONDS)

    def to_pcm16(self) -> bytes:
        """Signed 16-bit little-endian mono PCM."""
        pcm = array("h", (
            max(-_PCM_SCALE, min(_PCM_SCALE, round(s * _PCM_SCALE))) for s in self
        ))
        if pcm.itemsize != 2:
            raise RuntimeError("platform lacks a 16-bit array type")
        if array("h", [1]).tobytes() != b"\x01\x00":
            pcm.byteswap()
        return pcm.tobytes()


class PianoWave(Wave):
    """A two-second tone with soft overtones and fast exponential decay."""

    SECONDS = 2

    def _sample(self, t: float) -> float:
        w = t * self.freq * math.pi
        wave = (
            math.sin(2.0 * w)
            + 0.18 * math.sin(4.0 * w)
            + 0.06 * math.sin(6.0 * w)
        )
        return wave * math.exp(-t * 3.5) * 0.15


class GuitarWave(Wave):
    """A three-second tone with brighter overtones and a two-stage decay."""

    SECONDS = 3

    def _sample(self, t: float) -> float:
        w = t * self.freq * math.pi
        wave = (
            math.sin(2.0 * w)
            + 0.45 * math.sin(4.0 * w)
            + 0.22 * math.sin(6.0 * w)
            + 0.08 * math.sin(8.0 * w)
        )
        env = math.exp(-t * 5.5) * 0.7 + math.exp(-t * 1.2) * 0.3
        return wave * env * 0.1


class Player:
    """Plays waves through the default audio output, each on its own channel."""

    def __init__(self) -> None:
        try:
            pygame.mixer.init(frequency=SAMPLE_RATE, size=-16, channels=1)
        except pygame.error as exc:
            raise RuntimeError("Failed to find audio output device") from exc
        params = pygame.mixer.get_init()
        self._channels = params[2] if params else 1
        pygame.mixer.set_num_channels(32)

    def play(self, wave: Wave) -> None:
        """Start playing ``wave`` without waiting for it to finish."""
        data = wave.to_pcm16()
        if self._channels > 1:
            mono = memoryview(data).cast("B")
            frames = [bytes(mono[i:i + 2]) * self._channels
                      for i in range(0, len(mono), 2)]
            data = b"".join(frames)
        try:
            pygame.mixer.Sound(buffer=data).play()
        except pygame.error:
            pass