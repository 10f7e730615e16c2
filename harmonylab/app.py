"""The application window and its entry point."""

from __future__ import annotations

import argparse
from pathlib import Path

import pygame

from harmonylab.audio import Player, Wave
from harmonylab.screens import DEFAULT_SIZE, GuitarScreen, HomeScreen, PianoScreen
from harmonylab.selection import Selection
from harmonylab.settings import Screen, load_settings, save_settings

TITLE = "Harmony Lab"


class _DeferredPlayer:
    """Opens the audio device the first time it is needed."""

    def __init__(self) -> None:
        self._player: Player | None = None

    def ensure(self) -> Player:
        if self._player is None:
            self._player = Player()
        return self._player

    def play(self, wave: Wave) -> None:
        self.ensure().play(wave)


class HarmonyApp:
    """Holds the settings and the three screens and switches between them."""

    def __init__(self, settings_path: Path | str | None = None) -> None:
        self.settings_path = settings_path
        self.settings = load_settings(settings_path)
        self._player = _DeferredPlayer()
        self.home = HomeScreen(self.settings)
        self.piano = PianoScreen(Selection(), self._player)
        self.guitar = GuitarScreen(Selection(), self._player)

    def handle_click(self, pos: tuple[int, int]) -> None:
        """Pass a click to the visible screen and follow any navigation."""
        match self.settings.screen:
            case Screen.HOME:
                target = self.home.handle_click(pos)
            case Screen.PIANO:
                target = self.piano.handle_click(pos)
            case Screen.GUITAR:
                target = self.guitar.handle_click(pos)
        if target is not None:
            self.settings.screen = target

    def _draw(self, surface: pygame.Surface) -> None:
        match self.settings.screen:
            case Screen.HOME:
                self.home.draw(surface)
            case Screen.PIANO:
                self.piano.draw(surface, self.settings.palette)
            case Screen.GUITAR:
                self.guitar.draw(surface, self.settings.palette)

    def run(self) -> None:
        """Open the window and run until it is closed, then save settings."""
        self._player.ensure()
        pygame.init()
        try:
            surface = pygame.display.set_mode(DEFAULT_SIZE, pygame.RESIZABLE)
            pygame.display.set_caption(TITLE)
            clock = pygame.time.Clock()
            running = True
            while running:
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        running = False
                    elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                        self.handle_click(event.pos)
                self._draw(surface)
                pygame.display.flip()
                clock.tick(60)
        finally:
            save_settings(self.settings, self.settings_path)
            pygame.quit()


def main(argv: list[str] | None = None) -> int:
    """Start the application."""
    parser = argparse.ArgumentParser(prog="harmonylab", description=TITLE)
    parser.add_argument("--settings", type=Path, default=None,
                        help="settings file to load and save")
    args = parser.parse_args(argv)
    HarmonyApp(args.settings).run()
    return 0