"""Tests for the home theater Facade pattern."""

from pattern_catalog.infrastructure.console import RecordingConsole
from pattern_catalog.structural.facade import (
    DVDPlayer,
    HomeTheaterFacade,
    Projector,
    SoundSystem,
    run_demo,
)

WATCH_LINES = [
    "Setting up the home theater to watch a movie...",
    "Projector is ON.",
    "Projector set to widescreen mode.",
    "Sound System is ON.",
    "Sound System set to surround sound.",
    "DVD Player is ON.",
    "Playing movie: Inception",
]

END_LINES = [
    "Shutting down the home theater...",
    "DVD Player is OFF.",
    "Sound System is OFF.",
    "Projector is OFF.",
]


class TestHomeTheaterFacade:
    """Test the facade coordinating its subsystems."""

    def setup_method(self):
        """Set up test fixtures."""
        self.console = RecordingConsole()
        self.dvd = DVDPlayer(self.console)
        self.projector = Projector(self.console)
        self.sound = SoundSystem(self.console)
        self.facade = HomeTheaterFacade(self.dvd, self.projector, self.sound, self.console)

    def test_watch_movie_turns_everything_on(self):
        self.facade.watch_movie("Inception")

        assert self.console.lines == WATCH_LINES
        assert self.dvd.is_on and self.projector.is_on and self.sound.is_on

    def test_end_movie_turns_everything_off(self):
        self.facade.watch_movie("Inception")
        self.console.clear()

        self.facade.end_movie()

        assert self.console.lines == END_LINES
        assert not (self.dvd.is_on or self.projector.is_on or self.sound.is_on)


def test_demo_output(recording_console):
    """Test the facade demo."""
    run_demo(recording_console)

    assert recording_console.lines == WATCH_LINES + END_LINES
