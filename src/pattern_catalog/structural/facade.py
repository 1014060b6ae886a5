"""Facade pattern: one call to start the home theater.

Participants:
    - DVDPlayer, Projector, SoundSystem: subsystem classes
    - HomeTheaterFacade: the simplified interface clients use
"""
from typing import Optional

from pattern_catalog.domain.pattern import PatternCategory, PatternInfo
from pattern_catalog.infrastructure.console import Console, StdoutConsole, default_console


class _Component:
    name = "Component"

    def __init__(self, console: Optional[Console] = None):
        self._console = default_console(console)
        self.is_on = False

    def on(self) -> None:
        self.is_on = True
        self._console.write(f"{self.name} is ON.")

    def off(self) -> None:
        self.is_on = False
        self._console.write(f"{self.name} is OFF.")


class DVDPlayer(_Component):
    name = "DVD Player"

    def play(self, movie: str) -> None:
        self._console.write(f"Playing movie: {movie}")


class Projector(_Component):
    name = "Projector"

    def set_wide_screen_mode(self) -> None:
        self._console.write("Projector set to widescreen mode.")


class SoundSystem(_Component):
    name = "Sound System"

    def set_surround_sound(self) -> None:
        self._console.write("Sound System set to surround sound.")


class HomeTheaterFacade:
    def __init__(
        self,
        dvd_player: DVDPlayer,
        projector: Projector,
        sound_system: SoundSystem,
        console: Optional[Console] = None,
    ):
        self._dvd_player = dvd_player
        self._projector = projector
        self._sound_system = sound_system
        self._console = default_console(console)

    def watch_movie(self, movie: str) -> None:
        self._console.write("Setting up the home theater to watch a movie...")
        self._projector.on()
        self._projector.set_wide_screen_mode()

        self._sound_system.on()
        self._sound_system.set_surround_sound()

        self._dvd_player.on()
        self._dvd_player.play(movie)

    def end_movie(self) -> None:
        self._console.write("Shutting down the home theater...")
        self._dvd_player.off()
        self._sound_system.off()
        self._projector.off()


PATTERN_INFO = PatternInfo(
    name="facade",
    title="Facade",
    category=PatternCategory.STRUCTURAL,
    intent=(
        "Provide a unified, simplified interface to a set of interfaces in a "
        "subsystem."
    ),
    participants=[
        "DVDPlayer / Projector / SoundSystem: subsystem classes",
        "HomeTheaterFacade: simplified entry point",
    ],
    advantages=[
        "Clients get a simple interface to a complex subsystem",
        "Clients are decoupled from subsystem classes",
    ],
    examples=[
        "An operating system shutdown command coordinating many subsystems",
        "A service layer wrapping several repositories",
    ],
    module=__name__,
)


def run_demo(console: Console) -> None:
    home_theater = HomeTheaterFacade(
        DVDPlayer(console), Projector(console), SoundSystem(console), console
    )
    home_theater.watch_movie("Inception")
    home_theater.end_movie()


def main() -> None:
    run_demo(StdoutConsole())


if __name__ == "__main__":
    main()
