"""Adapter pattern: playing mp4 files through an audio player interface.

Participants:
    - MediaPlayer: target interface the client expects
    - VideoPlayer: adaptee with an incompatible interface
    - MediaAdapter: implements MediaPlayer by calling VideoPlayer
    - AudioPlayer: client-facing player using the adapter for mp4
"""
from abc import ABC, abstractmethod
from typing import Optional

from pattern_catalog.domain.pattern import PatternCategory, PatternInfo
from pattern_catalog.infrastructure.console import Console, StdoutConsole, default_console
from pattern_catalog.infrastructure.logging import get_logger

logger = get_logger(__name__)


def _normalize_format(media_type: str) -> str:
    return media_type.strip().lower()


class MediaPlayer(ABC):
    @abstractmethod
    def play_audio(self, audio_type: str, file_name: str) -> bool:
        """Play a file. Returns False when the format is not supported."""


class VideoPlayer:
    """Adaptee. Knows nothing about ``MediaPlayer``."""

    def __init__(self, console: Optional[Console] = None):
        self._console = default_console(console)

    def play_video(self, video_type: str, file_name: str) -> bool:
        if _normalize_format(video_type) == "mp4":
            self._console.write(f"Playing mp4 video: {file_name}")
            return True
        self._console.write(f"Unsupported video format: {video_type}")
        return False


class MediaAdapter(MediaPlayer):
    def __init__(self, video_player: Optional[VideoPlayer] = None, console: Optional[Console] = None):
        self._console = default_console(console)
        self._video_player = video_player or VideoPlayer(self._console)

    def play_audio(self, audio_type: str, file_name: str) -> bool:
        if _normalize_format(audio_type) == "mp4":
            return self._video_player.play_video(audio_type, file_name)
        self._console.write(f"Unsupported audio format: {audio_type}")
        return False


class AudioPlayer(MediaPlayer):
    def __init__(self, console: Optional[Console] = None):
        self._console = default_console(console)

    def play_audio(self, audio_type: str, file_name: str) -> bool:
        media_format = _normalize_format(audio_type)
        if media_format == "mp3":
            self._console.write(f"Playing mp3 audio: {file_name}")
            return True
        if media_format == "mp4":
            logger.debug("Delegating to media adapter", format=media_format, file=file_name)
            return MediaAdapter(console=self._console).play_audio(audio_type, file_name)

        self._console.write(f"Unsupported format: {audio_type}")
        return False


PATTERN_INFO = PatternInfo(
    name="adapter",
    title="Adapter",
    category=PatternCategory.STRUCTURAL,
    intent=(
        "Convert the interface of a class into another interface clients expect, "
        "letting classes with incompatible interfaces work together."
    ),
    participants=[
        "MediaPlayer: target interface",
        "VideoPlayer: adaptee",
        "MediaAdapter: adapter translating calls",
        "AudioPlayer: client of the target interface",
    ],
    advantages=[
        "Clients stay unaware of the adaptee",
        "Existing classes are reused without modification",
        "The adapter is a thin, replaceable middle layer",
    ],
    examples=[
        "A power plug adapter between socket standards",
        "Wrapping a third-party SDK behind an application interface",
    ],
    module=__name__,
)


def run_demo(console: Console) -> None:
    audio_player = AudioPlayer(console)
    audio_player.play_audio("mp3", "song.mp3")
    audio_player.play_audio("mp4", "movie.mp4")
    audio_player.play_audio("avi", "video.avi")


def main() -> None:
    run_demo(StdoutConsole())


if __name__ == "__main__":
    main()
