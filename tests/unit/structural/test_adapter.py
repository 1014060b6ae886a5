"""Tests for the media player Adapter pattern."""

from pattern_catalog.structural.adapter import AudioPlayer, MediaAdapter, VideoPlayer, run_demo


class TestAudioPlayer:
    """Test the client-facing player."""

    def test_plays_mp3_natively(self, recording_console):
        assert AudioPlayer(recording_console).play_audio("mp3", "song.mp3") is True
        assert recording_console.lines == ["Playing mp3 audio: song.mp3"]

    def test_plays_mp4_through_adapter(self, recording_console):
        assert AudioPlayer(recording_console).play_audio("mp4", "movie.mp4") is True
        assert recording_console.lines == ["Playing mp4 video: movie.mp4"]

    def test_formats_are_case_insensitive(self, recording_console):
        player = AudioPlayer(recording_console)

        assert player.play_audio("MP3", "a.mp3") is True
        assert player.play_audio(" Mp4 ", "b.mp4") is True

    def test_unsupported_format(self, recording_console):
        assert AudioPlayer(recording_console).play_audio("avi", "video.avi") is False
        assert recording_console.lines == ["Unsupported format: avi"]


class TestMediaAdapter:
    """Test the adapter in isolation."""

    def test_delegates_to_video_player(self, recording_console):
        adapter = MediaAdapter(VideoPlayer(recording_console), recording_console)

        assert adapter.play_audio("mp4", "clip.mp4") is True
        assert recording_console.lines == ["Playing mp4 video: clip.mp4"]

    def test_rejects_other_formats(self, recording_console):
        adapter = MediaAdapter(console=recording_console)

        assert adapter.play_audio("wav", "clip.wav") is False
        assert recording_console.lines == ["Unsupported audio format: wav"]


def test_demo_output(recording_console):
    """Test the adapter demo."""
    run_demo(recording_console)

    assert recording_console.lines == [
        "Playing mp3 audio: song.mp3",
        "Playing mp4 video: movie.mp4",
        "Unsupported format: avi",
    ]
