"""Tests for the lazy image Proxy pattern."""

from pattern_catalog.structural.proxy import ProxyImage, RealImage, run_demo


class TestProxyImage:
    """Test lazy loading."""

    def test_creation_does_not_load(self, recording_console):
        """Test that constructing the proxy does not touch the disk."""
        proxy = ProxyImage("photo.jpg", recording_console)

        assert not proxy.is_loaded
        assert recording_console.lines == []

    def test_loads_once_on_first_display(self, recording_console):
        """Test that only the first display loads the image."""
        proxy = ProxyImage("photo.jpg", recording_console)

        proxy.display()
        proxy.display()

        assert proxy.is_loaded
        assert recording_console.lines == [
            "Loading image from disk: photo.jpg",
            "Displaying image: photo.jpg",
            "Displaying image: photo.jpg",
        ]


def test_real_image_loads_eagerly(recording_console):
    RealImage("photo.jpg", recording_console)

    assert recording_console.lines == ["Loading image from disk: photo.jpg"]


def test_demo_output(recording_console):
    """Test the proxy demo."""
    run_demo(recording_console)

    assert recording_console.lines == [
        "First display:",
        "Loading image from disk: high_resolution_image.jpg",
        "Displaying image: high_resolution_image.jpg",
        "",
        "Second display:",
        "Displaying image: high_resolution_image.jpg",
    ]
