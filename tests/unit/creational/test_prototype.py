"""Tests for the shape Prototype pattern."""

import pytest

from pattern_catalog.creational.prototype import Circle, Square, run_demo
from pattern_catalog.domain.exceptions import ValidationError


class TestShapeClone:
    """Test cloning."""

    def test_clone_is_an_independent_copy(self):
        """Test that modifying a clone leaves the original untouched."""
        original = Circle(10, "Red")

        clone = original.clone()
        clone.set_color("Green")

        assert clone is not original
        assert isinstance(clone, Circle)
        assert clone.radius == 10
        assert original.color == "Red"
        assert clone.describe() == "Drawing a Green circle with radius 10"

    def test_square_description(self):
        assert Square(5, "Blue").describe() == "Drawing a Blue square with side 5"

    @pytest.mark.parametrize("factory", [lambda: Circle(0, "Red"), lambda: Square(-2, "Red")])
    def test_non_positive_size_rejected(self, factory):
        with pytest.raises(ValidationError):
            factory()


def test_demo_output(recording_console):
    """Test the prototype demo."""
    run_demo(recording_console)

    assert recording_console.lines == [
        "Original shapes:",
        "Drawing a Red circle with radius 10",
        "Drawing a Blue square with side 5",
        "",
        "Cloned and modified shapes:",
        "Drawing a Green circle with radius 10",
        "Drawing a Yellow square with side 5",
    ]
