"""Tests for argument checks."""

from __future__ import annotations

import pytest

from sprite_frames.validation import check_at_least, check_not_empty, check_not_none


class TestValidation:
    """Tests for validation helpers."""

    def test_check_not_none_passes_values(self):
        """Test falsy values other than None pass."""
        check_not_none(0, "unused")
        check_not_none("", "unused")

    def test_check_not_none_raises_type_error(self):
        """Test None raises TypeError with the given message."""
        with pytest.raises(TypeError, match="image must not be None"):
            check_not_none(None, "image must not be None")

    def test_check_at_least_accepts_minimum(self):
        """Test the minimum itself is accepted."""
        check_at_least(1, 1, "frames")

    def test_check_at_least_message(self):
        """Test values below the minimum name the argument."""
        with pytest.raises(ValueError, match="x must be at least 0"):
            check_at_least(-1, 0, "x")

    def test_check_not_empty(self):
        """Test empty collections are rejected."""
        check_not_empty([1], "frames")
        with pytest.raises(ValueError, match="frames must not be empty"):
            check_not_empty([], "frames")
