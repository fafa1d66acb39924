"""Unit tests for the per-frame game contract."""

import numpy as np
import pytest

from doomfire.constants import MAX_INTENSITY
from doomfire.core import FieldConfigError
from doomfire.game import FireGame


class TestFireGame:
    """Test cases for FireGame."""

    def test_update_then_draw(self):
        """Test that a frame advances the counter and renders a full buffer."""
        game = FireGame(width=10, height=8, rng=np.random.default_rng(0))
        game.update()
        buffer = game.draw()
        assert buffer.shape == (10 * 8 * 4,)
        assert game.frame == 1

    def test_layout_same_size_keeps_field(self):
        """Test that laying out at the current size keeps the grid."""
        game = FireGame(width=10, height=8, rng=np.random.default_rng(0))
        for _ in range(3):
            game.update()
        pixels = game.field.pixels
        assert game.layout(10, 8) == (10, 8)
        assert game.field.pixels is pixels

    def test_layout_new_size_resets(self):
        """Test that laying out at a new size reseeds the grid."""
        game = FireGame(width=10, height=8, rng=np.random.default_rng(0))
        game.update()
        assert game.layout(12, 5) == (12, 5)
        assert game.field.pixels.shape == (5, 12)
        assert game.field.pixels[:4].sum() == 0
        assert game.draw().shape == (12 * 5 * 4,)

    def test_layout_rejects_empty_surface(self):
        """Test that an empty surface is refused and the size kept."""
        game = FireGame(width=4, height=4)
        with pytest.raises(FieldConfigError):
            game.layout(0, 4)
        assert game.size == (4, 4)

    def test_restart(self):
        """Test that restart reseeds the fire."""
        game = FireGame(width=6, height=6, rng=np.random.default_rng(9))
        for _ in range(10):
            game.update()
        game.restart()
        assert game.field.pixels[:5].sum() == 0
        assert game.field.pixels[5].tolist() == [MAX_INTENSITY] * 6
