import logging

import numpy as np
import taichi as ti

from doomfire.constants import MAX_INTENSITY, PALETTE_SIZE
from doomfire.palettes import DOOM_PALETTE

ti.init(arch=ti.cpu)

logger = logging.getLogger("doomfire")


class FieldConfigError(ValueError):
    """Raised when a fire field is asked for a non-positive size."""


# Fire spread


@ti.kernel
def spread_fire(
    pixels: ti.types.ndarray(dtype=ti.i32, ndim=2),
    offsets: ti.types.ndarray(dtype=ti.i32, ndim=2),
    decays: ti.types.ndarray(dtype=ti.i32, ndim=2),
):
    height = pixels.shape[0]
    width = pixels.shape[1]
    # Columns outer, rows inner, top to bottom. A later cell may read one
    # written earlier in the same pass.
    ti.loop_config(serialize=True)
    for x in range(width):
        for y in range(1, height):
            src = y * width + x
            offset = offsets[y - 1, x]
            dst = src - width + offset
            dst_x = x + offset
            # Reject targets off the grid and offsets that wrap to another row
            if 0 <= dst < width * height and 0 <= dst_x < width:
                pixels[y - 1, dst_x] = ti.max(0, pixels[y, x] - decays[y - 1, x])


@ti.kernel
def update_image(
    pixels: ti.types.ndarray(dtype=ti.i32, ndim=2),
    colors: ti.types.ndarray(dtype=ti.u8, ndim=2),
    image: ti.types.ndarray(dtype=ti.u8, ndim=3),
):
    for y, x in ti.ndrange(pixels.shape[0], pixels.shape[1]):
        intensity = ti.min(MAX_INTENSITY, ti.max(0, pixels[y, x]))
        for c in ti.static(range(4)):
            image[y, x, c] = colors[intensity, c]


class FireField:
    """A grid of heat levels fed by a permanently hot bottom row.

    Cells are stored row-major in an ``(height, width)`` int32 array, row 0
    at the top. Each :meth:`step` moves heat one row up with a random
    sideways jitter of -1, 0 or +1 columns and a random loss of 0 or 1.
    """

    def __init__(self, width, height, rng=None):
        self.rng = rng if rng is not None else np.random.default_rng()
        self._pixels = None
        self.reset(width, height)

    @property
    def width(self):
        return self._pixels.shape[1]

    @property
    def height(self):
        return self._pixels.shape[0]

    @property
    def pixels(self):
        return self._pixels

    def reset(self, width, height):
        """Reallocate the grid and reseed the bottom row at full heat."""
        if width <= 0 or height <= 0:
            raise FieldConfigError(f"fire field must be at least 1x1, got {width}x{height}")
        pixels = np.zeros((height, width), dtype=np.int32)
        pixels[height - 1, :] = MAX_INTENSITY
        # Swap in one assignment so the old grid stays whole until replaced
        self._pixels = pixels
        logger.debug(f"Fire field reset to {width}x{height}")

    def clear(self):
        self.reset(self.width, self.height)

    def step(self):
        """Advance the fire by one frame."""
        if self.height < 2:
            return
        shape = (self.height - 1, self.width)
        offsets = self.rng.integers(-1, 2, size=shape, dtype=np.int32)
        decays = self.rng.integers(0, 2, size=shape, dtype=np.int32)
        self.spread(offsets, decays)

    def spread(self, offsets, decays):
        """Propagate heat using pre-drawn samples.

        ``offsets[y - 1, x]`` and ``decays[y - 1, x]`` belong to the source
        cell at column ``x``, row ``y``.
        """
        shape = (self.height - 1, self.width)
        if offsets.shape != shape or decays.shape != shape:
            raise ValueError(
                f"expected samples of shape {shape}, got {offsets.shape} and {decays.shape}"
            )
        if self.height < 2:
            return
        spread_fire(
            self._pixels,
            np.ascontiguousarray(offsets, dtype=np.int32),
            np.ascontiguousarray(decays, dtype=np.int32),
        )


class Rasterizer:
    """Maps heat levels to RGBA bytes through a fixed palette."""

    def __init__(self, palette=DOOM_PALETTE):
        if len(palette) != PALETTE_SIZE:
            raise ValueError(f"palette needs {PALETTE_SIZE} entries, got {len(palette)}")
        self.palette = tuple(tuple(color) for color in palette)
        self._colors = np.array(self.palette, dtype=np.uint8)

    def rasterize(self, field: FireField) -> np.ndarray:
        """Return a flat row-major RGBA buffer of ``width * height * 4`` bytes."""
        image = np.empty((field.height, field.width, 4), dtype=np.uint8)
        update_image(field.pixels, self._colors, image)
        return image.reshape(-1)
