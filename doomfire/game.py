import logging

from doomfire.core import FireField, Rasterizer
from doomfire.palettes import DOOM_PALETTE

logger = logging.getLogger("doomfire")


class FireGame:
    """The per-frame contract between the fire and whatever drives it.

    The driver calls :meth:`update` then :meth:`draw` once per frame and
    :meth:`layout` whenever its drawing surface changes size.
    """

    def __init__(self, width, height, rng=None, palette=DOOM_PALETTE):
        self.field = FireField(width, height, rng=rng)
        self.rasterizer = Rasterizer(palette)
        self.frame = 0

    @property
    def size(self):
        return self.field.width, self.field.height

    def update(self):
        self.field.step()
        self.frame += 1

    def draw(self):
        return self.rasterizer.rasterize(self.field)

    def layout(self, requested_width, requested_height):
        if (requested_width, requested_height) != self.size:
            logger.info(
                f"Resizing fire from {self.field.width}x{self.field.height} "
                f"to {requested_width}x{requested_height}"
            )
            self.field.reset(requested_width, requested_height)
        return self.size

    def restart(self):
        logger.info("Restarting fire")
        self.field.clear()
