from doomfire.core import FieldConfigError, FireField, Rasterizer
from doomfire.game import FireGame
from doomfire.palettes import DOOM_PALETTE

__all__ = ["DOOM_PALETTE", "FieldConfigError", "FireField", "FireGame", "Rasterizer"]
