# Constants
import os


def env_dimension(name, environ=os.environ):
    """Read a positive grid dimension from the environment, or None if unset."""
    raw = environ.get(name)
    if not raw:
        return None
    value = int(raw)
    if value <= 0:
        raise ValueError(f"{name} must be a positive integer, got {value}")
    return value


# Grid size; unset means "derive from the primary screen"
FIRE_WIDTH = env_dimension("FIRE_WIDTH")
FIRE_HEIGHT = env_dimension("FIRE_HEIGHT")

MAX_INTENSITY = 36
PALETTE_SIZE = MAX_INTENSITY + 1

# Window
WINDOW_TITLE = "Doom Fire Animation"
PIXEL_SCALE = 2  # screen pixels per fire cell
FRAME_INTERVAL_MS = 16  # ~60 FPS
FPS_WINDOW_S = 1.0

# Logging
LOG_LEVEL = os.environ.get("FIRE_LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "%(asctime)s %(levelname)s [%(module)s] %(message)s"
