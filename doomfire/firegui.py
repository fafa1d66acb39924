import logging
import time

from PySide6.QtCore import Qt, QTimer
from PySide6.QtGui import QImage, QKeyEvent, QPixmap, QResizeEvent
from PySide6.QtWidgets import QApplication, QLabel, QMainWindow

from doomfire.constants import (FIRE_HEIGHT, FIRE_WIDTH, FPS_WINDOW_S,
                                FRAME_INTERVAL_MS, PIXEL_SCALE, WINDOW_TITLE)
from doomfire.game import FireGame

logger = logging.getLogger("doomfire")


def initial_fire_size(screen):
    """Grid size from FIRE_WIDTH/FIRE_HEIGHT, else from the screen geometry."""
    geometry = screen.availableGeometry()
    width = FIRE_WIDTH if FIRE_WIDTH is not None else max(1, geometry.width() // PIXEL_SCALE)
    height = FIRE_HEIGHT if FIRE_HEIGHT is not None else max(1, geometry.height() // PIXEL_SCALE)
    return width, height


class FireWindow(QMainWindow):
    def __init__(self, fire_width, fire_height):
        super().__init__()
        self.setWindowTitle(WINDOW_TITLE)
        # Cold cells are transparent, so the fire floats over the desktop
        self.setWindowFlags(Qt.WindowType.FramelessWindowHint)
        self.setAttribute(Qt.WidgetAttribute.WA_TranslucentBackground)
        self.label = QLabel(self)
        self.label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.setCentralWidget(self.label)

        self.game = FireGame(fire_width, fire_height)
        self.resize(fire_width * PIXEL_SCALE, fire_height * PIXEL_SCALE)

        # --- FPS Counter ---
        self.last_fps_time = time.time()
        self.frame_count = 0
        self.fps = 0

        self.timer = QTimer(self)
        self.timer.timeout.connect(self.update_frame)
        self.timer.start(FRAME_INTERVAL_MS)

    def update_frame(self):
        self.game.update()
        buffer = self.game.draw()
        w, h = self.game.size
        bytes_per_line = 4 * w
        qimg = QImage(buffer.data, w, h, bytes_per_line, QImage.Format.Format_RGBA8888)
        pixmap = QPixmap.fromImage(qimg).scaled(
            w * PIXEL_SCALE,
            h * PIXEL_SCALE,
            Qt.AspectRatioMode.IgnoreAspectRatio,
            Qt.TransformationMode.FastTransformation,
        )
        self.label.setPixmap(pixmap)

        # --- FPS Counter update ---
        self.frame_count += 1
        now = time.time()
        elapsed_fps = now - self.last_fps_time
        if elapsed_fps >= FPS_WINDOW_S:
            self.fps = int(self.frame_count / elapsed_fps)
            logger.debug(f"FPS: {self.fps} (frame {self.game.frame})")
            self.last_fps_time = now
            self.frame_count = 0

    def resizeEvent(self, event: QResizeEvent):
        super().resizeEvent(event)
        size = event.size()
        self.game.layout(
            max(1, size.width() // PIXEL_SCALE),
            max(1, size.height() // PIXEL_SCALE),
        )

    def keyPressEvent(self, event: QKeyEvent):
        key = event.key()
        if key == Qt.Key.Key_R:
            self.game.restart()
        elif key == Qt.Key.Key_Escape:
            self.close()
        else:
            super().keyPressEvent(event)


def main(argv):
    app = QApplication(argv)
    width, height = initial_fire_size(app.primaryScreen())
    logger.info(f"Starting fire at {width}x{height} cells, scale {PIXEL_SCALE}")
    win = FireWindow(width, height)
    win.show()
    status = app.exec()
    logger.info("Window closed")
    return status
