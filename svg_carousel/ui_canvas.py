import contextlib
import os

from PySide6.QtCore import Qt
from PySide6.QtSvgWidgets import QSvgWidget
from PySide6.QtWidgets import QLabel, QStackedWidget

from .logger import get_logger

_logger = get_logger("ui_canvas")


class SvgCanvas(QStackedWidget):
    """Shows one SVG file, or a text placeholder when there is nothing to draw."""

    def __init__(self, parent=None):
        super().__init__(parent)
        self._svg = QSvgWidget(self)
        with contextlib.suppress(AttributeError):
            # Qt >= 6.7
            self._svg.renderer().setAspectRatioMode(Qt.AspectRatioMode.KeepAspectRatio)
        self._placeholder = QLabel(self)
        self._placeholder.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.addWidget(self._svg)
        self.addWidget(self._placeholder)
        self._path: str | None = None

    @property
    def path(self) -> str | None:
        return self._path

    def is_showing_placeholder(self) -> bool:
        return self.currentWidget() is self._placeholder

    def placeholder_text(self) -> str:
        return self._placeholder.text()

    def show_placeholder(self, text: str) -> None:
        self._path = None
        self._placeholder.setText(text)
        self.setCurrentWidget(self._placeholder)

    def show_svg(self, path: str) -> None:
        self._path = path
        self._svg.load(path)
        if not self._svg.renderer().isValid():
            # Directories and non-SVG entries are items too; they just can't be drawn.
            _logger.debug("not renderable as SVG: %s", path)
            self._placeholder.setText(f"Cannot display {os.path.basename(path)}")
            self.setCurrentWidget(self._placeholder)
            return
        self.setCurrentWidget(self._svg)
