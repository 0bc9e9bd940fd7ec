import sys
from pathlib import Path

from PySide6.QtCore import QStandardPaths, Qt
from PySide6.QtWidgets import QApplication, QHBoxLayout, QLabel, QMainWindow, QPushButton, QVBoxLayout, QWidget

from svg_carousel import constants
from svg_carousel.carousel import CarouselState, Command, Outcome
from svg_carousel.dir_loader import load
from svg_carousel.keymap import command_for_key
from svg_carousel.logger import get_logger, setup_logger
from svg_carousel.path_utils import abs_path_str
from svg_carousel.settings_manager import SettingsManager
from svg_carousel.status_text import build_help_text, build_status_text
from svg_carousel.ui_canvas import SvgCanvas

# --- CLI logging options -----------------------------------------------------
# To prevent Qt from seeing unknown options, we preemptively parse our own
# options, reflect them in environment variables (SVG_CAROUSEL_LOG_LEVEL,
# SVG_CAROUSEL_LOG_CATS), and remove them from sys.argv.


def _apply_cli_logging_options(argv: list[str]) -> list[str]:
    import argparse
    import os

    parser = argparse.ArgumentParser(description="SVG Carousel", add_help=False)
    parser.add_argument("--log-level", help="Set log level")
    parser.add_argument("--log-cats", help="Set log categories")
    args, remaining = parser.parse_known_args(argv[1:])
    if args.log_level:
        os.environ["SVG_CAROUSEL_LOG_LEVEL"] = args.log_level
    if args.log_cats:
        os.environ["SVG_CAROUSEL_LOG_CATS"] = args.log_cats
    return [argv[0], *remaining]


logger = get_logger("main")
_BASE_DIR = Path(getattr(sys, "_MEIPASS", Path(__file__).resolve().parent))

# Share of the window height given to each row (canvas / buttons / status / help)
_CANVAS_STRETCH = 17
_BUTTON_STRETCH = 2
_TEXT_STRETCH = 1


def default_settings_path() -> str:
    app_cfg = QStandardPaths.writableLocation(QStandardPaths.StandardLocation.AppConfigLocation)
    if app_cfg:
        return (Path(app_cfg) / "svg_carousel" / "settings.json").as_posix()
    return (_BASE_DIR / "settings.json").as_posix()


class CarouselWindow(QMainWindow):
    def __init__(self, state: CarouselState, title: str = constants.TITLE, settings: SettingsManager | None = None):
        super().__init__()
        self.state = state
        self._settings_manager = settings
        self.setWindowTitle(title)

        if settings is not None:
            self.resize(*settings.window_size)
        else:
            self.resize(constants.WINDOW_WIDTH, constants.WINDOW_HEIGHT)

        self.canvas = SvgCanvas(self)

        self.left_button = QPushButton("Left", self)
        self.left_button.setFocusPolicy(Qt.FocusPolicy.NoFocus)
        self.left_button.clicked.connect(lambda: self.handle_command(Command.CHANGE_LEFT))
        self.right_button = QPushButton("Right", self)
        self.right_button.setFocusPolicy(Qt.FocusPolicy.NoFocus)
        self.right_button.clicked.connect(lambda: self.handle_command(Command.CHANGE_RIGHT))

        buttons = QHBoxLayout()
        buttons.addWidget(self.left_button, 1)
        buttons.addWidget(self.right_button, 1)

        self.status_label = QLabel(self)
        self.status_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.help_label = QLabel(build_help_text(), self)
        self.help_label.setAlignment(Qt.AlignmentFlag.AlignCenter)

        central = QWidget(self)
        layout = QVBoxLayout(central)
        layout.setContentsMargins(5, 5, 5, 5)
        layout.addWidget(self.canvas, _CANVAS_STRETCH)
        layout.addLayout(buttons, _BUTTON_STRETCH)
        layout.addWidget(self.status_label, _TEXT_STRETCH)
        layout.addWidget(self.help_label, _TEXT_STRETCH)
        self.setCentralWidget(central)
        self.setFocusPolicy(Qt.FocusPolicy.StrongFocus)

        self.display_current()

    def display_current(self) -> None:
        """Redraw from the carousel state."""
        item = self.state.current_item
        has_items = item is not None
        self.left_button.setEnabled(has_items)
        self.right_button.setEnabled(has_items)
        self.status_label.setText(build_status_text(self.state))
        if item is None:
            self.canvas.show_placeholder(constants.EMPTY_PLACEHOLDER)
            return
        logger.debug("display: idx=%s path=%s", self.state.cursor, item)
        self.canvas.show_svg(item)

    def handle_command(self, command: Command | str) -> Outcome:
        outcome = self.state.dispatch(command)
        if outcome is Outcome.TERMINATE:
            logger.debug("close requested")
            self.close()
        elif outcome is Outcome.STATE_CHANGED:
            self.display_current()
        return outcome

    def keyPressEvent(self, event):
        command = command_for_key(event.key(), event.modifiers())
        if command is None:
            super().keyPressEvent(event)
            return
        self.handle_command(command)
        event.accept()

    def closeEvent(self, event):
        if self._settings_manager is not None:
            # Only the window size is remembered; the cursor always starts at 0.
            size = self.size()
            self._settings_manager.update(window_width=size.width(), window_height=size.height())
        event.accept()


def build_window(svg_dir: str | None = None, settings: SettingsManager | None = None) -> CarouselWindow:
    """Scan the directory once and wrap the result in a window."""
    if settings is None:
        settings = SettingsManager(default_settings_path())
    directory = abs_path_str(svg_dir or settings.svg_dir)
    state = CarouselState(load(directory))
    logger.info("loaded %d item(s) from %s", state.count, directory)
    return CarouselWindow(state, title=settings.title, settings=settings)


def run(argv: list[str] | None = None) -> int:
    """Application entrypoint (packaging-friendly)."""
    import argparse

    if argv is None:
        argv = sys.argv
    argv = _apply_cli_logging_options(list(argv))
    # Modules grabbed their loggers at import; re-read the env the options just set.
    setup_logger()

    parser = argparse.ArgumentParser(add_help=False)
    parser.add_argument("svg_dir", nargs="?", help="Directory of SVG files to cycle through")
    args, _ = parser.parse_known_args(argv[1:])

    app = QApplication.instance() or QApplication(argv)
    window = build_window(args.svg_dir)
    window.show()
    window.activateWindow()
    return app.exec()


if __name__ == "__main__":
    sys.exit(run())
