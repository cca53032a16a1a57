"""Qt application bootstrap helpers."""

from __future__ import annotations

import logging
import os
import sys
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from PyQt6.QtWidgets import QApplication

_LOGGER = logging.getLogger(__name__)
_LOG_LEVEL_ENV = "KINGSIDE_LOG_LEVEL"


def configure_logging() -> None:
    """Set up root logging from ``KINGSIDE_LOG_LEVEL`` (default ``WARNING``)."""
    level_name = os.environ.get(_LOG_LEVEL_ENV, "WARNING").upper()
    level = logging.getLevelName(level_name)
    unknown = not isinstance(level, int)
    logging.basicConfig(
        level=logging.WARNING if unknown else level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    if unknown:
        _LOGGER.warning("Unknown log level %r, using WARNING", level_name)


def _configure_application(app: QApplication) -> None:
    """Apply app-wide settings and theme."""
    from kingside.ui.styles.theme import APP_STYLE

    app.setApplicationName("Kingside")
    app.setStyle("Fusion")
    app.setStyleSheet(APP_STYLE)


def run_application(argv: list[str] | None = None) -> int:
    """Create and run the main Qt application."""
    from PyQt6.QtWidgets import QApplication

    from kingside.ui.main_window import MainWindow

    configure_logging()
    app = QApplication(sys.argv if argv is None else argv)
    _configure_application(app)

    window = MainWindow()
    window.show()

    return app.exec()
