"""SettingsDialog — language and board display preferences."""

from __future__ import annotations

from PyQt6.QtWidgets import (
    QCheckBox,
    QComboBox,
    QDialog,
    QDialogButtonBox,
    QFormLayout,
    QWidget,
)

from kingside.ui.i18n import LANGUAGES, t
from kingside.ui.settings import AppSettings
from kingside.ui.styles.theme import THEME_NAMES


def _combo(items: list[str], current: str) -> QComboBox:
    combo = QComboBox()
    combo.addItems(items)
    combo.setCurrentIndex(max(0, combo.findText(current)))
    return combo


class SettingsDialog(QDialog):
    """Edits *settings* in place when the user presses OK.

    Cancelling leaves the object untouched; applying the new values to the
    window is up to the caller.
    """

    def __init__(self, settings: AppSettings, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setModal(True)
        self._settings = settings
        s = t()
        self.setWindowTitle(s.settings_title)

        self._lang_combo = _combo(LANGUAGES, settings.language)
        self._theme_combo = _combo(THEME_NAMES, settings.board_theme)
        self._coords_check = QCheckBox(s.settings_show_coords)
        self._coords_check.setChecked(settings.show_coordinates)
        self._legal_check = QCheckBox(s.settings_show_legal)
        self._legal_check.setChecked(settings.show_legal_moves)

        form = QFormLayout(self)
        form.addRow(s.settings_language, self._lang_combo)
        form.addRow(s.settings_board_theme, self._theme_combo)
        form.addRow(self._coords_check)
        form.addRow(self._legal_check)

        buttons = QDialogButtonBox(
            QDialogButtonBox.StandardButton.Ok | QDialogButtonBox.StandardButton.Cancel
        )
        buttons.accepted.connect(self._on_accept)
        buttons.rejected.connect(self.reject)
        form.addRow(buttons)

    def apply(self, settings: AppSettings) -> None:
        """Copy the current widget values into *settings*."""
        settings.language = self._lang_combo.currentText()
        settings.board_theme = self._theme_combo.currentText()
        settings.show_coordinates = self._coords_check.isChecked()
        settings.show_legal_moves = self._legal_check.isChecked()

    def _on_accept(self) -> None:
        self.apply(self._settings)
        self.accept()
