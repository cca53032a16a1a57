"""Tests for the settings and promotion dialogs."""

from __future__ import annotations

from kingside.core.enums import Color, PieceType
from kingside.ui.dialogs.promotion_dialog import PromotionDialog
from kingside.ui.dialogs.settings_dialog import SettingsDialog
from kingside.ui.i18n import set_language
from kingside.ui.settings import AppSettings


def test_settings_accept_applies_changes() -> None:
    settings = AppSettings()
    dialog = SettingsDialog(settings)

    dialog._lang_combo.setCurrentText("Indonesian")
    dialog._theme_combo.setCurrentText("Blue")
    dialog._coords_check.setChecked(False)
    dialog._legal_check.setChecked(False)

    dialog._on_accept()

    assert settings.language == "Indonesian"
    assert settings.board_theme == "Blue"
    assert settings.show_coordinates is False
    assert settings.show_legal_moves is False


def test_settings_dialog_reflects_current_values() -> None:
    settings = AppSettings(board_theme="Green", show_legal_moves=False)
    dialog = SettingsDialog(settings)
    assert dialog._theme_combo.currentText() == "Green"
    assert not dialog._legal_check.isChecked()
    assert dialog._coords_check.isChecked()


def test_settings_reject_leaves_settings_untouched() -> None:
    settings = AppSettings()
    dialog = SettingsDialog(settings)
    dialog._theme_combo.setCurrentText("Blue")
    dialog.reject()
    assert settings.board_theme == "Classic"


def test_settings_dialog_translated() -> None:
    set_language("Indonesian")
    dialog = SettingsDialog(AppSettings())
    assert dialog.windowTitle() == "Pengaturan"


def test_promotion_dialog_buttons_and_choice() -> None:
    dialog = PromotionDialog(Color.BLACK)
    assert list(dialog._buttons) == [
        PieceType.QUEEN,
        PieceType.ROOK,
        PieceType.BISHOP,
        PieceType.KNIGHT,
    ]
    assert dialog._buttons[PieceType.KNIGHT].text() == "♞"
    assert dialog.selected == PieceType.QUEEN

    dialog._buttons[PieceType.ROOK].click()
    assert dialog.selected == PieceType.ROOK
    assert dialog.result() == PromotionDialog.DialogCode.Accepted
