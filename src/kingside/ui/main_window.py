"""MainWindow — board, turn indicator and status message."""

from __future__ import annotations

import logging
from collections.abc import Callable

from PyQt6.QtGui import QAction, QKeySequence
from PyQt6.QtWidgets import QLabel, QMainWindow, QMenu, QVBoxLayout, QWidget

from kingside.core.enums import Color, GameStatus
from kingside.core.move import Move
from kingside.game.controller import GameController
from kingside.ui.board.board_view import BoardView
from kingside.ui.dialogs.settings_dialog import SettingsDialog
from kingside.ui.i18n import set_language, status_message, t, turn_text
from kingside.ui.settings import AppSettings
from kingside.ui.styles.theme import BoardTheme

_LOGGER = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """Top-level window.

    Owns the :class:`GameController`. The board only proposes moves; every
    move goes through the controller and the board is redrawn from its
    position afterwards.
    """

    def __init__(self, controller: GameController | None = None) -> None:
        super().__init__()
        self.setMinimumSize(480, 560)
        self.resize(720, 800)

        self._controller = controller if controller is not None else GameController()
        self._settings = AppSettings()

        self._build_central()
        self._build_menus()
        self._board_view.move_made.connect(self._on_move_made)
        self._controller.events.on_status.append(self._on_status)

        self.retranslate_ui()
        self._sync_board()

    # ── Layout ───────────────────────────────────────────────────────────

    def _build_central(self) -> None:
        self._turn_label = QLabel()
        self._turn_label.setObjectName("turnIndicator")
        self._board_view = BoardView()
        self._message_label = QLabel()
        self._message_label.setObjectName("message")

        body = QWidget()
        column = QVBoxLayout(body)
        column.setContentsMargins(8, 8, 8, 8)
        column.addWidget(self._turn_label)
        column.addWidget(self._board_view, stretch=1)
        column.addWidget(self._message_label)
        self.setCentralWidget(body)

    def _build_menus(self) -> None:
        bar = self.menuBar()
        assert bar is not None
        game_menu = bar.addMenu("")
        settings_menu = bar.addMenu("")
        assert game_menu is not None and settings_menu is not None
        self._menu_game = game_menu
        self._menu_settings = settings_menu

        self._act_new_game = self._add_action(game_menu, self.new_game, "Ctrl+N")
        self._act_flip = self._add_action(game_menu, self._on_flip, "Ctrl+F")
        game_menu.addSeparator()
        self._act_quit = self._add_action(game_menu, self.close, "Ctrl+Q")
        self._act_settings = self._add_action(settings_menu, self._on_settings)

    def _add_action(
        self, menu: QMenu, slot: Callable[[], object], shortcut: str | None = None
    ) -> QAction:
        action = QAction(self)
        if shortcut is not None:
            action.setShortcut(QKeySequence(shortcut))
        action.triggered.connect(lambda _checked=False: slot())
        menu.addAction(action)
        return action

    def retranslate_ui(self) -> None:
        """Re-read every visible string from the active locale."""
        s = t()
        self.setWindowTitle(s.window_title)
        self._menu_game.setTitle(s.menu_game)
        self._menu_settings.setTitle(s.menu_settings)
        for action, text in (
            (self._act_new_game, s.menu_new_game),
            (self._act_flip, s.menu_flip_board),
            (self._act_quit, s.menu_quit),
            (self._act_settings, s.menu_settings_action),
        ):
            action.setText(text)
        self._update_labels(self._controller.status, self._controller.side_to_move)

    # ── Game flow ────────────────────────────────────────────────────────

    def new_game(self) -> None:
        self._controller.new_game()
        self._sync_board()

    def _on_move_made(self, move: Move) -> None:
        if not self._controller.submit_move(move):
            _LOGGER.warning("Board produced a move the controller refused: %s", move)
        self._sync_board()

    def _on_status(self, status: GameStatus, side_to_move: Color) -> None:
        self._update_labels(status, side_to_move)

    def _on_flip(self) -> None:
        scene = self._board_view.board_scene
        scene.set_flipped(not scene.is_flipped())
        self._sync_board()

    # ── Settings ─────────────────────────────────────────────────────────

    @property
    def settings(self) -> AppSettings:
        return self._settings

    def _on_settings(self) -> None:
        if SettingsDialog(self._settings, self).exec():
            self.apply_settings()

    def apply_settings(self) -> None:
        """Push the current :class:`AppSettings` into the UI."""
        # Switch locale before anything re-reads its strings.
        set_language(self._settings.language)
        self.retranslate_ui()

        scene = self._board_view.board_scene
        scene.set_theme(BoardTheme.named(self._settings.board_theme))
        scene.set_show_coordinates(self._settings.show_coordinates)
        scene.set_show_legal_moves(self._settings.show_legal_moves)
        self._sync_board()

    # ── Board and labels ─────────────────────────────────────────────────

    def _sync_board(self) -> None:
        ctrl = self._controller
        scene = self._board_view.board_scene
        scene.set_position(ctrl.position, ctrl.side_to_move)
        scene.set_interactive(not ctrl.is_game_over)
        scene.highlight_last_move(ctrl.last_move)
        scene.highlight_check()
        self._update_labels(ctrl.status, ctrl.side_to_move)

    def _update_labels(self, status: GameStatus, side_to_move: Color) -> None:
        self._turn_label.setText(turn_text(side_to_move))
        self._message_label.setText(status_message(status, side_to_move))
