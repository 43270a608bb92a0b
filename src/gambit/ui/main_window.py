"""MainWindow: top-level window wiring the controller to the board and dialogs."""

from __future__ import annotations

import logging

from PyQt6.QtGui import QAction
from PyQt6.QtWidgets import QLabel, QMainWindow, QMessageBox, QStatusBar

from gambit.core.enums import Side
from gambit.game.controller import GameController
from gambit.game.interfaces import GameOver, GamePhase, PromotionRequest
from gambit.ui.board.board_view import BoardView
from gambit.ui.dialogs.promotion_dialog import PromotionDialog
from gambit.ui.dialogs.settings_dialog import AppSettings, SettingsDialog
from gambit.ui.styles.theme import theme_by_name

_LOGGER = logging.getLogger(__name__)

NOTICE_TIMEOUT_MS = 2500


class MainWindow(QMainWindow):
    """Main application window for Gambit."""

    def __init__(self, settings: AppSettings | None = None) -> None:
        super().__init__()
        self.setWindowTitle("Gambit")
        self.setMinimumSize(520, 560)
        self.resize(720, 760)

        self._settings = settings or AppSettings()
        self._controller: GameController | None = None
        self._promotion_dialogs: list[PromotionDialog] = []
        self._game_over_box: QMessageBox | None = None

        self._setup_ui()
        self._setup_menu()
        self._apply_board_settings()
        self.start_new_game()

    # ── UI setup ─────────────────────────────────────────────────────────

    def _setup_ui(self) -> None:
        self._board_view = BoardView()
        self.setCentralWidget(self._board_view)
        self._board_view.move_processed.connect(self._on_move_processed)

        self._status = QStatusBar()
        self.setStatusBar(self._status)
        self._turn_label = QLabel()
        self._status.addPermanentWidget(self._turn_label)

    def _setup_menu(self) -> None:
        menu_bar = self.menuBar()
        assert menu_bar is not None

        game_menu = menu_bar.addMenu("&Game")
        assert game_menu is not None
        self._act_new = QAction("&New Game", self)
        self._act_new.setShortcut("Ctrl+N")
        self._act_new.triggered.connect(self.start_new_game)
        game_menu.addAction(self._act_new)

        self._act_settings = QAction("&Settings…", self)
        self._act_settings.triggered.connect(self._on_settings)
        game_menu.addAction(self._act_settings)

        game_menu.addSeparator()
        act_quit = QAction("&Quit", self)
        act_quit.setShortcut("Ctrl+Q")
        act_quit.triggered.connect(self.close)
        game_menu.addAction(act_quit)

    # ── Game lifecycle ───────────────────────────────────────────────────

    @property
    def controller(self) -> GameController:
        assert self._controller is not None
        return self._controller

    def start_new_game(self) -> None:
        """Throw the current game away and build a fresh controller."""
        dialogs, self._promotion_dialogs = self._promotion_dialogs, []
        for dialog in dialogs:
            dialog.close()
        self._game_over_box = None

        ctrl = GameController(
            self._settings.game_setup(), self._settings.rule_options()
        )
        ctrl.events.on_notice.append(self._on_notice)
        ctrl.events.on_promotion_request.append(self._on_promotion_request)
        ctrl.events.on_game_over.append(self._on_game_over)
        ctrl.register_promotion_continuation(self._board_view.board_scene.refresh)
        self._controller = ctrl

        self._board_view.board_scene.set_controller(ctrl)
        self._status.clearMessage()
        self._update_status()
        _LOGGER.debug("New game started")

    # ── Controller callbacks ─────────────────────────────────────────────

    def _on_notice(self, message: str) -> None:
        self._status.showMessage(message, NOTICE_TIMEOUT_MS)

    def _on_promotion_request(self, request: PromotionRequest) -> None:
        ctrl = self.controller
        dialog = PromotionDialog.prompt(
            request,
            ctrl.setup.color_of(request.side),
            lambda glyph: self._on_promotion_choice(ctrl, request, glyph),
            self,
        )
        self._promotion_dialogs.append(dialog)

    def _on_promotion_choice(
        self, ctrl: GameController, request: PromotionRequest, glyph: str | None
    ) -> None:
        self._promotion_dialogs = [
            d for d in self._promotion_dialogs if d.request != request
        ]
        if ctrl is not self._controller:
            return
        outcome = ctrl.resolve_promotion(request, glyph)
        _LOGGER.debug("Promotion resolved: %s", outcome.name)
        self._board_view.board_scene.refresh()
        self._update_status()

    def _on_game_over(self, game_over: GameOver) -> None:
        winner = "Light" if game_over.winner == Side.LIGHT else "Dark"
        box = QMessageBox(self)
        box.setWindowTitle("Game Over")
        box.setText(f"The king has fallen. {winner} wins.")
        box.addButton("Restart", QMessageBox.ButtonRole.AcceptRole)
        box.finished.connect(lambda _result: self.start_new_game())
        self._game_over_box = box
        self._update_status()
        box.open()

    # ── UI callbacks ─────────────────────────────────────────────────────

    def _on_move_processed(self, _from_sq: int, _to_sq: int, _handled: bool) -> None:
        self._update_status()

    def _on_settings(self) -> None:
        dlg = SettingsDialog(self._settings, self)
        if dlg.exec():
            self._apply_settings()

    def _apply_settings(self) -> None:
        self._apply_board_settings()
        # Piece set and rules are fixed per game.
        self.start_new_game()

    def _apply_board_settings(self) -> None:
        scene = self._board_view.board_scene
        scene.set_theme(theme_by_name(self._settings.board_theme))
        scene.set_show_coordinates(self._settings.show_coordinates)

    def _update_status(self) -> None:
        ctrl = self._controller
        if ctrl is None:
            return
        if ctrl.phase == GamePhase.GAME_OVER:
            self._turn_label.setText("Game over")
            return
        side = "Light" if ctrl.side_to_move == Side.LIGHT else "Dark"
        text = f"{side} to move"
        if ctrl.phase == GamePhase.PROMOTION_PENDING:
            text += " · promotion pending"
        self._turn_label.setText(text)
