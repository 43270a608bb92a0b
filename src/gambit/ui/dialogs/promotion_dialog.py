"""Promotion dialog that lets the user pick the piece a pawn becomes."""

from __future__ import annotations

from collections.abc import Callable

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import (
    QDialog,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from gambit.game.interfaces import PromotionRequest


class PromotionDialog(QDialog):
    """Window-modal picker that reports its answer through a signal.

    Opened with :meth:`open`, so the caller's event handler returns at once
    and the game carries on while the choice is outstanding.

    Signals:
        choice_made(object): the chosen glyph, or ``None`` when cancelled.
    """

    choice_made = pyqtSignal(object)

    def __init__(
        self,
        request: PromotionRequest,
        color: str,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.setWindowTitle("Promote Your Pawn")
        self.setFixedSize(340, 130)
        self.setWindowFlags(
            self.windowFlags() & ~Qt.WindowType.WindowContextHelpButtonHint
        )

        self._request = request
        self._selected: str | None = None
        self._buttons: list[QPushButton] = []

        layout = QVBoxLayout(self)
        label = QLabel("Choose a piece:")
        label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(label)

        btn_row = QHBoxLayout()
        glyph_font = QFont()
        glyph_font.setPixelSize(40)
        for glyph in request.candidates:
            btn = QPushButton(glyph)
            btn.setFont(glyph_font)
            btn.setFixedSize(68, 68)
            btn.setStyleSheet(f"color: {color};")
            btn.setToolTip(request.kind_of(glyph).name.capitalize())
            btn.clicked.connect(lambda checked, g=glyph: self._choose(g))
            btn_row.addWidget(btn)
            self._buttons.append(btn)
        layout.addLayout(btn_row)

        self.finished.connect(self._on_finished)

    @property
    def request(self) -> PromotionRequest:
        return self._request

    @property
    def selected(self) -> str | None:
        return self._selected

    def _choose(self, glyph: str) -> None:
        self._selected = glyph
        self.accept()

    def _on_finished(self, result: int) -> None:
        if result != QDialog.DialogCode.Accepted:
            self._selected = None
        self.choice_made.emit(self._selected)

    @classmethod
    def prompt(
        cls,
        request: PromotionRequest,
        color: str,
        on_choice: Callable[[str | None], None],
        parent: QWidget | None = None,
    ) -> PromotionDialog:
        """Open the dialog without blocking; *on_choice* receives the answer."""
        dlg = cls(request, color, parent)
        dlg.choice_made.connect(on_choice)
        dlg.open()
        return dlg
