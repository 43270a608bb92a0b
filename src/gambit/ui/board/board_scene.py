"""BoardScene: QGraphicsScene that draws the board and turns taps into moves."""

from __future__ import annotations

from typing import TYPE_CHECKING

from PyQt6.QtCore import QObject, QPointF, Qt, pyqtSignal
from PyQt6.QtGui import QBrush, QColor, QFont, QPen
from PyQt6.QtWidgets import (
    QGraphicsRectItem,
    QGraphicsScene,
    QGraphicsSceneMouseEvent,
    QGraphicsSimpleTextItem,
)

from gambit.core.enums import Side
from gambit.core.types import Square, file_of, make_square, on_board, rank_of
from gambit.ui.styles.theme import BoardTheme

if TYPE_CHECKING:
    from gambit.game.controller import GameController


class BoardScene(QGraphicsScene):
    """Renders squares, coordinates, glyphs and highlights.

    Two taps make a move request: the first selects a piece, the second
    names the destination and is forwarded to ``GameController.swap_to``.

    Signals:
        move_processed(int, int, bool): origin, destination and the
            controller's "handled" answer.
    """

    move_processed = pyqtSignal(int, int, bool)

    TILE = 80  # px per square

    def __init__(self, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._theme = BoardTheme.default()
        self._controller: GameController | None = None
        self._selected_sq: Square | None = None
        self._show_coordinates = True

        self._square_items: dict[Square, QGraphicsRectItem] = {}
        self._highlight_items: list[QGraphicsRectItem] = []
        self._check_items: list[QGraphicsRectItem] = []
        self._piece_items: dict[Square, QGraphicsSimpleTextItem] = {}
        self._coord_items: list[QGraphicsSimpleTextItem] = []

        self._draw_board()

    # ── Public API ───────────────────────────────────────────────────────

    def set_controller(self, controller: GameController) -> None:
        """Show (and forward taps to) *controller*'s game."""
        self._controller = controller
        self._clear_selection()
        self.refresh()

    def set_theme(self, theme: BoardTheme) -> None:
        self._theme = theme
        self._draw_board()
        self.refresh()

    def set_show_coordinates(self, visible: bool) -> None:
        """Show or hide rank/file coordinate labels."""
        self._show_coordinates = visible
        for item in self._coord_items:
            item.setVisible(visible)

    @property
    def selected_square(self) -> Square | None:
        return self._selected_sq

    def refresh(self) -> None:
        """Re-read the board from the controller."""
        self._sync_pieces()
        self._highlight_check()

    def tap(self, sq: Square) -> None:
        """Handle a tap on *sq*."""
        ctrl = self._controller
        if ctrl is None or ctrl.game_over is not None:
            return

        if self._selected_sq is None:
            if ctrl.get(sq) is not None:
                self._select_square(sq)
            return

        from_sq = self._selected_sq
        self._clear_selection()
        if from_sq == sq:
            return

        handled = ctrl.swap_to(from_sq, sq)
        # Tapping another own piece just moves the selection there.
        if not handled and ctrl.get(sq) is not None:
            self._select_square(sq)
        self.refresh()
        self.move_processed.emit(from_sq, sq, handled)

    # ── Board drawing ────────────────────────────────────────────────────

    def _draw_board(self) -> None:
        """Draw or redraw the 64 squares and coordinates."""
        for sq_item in self._square_items.values():
            self.removeItem(sq_item)
        self._square_items.clear()
        for coord_item in self._coord_items:
            self.removeItem(coord_item)
        self._coord_items.clear()

        t = self.TILE
        font = QFont()
        font.setPointSize(max(9, t // 8))

        for sq in range(64):
            f, r = file_of(sq), rank_of(sq)
            vf, vr = self._visual_coords(f, r)
            is_dark = (f + r) % 2 == 0  # a1 is dark
            color = self._theme.dark_square if is_dark else self._theme.light_square
            rect = QGraphicsRectItem(vf * t, vr * t, t, t)
            rect.setBrush(QBrush(color))
            rect.setPen(QPen(Qt.PenStyle.NoPen))
            rect.setZValue(0)
            self.addItem(rect)
            self._square_items[sq] = rect

            coord_color = self._theme.coord_dark if is_dark else self._theme.coord_light
            labels: list[tuple[str, float, float]] = []
            if f == 0:
                labels.append((str(r + 1), vf * t + 2, vr * t + 1))
            if r == 0:
                labels.append((chr(ord("a") + f), vf * t + t - 12, vr * t + t - 16))
            for text, x, y in labels:
                txt = QGraphicsSimpleTextItem(text)
                txt.setFont(font)
                txt.setBrush(QBrush(coord_color))
                txt.setPos(x, y)
                txt.setZValue(0.3)
                txt.setVisible(self._show_coordinates)
                self.addItem(txt)
                self._coord_items.append(txt)

        self.setSceneRect(0, 0, 8 * t, 8 * t)

    # ── Piece synchronisation ────────────────────────────────────────────

    def _sync_pieces(self) -> None:
        """Re-create all glyph items from the controller's board."""
        for item in self._piece_items.values():
            self.removeItem(item)
        self._piece_items.clear()

        ctrl = self._controller
        if ctrl is None:
            return

        t = self.TILE
        font = QFont()
        font.setPixelSize(int(t * 0.8))
        for sq, piece in ctrl.board.occupied():
            item = QGraphicsSimpleTextItem(piece.glyph)
            item.setFont(font)
            item.setBrush(QBrush(QColor(ctrl.setup.color_of(piece.side))))
            bounds = item.boundingRect()
            vf, vr = self._visual_coords(file_of(sq), rank_of(sq))
            item.setPos(
                vf * t + (t - bounds.width()) / 2,
                vr * t + (t - bounds.height()) / 2,
            )
            item.setZValue(1)
            self.addItem(item)
            self._piece_items[sq] = item

    # ── Mouse interaction ────────────────────────────────────────────────

    def mousePressEvent(self, event: QGraphicsSceneMouseEvent | None) -> None:
        if event is None:
            return super().mousePressEvent(event)
        sq = self._pos_to_square(event.scenePos())
        if sq is None:
            self._clear_selection()
        else:
            self.tap(sq)
        super().mousePressEvent(event)

    # ── Selection / highlights ───────────────────────────────────────────

    def _select_square(self, sq: Square) -> None:
        self._clear_selection()
        self._selected_sq = sq
        self._highlight_items.append(
            self._make_highlight(sq, self._theme.highlight_from)
        )

    def _clear_selection(self) -> None:
        self._selected_sq = None
        self._clear_items(self._highlight_items)

    def _highlight_check(self) -> None:
        self._clear_items(self._check_items)
        ctrl = self._controller
        if ctrl is None:
            return
        for side in Side:
            attackers = ctrl.attackers_of(side)
            king_sq = ctrl.board.king_square(side)
            if king_sq is None or not attackers:
                continue
            rect = self._make_highlight(king_sq, self._theme.highlight_check)
            rect.setZValue(0.6)
            self._check_items.append(rect)
            for sq in attackers:
                rect = self._make_highlight(sq, self._theme.highlight_attacker)
                rect.setZValue(0.6)
                self._check_items.append(rect)

    def _clear_items(self, items: list[QGraphicsRectItem]) -> None:
        for item in items:
            self.removeItem(item)
        items.clear()

    # ── Coordinate helpers ───────────────────────────────────────────────

    @staticmethod
    def _visual_coords(file: int, rank: int) -> tuple[int, int]:
        """Board file/rank → visual column/row (rank 8 at the top)."""
        return file, 7 - rank

    def _pos_to_square(self, pos: QPointF) -> Square | None:
        """Scene position → board square."""
        t = self.TILE
        col = int(pos.x() // t)
        row = int(pos.y() // t)
        if not on_board(col, row):
            return None
        return make_square(col, 7 - row)

    def _make_highlight(self, sq: Square, color: QColor) -> QGraphicsRectItem:
        """Create a coloured overlay rectangle on a square."""
        t = self.TILE
        vf, vr = self._visual_coords(file_of(sq), rank_of(sq))
        rect = QGraphicsRectItem(vf * t, vr * t, t, t)
        rect.setBrush(QBrush(color))
        rect.setPen(QPen(Qt.PenStyle.NoPen))
        rect.setZValue(0.8)
        self.addItem(rect)
        return rect
