"""Tests for BoardScene tap handling and rendering helpers."""

from __future__ import annotations

from PyQt6.QtCore import QPointF

from gambit.core.board import Board
from gambit.core.enums import PieceKind, Side
from gambit.core.piece import Piece
from gambit.game.controller import GameController
from gambit.ui.board.board_scene import BoardScene

from squares import A8, B1, E1, E2, E4, E5, E8, G1, H1, parse_square


def _scene_with(controller: GameController) -> tuple[BoardScene, list[tuple[int, int, bool]]]:
    scene = BoardScene()
    scene.set_controller(controller)
    emitted: list[tuple[int, int, bool]] = []
    scene.move_processed.connect(lambda a, b, c: emitted.append((a, b, c)))
    return scene, emitted


def test_pos_to_square_top_left_is_a8() -> None:
    scene = BoardScene()
    assert scene._pos_to_square(scene.sceneRect().topLeft()) == parse_square("a8")


def test_set_show_coordinates_toggles_all_labels_visibility() -> None:
    scene = BoardScene()
    assert scene._coord_items

    scene.set_show_coordinates(False)
    assert all(not item.isVisible() for item in scene._coord_items)

    scene.set_show_coordinates(True)
    assert all(item.isVisible() for item in scene._coord_items)


def test_initial_position_draws_every_piece() -> None:
    scene, _ = _scene_with(GameController())
    assert len(scene._piece_items) == 32
    assert scene._piece_items[E1].text() == "♔"
    assert scene._piece_items[E8].text() == "♚"


def test_two_taps_make_a_move() -> None:
    ctrl = GameController()
    scene, emitted = _scene_with(ctrl)

    scene.tap(E2)
    assert scene.selected_square == E2
    scene.tap(E4)

    assert emitted == [(E2, E4, True)]
    assert scene.selected_square is None
    assert ctrl.get(E4) is not None
    assert E4 in scene._piece_items and E2 not in scene._piece_items


def test_tap_on_empty_square_selects_nothing() -> None:
    scene, emitted = _scene_with(GameController())
    scene.tap(E4)
    assert scene.selected_square is None
    assert emitted == []


def test_tapping_own_piece_moves_selection() -> None:
    scene, emitted = _scene_with(GameController())
    scene.tap(B1)
    scene.tap(G1)
    assert emitted == [(B1, G1, False)]
    assert scene.selected_square == G1


def test_tapping_selected_square_again_deselects() -> None:
    scene, emitted = _scene_with(GameController())
    scene.tap(E2)
    scene.tap(E2)
    assert scene.selected_square is None
    assert emitted == []


def test_king_in_check_is_highlighted() -> None:
    board = Board()
    board[E1] = Piece("♔", Side.LIGHT)
    board[E5] = Piece.of(PieceKind.ROOK, Side.DARK, True)
    board[A8] = Piece("♚", Side.DARK)
    scene, _ = _scene_with(GameController.from_board(board))
    # King square plus the rook giving check.
    assert len(scene._check_items) == 2
    attacker = scene._check_items[1]
    assert attacker.brush().color() == scene._theme.highlight_attacker
    # e5 is file 4, visual row 3 with rank 8 on top.
    assert attacker.rect().topLeft() == QPointF(4 * BoardScene.TILE, 3 * BoardScene.TILE)


def test_taps_ignored_after_game_over() -> None:
    board = Board()
    board[H1] = Piece("♖", Side.LIGHT)
    board[E1] = Piece("♔", Side.LIGHT)
    board[parse_square("h8")] = Piece("♚", Side.DARK)
    ctrl = GameController.from_board(board)
    scene, emitted = _scene_with(ctrl)

    scene.tap(H1)
    scene.tap(parse_square("h8"))
    assert ctrl.game_over is not None

    scene.tap(E1)
    assert scene.selected_square is None
    assert len(emitted) == 1
