"""Two-phase pawn promotion through GameController."""

import pytest

from gambit.core.board import Board
from gambit.core.enums import PieceKind, PromotionOutcome, Side
from gambit.core.piece import Piece
from gambit.core.types import Square
from gambit.game import messages
from gambit.game.config import GameSetup
from gambit.game.controller import GameController
from gambit.game.interfaces import GamePhase, PromotionRequest

from squares import A7, A8, B8, E1, E2, E8, G7, H1, H2, H7, H8

L, D = Side.LIGHT, Side.DARK


def _controller(
    placements: dict[Square, tuple[PieceKind, Side]],
    side_to_move: Side = L,
    setup: GameSetup | None = None,
) -> GameController:
    setup = setup or GameSetup()
    board = Board()
    for sq, (kind, side) in placements.items():
        board[sq] = Piece.of(kind, side, setup.filled(side))
    return GameController.from_board(board, side_to_move=side_to_move, setup=setup)


def _light_pawn_on_seventh(setup: GameSetup | None = None) -> GameController:
    return _controller(
        {A7: (PieceKind.PAWN, L), E1: (PieceKind.KING, L), H7: (PieceKind.KING, D)},
        setup=setup,
    )


@pytest.fixture
def ctrl() -> GameController:
    return _light_pawn_on_seventh()


@pytest.fixture
def requests(ctrl: GameController) -> list[PromotionRequest]:
    seen: list[PromotionRequest] = []
    ctrl.events.on_promotion_request.append(seen.append)
    return seen


class TestPromotionRequest:
    def test_request_emitted_after_turn_passes(
        self, ctrl: GameController, requests: list[PromotionRequest]
    ) -> None:
        assert ctrl.swap_to(A7, A8) is True
        assert requests == [PromotionRequest(A8, L, False)]
        assert requests[0].candidates == ("♕", "♖", "♗", "♘")
        assert ctrl.side_to_move == D
        assert ctrl.phase == GamePhase.PROMOTION_PENDING
        assert ctrl.pending_promotions == (requests[0],)
        assert ctrl.get(A8) == Piece("♙", L)

    def test_filled_candidates(self) -> None:
        ctrl = _light_pawn_on_seventh(GameSetup(light_filled=True, dark_filled=False))
        seen: list[PromotionRequest] = []
        ctrl.events.on_promotion_request.append(seen.append)
        ctrl.swap_to(A7, A8)
        assert seen[0].candidates == ("♛", "♜", "♝", "♞")

    def test_dark_pawn(self) -> None:
        ctrl = _controller(
            {H2: (PieceKind.PAWN, D), E8: (PieceKind.KING, D), A8: (PieceKind.KING, L)},
            side_to_move=D,
        )
        seen: list[PromotionRequest] = []
        ctrl.events.on_promotion_request.append(seen.append)
        ctrl.swap_to(H2, H1)
        assert seen == [PromotionRequest(H1, D, True)]
        assert ctrl.resolve_promotion(seen[0], PieceKind.QUEEN) == PromotionOutcome.PROMOTED
        assert ctrl.get(H1) == Piece("♛", D)

    def test_no_request_for_non_pawn(self, ctrl: GameController) -> None:
        assert ctrl.begin_promotion(E1) is None
        assert ctrl.begin_promotion(A7) is None
        assert ctrl.pending_promotions == ()

    def test_kind_of_rejects_foreign_glyph(self) -> None:
        request = PromotionRequest(A8, L, False)
        assert request.kind_of("♘") == PieceKind.KNIGHT
        with pytest.raises(ValueError):
            request.kind_of("♞")


class TestResolvePromotion:
    def test_knight(
        self, ctrl: GameController, requests: list[PromotionRequest]
    ) -> None:
        calls: list[None] = []
        ctrl.register_promotion_continuation(lambda: calls.append(None))
        notices: list[str] = []
        ctrl.events.on_notice.append(notices.append)

        ctrl.swap_to(A7, A8)
        outcome = ctrl.resolve_promotion(requests[0], PieceKind.KNIGHT)

        assert outcome == PromotionOutcome.PROMOTED
        assert ctrl.get(A8) == Piece("♘", L)
        assert calls == [None]
        assert notices == [messages.promoted("♘")]
        assert ctrl.phase == GamePhase.AWAITING_MOVE
        assert ctrl.pending_promotions == ()
        assert ctrl.side_to_move == D

    def test_glyph_choice(
        self, ctrl: GameController, requests: list[PromotionRequest]
    ) -> None:
        ctrl.swap_to(A7, A8)
        assert ctrl.resolve_promotion(requests[0], "♖") == PromotionOutcome.PROMOTED
        assert ctrl.get(A8) == Piece("♖", L)

    def test_cancel_keeps_pawn(
        self, ctrl: GameController, requests: list[PromotionRequest]
    ) -> None:
        calls: list[None] = []
        ctrl.register_promotion_continuation(lambda: calls.append(None))
        ctrl.swap_to(A7, A8)
        assert ctrl.resolve_promotion(requests[0], None) == PromotionOutcome.CANCELLED
        assert ctrl.get(A8) == Piece("♙", L)
        assert calls == []
        assert ctrl.phase == GamePhase.AWAITING_MOVE

    def test_king_is_not_a_choice(
        self, ctrl: GameController, requests: list[PromotionRequest]
    ) -> None:
        ctrl.swap_to(A7, A8)
        with pytest.raises(ValueError):
            ctrl.resolve_promotion(requests[0], PieceKind.KING)
        assert ctrl.pending_promotions == (requests[0],)

    def test_second_resolution_is_stale(
        self, ctrl: GameController, requests: list[PromotionRequest]
    ) -> None:
        ctrl.swap_to(A7, A8)
        ctrl.resolve_promotion(requests[0], PieceKind.QUEEN)
        assert ctrl.resolve_promotion(requests[0], PieceKind.ROOK) == PromotionOutcome.STALE
        assert ctrl.get(A8) == Piece("♕", L)

    def test_opponent_may_move_while_pending(
        self, ctrl: GameController, requests: list[PromotionRequest]
    ) -> None:
        ctrl.swap_to(A7, A8)
        assert ctrl.swap_to(H7, G7) is True
        assert ctrl.get(G7) == Piece("♚", D)
        assert ctrl.resolve_promotion(requests[0], PieceKind.QUEEN) == PromotionOutcome.PROMOTED

    def test_pawn_captured_before_choice(self) -> None:
        ctrl = _controller(
            {
                A7: (PieceKind.PAWN, L),
                E1: (PieceKind.KING, L),
                H7: (PieceKind.KING, D),
                H8: (PieceKind.ROOK, D),
            }
        )
        seen: list[PromotionRequest] = []
        ctrl.events.on_promotion_request.append(seen.append)
        ctrl.swap_to(A7, A8)
        assert ctrl.swap_to(H8, A8) is True
        assert ctrl.resolve_promotion(seen[0], PieceKind.QUEEN) == PromotionOutcome.STALE
        assert ctrl.get(A8) == Piece("♜", D)
        assert ctrl.phase == GamePhase.AWAITING_MOVE

    def test_outstanding_promotions_resolve_independently(self) -> None:
        ctrl = _controller(
            {
                A7: (PieceKind.PAWN, L),
                H2: (PieceKind.PAWN, D),
                E1: (PieceKind.KING, L),
                H7: (PieceKind.KING, D),
            }
        )
        seen: list[PromotionRequest] = []
        ctrl.events.on_promotion_request.append(seen.append)
        ctrl.swap_to(A7, A8)
        ctrl.swap_to(H2, H1)
        assert ctrl.pending_promotions == tuple(seen)

        assert ctrl.resolve_promotion(seen[0], PieceKind.QUEEN) == PromotionOutcome.PROMOTED
        assert ctrl.get(A8) == Piece("♕", L)
        assert ctrl.phase == GamePhase.PROMOTION_PENDING

        assert ctrl.resolve_promotion(seen[1], PieceKind.KNIGHT) == PromotionOutcome.PROMOTED
        assert ctrl.get(H1) == Piece("♞", D)
        assert ctrl.phase == GamePhase.AWAITING_MOVE
        assert ctrl.pending_promotions == ()

    def test_later_request_may_resolve_first(self) -> None:
        ctrl = _controller(
            {
                A8: (PieceKind.PAWN, L),
                B8: (PieceKind.PAWN, L),
                E1: (PieceKind.KING, L),
                H7: (PieceKind.KING, D),
            }
        )
        first = ctrl.begin_promotion(A8)
        second = ctrl.begin_promotion(B8)
        assert first is not None and second is not None
        assert ctrl.resolve_promotion(second, PieceKind.ROOK) == PromotionOutcome.PROMOTED
        assert ctrl.resolve_promotion(first, None) == PromotionOutcome.CANCELLED
        assert ctrl.get(A8) == Piece("♙", L)
        assert ctrl.get(B8) == Piece("♖", L)

    def test_continuation_runs_per_promotion(self) -> None:
        ctrl = _controller(
            {
                A8: (PieceKind.PAWN, L),
                B8: (PieceKind.PAWN, L),
                E2: (PieceKind.KING, L),
                H7: (PieceKind.KING, D),
            }
        )
        calls: list[None] = []
        ctrl.register_promotion_continuation(lambda: calls.append(None))
        for sq in (A8, B8):
            request = ctrl.begin_promotion(sq)
            assert request is not None
            ctrl.resolve_promotion(request, PieceKind.ROOK)
        assert len(calls) == 2
