"""GameController: the façade a UI calls with move requests.

Coordinates: Board, MoveValidator, CheckDetector, CastlingRights.
Emits notices, promotion requests and game over via simple callbacks so the
UI / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from gambit.core.board import Board
from gambit.core.castling import ROOK_HOMES, CastleRoute, CastlingRights, castle_route
from gambit.core.check import CheckDetector
from gambit.core.enums import PieceKind, PromotionOutcome, Side
from gambit.core.piece import PROMOTION_KINDS, Piece, transform
from gambit.core.types import Square, is_valid_square, rank_of, square_name
from gambit.core.validator import CASTLE_REACH_SEQUENCE, MoveValidator, RuleOptions
from gambit.game import messages
from gambit.game.config import GameSetup
from gambit.game.interfaces import GameOver, GamePhase, MoveRecord, PromotionRequest

_LOGGER = logging.getLogger(__name__)

_LAST_RANK: dict[Side, int] = {Side.LIGHT: 7, Side.DARK: 0}

# ── Event definitions ────────────────────────────────────────────────────────

NoticeCallback = Callable[[str], None]
PromotionRequestCallback = Callable[[PromotionRequest], None]
GameOverCallback = Callable[[GameOver], None]
MoveCallback = Callable[[MoveRecord], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_notice: list[NoticeCallback] = field(default_factory=list)
    on_promotion_request: list[PromotionRequestCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)
    on_move: list[MoveCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController:
    """Owns one game: board, side to move, castling rights, promotion and
    game-over state.

    ``swap_to`` returns ``False`` for structurally invalid requests (bad
    index, empty origin, friendly destination) and ``True`` once a request
    was processed, whether it was applied or rejected with a notice.

    Single-threaded: call from the UI thread. A fresh game is a fresh
    controller.
    """

    __slots__ = (
        "_setup",
        "_board",
        "_validator",
        "_check",
        "_rights",
        "_side_to_move",
        "_phase",
        "_game_over",
        "_pending_promotions",
        "_promotion_continuation",
        "_busy",
        "events",
    )

    def __init__(
        self,
        setup: GameSetup | None = None,
        rules: RuleOptions | None = None,
        *,
        board: Board | None = None,
        side_to_move: Side = Side.LIGHT,
    ) -> None:
        self._setup = setup or GameSetup()
        if board is None:
            board = Board.initial(self._setup.light_filled, self._setup.dark_filled)
        self._board = board
        self._validator = MoveValidator(self._board, rules)
        self._check = CheckDetector(self._board, self._validator)
        self._rights: dict[Side, CastlingRights] = {
            Side.LIGHT: CastlingRights(),
            Side.DARK: CastlingRights(),
        }
        self._side_to_move = side_to_move
        self._phase = GamePhase.AWAITING_MOVE
        self._game_over: GameOver | None = None
        self._pending_promotions: dict[Square, PromotionRequest] = {}
        self._promotion_continuation: Callable[[], None] | None = None
        self._busy = False
        self.events = GameEvents()

    @classmethod
    def from_board(
        cls,
        board: Board,
        *,
        side_to_move: Side = Side.LIGHT,
        setup: GameSetup | None = None,
        rules: RuleOptions | None = None,
    ) -> GameController:
        """Start from an arbitrary placement instead of the opening layout."""
        return cls(setup, rules, board=board, side_to_move=side_to_move)

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def setup(self) -> GameSetup:
        return self._setup

    @property
    def rules(self) -> RuleOptions:
        return self._validator.options

    @property
    def board(self) -> Board:
        return self._board

    @property
    def side_to_move(self) -> Side:
        return self._side_to_move

    @property
    def phase(self) -> GamePhase:
        return self._phase

    @property
    def game_over(self) -> GameOver | None:
        return self._game_over

    @property
    def pending_promotions(self) -> tuple[PromotionRequest, ...]:
        """Outstanding requests, oldest first."""
        return tuple(self._pending_promotions.values())

    def castling_rights(self, side: Side) -> CastlingRights:
        return self._rights[side]

    def get(self, index: int) -> Piece | None:
        return self._board.get(index)

    def is_in_check(self, side: Side) -> bool:
        return self._check.is_in_check(side)

    def attackers_of(self, side: Side) -> list[Square]:
        return self._check.attackers_of(side)

    @staticmethod
    def transform(glyph: str) -> str:
        """Toggle a glyph's fill-variant (rendering helper)."""
        return transform(glyph)

    def register_promotion_continuation(self, callback: Callable[[], None]) -> None:
        """Callback run after each confirmed promotion."""
        self._promotion_continuation = callback

    # ── Moves ────────────────────────────────────────────────────────────

    def swap_to(self, from_sq: int, to_sq: int) -> bool:
        if self._game_over is not None:
            _LOGGER.debug("Move %s→%s ignored: game is over", from_sq, to_sq)
            return False
        if self._busy:
            _LOGGER.warning("Nested move request %s→%s rejected", from_sq, to_sq)
            return False

        self._busy = True
        try:
            return self._swap_to(from_sq, to_sq)
        finally:
            self._busy = False

    def _swap_to(self, from_sq: int, to_sq: int) -> bool:
        if not (is_valid_square(from_sq) and is_valid_square(to_sq)):
            return False

        board = self._board
        piece = board[from_sq]
        if piece is None:
            return False

        side = self._side_to_move
        if piece.side != side:
            self._notify(messages.NOT_YOUR_TURN)
            return True

        target = board[to_sq]
        if target is not None and target.side == side:
            return False

        kind = piece.kind
        if kind == PieceKind.KING:
            route = castle_route(side, from_sq, to_sq)
            if route is not None:
                self._castle(route, piece)
                return True

        if not self._validator.is_legal(kind, from_sq, to_sq, side):
            self._notify(messages.ILLEGAL_BY_KIND[kind])
            return True

        board[to_sq] = piece
        board[from_sq] = None
        attackers = self._check.attackers_of(side)
        if attackers:
            board[from_sq] = piece
            board[to_sq] = target
            _LOGGER.debug(
                "%s %s→%s leaves the king attacked from %s",
                piece,
                square_name(from_sq),
                square_name(to_sq),
                ", ".join(square_name(sq) for sq in attackers),
            )
            self._notify(messages.SELF_CHECK)
            return True

        self._update_rights(piece, from_sq)
        self._side_to_move = side.opposite
        _LOGGER.debug(
            "%s %s %s→%s", side, piece, square_name(from_sq), square_name(to_sq)
        )

        if kind == PieceKind.PAWN and rank_of(to_sq) == _LAST_RANK[side]:
            self.begin_promotion(to_sq)

        if target is not None:
            if target.kind == PieceKind.KING:
                self._declare_game_over(side)
            else:
                self._notify(messages.capture(piece.glyph, target.glyph))

        self._emit_move(
            MoveRecord(
                side=side,
                from_sq=from_sq,
                to_sq=to_sq,
                glyph=piece.glyph,
                captured=target.glyph if target is not None else None,
            )
        )
        return True

    def _castle(self, route: CastleRoute, king: Piece) -> bool:
        board = self._board
        side = route.side
        rights = self._rights[side]
        available = (
            rights.kingside_available() if route.kingside else rights.queenside_available()
        )
        rook = board[route.rook_from]

        if (
            not available
            or rook is None
            or rook.kind != PieceKind.ROOK
            or rook.side != side
            or any(board[sq] is not None for sq in route.between)
            or not self._validator.king(
                route.king_from, route.king_to, side, CASTLE_REACH_SEQUENCE
            )
            or self._check.is_in_check(side)
        ):
            _LOGGER.debug(
                "Castling %s→%s refused for %s",
                square_name(route.king_from),
                square_name(route.king_to),
                side,
            )
            self._notify(messages.ILLEGAL_BY_KIND[PieceKind.KING])
            return False

        board[route.king_to] = king
        board[route.king_from] = None
        board[route.rook_to] = rook
        board[route.rook_from] = None

        if self._check.is_in_check(side):
            board[route.rook_from] = rook
            board[route.rook_to] = None
            board[route.king_from] = king
            board[route.king_to] = None
            self._notify(messages.CASTLE_INTO_CHECK)
            return False

        rights.mark_castled()
        self._side_to_move = side.opposite
        self._notify(messages.CASTLED)
        self._emit_move(
            MoveRecord(
                side=side,
                from_sq=route.king_from,
                to_sq=route.king_to,
                glyph=king.glyph,
                castled=True,
            )
        )
        return True

    # ── Promotion ────────────────────────────────────────────────────────

    def begin_promotion(self, square: Square) -> PromotionRequest | None:
        """Phase one: ask collaborators which piece replaces the pawn on
        *square*. Returns ``None`` when no pawn stands on its last rank there.

        The turn is not held back: the opponent may move while the request
        is outstanding, so several requests can be pending at once. Each is
        resolved against its own square.
        """
        pawn = self._board.get(square)
        if (
            pawn is None
            or pawn.kind != PieceKind.PAWN
            or rank_of(square) != _LAST_RANK[pawn.side]
        ):
            return None

        request = PromotionRequest(square, pawn.side, self._setup.filled(pawn.side))
        if square in self._pending_promotions:
            _LOGGER.warning("Promotion on %s requested again", square_name(square))
        self._pending_promotions[square] = request
        if self._game_over is None:
            self._phase = GamePhase.PROMOTION_PENDING

        for cb in self.events.on_promotion_request:
            cb(request)
        return request

    def resolve_promotion(
        self, request: PromotionRequest, choice: PieceKind | str | None
    ) -> PromotionOutcome:
        """Phase two: apply the chosen kind (or glyph), or ``None`` to cancel.

        Cancelling leaves the pawn where it landed; the turn has already
        passed either way.
        """
        if isinstance(choice, str):
            choice = request.kind_of(choice)
        if choice is not None and choice not in PROMOTION_KINDS:
            raise ValueError(f"Cannot promote to {choice!r}")

        if self._pending_promotions.get(request.square) != request:
            return PromotionOutcome.STALE

        del self._pending_promotions[request.square]
        if self._game_over is None and not self._pending_promotions:
            self._phase = GamePhase.AWAITING_MOVE

        pawn = self._board.get(request.square)
        if pawn is None or pawn.kind != PieceKind.PAWN or pawn.side != request.side:
            _LOGGER.warning("Promotion on %s is stale", square_name(request.square))
            return PromotionOutcome.STALE

        if choice is None:
            _LOGGER.debug("Promotion on %s cancelled", square_name(request.square))
            return PromotionOutcome.CANCELLED

        promoted = pawn.promoted(choice)
        self._board[request.square] = promoted

        if self._promotion_continuation is not None:
            self._promotion_continuation()
        self._notify(messages.promoted(promoted.glyph))
        return PromotionOutcome.PROMOTED

    # ── Internal helpers ─────────────────────────────────────────────────

    def _update_rights(self, piece: Piece, from_sq: Square) -> None:
        rights = self._rights[piece.side]
        if piece.kind == PieceKind.KING:
            rights.mark_king_moved()
        elif piece.kind == PieceKind.ROOK and from_sq in ROOK_HOMES:
            owner, first = ROOK_HOMES[from_sq]
            if owner != piece.side:
                return
            if first:
                rights.mark_first_rook_moved()
            else:
                rights.mark_second_rook_moved()

    def _declare_game_over(self, winner: Side) -> None:
        self._game_over = GameOver(winner)
        self._phase = GamePhase.GAME_OVER
        _LOGGER.info("King captured, %s wins", winner)
        for cb in self.events.on_game_over:
            cb(self._game_over)

    def _notify(self, message: str) -> None:
        _LOGGER.debug("Notice: %s", message)
        for cb in self.events.on_notice:
            cb(message)

    def _emit_move(self, record: MoveRecord) -> None:
        for cb in self.events.on_move:
            cb(record)
