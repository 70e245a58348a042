"""Turn controller: the single owner of a game's board and turn counter.

A human shell drives it one click at a time (``select_source``,
``select_destination``, ``commit``); AI players hand it a whole move via
``play``. Every applied move is followed by a victory check before the
next move can be requested.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import FrozenSet, List, Optional, Tuple

from quixo.core import (
    Board,
    GameResult,
    IllegalMoveError,
    InvalidStateError,
    Move,
    MoveRecord,
    Player,
    apply_move,
    game_outcome,
    is_legal_source,
    is_perimeter,
    legal_destinations,
    new_game,
)
from quixo.ai import Policy

Position = Tuple[int, int]


class TurnPhase(Enum):
    AWAITING_SOURCE = "awaiting_source"
    AWAITING_DESTINATION = "awaiting_destination"
    MOVE_READY = "move_ready"
    GAME_OVER = "game_over"


@dataclass
class GameState:
    board: Board = field(default_factory=new_game)
    turn: int = 0
    result: GameResult = GameResult.ONGOING
    history: List[MoveRecord] = field(default_factory=list)

    @property
    def current_player(self) -> Player:
        return Player.for_turn(self.turn)

    @property
    def is_player_a_turn(self) -> bool:
        return self.turn % 2 == 0

    @property
    def winner(self) -> Optional[Player]:
        return self.result.winner

    @property
    def is_terminal(self) -> bool:
        return self.result.is_terminal

    def copy(self) -> "GameState":
        # Boards are immutable, so sharing them is safe.
        return GameState(board=self.board, turn=self.turn, result=self.result, history=list(self.history))

    def __repr__(self) -> str:
        return (
            f"GameState(current={self.current_player.name}, result={self.result}, turn={self.turn})\n"
            f"{self.board.render()}"
        )


class TurnController:
    def __init__(self, *, max_ply: Optional[int] = None) -> None:
        if max_ply is not None and max_ply <= 0:
            raise ValueError("max_ply must be positive when given.")
        self.max_ply = max_ply
        self._state = GameState()
        self._phase = TurnPhase.AWAITING_SOURCE
        self._source: Optional[Position] = None
        self._destination: Optional[Position] = None

    # ------------------------------------------------------------------
    # Read-only views
    # ------------------------------------------------------------------
    @property
    def state(self) -> GameState:
        return self._state

    @property
    def board(self) -> Board:
        return self._state.board

    @property
    def phase(self) -> TurnPhase:
        return self._phase

    @property
    def current_player(self) -> Player:
        return self._state.current_player

    @property
    def selected_source(self) -> Optional[Position]:
        return self._source

    @property
    def selected_destination(self) -> Optional[Position]:
        return self._destination

    @property
    def pending_move(self) -> Optional[Move]:
        if self._source is None or self._destination is None:
            return None
        return Move.between(self._source, self._destination)

    def legal_destinations(self) -> FrozenSet[Position]:
        """Destinations for the selected source; empty when none is selected."""
        if self._source is None:
            return frozenset()
        return legal_destinations(self.board, *self._source, mover=self.current_player)

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------
    def reset(self) -> Board:
        self._state = GameState()
        self._phase = TurnPhase.AWAITING_SOURCE
        self._source = None
        self._destination = None
        return self._state.board

    def select_source(self, col: int, row: int) -> FrozenSet[Position]:
        self._expect(TurnPhase.AWAITING_SOURCE)
        if not is_perimeter(col, row):
            raise IllegalMoveError(f"Cell ({col},{row}) is not on the perimeter.")
        if not is_legal_source(self.board, col, row, self.current_player):
            raise IllegalMoveError(f"Cell ({col},{row}) belongs to {self.current_player.opponent.name}.")
        self._source = (col, row)
        self._phase = TurnPhase.AWAITING_DESTINATION
        return self.legal_destinations()

    def select_destination(self, col: int, row: int) -> Move:
        self._expect(TurnPhase.AWAITING_DESTINATION)
        if (col, row) not in self.legal_destinations():
            raise IllegalMoveError(f"Cell ({col},{row}) is not a destination for source {self._source}.")
        self._destination = (col, row)
        self._phase = TurnPhase.MOVE_READY
        return Move.between(self._source, self._destination)

    def cancel(self) -> None:
        self._expect(TurnPhase.AWAITING_DESTINATION, TurnPhase.MOVE_READY)
        self._source = None
        self._destination = None
        self._phase = TurnPhase.AWAITING_SOURCE

    def commit(self) -> MoveRecord:
        self._expect(TurnPhase.MOVE_READY)
        move = self.pending_move
        mover = self.current_player
        self._state.board = apply_move(move, self.board, self._state.is_player_a_turn)
        self._state.turn += 1

        result = game_outcome(self.board, mover)
        if result == GameResult.ONGOING and self.max_ply is not None and self._state.turn >= self.max_ply:
            result = GameResult.DRAW
        self._state.result = result

        record = MoveRecord(turn=self._state.turn - 1, player=mover, move=move, resulted_in=result)
        self._state.history.append(record)
        self._source = None
        self._destination = None
        self._phase = TurnPhase.GAME_OVER if result.is_terminal else TurnPhase.AWAITING_SOURCE
        return record

    def play(self, move: Move) -> MoveRecord:
        """Select, place and commit ``move`` for the player to move."""
        self._expect(TurnPhase.AWAITING_SOURCE)
        try:
            self.select_source(move.source_col, move.source_row)
            self.select_destination(move.dest_col, move.dest_row)
        except IllegalMoveError:
            if self._phase != TurnPhase.AWAITING_SOURCE:
                self.cancel()
            raise
        return self.commit()

    def request_move(self, policy: Policy) -> Move:
        if self._phase == TurnPhase.GAME_OVER:
            raise InvalidStateError("The game is over; no further moves can be requested.")
        return policy.select_move(self.board, self.current_player)

    def play_ai(self, policy: Policy) -> MoveRecord:
        return self.play(self.request_move(policy))

    def _expect(self, *phases: TurnPhase) -> None:
        if self._phase == TurnPhase.GAME_OVER:
            raise InvalidStateError("The game is over; start a new game to continue.")
        if self._phase not in phases:
            expected = " or ".join(p.name for p in phases)
            raise InvalidStateError(f"Expected phase {expected}, controller is in {self._phase.name}.")
