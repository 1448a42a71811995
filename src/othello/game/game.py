"""
Othello game module.
Handles turn alternation, passes and computer turns for a human (Black)
versus computer (White) game.
"""
import logging
import random
from contextlib import contextmanager
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Iterator, List, Optional, Tuple

from .board import Board, BLACK, WHITE, PLAYER_NAMES, opponent
from .rules import (
    Cell, Move, legal_moves, has_legal_move, find_move, apply_move,
    is_terminal, winner,
)
from ..ai.base import Strategy, SearchExhaustedError
from ..ai.factory import get_strategy
from ..config import Config, DIFFICULTIES, get_default_config

logger = logging.getLogger(__name__)

OUTCOMES = {BLACK: 'black', WHITE: 'white', 0: 'draw'}


class GameState(Enum):
    AWAITING_HUMAN_MOVE = 'awaiting_human_move'
    THINKING = 'thinking'
    TERMINAL = 'terminal'


@dataclass
class MoveResult:
    """Answer to a human move request."""
    accepted: bool
    flipped_cells: Tuple[Cell, ...]
    board: Board
    reason: str = ''


def new_game() -> Tuple[Board, int]:
    """Return the starting board and the player to move."""
    return Board.initial(), BLACK


class GameSession:
    """
    Main game class that owns the authoritative board.

    The human always plays Black and the computer White. The board is
    mutated in place only by this class; everything handed out (the
    `board` property, MoveResult.board, boards given to strategies) is a
    copy.
    """

    HUMAN = BLACK
    COMPUTER = WHITE

    def __init__(self, config: Optional[Config] = None, rng: Optional[random.Random] = None,
                 difficulty: Optional[str] = None):
        """
        Initialize a new game.

        Args:
            config: Configuration (default: get_default_config())
            rng: Random source for greedy tie-breaks (default: seeded from config.seed)
            difficulty: Overrides config.search.difficulty
        """
        self.config = (config or get_default_config()).validate()
        self.rng = rng if rng is not None else random.Random(self.config.seed)
        self._strategies: Dict[str, Strategy] = {}
        self._difficulty = self.config.search.difficulty
        if difficulty is not None:
            self.difficulty = difficulty
        self.reset()

    def reset(self) -> None:
        """Reset the game to its initial state."""
        self._board, self._turn = new_game()
        self._busy = False
        self.move_history: List[Dict[str, Any]] = []
        logger.info("New game: human plays Black and moves first")

    def set_position(self, board: Board, turn: int = BLACK) -> None:
        """
        Start from an arbitrary position.

        The turn passes straight away if `turn` has no legal move, exactly
        as after a played move.
        """
        opponent(turn)
        self._board = board.copy()
        self._turn = turn
        self._busy = False
        self.move_history = []
        self._settle_turn()

    # ----- State -----

    @property
    def board(self) -> Board:
        """Snapshot of the current board."""
        return self._board.copy()

    @property
    def current_player(self) -> int:
        return self._turn

    @property
    def difficulty(self) -> str:
        return self._difficulty

    @difficulty.setter
    def difficulty(self, value: str) -> None:
        if value not in DIFFICULTIES:
            raise ValueError(f"Unknown difficulty {value!r}, expected one of {DIFFICULTIES}")
        self._difficulty = value

    @property
    def is_busy(self) -> bool:
        return self._busy

    @contextmanager
    def busy(self) -> Iterator['GameSession']:
        """
        Hold the session busy, e.g. while a front end replays a flip set.
        Human moves are rejected until the block exits.
        """
        previous = self._busy
        self._busy = True
        try:
            yield self
        finally:
            self._busy = previous

    @property
    def state(self) -> GameState:
        if is_terminal(self._board):
            return GameState.TERMINAL
        if self._busy or self._turn == self.COMPUTER:
            return GameState.THINKING
        return GameState.AWAITING_HUMAN_MOVE

    def is_terminal(self) -> bool:
        return is_terminal(self._board)

    def get_score(self) -> Tuple[int, int]:
        """
        Get the current score (black, white).
        """
        return self._board.get_score()

    def outcome(self) -> Optional[str]:
        """'black', 'white' or 'draw' once the game is over, else None."""
        if not self.is_terminal():
            return None
        return OUTCOMES[winner(self._board)]

    def valid_moves(self) -> List[Move]:
        """Legal moves for the player to move."""
        if self.is_terminal():
            return []
        return legal_moves(self._board, self._turn)

    def hints(self) -> List[Move]:
        """Moves to highlight for the human; empty unless input is accepted."""
        if self.state != GameState.AWAITING_HUMAN_MOVE:
            return []
        return legal_moves(self._board, self.HUMAN)

    # ----- Moves -----

    def apply_human_move(self, row: int, col: int) -> MoveResult:
        """
        Play Black's move at (row, col).

        Returns:
            MoveResult with accepted=False (and the board unchanged) if the
            game is over, the session is busy, it is not Black's turn, or
            the cell is not a legal move
        """
        reason = ''
        move = None
        if self.is_terminal():
            reason = 'game over'
        elif self._busy:
            reason = 'busy'
        elif self._turn != self.HUMAN:
            reason = 'not your turn'
        else:
            move = find_move(self._board, row, col, self.HUMAN)
            if move is None:
                reason = 'illegal move'

        if move is None:
            logger.debug("Rejected human move at (%d, %d): %s", row, col, reason)
            return MoveResult(False, (), self.board, reason)

        self._play(move, self.HUMAN)
        return MoveResult(True, move.flips, self.board)

    def request_computer_move(self, difficulty: Optional[str] = None) -> Optional[Move]:
        """
        Let the computer play White's turn.

        Args:
            difficulty: "basic" or "advanced" (default: the session's difficulty)

        Returns:
            The move played, or None if it is not White's turn or the game is over

        Raises:
            SearchExhaustedError: If the strategy returns no move although
                White has legal moves
        """
        if self.is_terminal() or self._turn != self.COMPUTER:
            return None
        return self.play_turn(self._strategy(difficulty or self._difficulty))

    def play_turn(self, strategy: Strategy) -> Move:
        """
        Play the current turn with `strategy`, whichever colour is to move.
        The session is busy while the strategy thinks.
        """
        player = self._turn
        if self.is_terminal():
            raise SearchExhaustedError("Game is over, no move to search for")
        with self.busy():
            move = strategy.choose_move_or_raise(self._board.copy(), player)
        self._play(move, player)
        return move

    def run_computer_turns(self, difficulty: Optional[str] = None) -> List[Move]:
        """Play White until it is Black's turn again or the game ends."""
        moves = []
        while not self.is_terminal() and self._turn == self.COMPUTER:
            moves.append(self.request_computer_move(difficulty))
        return moves

    def _strategy(self, difficulty: str) -> Strategy:
        if difficulty not in self._strategies:
            self._strategies[difficulty] = get_strategy(difficulty, self.config, self.rng)
        return self._strategies[difficulty]

    def _play(self, move: Move, player: int) -> None:
        apply_move(self._board, move, player, in_place=True)
        self.move_history.append({
            'player': player,
            'move': move.cell,
            'flipped': move.flips,
        })
        logger.info("%s plays (%d, %d), flipping %d",
                    PLAYER_NAMES[player], move.row, move.col, len(move.flips))
        self._turn = opponent(player)
        self._settle_turn()

    def _settle_turn(self) -> None:
        """Pass until the player to move has a legal move or the game is over."""
        while True:
            if is_terminal(self._board):
                black, white = self._board.get_score()
                logger.info("Game over: %s (Black %d : White %d)",
                            OUTCOMES[winner(self._board)], black, white)
                return
            if has_legal_move(self._board, self._turn):
                return
            logger.info("%s has no legal move and passes", PLAYER_NAMES[self._turn])
            self.move_history.append({'player': self._turn, 'move': None, 'flipped': ()})
            self._turn = opponent(self._turn)

    def __str__(self) -> str:
        """String representation of the game state."""
        result = str(self._board)
        result += f"\nCurrent player: {PLAYER_NAMES[self._turn]}"
        outcome = self.outcome()
        if outcome == 'draw':
            result += "\nGame over! It's a draw!"
        elif outcome is not None:
            result += f"\nGame over! {outcome.capitalize()} wins!"
        return result
