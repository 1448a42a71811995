"""
Abstract strategy interface.

Every computer opponent implements choose_move(). Strategies receive a
board snapshot and must never mutate it; hypothetical positions are built
with rules.apply_move(), which copies.
"""
from abc import ABC, abstractmethod
from typing import Optional

from ..game.board import Board, WHITE, PLAYER_NAMES
from ..game.rules import Move


class SearchExhaustedError(AssertionError):
    """A strategy was asked for a move in a position with no legal moves."""


class Strategy(ABC):
    """Base class for computer opponents."""

    name = "strategy"

    @abstractmethod
    def choose_move(self, board: Board, player: int = WHITE) -> Optional[Move]:
        """
        Pick a move for `player`.

        Args:
            board: Position to move in (read-only)
            player: Side to move, White by default

        Returns:
            One of legal_moves(board, player), or None if there are none
        """

    def choose_move_or_raise(self, board: Board, player: int = WHITE) -> Move:
        """Like choose_move(), for callers that already know a move exists."""
        move = self.choose_move(board, player)
        if move is None:
            raise SearchExhaustedError(
                f"{self.name} found no move for {PLAYER_NAMES[player]}")
        return move

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
