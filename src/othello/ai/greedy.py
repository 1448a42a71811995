"""
Greedy one-ply strategies ("basic" difficulty) and a random baseline.
"""
import random
from typing import Optional

from .base import Strategy
from ..game.board import Board, WHITE
from ..game.rules import Move, legal_moves, is_corner


class GreedyStrategy(Strategy):
    """
    Play the move that flips the most discs.

    Ties go to a corner move if one is tied (first in row-major order),
    otherwise to a uniformly random pick among the tied moves.
    """

    name = "basic"

    def __init__(self, rng: Optional[random.Random] = None):
        """
        Args:
            rng: Source of randomness for tie-breaks. Pass a seeded
                random.Random for reproducible play.
        """
        self.rng = rng or random.Random()

    def choose_move(self, board: Board, player: int = WHITE) -> Optional[Move]:
        moves = legal_moves(board, player)
        if not moves:
            return None

        best_len = max(len(m.flips) for m in moves)
        top = [m for m in moves if len(m.flips) == best_len]

        for move in top:
            if is_corner(move.row, move.col):
                return move
        return self.rng.choice(top)


class RandomStrategy(Strategy):
    """Uniformly random legal move. Baseline for arena matches."""

    name = "random"

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()

    def choose_move(self, board: Board, player: int = WHITE) -> Optional[Move]:
        moves = legal_moves(board, player)
        return self.rng.choice(moves) if moves else None
