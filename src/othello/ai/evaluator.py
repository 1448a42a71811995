"""
Static evaluation of Othello positions.

Scores are always from White's perspective: positive favours White,
negative favours Black. The score is the sum of four independent terms:

    positional         weight table over occupied cells
    mobility           difference in legal move counts
    disc_differential  disc difference, weighted up in the late game
    corner_bonus       flat bonus per owned corner

The evaluator is stateless apart from its weights and has no notion of
search depth.
"""
from typing import Dict, Optional
import numpy as np

from ..config import EvaluatorConfig
from ..game.board import Board, BLACK, WHITE
from ..game.rules import legal_moves

# Classic Othello square weights. Symmetric under the 8 board symmetries.
WEIGHTS = np.array([
    [120, -20,  20,   5,   5,  20, -20, 120],
    [-20, -40,  -5,  -5,  -5,  -5, -40, -20],
    [ 20,  -5,  15,   3,   3,  15,  -5,  20],
    [  5,  -5,   3,   3,   3,   3,  -5,   5],
    [  5,  -5,   3,   3,   3,   3,  -5,   5],
    [ 20,  -5,  15,   3,   3,  15,  -5,  20],
    [-20, -40,  -5,  -5,  -5,  -5, -40, -20],
    [120, -20,  20,   5,   5,  20, -20, 120],
], dtype=np.int32)
WEIGHTS.setflags(write=False)


class Evaluator:
    """Weighted positional evaluator."""

    def __init__(self, config: Optional[EvaluatorConfig] = None):
        self.config = config or EvaluatorConfig()

    def positional(self, board: Board) -> float:
        cells = board.get_board_state()
        return float(WEIGHTS[cells == WHITE].sum() - WEIGHTS[cells == BLACK].sum())

    def mobility(self, board: Board) -> float:
        white_moves = len(legal_moves(board, WHITE))
        black_moves = len(legal_moves(board, BLACK))
        return self.config.mobility_weight * (white_moves - black_moves)

    def phase_factor(self, board: Board) -> float:
        """Disc-count weight: high once fewer than 35% of cells are empty."""
        empty_fraction = board.empty_count() / Board.BOARD_SIZE
        if empty_fraction < self.config.late_game_threshold:
            return self.config.late_game_disc_weight
        return self.config.early_game_disc_weight

    def disc_differential(self, board: Board) -> float:
        black, white = board.get_score()
        return (white - black) * self.phase_factor(board)

    def corner_bonus(self, board: Board) -> float:
        total = 0.0
        for pos in Board.CORNERS:
            if board[pos] == WHITE:
                total += self.config.corner_bonus
            elif board[pos] == BLACK:
                total -= self.config.corner_bonus
        return total

    def breakdown(self, board: Board) -> Dict[str, float]:
        """Each term separately, keyed by name."""
        return {
            'positional': self.positional(board),
            'mobility': self.mobility(board),
            'disc_differential': self.disc_differential(board),
            'corner_bonus': self.corner_bonus(board),
        }

    def evaluate(self, board: Board) -> float:
        """
        Evaluate a position from White's perspective.

        Args:
            board: Position to score (not modified)

        Returns:
            Sum of the four evaluation terms
        """
        return (self.positional(board) + self.mobility(board)
                + self.disc_differential(board) + self.corner_bonus(board))

    __call__ = evaluate
