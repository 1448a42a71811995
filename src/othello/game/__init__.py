"""
Othello game module.
This package contains the board model and the rules engine. The game
session lives in othello.game.game.
"""

from .board import Board, EMPTY, BLACK, WHITE, opponent
from .rules import (
    Move, InvalidMoveError, flips_for, legal_moves, has_legal_move,
    find_move, apply_move, is_terminal, score, tally, winner,
)

__all__ = [
    'Board', 'EMPTY', 'BLACK', 'WHITE', 'opponent',
    'Move', 'InvalidMoveError', 'flips_for', 'legal_moves', 'has_legal_move',
    'find_move', 'apply_move', 'is_terminal', 'score', 'tally', 'winner',
]
