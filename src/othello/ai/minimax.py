"""
Minimax Search with Alpha-Beta Pruning

Depth-limited minimax over Othello positions. White is the maximizing
side, Black the minimizing side; scores come from the Evaluator and are
always from White's perspective.

Rules of the recursion:
    - depth 0 or a terminal board: return the static evaluation
    - side to move has no legal move: pass, which still costs one ply
    - alpha/beta are threaded through every call; a branch is cut as soon
      as alpha >= beta

The root searches each candidate with a full (-inf, +inf) window and keeps
the first strictly improving move, so with or without pruning the chosen
move and its value are identical.

Every function here is pure: boards are never mutated, children are built
with rules.apply_move(), which copies.
"""
import logging
import math
from dataclasses import dataclass
from typing import Optional, Tuple

from .base import Strategy
from .evaluator import Evaluator
from ..game.board import Board, BLACK, WHITE, PLAYER_NAMES
from ..game.rules import Move, legal_moves, apply_move, is_terminal

logger = logging.getLogger(__name__)

DEFAULT_DEPTH = 3


@dataclass
class SearchStats:
    """Counters filled in by a search."""
    nodes: int = 0
    leaves: int = 0
    cutoffs: int = 0


def minimax(
    board: Board,
    depth: int,
    alpha: float,
    beta: float,
    maximizing: bool,
    evaluator: Evaluator,
    prune: bool = True,
    stats: Optional[SearchStats] = None,
) -> float:
    """
    Minimax search with optional alpha-beta pruning.

    Args:
        board: Position to search (read-only)
        depth: Remaining plies; a pass consumes one
        alpha: Best score the maximizer can already guarantee
        beta: Best score the minimizer can already guarantee
        maximizing: True if White is to move
        evaluator: Static evaluation function
        prune: Disable to run the exhaustive search
        stats: Optional counters to update

    Returns:
        float: Value of the position from White's perspective
    """
    if stats is not None:
        stats.nodes += 1

    if depth == 0 or is_terminal(board):
        if stats is not None:
            stats.leaves += 1
        return evaluator.evaluate(board)

    player = WHITE if maximizing else BLACK
    moves = legal_moves(board, player)

    # Pass
    if not moves:
        return minimax(board, depth - 1, alpha, beta, not maximizing,
                       evaluator, prune, stats)

    if maximizing:
        value = -math.inf
        for move in moves:
            child = apply_move(board, move, WHITE)
            value = max(value, minimax(child, depth - 1, alpha, beta, False,
                                       evaluator, prune, stats))
            alpha = max(alpha, value)
            if prune and alpha >= beta:
                if stats is not None:
                    stats.cutoffs += 1
                break
        return value

    value = math.inf
    for move in moves:
        child = apply_move(board, move, BLACK)
        value = min(value, minimax(child, depth - 1, alpha, beta, True,
                                   evaluator, prune, stats))
        beta = min(beta, value)
        if prune and alpha >= beta:
            if stats is not None:
                stats.cutoffs += 1
            break
    return value


def find_best_move(
    board: Board,
    depth: int = DEFAULT_DEPTH,
    evaluator: Optional[Evaluator] = None,
    player: int = WHITE,
    prune: bool = True,
    stats: Optional[SearchStats] = None,
) -> Tuple[Optional[Move], float]:
    """
    Root-level search.

    White keeps the first move with a strictly greater value, Black the
    first with a strictly smaller one; ties go to the earlier move in
    row-major order.

    Returns:
        (best_move, value), or (None, static evaluation) if `player`
        has no legal move
    """
    evaluator = evaluator or Evaluator()
    moves = legal_moves(board, player)
    if not moves:
        return None, evaluator.evaluate(board)

    maximizing = player == WHITE
    best_move = None
    best_value = -math.inf if maximizing else math.inf

    for move in moves:
        child = apply_move(board, move, player)
        value = minimax(child, depth - 1, -math.inf, math.inf, not maximizing,
                        evaluator, prune, stats)
        if (maximizing and value > best_value) or (not maximizing and value < best_value):
            best_value = value
            best_move = move

    return best_move, best_value


class MinimaxStrategy(Strategy):
    """Fixed-depth alpha-beta search ("advanced" difficulty)."""

    name = "advanced"

    def __init__(self, depth: int = DEFAULT_DEPTH, evaluator: Optional[Evaluator] = None,
                 prune: bool = True):
        if depth < 1:
            raise ValueError(f"Search depth must be at least 1, got {depth}")
        self.depth = depth
        self.evaluator = evaluator or Evaluator()
        self.prune = prune
        self.last_stats: Optional[SearchStats] = None
        self.last_value: Optional[float] = None

    def choose_move(self, board: Board, player: int = WHITE) -> Optional[Move]:
        stats = SearchStats()
        move, value = find_best_move(board, self.depth, self.evaluator, player,
                                     self.prune, stats)
        self.last_stats = stats
        self.last_value = value
        if move is not None:
            logger.debug(
                "%s searched depth %d: move=(%d, %d) value=%.1f nodes=%d leaves=%d cutoffs=%d",
                PLAYER_NAMES[player], self.depth, move.row, move.col, value,
                stats.nodes, stats.leaves, stats.cutoffs)
        return move

    def __repr__(self) -> str:
        return f"MinimaxStrategy(depth={self.depth})"
