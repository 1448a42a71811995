"""
Unit tests for the greedy and minimax strategies.
"""
import math
import random
import sys
from pathlib import Path

import pytest

# Add src directory to path
sys.path.append(str(Path(__file__).parent.absolute() / "src"))

from othello.ai import (
    Evaluator, GreedyStrategy, RandomStrategy, MinimaxStrategy, SearchStats,
    SearchExhaustedError, minimax, find_best_move, get_strategy,
)
from othello.config import Config
from othello.game.board import Board, BLACK, WHITE
from othello.game.rules import find_move, apply_move, legal_moves

CORNER_TIE = Board.from_rows([
    "...BW...",
    "........",
    "........",
    "........",
    "........",
    "........",
    "........",
    ".....WB.",
])

TWO_FLIPS = Board.from_rows([
    "........",
    "........",
    ".BBW....",
    "........",
    "........",
    "....BW..",
    "........",
    "........",
])

PLAIN_TIE = Board.from_rows([
    "........",
    "..BW....",
    "........",
    "........",
    "........",
    "....BW..",
    "........",
    "........",
])


def opening_positions():
    """A few early positions reached by fixed play."""
    board = Board.initial()
    positions = [board]
    for (row, col), player in [((2, 3), BLACK), ((2, 2), WHITE), ((3, 2), BLACK)]:
        board = apply_move(board, find_move(board, row, col, player), player)
        positions.append(board)
    return positions


class TestGreedy:
    def test_prefers_most_flips(self):
        move = GreedyStrategy(random.Random(0)).choose_move(TWO_FLIPS, WHITE)
        assert move.cell == (2, 0)
        assert len(move.flips) == 2

    def test_corner_wins_tie(self):
        assert [m.cell for m in legal_moves(CORNER_TIE, WHITE)] == [(0, 2), (7, 7)]
        for seed in range(20):
            move = GreedyStrategy(random.Random(seed)).choose_move(CORNER_TIE, WHITE)
            assert move.cell == (7, 7), "A tied corner move must be preferred"

    def test_random_tie_break_uses_rng(self):
        tied = {m.cell for m in legal_moves(PLAIN_TIE, WHITE)}
        assert tied == {(1, 1), (5, 3)}

        chosen = {GreedyStrategy(random.Random(seed)).choose_move(PLAIN_TIE, WHITE).cell
                  for seed in range(50)}
        assert chosen == tied

        first = GreedyStrategy(random.Random(5)).choose_move(PLAIN_TIE, WHITE)
        again = GreedyStrategy(random.Random(5)).choose_move(PLAIN_TIE, WHITE)
        assert first == again, "Same seed must give the same choice"

    def test_no_moves_returns_none(self):
        board = Board.from_rows(["WB......"] + ["........"] * 7)
        assert GreedyStrategy().choose_move(board, BLACK) is None
        with pytest.raises(SearchExhaustedError):
            GreedyStrategy().choose_move_or_raise(board, BLACK)


class TestMinimax:
    @pytest.fixture
    def evaluator(self):
        return Evaluator()

    def test_depth_zero_is_static_evaluation(self, evaluator):
        board = opening_positions()[1]
        assert minimax(board, 0, -math.inf, math.inf, True, evaluator) == evaluator.evaluate(board)

    def test_pass_consumes_depth(self, evaluator):
        # White has no move, Black has one: a depth-1 search just passes
        board = Board.from_rows(["BW......"] + ["........"] * 7)
        assert not legal_moves(board, WHITE)
        assert legal_moves(board, BLACK)
        value = minimax(board, 1, -math.inf, math.inf, True, evaluator)
        assert value == evaluator.evaluate(board)

    def test_pass_then_reply(self, evaluator):
        # White passes, then Black's reply is searched with the remaining ply
        board = Board.from_rows(["BW......"] + ["........"] * 7)
        replies = [apply_move(board, m, BLACK) for m in legal_moves(board, BLACK)]
        value = minimax(board, 2, -math.inf, math.inf, True, evaluator)
        assert value == min(evaluator.evaluate(child) for child in replies)
        assert value == evaluator.evaluate(apply_move(board, find_move(board, 0, 2, BLACK), BLACK))
        assert value != minimax(board, 1, -math.inf, math.inf, True, evaluator)

    def test_initial_board_move_is_legal(self, evaluator):
        board = Board.initial()
        move, _ = find_best_move(board, depth=3, evaluator=evaluator)
        assert move in legal_moves(board, WHITE)

    def test_after_first_black_move(self):
        board = opening_positions()[1]
        move = MinimaxStrategy(depth=3).choose_move(board)
        assert move in legal_moves(board, WHITE)

    @pytest.mark.parametrize("depth", [1, 2, 3])
    def test_alpha_beta_matches_full_minimax(self, evaluator, depth):
        for board in opening_positions():
            for player in (WHITE, BLACK):
                pruned_stats, full_stats = SearchStats(), SearchStats()
                pruned = find_best_move(board, depth, evaluator, player, True, pruned_stats)
                full = find_best_move(board, depth, evaluator, player, False, full_stats)
                assert pruned == full, "Pruning must not change the move or its value"
                assert full_stats.cutoffs == 0
                assert pruned_stats.nodes <= full_stats.nodes

    def test_alpha_beta_prunes(self, evaluator):
        cutoffs = 0
        for board in opening_positions():
            for player in (WHITE, BLACK):
                stats = SearchStats()
                find_best_move(board, 3, evaluator, player, True, stats)
                cutoffs += stats.cutoffs
        assert cutoffs > 0, "Depth-3 search should cut at least one branch"

    def test_takes_corner(self, evaluator):
        move, value = find_best_move(CORNER_TIE, depth=1, evaluator=evaluator)
        assert move.cell == (7, 7)
        assert value == 154.5

    def test_first_improving_move_wins_ties(self):
        class Flat:
            def evaluate(self, board):
                return 0.0

        board = Board.initial()
        move, value = find_best_move(board, depth=2, evaluator=Flat())
        assert move == legal_moves(board, WHITE)[0]
        assert value == 0.0

    def test_search_does_not_mutate_board(self, evaluator):
        board = opening_positions()[2]
        before = board.copy()
        find_best_move(board, depth=3, evaluator=evaluator)
        assert board == before

    def test_plays_black(self, evaluator):
        board = Board.initial()
        move, _ = find_best_move(board, depth=2, evaluator=evaluator, player=BLACK)
        assert move in legal_moves(board, BLACK)

    def test_no_moves_returns_none(self):
        board = Board.from_rows(["BW......"] + ["........"] * 7)
        strategy = MinimaxStrategy()
        assert strategy.choose_move(board, WHITE) is None
        with pytest.raises(SearchExhaustedError):
            strategy.choose_move_or_raise(board, WHITE)

    def test_records_stats(self):
        strategy = MinimaxStrategy(depth=2)
        strategy.choose_move(Board.initial())
        assert strategy.last_stats.nodes > 0
        assert strategy.last_stats.leaves > 0

    def test_rejects_bad_depth(self):
        with pytest.raises(ValueError):
            MinimaxStrategy(depth=0)


def test_get_strategy():
    config = Config()
    config.search.depth = 2
    assert isinstance(get_strategy('basic', config), GreedyStrategy)
    assert isinstance(get_strategy('random', config), RandomStrategy)
    advanced = get_strategy('advanced', config)
    assert isinstance(advanced, MinimaxStrategy)
    assert advanced.depth == 2
    with pytest.raises(ValueError):
        get_strategy('expert', config)


def test_random_strategy_is_legal():
    board = Board.initial()
    move = RandomStrategy(random.Random(1)).choose_move(board, BLACK)
    assert move in legal_moves(board, BLACK)
