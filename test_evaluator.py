"""
Unit tests for the static evaluator.
"""
import sys
from pathlib import Path

import numpy as np
import pytest

# Add src directory to path
sys.path.append(str(Path(__file__).parent.absolute() / "src"))

from othello.ai.evaluator import Evaluator, WEIGHTS
from othello.config import EvaluatorConfig
from othello.game.board import Board, BLACK, WHITE
from othello.game.rules import find_move, apply_move


def filled_board(white: int, black: int) -> Board:
    """Board with `white` White discs then `black` Black discs in row-major order."""
    cells = [WHITE] * white + [BLACK] * black + [0] * (64 - white - black)
    return Board([cells[i * 8:(i + 1) * 8] for i in range(8)])


@pytest.fixture
def evaluator():
    return Evaluator()


def test_weight_table_values():
    assert WEIGHTS[0, 0] == 120
    assert WEIGHTS[0, 1] == -20
    assert WEIGHTS[1, 1] == -40
    assert WEIGHTS[1, 2] == -5
    assert WEIGHTS[2, 2] == 15
    assert WEIGHTS[0, 2] == 20
    assert WEIGHTS[0, 3] == 5
    assert WEIGHTS[3, 3] == 3


def test_weight_table_symmetry():
    for transformed in (WEIGHTS.T, np.fliplr(WEIGHTS), np.flipud(WEIGHTS), np.rot90(WEIGHTS)):
        assert np.array_equal(transformed, WEIGHTS)


def test_initial_position_is_balanced(evaluator):
    board = Board.initial()
    assert evaluator.evaluate(board) == 0.0
    assert evaluator.breakdown(board) == {
        'positional': 0.0, 'mobility': 0.0, 'disc_differential': 0.0, 'corner_bonus': 0.0,
    }


def test_after_first_move(evaluator):
    """Black (2, 3): positional -9, mobility 0, discs (1 - 4) * 1.5, no corners."""
    board = Board.initial()
    board = apply_move(board, find_move(board, 2, 3, BLACK), BLACK)
    terms = evaluator.breakdown(board)
    assert terms['positional'] == -9.0
    assert terms['mobility'] == 0.0
    assert terms['disc_differential'] == -4.5
    assert terms['corner_bonus'] == 0.0
    assert evaluator.evaluate(board) == -13.5


def test_positional_signs(evaluator):
    board = Board()
    board[0, 0] = WHITE
    board[1, 1] = BLACK
    assert evaluator.positional(board) == 160.0


def test_mobility_term(evaluator):
    # White can play (0, 2); Black has no move
    board = Board.from_rows(["WB......"] + ["........"] * 7)
    assert evaluator.mobility(board) == 8.0


def test_disc_differential_phase(evaluator):
    late = filled_board(white=22, black=20)  # 22 empty cells
    assert evaluator.phase_factor(late) == 6.0
    assert evaluator.disc_differential(late) == 12.0

    mid = filled_board(white=22, black=19)  # 23 empty cells
    assert evaluator.phase_factor(mid) == 1.5
    assert evaluator.disc_differential(mid) == 4.5


def test_corner_bonus(evaluator):
    board = Board()
    board[0, 0] = WHITE
    board[7, 7] = WHITE
    board[0, 7] = BLACK
    assert evaluator.corner_bonus(board) == 30.0


def test_evaluate_is_sum_of_terms(evaluator):
    board = Board.from_rows([
        "WWB.....",
        "BWB.....",
        "..WB....",
        "...WB...",
        "...BW...",
        "........",
        "........",
        ".......B",
    ])
    terms = evaluator.breakdown(board)
    assert evaluator.evaluate(board) == pytest.approx(sum(terms.values()))
    assert evaluator(board) == evaluator.evaluate(board)


def test_evaluate_does_not_mutate(evaluator):
    board = Board.initial()
    before = board.copy()
    evaluator.evaluate(board)
    assert board == before


def test_custom_weights():
    evaluator = Evaluator(EvaluatorConfig(mobility_weight=1.0, corner_bonus=0.0))
    board = Board.from_rows(["WB......"] + ["........"] * 7)
    assert evaluator.mobility(board) == 1.0
    assert evaluator.corner_bonus(board) == 0.0
