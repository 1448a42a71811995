"""
Computer opponents: static evaluation, greedy and minimax strategies.
"""
from .base import Strategy, SearchExhaustedError
from .evaluator import Evaluator, WEIGHTS
from .greedy import GreedyStrategy, RandomStrategy
from .minimax import MinimaxStrategy, SearchStats, minimax, find_best_move
from .factory import get_strategy

__all__ = [
    'Strategy', 'SearchExhaustedError', 'Evaluator', 'WEIGHTS',
    'GreedyStrategy', 'RandomStrategy', 'MinimaxStrategy', 'SearchStats',
    'minimax', 'find_best_move', 'get_strategy',
]
