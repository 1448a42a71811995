"""
Maps difficulty names to strategy instances.
"""
import random
from typing import Optional

from .base import Strategy
from .evaluator import Evaluator
from .greedy import GreedyStrategy, RandomStrategy
from .minimax import MinimaxStrategy
from ..config import Config, DIFFICULTIES


def get_strategy(difficulty: str, config: Optional[Config] = None,
                 rng: Optional[random.Random] = None) -> Strategy:
    """
    Build the strategy for a difficulty setting.

    Args:
        difficulty: "basic" (greedy), "advanced" (minimax) or "random"
        config: Supplies search depth and evaluator weights
        rng: Random source for strategies that break ties randomly

    Raises:
        ValueError: If the difficulty is unknown
    """
    config = config or Config()
    if difficulty == 'basic':
        return GreedyStrategy(rng)
    if difficulty == 'advanced':
        return MinimaxStrategy(depth=config.search.depth,
                               evaluator=Evaluator(config.evaluator))
    if difficulty == 'random':
        return RandomStrategy(rng)
    raise ValueError(f"Unknown difficulty {difficulty!r}, expected one of {DIFFICULTIES}")
