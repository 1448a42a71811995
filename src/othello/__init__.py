"""
Othello: rules engine and computer opponents for a human-vs-computer game.
"""

from .config import Config, get_default_config
from .game.board import Board, EMPTY, BLACK, WHITE
from .game.game import GameSession, GameState, MoveResult, new_game

__version__ = "0.1.0"

__all__ = [
    'Config', 'get_default_config', 'Board', 'EMPTY', 'BLACK', 'WHITE',
    'GameSession', 'GameState', 'MoveResult', 'new_game',
]
