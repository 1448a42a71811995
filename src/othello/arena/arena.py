"""
Arena for running matches between computer strategies.
"""
import os
import json
import logging
import time
from dataclasses import dataclass, field, asdict
from datetime import datetime
from typing import Any, Dict, List, Optional, Tuple

from tqdm import tqdm

from ..ai.base import Strategy
from ..config import Config, get_default_config
from ..game.board import BLACK, WHITE
from ..game.game import GameSession, OUTCOMES

logger = logging.getLogger(__name__)


@dataclass
class GameRecord:
    """Result of one arena game."""
    black: str
    white: str
    moves: List[Optional[Tuple[int, int]]] = field(default_factory=list)
    passes: int = 0
    black_count: int = 0
    white_count: int = 0
    winner: str = 'draw'

    @property
    def plies(self) -> int:
        return sum(1 for m in self.moves if m is not None)


class Arena:
    """Plays two strategies against each other and keeps the score."""

    def __init__(self, player_a: Strategy, player_b: Strategy, config: Optional[Config] = None,
                 name_a: Optional[str] = None, name_b: Optional[str] = None):
        """
        Initialize the arena.

        Args:
            player_a: First strategy (Black in the first game)
            player_b: Second strategy
            config: Configuration; arena settings come from config.arena
            name_a: Label for player_a (default: its strategy name)
            name_b: Label for player_b
        """
        self.config = config or get_default_config()
        self.players = {
            name_a or player_a.name: player_a,
            name_b or player_b.name: player_b,
        }
        if len(self.players) != 2:
            raise ValueError("Arena players need distinct names")
        self.name_a, self.name_b = list(self.players)
        self.records: List[GameRecord] = []

    def play_game(self, black_id: str, white_id: str) -> GameRecord:
        """
        Play a single game.

        Args:
            black_id: Name of the player moving first
            white_id: Name of the other player

        Returns:
            GameRecord with the move list and final tally
        """
        if black_id not in self.players or white_id not in self.players:
            raise ValueError(f"One or both players not found: {black_id}, {white_id}")

        session = GameSession(self.config)
        sides = {BLACK: self.players[black_id], WHITE: self.players[white_id]}

        while not session.is_terminal():
            session.play_turn(sides[session.current_player])

        black_count, white_count = session.get_score()
        record = GameRecord(
            black=black_id,
            white=white_id,
            moves=[entry['move'] for entry in session.move_history],
            passes=sum(1 for entry in session.move_history if entry['move'] is None),
            black_count=black_count,
            white_count=white_count,
            winner=session.outcome(),
        )
        logger.debug("%s (Black) vs %s (White): %s %d-%d",
                     black_id, white_id, record.winner, black_count, white_count)
        return record

    def run_match(self, num_games: Optional[int] = None, show_progress: bool = True) -> Dict[str, Any]:
        """
        Play a series of games.

        Args:
            num_games: Number of games (default: config.arena.num_games)
            show_progress: Show a tqdm progress bar

        Returns:
            Dictionary with per-player wins, draws and average disc margin.
            `records` holds the games of this match only.

        Raises:
            ValueError: If num_games is less than 1
        """
        if num_games is None:
            num_games = self.config.arena.num_games
        if num_games < 1:
            raise ValueError(f"A match needs at least one game, got {num_games}")
        self.records = []
        start = time.time()
        results = {
            'games_played': 0,
            'wins': {self.name_a: 0, self.name_b: 0},
            'draws': 0,
            'margin': {self.name_a: 0, self.name_b: 0},
        }

        for game_num in tqdm(range(num_games), desc="Arena", disable=not show_progress):
            if self.config.arena.swap_colors and game_num % 2 == 1:
                black_id, white_id = self.name_b, self.name_a
            else:
                black_id, white_id = self.name_a, self.name_b

            record = self.play_game(black_id, white_id)
            self.records.append(record)
            results['games_played'] += 1

            if record.winner == OUTCOMES[BLACK]:
                results['wins'][black_id] += 1
            elif record.winner == OUTCOMES[WHITE]:
                results['wins'][white_id] += 1
            else:
                results['draws'] += 1
            results['margin'][black_id] += record.black_count - record.white_count
            results['margin'][white_id] += record.white_count - record.black_count

        results['average_margin'] = {
            name: total / results['games_played'] for name, total in results['margin'].items()
        }
        del results['margin']
        results['duration'] = time.time() - start
        return results

    def save_results(self, results: Dict[str, Any], filepath: str):
        """Save match results and the game records to a JSON file."""
        os.makedirs(os.path.dirname(os.path.abspath(filepath)), exist_ok=True)
        data = {
            'timestamp': datetime.now().isoformat(),
            'players': {name: repr(strategy) for name, strategy in self.players.items()},
            'results': results,
            'games': [asdict(record) for record in self.records],
        }
        with open(filepath, 'w') as f:
            json.dump(data, f, indent=2)
