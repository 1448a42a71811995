"""
Configuration parameters for Othello.
"""
import os
from dataclasses import dataclass, asdict, field
from typing import Dict, Any
import json

DIFFICULTIES = ('basic', 'advanced', 'random')
LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


@dataclass
class SearchConfig:
    """Configuration for the computer opponent."""
    difficulty: str = "advanced"  # "basic" = greedy, "advanced" = minimax
    depth: int = 3  # Minimax depth in plies, passes included


@dataclass
class EvaluatorConfig:
    """Weights of the static evaluation terms."""
    mobility_weight: float = 8.0
    corner_bonus: float = 30.0
    late_game_threshold: float = 0.35  # Empty-cell fraction below which the game is "late"
    late_game_disc_weight: float = 6.0
    early_game_disc_weight: float = 1.5


@dataclass
class ArenaConfig:
    """Configuration for computer-vs-computer matches."""
    num_games: int = 10
    output_dir: str = "arena_results"
    swap_colors: bool = True  # Alternate who plays Black every game


@dataclass
class LoggingConfig:
    """Configuration for logging."""
    log_dir: str = "logs"
    log_level: str = "INFO"
    log_to_file: bool = False
    verbose: bool = True


@dataclass
class Config:
    """Main configuration class."""
    project_name: str = "Othello"
    seed: int = 42
    search: SearchConfig = field(default_factory=SearchConfig)
    evaluator: EvaluatorConfig = field(default_factory=EvaluatorConfig)
    arena: ArenaConfig = field(default_factory=ArenaConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    def validate(self) -> 'Config':
        """
        Check values that would otherwise fail deep inside a game.

        Raises:
            ValueError: On an unknown difficulty or log level, or a bad depth
        """
        if self.search.difficulty not in DIFFICULTIES:
            raise ValueError(
                f"Unknown difficulty {self.search.difficulty!r}, expected one of {DIFFICULTIES}")
        if self.search.depth < 1:
            raise ValueError(f"Search depth must be at least 1, got {self.search.depth}")
        if not 0.0 <= self.evaluator.late_game_threshold <= 1.0:
            raise ValueError("late_game_threshold must be within [0, 1]")
        if self.logging.log_level.upper() not in LOG_LEVELS:
            raise ValueError(f"Unknown log level {self.logging.log_level!r}")
        if self.arena.num_games < 1:
            raise ValueError("Arena needs at least one game")
        return self

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary."""
        return asdict(self)

    def save(self, filepath: str):
        """Save config to JSON file."""
        os.makedirs(os.path.dirname(os.path.abspath(filepath)), exist_ok=True)
        with open(filepath, 'w') as f:
            json.dump(self.to_dict(), f, indent=2)

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> 'Config':
        """Create config from dictionary. Missing keys keep their defaults."""
        return cls(
            project_name=config_dict.get('project_name', 'Othello'),
            seed=config_dict.get('seed', 42),
            search=SearchConfig(**config_dict.get('search', {})),
            evaluator=EvaluatorConfig(**config_dict.get('evaluator', {})),
            arena=ArenaConfig(**config_dict.get('arena', {})),
            logging=LoggingConfig(**config_dict.get('logging', {}))
        ).validate()

    @classmethod
    def load(cls, filepath: str) -> 'Config':
        """Load config from JSON file."""
        with open(filepath, 'r') as f:
            config_dict = json.load(f)
        return cls.from_dict(config_dict)


def get_default_config() -> Config:
    """Get default configuration."""
    return Config()
