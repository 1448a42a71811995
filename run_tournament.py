"""
Script for running matches between Othello computer strategies.
"""
import os
import sys
import random
import argparse
from pathlib import Path
from datetime import datetime

# Add src directory to path
sys.path.append(str(Path(__file__).parent.absolute() / "src"))

from othello.ai import get_strategy
from othello.arena import Arena
from othello.config import Config, get_default_config
from othello.logger import setup_logger


def main():
    parser = argparse.ArgumentParser(description='Run a match between Othello strategies')

    parser.add_argument('--player-a', type=str, default='advanced',
                        choices=['basic', 'advanced', 'random'],
                        help='First strategy (Black in the first game)')
    parser.add_argument('--player-b', type=str, default='basic',
                        choices=['basic', 'advanced', 'random'],
                        help='Second strategy')
    parser.add_argument('--games', type=int, default=None,
                        help='Number of games to play (default: from config)')
    parser.add_argument('--depth', type=int, default=None,
                        help='Minimax depth for the advanced strategy')
    parser.add_argument('--config', type=str, default=None,
                        help='Path to config file')
    parser.add_argument('--seed', type=int, default=None,
                        help='Random seed')
    parser.add_argument('--output-dir', type=str, default=None,
                        help='Directory to save match results')
    parser.add_argument('--no-progress', action='store_true',
                        help='Hide the progress bar')

    args = parser.parse_args()

    if args.config and os.path.exists(args.config):
        print(f"Loading configuration from {args.config}")
        config = Config.load(args.config)
    else:
        config = get_default_config()
    if args.depth is not None:
        config.search.depth = args.depth
    if args.output_dir is not None:
        config.arena.output_dir = args.output_dir
    if args.seed is not None:
        config.seed = args.seed
    config.validate()

    logger = setup_logger(config)
    rng = random.Random(config.seed)

    name_a, name_b = args.player_a, args.player_b
    if name_a == name_b:
        name_a, name_b = f"{name_a}_a", f"{name_b}_b"
    arena = Arena(get_strategy(args.player_a, config, rng),
                  get_strategy(args.player_b, config, rng),
                  config, name_a=name_a, name_b=name_b)

    print(f"\nStarting match: {name_a} vs {name_b}")
    results = arena.run_match(args.games, show_progress=not args.no_progress)

    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    results_file = os.path.join(config.arena.output_dir, f'match_{timestamp}.json')
    arena.save_results(results, results_file)

    logger.log_metrics({
        f'{name_a}_wins': results['wins'][name_a],
        f'{name_b}_wins': results['wins'][name_b],
        'draws': results['draws'],
        f'{name_a}_margin': results['average_margin'][name_a],
    }, results['games_played'])
    print(f"\nMatch completed! Results saved to {results_file}")
    logger.close()


if __name__ == '__main__':
    main()
