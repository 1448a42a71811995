"""
Play Othello in the terminal: you are Black, the computer is White.
"""
import os
import sys
import random
import argparse
from pathlib import Path
from typing import Optional, Tuple

# Add src directory to path
sys.path.append(str(Path(__file__).parent.absolute() / "src"))

from othello.config import Config, get_default_config
from othello.game.game import GameSession, GameState
from othello.logger import setup_logger

HELP = """Commands:
  r c | d3   place a disc (row/column 0-7, or column letter + row 1-8)
  hint       toggle move hints
  restart    start a new game
  quit       leave"""


def parse_cell(text: str) -> Optional[Tuple[int, int]]:
    """Parse "2 3", "2,3" or "d3" into a 0-based (row, col)."""
    text = text.strip().lower().replace(',', ' ')
    parts = text.split()
    if len(parts) == 2 and all(p.isdigit() for p in parts):
        return int(parts[0]), int(parts[1])
    if len(text) == 2 and text[0] in 'abcdefgh' and text[1] in '12345678':
        return int(text[1]) - 1, ord(text[0]) - ord('a')
    return None


def render(session: GameSession, show_hints: bool) -> str:
    """Draw the board, marking hints with '*'."""
    hints = {m.cell for m in session.hints()} if show_hints else set()
    board = session.board
    lines = ['  ' + ' '.join(str(c) for c in range(8))]
    for r in range(8):
        row = []
        for c in range(8):
            value = board[r, c]
            if value == board.BLACK:
                row.append('B')
            elif value == board.WHITE:
                row.append('W')
            else:
                row.append('*' if (r, c) in hints else '.')
        lines.append(f"{r} " + ' '.join(row))
    black, white = session.get_score()
    lines.append(f"Black (you): {black}  White (computer): {white}")
    return "\n".join(lines)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Play Othello against the computer')
    parser.add_argument('--difficulty', type=str, choices=['basic', 'advanced'], default=None,
                        help='Computer strength (default: from config)')
    parser.add_argument('--config', type=str, default=None,
                        help='Path to config file')
    parser.add_argument('--seed', type=int, default=None,
                        help='Random seed for the computer\'s tie-breaks')
    parser.add_argument('--no-hints', action='store_true',
                        help='Do not mark legal moves')
    parser.add_argument('--verbose', action='store_true',
                        help='Log every move and pass to stderr')
    return parser


def build_config(args: argparse.Namespace) -> Config:
    """Config for an interactive game. Move logging stays quiet unless --verbose."""
    if args.config and os.path.exists(args.config):
        config = Config.load(args.config)
    else:
        config = get_default_config()
    if args.difficulty:
        config.search.difficulty = args.difficulty
    if not args.verbose:
        config.logging.log_level = 'WARNING'
    return config


def main():
    args = build_parser().parse_args()
    config = build_config(args)
    logger = setup_logger(config)

    rng = random.Random(args.seed) if args.seed is not None else random.Random()
    session = GameSession(config, rng=rng)
    show_hints = not args.no_hints
    print(HELP)

    try:
        while True:
            print()
            print(render(session, show_hints))
            if session.state == GameState.TERMINAL:
                outcome = session.outcome()
                print("Draw!" if outcome == 'draw' else
                      ("You win!" if outcome == 'black' else "The computer wins!"))
                command = input("Type 'restart' or 'quit': ").strip().lower()
            else:
                command = input("Your move: ").strip().lower()

            if command in ('quit', 'exit', 'q'):
                break
            if command == 'restart':
                session.reset()
                continue
            if command == 'hint':
                show_hints = not show_hints
                continue

            cell = parse_cell(command)
            if cell is None:
                print(HELP)
                continue
            result = session.apply_human_move(*cell)
            if not result.accepted:
                print(f"Move rejected: {result.reason}")
                continue
            print(f"You flipped {len(result.flipped_cells)}")
            for move in session.run_computer_turns():
                print(f"Computer plays ({move.row}, {move.col}) and flips {len(move.flips)}")
    except (KeyboardInterrupt, EOFError):
        print()
    finally:
        logger.close()


if __name__ == "__main__":
    main()
