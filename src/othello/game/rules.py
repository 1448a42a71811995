"""
Rules engine for Othello.
Legal-move generation, flip computation, move application and
end-of-game detection. All functions are pure except apply_move(in_place=True).
"""
from typing import List, NamedTuple, Optional, Tuple

from .board import Board, EMPTY, BLACK, WHITE, opponent

Cell = Tuple[int, int]

# The 8 compass directions: NW, N, NE, W, E, SW, S, SE
DIRECTIONS = (
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1),           (0, 1),
    (1, -1),  (1, 0),  (1, 1),
)


class InvalidMoveError(ValueError):
    """Raised when a move targets an occupied cell or flips nothing."""


class Move(NamedTuple):
    """A legal placement and the opponent discs it flips."""
    row: int
    col: int
    flips: Tuple[Cell, ...]

    @property
    def cell(self) -> Cell:
        return (self.row, self.col)


def _flips(grid: List[List[int]], row: int, col: int, player: int) -> Tuple[Cell, ...]:
    """Flip computation on a nested-list grid (see flips_for)."""
    if grid[row][col] != EMPTY:
        return ()
    opp = 3 - player
    flips: List[Cell] = []
    for dr, dc in DIRECTIONS:
        r, c = row + dr, col + dc
        line = []
        while 0 <= r < 8 and 0 <= c < 8 and grid[r][c] == opp:
            line.append((r, c))
            r += dr
            c += dc
        if line and 0 <= r < 8 and 0 <= c < 8 and grid[r][c] == player:
            flips.extend(line)
    return tuple(flips)


def flips_for(board: Board, row: int, col: int, player: int) -> Tuple[Cell, ...]:
    """
    Get the opponent discs that placing `player` at (row, col) would flip.

    Args:
        board: Board to inspect (not modified)
        row: Target row (0-based)
        col: Target column (0-based)
        player: BLACK or WHITE

    Returns:
        Tuple of (row, col) cells; empty if the target is occupied,
        off the board, or brackets nothing. Treat it as a set.
    """
    opponent(player)  # validates player
    if not Board.in_bounds(row, col):
        return ()
    return _flips(board.rows(), row, col, player)


def legal_moves(board: Board, player: int) -> List[Move]:
    """
    Get all legal moves for a player in row-major order.

    Row-major order is the canonical tie-break order for anything that
    picks the "first" among equal moves.
    """
    opponent(player)  # validates player
    grid = board.rows()
    moves = []
    for r in range(8):
        for c in range(8):
            if grid[r][c] != EMPTY:
                continue
            flips = _flips(grid, r, c, player)
            if flips:
                moves.append(Move(r, c, flips))
    return moves


def has_legal_move(board: Board, player: int) -> bool:
    """Check if the player has at least one legal move."""
    opponent(player)  # validates player
    grid = board.rows()
    for r in range(8):
        for c in range(8):
            if grid[r][c] == EMPTY and _flips(grid, r, c, player):
                return True
    return False


def find_move(board: Board, row: int, col: int, player: int) -> Optional[Move]:
    """Return the legal move at (row, col) for `player`, or None."""
    flips = flips_for(board, row, col, player)
    return Move(row, col, flips) if flips else None


def apply_move(board: Board, move: Move, player: int, in_place: bool = False) -> Board:
    """
    Place `player` on the move's target and flip its captured discs.

    Args:
        board: Board to play on
        move: Candidate, normally one returned by legal_moves()
        player: BLACK or WHITE
        in_place: Mutate `board` instead of returning a new one. Only the
            game session does this, on the board it owns.

    Returns:
        The resulting board (`board` itself when in_place is set)

    Raises:
        InvalidMoveError: If the target is occupied, the flip set is empty,
            or a flip cell does not hold an opponent disc
    """
    opp = opponent(player)
    if not move.flips:
        raise InvalidMoveError(f"Move at ({move.row}, {move.col}) flips no discs")
    if not Board.in_bounds(move.row, move.col) or board[move.row, move.col] != EMPTY:
        raise InvalidMoveError(f"Cell ({move.row}, {move.col}) is not empty")
    for cell in move.flips:
        if not Board.in_bounds(*cell) or board[cell] != opp:
            raise InvalidMoveError(f"Cell {cell} does not hold an opponent disc")

    result = board if in_place else board.copy()
    result[move.row, move.col] = player
    for cell in move.flips:
        result[cell] = player
    return result


def is_terminal(board: Board) -> bool:
    """True iff neither player has a legal move. Empty cells may remain."""
    return not has_legal_move(board, BLACK) and not has_legal_move(board, WHITE)


def score(board: Board) -> Tuple[int, int]:
    """Disc tally as (black_count, white_count)."""
    return board.get_score()


tally = score


def winner(board: Board) -> int:
    """
    Compare disc counts.

    Returns:
        BLACK, WHITE, or 0 for a draw
    """
    black_count, white_count = score(board)
    if black_count > white_count:
        return BLACK
    if white_count > black_count:
        return WHITE
    return 0


def is_corner(row: int, col: int) -> bool:
    return (row, col) in Board.CORNERS
