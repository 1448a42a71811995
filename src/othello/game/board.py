"""
Board module for Othello.
Holds the 8x8 grid of cell states and the invariant checks on it.
The grid is a numpy array; rules code reads it through plain nested lists.
"""
from typing import Iterable, List, Optional, Sequence, Tuple
import numpy as np

# Cell / player constants
EMPTY = 0
BLACK = 1  # Human, moves first
WHITE = 2  # Computer

PLAYER_NAMES = {BLACK: 'Black', WHITE: 'White'}


def opponent(player: int) -> int:
    """Return the other player. Only defined for BLACK and WHITE."""
    if player not in (BLACK, WHITE):
        raise ValueError(f"Not a player: {player!r}")
    return 3 - player


class Board:
    """
    Represents the Othello board as an 8x8 grid of cell states.

    Each cell holds EMPTY, BLACK or WHITE. Boards used for search are
    treated as immutable snapshots; only the game session mutates its own
    board in place.
    """

    # Board dimensions
    SIZE = 8
    BOARD_SIZE = SIZE * SIZE

    # Player constants
    EMPTY = EMPTY
    BLACK = BLACK
    WHITE = WHITE

    CORNERS = ((0, 0), (0, 7), (7, 0), (7, 7))

    def __init__(self, cells: Optional[Iterable[Iterable[int]]] = None):
        """
        Create a board.

        Args:
            cells: Optional 8x8 grid of cell states. An empty board is
                created when omitted.

        Raises:
            ValueError: If the grid is not 8x8 or holds an unknown cell state
        """
        if cells is None:
            self._cells = np.zeros((self.SIZE, self.SIZE), dtype=np.int8)
        else:
            grid = np.array(cells, dtype=np.int8)
            if grid.shape != (self.SIZE, self.SIZE):
                raise ValueError(f"Board must be {self.SIZE}x{self.SIZE}, got shape {grid.shape}")
            if not np.isin(grid, (EMPTY, BLACK, WHITE)).all():
                raise ValueError("Board cells must be EMPTY (0), BLACK (1) or WHITE (2)")
            self._cells = grid

    @classmethod
    def initial(cls) -> 'Board':
        """Return the standard starting position."""
        board = cls()
        board._cells[3, 3] = WHITE
        board._cells[4, 4] = WHITE
        board._cells[3, 4] = BLACK
        board._cells[4, 3] = BLACK
        return board

    @classmethod
    def from_rows(cls, rows: Sequence[str]) -> 'Board':
        """
        Build a board from eight strings using '.', 'B' and 'W'.
        Whitespace inside a row is ignored, so "B W . ." and "BW.." are
        the same row.
        """
        symbols = {'.': EMPTY, 'B': BLACK, 'W': WHITE}
        grid = []
        for row in rows:
            cleaned = ''.join(row.split())
            try:
                grid.append([symbols[ch] for ch in cleaned.upper()])
            except KeyError as e:
                raise ValueError(f"Unknown cell symbol {e.args[0]!r} in row {row!r}") from None
        return cls(grid)

    def copy(self) -> 'Board':
        """Create a deep copy of the board."""
        new_board = Board.__new__(Board)
        new_board._cells = self._cells.copy()
        return new_board

    @staticmethod
    def in_bounds(row: int, col: int) -> bool:
        return 0 <= row < Board.SIZE and 0 <= col < Board.SIZE

    def __getitem__(self, pos: Tuple[int, int]) -> int:
        row, col = pos
        if not self.in_bounds(row, col):
            raise IndexError(f"Cell ({row}, {col}) is off the board")
        return int(self._cells[row, col])

    def __setitem__(self, pos: Tuple[int, int], value: int) -> None:
        if value not in (EMPTY, BLACK, WHITE):
            raise ValueError(f"Invalid cell state: {value!r}")
        row, col = pos
        if not self.in_bounds(row, col):
            raise IndexError(f"Cell ({row}, {col}) is off the board")
        self._cells[row, col] = value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return bool(np.array_equal(self._cells, other._cells))

    __hash__ = None  # mutable

    def rows(self) -> List[List[int]]:
        """Return the grid as nested Python lists (fast scalar access)."""
        return self._cells.tolist()

    def get_board_state(self) -> np.ndarray:
        """
        Get the current board state as a numpy array.

        Returns:
            Copy of the 8x8 int8 grid
        """
        return self._cells.copy()

    def count(self, state: int) -> int:
        """Number of cells holding the given state."""
        return int(np.count_nonzero(self._cells == state))

    def empty_count(self) -> int:
        return self.count(EMPTY)

    def occupied_count(self) -> int:
        return self.BOARD_SIZE - self.empty_count()

    def get_score(self) -> Tuple[int, int]:
        """
        Get the current disc count.

        Returns:
            Tuple of (black_count, white_count)
        """
        return (self.count(BLACK), self.count(WHITE))

    def __str__(self) -> str:
        """Return a string representation of the board."""
        symbols = {EMPTY: '.', BLACK: 'B', WHITE: 'W'}
        lines = ['  ' + ' '.join(str(c) for c in range(self.SIZE))]
        for i, row in enumerate(self.rows()):
            lines.append(f"{i} " + ' '.join(symbols[v] for v in row))
        black, white = self.get_score()
        lines.append(f"Score - Black: {black}, White: {white}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        black, white = self.get_score()
        return f"Board(black={black}, white={white})"
