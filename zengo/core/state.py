from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Iterable, Optional, Tuple

import numpy as np
from numpy.typing import NDArray

BoardArray = NDArray[np.int8]

DEFAULT_BOARD_SIZE = 19


class Stone(IntEnum):
    EMPTY = 0
    BLACK = 1
    WHITE = 2

    def opponent(self) -> "Stone":
        if self == Stone.EMPTY:
            raise ValueError("Empty cells have no opponent.")
        return Stone.WHITE if self == Stone.BLACK else Stone.BLACK


@dataclass(frozen=True)
class Coordinate:
    x: int
    y: int

    def index(self, size: int) -> int:
        return self.y * size + self.x

    @staticmethod
    def from_index(index: int, size: int) -> "Coordinate":
        if not 0 <= index < size * size:
            raise ValueError(f"Cell index {index} out of range for a {size}x{size} board.")
        return Coordinate(index % size, index // size)

    def as_tuple(self) -> Tuple[int, int]:
        return (self.x, self.y)


@dataclass(frozen=True, eq=False)
class BoardState:
    board: BoardArray  # shape (size, size), indexed [y, x], values Stone
    current_player: Stone = Stone.BLACK
    move_history: Tuple[Coordinate, ...] = ()
    captured_by_black: int = 0  # white stones taken by black
    captured_by_white: int = 0  # black stones taken by white
    last_move: Optional[Coordinate] = None
    is_game_over: bool = False

    def __post_init__(self) -> None:
        board = np.asarray(self.board)
        if board.ndim != 2 or board.shape[0] != board.shape[1]:
            raise ValueError(f"Board must be a square grid, got shape {board.shape}.")
        if not np.isin(board, tuple(Stone)).all():
            raise ValueError("Board cells must hold EMPTY (0), BLACK (1) or WHITE (2).")
        if not isinstance(self.current_player, Stone) or self.current_player == Stone.EMPTY:
            raise ValueError(f"current_player must be Stone.BLACK or Stone.WHITE, got {self.current_player!r}.")
        # Only an owned, frozen int8 grid is kept as is; views and anything writeable are copied.
        if board.flags.writeable or board.dtype != np.int8 or board.base is not None:
            board = np.array(board, dtype=np.int8, copy=True)
            board.flags.writeable = False
        object.__setattr__(self, "board", board)

    @property
    def size(self) -> int:
        return int(self.board.shape[0])

    @property
    def ply_count(self) -> int:
        return len(self.move_history)

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.size and 0 <= y < self.size

    def stone_at(self, x: int, y: int) -> Stone:
        if not self.in_bounds(x, y):
            raise ValueError(f"Coordinate ({x}, {y}) is off a {self.size}x{self.size} board.")
        return Stone(int(self.board[y, x]))

    def captures_for(self, color: Stone) -> int:
        """Number of opponent stones captured by ``color``."""
        if color == Stone.BLACK:
            return self.captured_by_black
        if color == Stone.WHITE:
            return self.captured_by_white
        raise ValueError("Captures are only tracked for black and white.")

    def empty_cells(self) -> Iterable[Coordinate]:
        for y, x in np.argwhere(self.board == Stone.EMPTY):
            yield Coordinate(int(x), int(y))

    def stones(self, color: Stone) -> Iterable[Coordinate]:
        for y, x in np.argwhere(self.board == int(color)):
            yield Coordinate(int(x), int(y))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BoardState):
            return NotImplemented
        return (
            np.array_equal(self.board, other.board)
            and self.current_player == other.current_player
            and self.move_history == other.move_history
            and self.captured_by_black == other.captured_by_black
            and self.captured_by_white == other.captured_by_white
            and self.last_move == other.last_move
            and self.is_game_over == other.is_game_over
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        symbols = {Stone.EMPTY: ".", Stone.BLACK: "X", Stone.WHITE: "O"}
        board_str = "\n".join(" ".join(symbols[Stone(int(cell))] for cell in row) for row in self.board)
        return (
            f"BoardState(current={self.current_player.name}, ply={self.ply_count}, "
            f"captures=B{self.captured_by_black}/W{self.captured_by_white}, over={self.is_game_over})\n"
            f"{board_str}"
        )


def create_board_state(size: int = DEFAULT_BOARD_SIZE) -> BoardState:
    if size < 1:
        raise ValueError(f"Board size must be positive, got {size}.")
    board = np.zeros((size, size), dtype=np.int8)
    return BoardState(board=board, current_player=Stone.BLACK)
