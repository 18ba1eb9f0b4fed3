from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import List, Optional

import numpy as np
from numpy.typing import NDArray

BoardArray = NDArray[np.int8]
BoardsArray = NDArray[np.int8]


class Cell(IntEnum):
    EMPTY = 0
    MARKED = 1


class PlayerSide(IntEnum):
    ONE = 1
    TWO = 2

    @property
    def opponent(self) -> "PlayerSide":
        return PlayerSide.TWO if self == PlayerSide.ONE else PlayerSide.ONE


class GameResult(Enum):
    ONGOING = "ongoing"
    PLAYER_ONE_WIN = "player_one_win"
    PLAYER_TWO_WIN = "player_two_win"

    @staticmethod
    def for_loser(side: PlayerSide) -> "GameResult":
        return GameResult.PLAYER_TWO_WIN if side == PlayerSide.ONE else GameResult.PLAYER_ONE_WIN

    @property
    def winner(self) -> Optional[PlayerSide]:
        if self == GameResult.PLAYER_ONE_WIN:
            return PlayerSide.ONE
        if self == GameResult.PLAYER_TWO_WIN:
            return PlayerSide.TWO
        return None

    @property
    def loser(self) -> Optional[PlayerSide]:
        winner = self.winner
        return None if winner is None else winner.opponent


@dataclass(frozen=True)
class Move:
    board_index: int
    cell_index: int


@dataclass(frozen=True)
class Snapshot:
    boards: BoardsArray  # read-only
    to_move: PlayerSide


def freeze(boards: BoardsArray) -> BoardsArray:
    boards.flags.writeable = False
    return boards


@dataclass
class GameState:
    boards: BoardsArray  # shape (n, size * size), dtype=np.int8, values Cell
    board_size: int
    current_player: PlayerSide = PlayerSide.ONE
    history: List[Snapshot] = field(default_factory=list)
    ply_count: int = 0
    result: GameResult = GameResult.ONGOING
    last_move: Optional[Move] = None

    def copy(self) -> "GameState":
        # Snapshots are immutable, so the history list can be copied shallowly.
        return GameState(
            boards=self.boards,
            board_size=self.board_size,
            current_player=self.current_player,
            history=list(self.history),
            ply_count=self.ply_count,
            result=self.result,
            last_move=self.last_move,
        )

    @property
    def number_of_boards(self) -> int:
        return int(self.boards.shape[0])

    @property
    def is_terminal(self) -> bool:
        return self.result != GameResult.ONGOING

    def __repr__(self) -> str:
        rows = []
        size = self.board_size
        for r in range(size):
            parts = []
            for board in self.boards:
                cells = board[r * size:(r + 1) * size]
                parts.append("".join("X" if cell == Cell.MARKED else "." for cell in cells))
            rows.append("  ".join(parts))
        return (
            f"GameState(current={self.current_player.name}, result={self.result}, ply={self.ply_count})\n"
            + "\n".join(rows)
        )
