from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Dict, Optional, Union

import yaml

BOARD_SIZES = (2, 3, 4, 5)
MIN_BOARDS = 1
MAX_BOARDS = 5
DIFFICULTY_LEVELS = (1, 2, 3, 4, 5)


def clamp_board_count(number_of_boards: int) -> int:
    return min(MAX_BOARDS, max(MIN_BOARDS, int(number_of_boards)))


@dataclass
class MatchConfig:
    number_of_boards: int = 3
    board_size: int = 3
    difficulty: int = 1

    def __post_init__(self) -> None:
        if not MIN_BOARDS <= self.number_of_boards <= MAX_BOARDS:
            raise ValueError(
                f"number_of_boards must be in [{MIN_BOARDS}, {MAX_BOARDS}], got {self.number_of_boards}"
            )
        if self.board_size not in BOARD_SIZES:
            raise ValueError(f"board_size must be one of {BOARD_SIZES}, got {self.board_size}")
        if self.difficulty not in DIFFICULTY_LEVELS:
            raise ValueError(f"difficulty must be one of {DIFFICULTY_LEVELS}, got {self.difficulty}")

    def to_dict(self) -> Dict[str, int]:
        return asdict(self)


def load_match_config(path: Optional[Union[str, Path]]) -> MatchConfig:
    """Read a YAML match config; a missing path or file yields the defaults."""
    if path is None:
        return MatchConfig()
    cfg_path = Path(path)
    if not cfg_path.exists():
        return MatchConfig()
    cfg = yaml.safe_load(cfg_path.read_text(encoding="utf-8")) or {}
    if not isinstance(cfg, dict):
        raise ValueError(f"{cfg_path} must contain a mapping")
    known = {f.name for f in fields(MatchConfig)}
    unknown = sorted(set(cfg) - known)
    if unknown:
        raise ValueError(f"Unknown match config keys in {cfg_path}: {', '.join(unknown)}")
    return MatchConfig(**cfg)
