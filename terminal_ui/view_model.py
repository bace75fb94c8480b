from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class CardView:
    label: str
    hidden: bool
    suit: Optional[str] = None
    rank: Optional[str] = None


@dataclass(frozen=True)
class PileView:
    name: str
    size: int
    top: Optional[CardView]


@dataclass(frozen=True)
class ColumnView:
    name: str
    cards: tuple[CardView, ...]


@dataclass(frozen=True)
class GameViewModel:
    move_count: int
    elapsed_seconds: int
    score: int
    stock_cycles: int
    game_won: bool
    stock: PileView
    waste_size: int
    stack_piles: tuple[PileView, ...]
    columns: tuple[ColumnView, ...]
