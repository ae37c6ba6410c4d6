# mahjong_evaluator/tile.py
"""
牌的表示

一张牌由 (花色, 点数) 构成：
    花色: characters(万) / circles(筒) / bamboo(索) / honor(字)
    点数: 数牌为 1~9，字牌为 east/south/west/north/white/green/red

内部统一使用34种牌的编号（万0-8, 筒9-17, 索18-26, 字27-33）做计数与排序。
赤五与普通的五在比较、相等判断上完全相同，只有 is_red 标记不同。
"""

from dataclasses import dataclass
from functools import total_ordering
from typing import Tuple, Union

from .exceptions import InvalidTileError

CHARACTERS = "characters"
CIRCLES = "circles"
BAMBOO = "bamboo"
HONOR = "honor"

SUITS = (CHARACTERS, CIRCLES, BAMBOO, HONOR)
NUMBER_SUITS = (CHARACTERS, CIRCLES, BAMBOO)

WIND_RANKS = ("east", "south", "west", "north")
DRAGON_RANKS = ("white", "green", "red")
HONOR_RANKS = WIND_RANKS + DRAGON_RANKS

# 34种牌
NUM_TILE_KINDS = 34
HONOR_START = 27

Rank = Union[int, str]


@total_ordering
@dataclass(frozen=True, eq=False)
class Tile:
    """不可变的牌"""

    suit: str
    rank: Rank
    is_red: bool = False

    def __post_init__(self):
        if self.suit not in SUITS:
            raise InvalidTileError(f"unknown suit: {self.suit!r}")
        if self.suit == HONOR:
            if self.rank not in HONOR_RANKS:
                raise InvalidTileError(f"unknown honor: {self.rank!r}")
        elif not isinstance(self.rank, int) or not 1 <= self.rank <= 9:
            raise InvalidTileError(f"rank must be 1..9 for {self.suit}, got {self.rank!r}")
        if self.is_red and (self.suit == HONOR or self.rank != 5):
            raise InvalidTileError("only a numbered five can be red")

    @property
    def index(self) -> int:
        """34种牌中的编号"""
        if self.suit == HONOR:
            return HONOR_START + HONOR_RANKS.index(self.rank)
        return SUITS.index(self.suit) * 9 + self.rank - 1

    @property
    def is_honor(self) -> bool:
        return self.suit == HONOR

    @property
    def is_wind(self) -> bool:
        return self.rank in WIND_RANKS

    @property
    def is_dragon(self) -> bool:
        return self.rank in DRAGON_RANKS

    @property
    def is_terminal(self) -> bool:
        """老头牌（数牌的1和9）"""
        return not self.is_honor and self.rank in (1, 9)

    @property
    def is_terminal_or_honor(self) -> bool:
        """幺九牌"""
        return self.is_honor or self.is_terminal

    @property
    def is_simple(self) -> bool:
        """中张牌（2~8）"""
        return not self.is_terminal_or_honor

    def __eq__(self, other):
        if not isinstance(other, Tile):
            return NotImplemented
        return self.index == other.index

    def __lt__(self, other):
        if not isinstance(other, Tile):
            return NotImplemented
        return self.index < other.index

    def __hash__(self):
        return hash(self.index)

    def __str__(self):
        if self.is_honor:
            return f"{HONOR_RANKS.index(self.rank) + 1}z"
        letter = "mps"[NUMBER_SUITS.index(self.suit)]
        return f"{0 if self.is_red else self.rank}{letter}"

    def __repr__(self):
        return f"Tile({self})"


def from_index(index: int) -> Tile:
    """根据34种编号生成牌（不带赤宝牌标记）"""
    if not 0 <= index < NUM_TILE_KINDS:
        raise InvalidTileError(f"tile index must be in [0, {NUM_TILE_KINDS}), got {index}")
    if index >= HONOR_START:
        return Tile(HONOR, HONOR_RANKS[index - HONOR_START])
    return Tile(NUMBER_SUITS[index // 9], index % 9 + 1)


ALL_TILE_KINDS: Tuple[Tile, ...] = tuple(from_index(i) for i in range(NUM_TILE_KINDS))


def all_tile_kinds() -> Tuple[Tile, ...]:
    """全部34种牌，按标准顺序"""
    return ALL_TILE_KINDS


def compare(a: Tile, b: Tile) -> int:
    """排序用比较：a<b 返回 -1，相等返回 0，a>b 返回 1"""
    return (a.index > b.index) - (a.index < b.index)


def equals(a: Tile, b: Tile) -> bool:
    return a.index == b.index


def key(tile: Tile) -> int:
    """用于计数的规范键（34种编号）"""
    return tile.index


def is_red_five(tile: Tile) -> bool:
    return tile.is_red
