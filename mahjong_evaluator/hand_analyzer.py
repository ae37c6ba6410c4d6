# mahjong_evaluator/hand_analyzer.py
import logging
from collections import Counter
from functools import lru_cache
from typing import List, Optional, Sequence, Tuple

from .config import DEFAULT_CONFIG, EvaluatorConfig
from .exceptions import InvalidHandSizeError, InvalidTileCountError
from .tile import HONOR_START, NUM_TILE_KINDS, Tile, from_index
from .utils.constants import TERMINALS_AND_HONORS
from .utils.structures import Decomposition, HandAnalysis, Meld

logger = logging.getLogger(__name__)

WINNING_HAND_SIZE = 14
READY_HAND_SIZE = 13

# 分解时的面子：("triplet" | "sequence", 起始牌编号)
_RawMeld = Tuple[str, int]


def to_counts(tiles: Sequence[Tile]) -> Tuple[int, ...]:
    """将手牌转换为34维计数元组（不修改原手牌）"""
    counts = [0] * NUM_TILE_KINDS
    for tile in tiles:
        counts[tile.index] += 1
    return tuple(counts)


def validate_hand(
    tiles: Sequence[Tile], expected_size: int, max_copies: int = 4
) -> None:
    """检查张数与同种牌的数量，不合法时抛出异常"""
    if len(tiles) != expected_size:
        logger.warning(f"rejected hand: expected {expected_size} tiles, got {len(tiles)}")
        raise InvalidHandSizeError(expected=expected_size, actual=len(tiles))

    tile, count = Counter(tiles).most_common(1)[0] if tiles else (None, 0)
    if count > max_copies:
        logger.warning(f"rejected hand: {tile} appears {count} times")
        raise InvalidTileCountError(tile=str(tile), count=count)


def _can_start_sequence(i: int, counts: Sequence[int]) -> bool:
    # 字牌不能组成顺子，数牌只有1-7能作为顺子的起点
    return i < HONOR_START and i % 9 <= 6 and counts[i + 1] > 0 and counts[i + 2] > 0


@lru_cache(maxsize=None)
def _find_melds(counts: Tuple[int, ...]) -> Optional[Tuple[_RawMeld, ...]]:
    """
    递归地把剩余的牌全部分解成面子。
    从编号最小的牌开始，先尝试刻子，再尝试顺子。
    """
    try:
        # 找到第一张有牌的地方开始分解
        i = next(idx for idx, count in enumerate(counts) if count > 0)
    except StopIteration:
        # 如果手牌为空，说明所有牌都成功组成了面子
        return ()

    # 优先尝试移除刻子
    if counts[i] >= 3:
        rest = list(counts)
        rest[i] -= 3
        result = _find_melds(tuple(rest))
        if result is not None:
            return (("triplet", i),) + result

    # 尝试移除顺子
    if _can_start_sequence(i, counts):
        rest = list(counts)
        rest[i] -= 1
        rest[i + 1] -= 1
        rest[i + 2] -= 1
        result = _find_melds(tuple(rest))
        if result is not None:
            return (("sequence", i),) + result

    # 如果以上都失败，说明这个分解路径是死路
    return None


@lru_cache(maxsize=None)
def _find_regular_composition(
    counts: Tuple[int, ...]
) -> Optional[Tuple[int, Tuple[_RawMeld, ...]]]:
    """按牌的顺序尝试每一种雀头，返回第一个成功的 (雀头, 面子)"""
    if sum(counts) % 3 != 2:
        return None

    for i in range(NUM_TILE_KINDS):
        if counts[i] < 2:
            continue
        rest = list(counts)
        rest[i] -= 2
        melds = _find_melds(tuple(rest))
        if melds is not None:
            return i, melds
    return None


def _build_meld(kind: str, start: int) -> Meld:
    if kind == "triplet":
        tile = from_index(start)
        return Meld("triplet", (tile, tile, tile))
    return Meld("sequence", tuple(from_index(start + k) for k in range(3)))


def find_decomposition(tiles: Sequence[Tile]) -> Optional[Decomposition]:
    """四面子一雀头的分解；找不到时返回 None"""
    composition = _find_regular_composition(to_counts(tiles))
    if composition is None:
        return None
    pair_index, raw_melds = composition
    return Decomposition(
        melds=tuple(_build_meld(kind, start) for kind, start in raw_melds),
        pair=from_index(pair_index),
    )


def is_kokushi(counts: Sequence[int]) -> bool:
    """判断是否为国士无双：13种幺九牌各一张，其中一种再多一张"""
    if sum(counts) != WINNING_HAND_SIZE:
        return False
    present = [i for i, count in enumerate(counts) if count > 0]
    if len(present) != 13 or any(i not in TERMINALS_AND_HONORS for i in present):
        return False
    values = sorted(counts[i] for i in present)
    return values.count(1) == 12 and values.count(2) == 1


def is_chitoitsu(counts: Sequence[int]) -> bool:
    """判断是否为七对子（四张相同的牌不能当两个对子）"""
    present = [count for count in counts if count > 0]
    return len(present) == 7 and all(count == 2 for count in present)


class HandAnalyzer:
    """
    手牌分析器，用于判断和牌、分解面子和雀头、确定听牌类型。
    内部统一使用34维计数。
    """

    def __init__(self, config: EvaluatorConfig = DEFAULT_CONFIG):
        self.config = config

    def combine(self, hand: Sequence[Tile], win_tile: Optional[Tile] = None) -> List[Tile]:
        """拼上和牌张并检查是否恰好14张"""
        all_tiles = list(hand) + ([win_tile] if win_tile is not None else [])
        validate_hand(all_tiles, WINNING_HAND_SIZE, self.config.max_tile_copies)
        return all_tiles

    def is_winning_hand(self, hand: Sequence[Tile], win_tile: Optional[Tile] = None) -> bool:
        """和牌判断：特殊牌型优先，然后是四面子一雀头"""
        counts = to_counts(self.combine(hand, win_tile))
        return (
            is_kokushi(counts)
            or is_chitoitsu(counts)
            or _find_regular_composition(counts) is not None
        )

    def can_win(self, hand: Sequence[Tile], discarded_tile: Tile) -> bool:
        """荣和判断"""
        return self.is_winning_hand(hand, discarded_tile)

    def analyze(self, hand: Sequence[Tile], win_tile: Tile) -> HandAnalysis:
        """
        分析完整和牌手牌的主入口。
        """
        all_tiles = self.combine(hand, win_tile)
        counts = to_counts(all_tiles)

        # 1. 国士无双
        if is_kokushi(counts):
            return HandAnalysis(is_complete=True, pattern="kokushi", wait_type="kokushi")

        # 2. 常规牌型分析
        # 两杯口的形也满足七对子，此时按四面子一雀头分析
        decomposition = find_decomposition(all_tiles)
        if decomposition is not None:
            return HandAnalysis(
                is_complete=True,
                pattern="regular",
                decomposition=decomposition,
                wait_type=self._determine_wait_type(decomposition, win_tile),
            )

        # 3. 七对子
        if is_chitoitsu(counts):
            # 七对子一定是单骑听
            pairs = tuple(from_index(i) for i, count in enumerate(counts) if count == 2)
            return HandAnalysis(
                is_complete=True, pattern="chitoitsu", pairs=pairs, wait_type="tanki"
            )

        return HandAnalysis(is_complete=False)

    def _determine_wait_type(self, decomposition: Decomposition, win_tile: Tile) -> str:
        """
        根据分解出的面子和和牌张，判断听牌类型。
        同一张牌可以解释为多种听牌时，两面优先。
        """
        shapes = []
        for meld in decomposition.melds:
            if win_tile not in meld.tiles:
                continue
            if meld.is_triplet:
                shapes.append("shanpon")
                continue
            position = win_tile.rank - meld.first.rank
            if position == 1:
                shapes.append("kanchan")
            elif (position == 0 and meld.first.rank == 7) or (
                position == 2 and meld.first.rank == 1
            ):
                shapes.append("penchan")
            else:
                shapes.append("ryanmen")

        if "ryanmen" in shapes:
            return "ryanmen"
        if win_tile == decomposition.pair:
            return "tanki"
        for shape in ("shanpon", "kanchan", "penchan"):
            if shape in shapes:
                return shape
        return ""
