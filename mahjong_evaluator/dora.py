# mahjong_evaluator/dora.py
"""
宝牌计算

表宝牌总是计算；里宝牌只有立直和牌时才计算；赤宝牌每张记一番。
所有宝牌汇总为一条 "dora" 记录，宝牌永远不会变成役满。
"""

from typing import Iterable, List, Sequence

from .tile import HONOR, Tile
from .utils.constants import DORA, DRAGON_CYCLE, WIND_CYCLE
from .utils.structures import Context, YakuRecord


def get_dora_tile(indicator: Tile) -> Tile:
    """根据宝牌指示牌计算宝牌"""
    if indicator.suit == HONOR:  # 字牌
        if indicator.rank in WIND_CYCLE:  # 东南西北
            cycle = WIND_CYCLE
        else:  # 白发中
            cycle = DRAGON_CYCLE
        position = cycle.index(indicator.rank)
        return Tile(HONOR, cycle[(position + 1) % len(cycle)])

    # 数牌：9的下一张是1
    return Tile(indicator.suit, 1 if indicator.rank == 9 else indicator.rank + 1)


def count_matching(tiles: Iterable[Tile], target: Tile) -> int:
    return sum(1 for tile in tiles if tile == target)


class DoraCalculator:
    """计算一手和牌中的宝牌数量"""

    def __init__(self, tiles: Sequence[Tile], context: Context):
        self.tiles = list(tiles)
        self.context = context

    def _count_indicators(self, indicators: Iterable[Tile]) -> int:
        dora_count = 0
        for indicator in indicators:
            dora_tile = get_dora_tile(indicator)
            dora_count += count_matching(self.tiles, dora_tile)
            # 杠子的第4张不在14张手牌里
            dora_count += count_matching(self.context.declared_quads, dora_tile)
        return dora_count

    def count_dora(self) -> int:
        """表宝牌"""
        return self._count_indicators(self.context.dora_indicators)

    def count_ura_dora(self) -> int:
        """里宝牌（只有立直才能计算）"""
        if not self.context.any_riichi:
            return 0
        return self._count_indicators(self.context.ura_dora_indicators)

    def count_red_fives(self) -> int:
        """赤宝牌（赤5）"""
        if not self.context.red_fives_enabled:
            return 0
        return sum(1 for tile in self.tiles if tile.is_red)

    def total(self) -> int:
        """宝牌总数（表宝牌 + 里宝牌 + 赤宝牌）"""
        return self.count_dora() + self.count_ura_dora() + self.count_red_fives()

    def check(self) -> List[YakuRecord]:
        """宝牌汇总为一条记录，没有宝牌时返回空列表"""
        total = self.total()
        if total == 0:
            return []
        return [YakuRecord(DORA, total)]
