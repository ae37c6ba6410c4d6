"""
近似向听数估计（启发式，不是精确的最小向听）。

提供函数：
    scan_hand(tiles) -> HandShape
    estimate_shanten(tiles) -> int

约定：
- 只做一次结构扫描，不搜索所有分解方式。
- 面子数 = 刻子种类数 + 贪心找到的不重叠顺子数；对子数 = 恰好2张的种类数；
  搭子数 = 每张数牌与其 +1 / +2 的组合数。
- shanten = max(1, 8 - 2 * 面子数 - 对子数 - 搭子数)。
  和牌(-1)和听牌(0)由 HandEvaluator 通过完整判断单独给出，不走这个公式。

注意：搭子会重复计数，结果偏乐观，只适合用作粗略的进度提示。
"""

from __future__ import annotations

from typing import List, Sequence

import numpy as np

from .tile import HONOR_START, NUM_TILE_KINDS, Tile, from_index
from .utils.structures import HandShape, PartialSequence

AGARI_STATE = -1
TENPAI_STATE = 0
MIN_ESTIMATE = 1
MAX_SHANTEN_BASE = 8


def hand_to_counts(tiles: Sequence[Tile]) -> np.ndarray:
    """长度34的计数数组（每次生成新数组）"""
    indices = np.fromiter((tile.index for tile in tiles), dtype=np.intp)
    return np.bincount(indices, minlength=NUM_TILE_KINDS).astype(np.int8)


def _is_number(i: int) -> bool:
    return i < HONOR_START


def _find_sequences(counts: np.ndarray) -> List[tuple]:
    """贪心地找不重叠的顺子（每种牌最多用于一个顺子）"""
    sequences = []
    used = set()
    for i in np.flatnonzero(counts):
        i = int(i)
        if i in used or not _is_number(i) or i % 9 > 6:
            continue
        if counts[i + 1] > 0 and counts[i + 2] > 0:
            sequences.append(tuple(from_index(i + k) for k in range(3)))
            used.update((i, i + 1, i + 2))
    return sequences


def _is_isolated(i: int, counts: np.ndarray) -> bool:
    if not _is_number(i):
        return True
    suit_start = i - i % 9
    for offset in (-2, -1, 1, 2):
        j = i + offset
        if suit_start <= j < suit_start + 9 and counts[j] > 0:
            return False
    return True


def _find_partial_sequences(counts: np.ndarray) -> List[PartialSequence]:
    """搭子：两面 / 边张 / 坎张"""
    partials = []
    for i in np.flatnonzero(counts):
        i = int(i)
        if not _is_number(i):
            continue
        rank = i % 9 + 1

        if rank <= 8 and counts[i + 1] > 0:
            tiles = (from_index(i), from_index(i + 1))
            if rank == 1:
                partials.append(PartialSequence("penchan", tiles, (from_index(i + 2),)))
            elif rank == 8:
                partials.append(PartialSequence("penchan", tiles, (from_index(i - 1),)))
            else:
                waiting = (from_index(i - 1), from_index(i + 2))
                partials.append(PartialSequence("ryanmen", tiles, waiting))

        if rank <= 7 and counts[i + 2] > 0:
            tiles = (from_index(i), from_index(i + 2))
            partials.append(PartialSequence("kanchan", tiles, (from_index(i + 1),)))

    return partials


def scan_hand(tiles: Sequence[Tile]) -> HandShape:
    """手牌的结构扫描（对子、刻子、顺子、孤张、搭子）"""
    counts = hand_to_counts(tiles)
    return HandShape(
        pairs=[from_index(int(i)) for i in np.flatnonzero(counts == 2)],
        triplets=[from_index(int(i)) for i in np.flatnonzero(counts >= 3)],
        sequences=_find_sequences(counts),
        isolated=[
            from_index(int(i))
            for i in np.flatnonzero(counts == 1)
            if _is_isolated(int(i), counts)
        ],
        partial_sequences=_find_partial_sequences(counts),
    )


def shanten_from_shape(shape: HandShape) -> int:
    complete_melds = len(shape.triplets) + len(shape.sequences)
    shanten = (
        MAX_SHANTEN_BASE
        - 2 * complete_melds
        - len(shape.pairs)
        - len(shape.partial_sequences)
    )
    return max(MIN_ESTIMATE, shanten)


def estimate_shanten(tiles: Sequence[Tile]) -> int:
    """近似向听数，至少为1"""
    return shanten_from_shape(scan_hand(tiles))
