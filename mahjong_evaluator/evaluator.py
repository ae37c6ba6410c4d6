# mahjong_evaluator/evaluator.py
import logging
from collections import Counter
from typing import Iterator, List, Optional, Sequence

from .config import DEFAULT_CONFIG, EvaluatorConfig
from .exceptions import InvalidHandSizeError
from .hand_analyzer import (
    READY_HAND_SIZE,
    WINNING_HAND_SIZE,
    HandAnalyzer,
    validate_hand,
)
from .shanten import AGARI_STATE, TENPAI_STATE, estimate_shanten, scan_hand
from .tile import Tile, all_tile_kinds
from .utils.structures import Context, HandShape, WaitAnalysis, YakuRecord
from .yaku_checker import YakuChecker, total_han

logger = logging.getLogger(__name__)


class HandEvaluator:
    """手牌评估器主类：和牌、听牌、向听和役种判断"""

    def __init__(self, config: EvaluatorConfig = DEFAULT_CONFIG):
        self.config = config
        self.hand_analyzer = HandAnalyzer(config)

    def is_winning_hand(self, hand: Sequence[Tile], win_tile: Optional[Tile] = None) -> bool:
        """
        判断是否和牌

        Args:
            hand: 手牌（14张，或13张加上 win_tile）
            win_tile: 和牌张（摸到或荣和的牌）

        Returns:
            bool: 是否为和牌形态

        Raises:
            InvalidHandSizeError: 合计不是14张
            InvalidTileCountError: 同一种牌超过4张
        """
        return self.hand_analyzer.is_winning_hand(hand, win_tile)

    def can_win(self, hand: Sequence[Tile], discarded_tile: Tile) -> bool:
        """判断能否荣和他家打出的牌"""
        return self.hand_analyzer.can_win(hand, discarded_tile)

    def _candidates(self, hand: Sequence[Tile]) -> Iterator[Tile]:
        """可能摸到的牌：手里已有4张的牌不再考虑"""
        counts = Counter(hand)
        for tile in all_tile_kinds():
            if counts[tile] < self.config.max_tile_copies:
                yield tile

    def is_tenpai(self, hand: Sequence[Tile]) -> bool:
        """
        判断是否听牌

        Args:
            hand: 手牌列表（13张）

        Returns:
            bool: 是否听牌
        """
        validate_hand(hand, READY_HAND_SIZE, self.config.max_tile_copies)

        # 尝试加入每一种牌，看是否能和
        return any(
            self.hand_analyzer.is_winning_hand(hand, test_tile)
            for test_tile in self._candidates(hand)
        )

    def get_waiting_tiles(self, hand: Sequence[Tile]) -> List[Tile]:
        """
        获取所有听牌的牌

        Args:
            hand: 手牌列表（13张）

        Returns:
            List[Tile]: 所有可以和牌的牌，按标准顺序；没有听牌时为空列表
        """
        validate_hand(hand, READY_HAND_SIZE, self.config.max_tile_copies)

        return [
            test_tile
            for test_tile in self._candidates(hand)
            if self.hand_analyzer.is_winning_hand(hand, test_tile)
        ]

    def calculate_shanten(self, hand: Sequence[Tile]) -> int:
        """
        计算向听数：-1 为和牌，0 为听牌，1 以上为近似值

        14张时只判断是否和牌；13张时先判断听牌，都不满足时使用启发式估计。
        """
        if len(hand) == WINNING_HAND_SIZE:
            if self.hand_analyzer.is_winning_hand(hand):
                return AGARI_STATE
            return estimate_shanten(hand)

        if len(hand) != READY_HAND_SIZE:
            logger.warning(f"rejected hand: shanten needs 13 or 14 tiles, got {len(hand)}")
            raise InvalidHandSizeError(expected=READY_HAND_SIZE, actual=len(hand))

        if self.is_tenpai(hand):
            return TENPAI_STATE
        return estimate_shanten(hand)

    def check_all_yaku(
        self, hand: Sequence[Tile], win_tile: Tile, context: Optional[Context] = None
    ) -> List[YakuRecord]:
        """
        判断和牌的役种

        Args:
            hand: 手牌（13张，不含和牌张）
            win_tile: 和牌张
            context: 场况，省略时视为默认值（荣和、门前、无宝牌）

        Returns:
            List[YakuRecord]: 役种列表；有役满时只包含役满。不是和牌时为空列表
        """
        validate_hand(hand, READY_HAND_SIZE, self.config.max_tile_copies)
        if context is None:
            context = Context()

        analysis = self.hand_analyzer.analyze(hand, win_tile)
        if not analysis.is_complete:
            logger.debug(f"no yaku: hand is not complete with {win_tile}")
            return []

        checker = YakuChecker(hand, win_tile, context, analysis, self.config)
        return checker.check_all_yaku()

    @staticmethod
    def total_han(yaku_list: Sequence[YakuRecord]) -> int:
        """总番数（不换算点数）"""
        return total_han(yaku_list)

    # ===== 辅助分析 =====

    def analyze_hand(self, hand: Sequence[Tile]) -> HandShape:
        """手牌结构分析，附带和牌/听牌判断"""
        if len(hand) not in (READY_HAND_SIZE, WINNING_HAND_SIZE):
            raise InvalidHandSizeError(expected=READY_HAND_SIZE, actual=len(hand))

        shape = scan_hand(hand)
        if len(hand) == WINNING_HAND_SIZE:
            shape.is_complete = self.is_winning_hand(hand)
        else:
            shape.waiting_tiles = self.get_waiting_tiles(hand)
            shape.is_tenpai = bool(shape.waiting_tiles)
        return shape

    def analyze_waiting_pattern(self, hand: Sequence[Tile]) -> WaitAnalysis:
        """听牌形态分析：每张听牌对应的和牌形，以及听牌种类"""
        waiting_tiles = self.get_waiting_tiles(hand)
        patterns = [
            (tile, self.hand_analyzer.analyze(hand, tile).pattern) for tile in waiting_tiles
        ]
        return WaitAnalysis(
            waiting_tiles=waiting_tiles,
            patterns=patterns,
            wait_type=self._classify_wait_type(waiting_tiles),
        )

    @staticmethod
    def _classify_wait_type(waiting_tiles: List[Tile]) -> str:
        if not waiting_tiles:
            return "none"
        if len(waiting_tiles) == 1:
            return "single"
        if len(waiting_tiles) == 2:
            a, b = waiting_tiles
            # 两面：同一花色相差3，如 1-4、3-6
            if not a.is_honor and a.suit == b.suit and b.rank - a.rank == 3:
                return "ryanmen"
        return "multiple"

    def get_useful_tiles(self, hand: Sequence[Tile]) -> List[Tile]:
        """
        有效牌：摸到后打出另一张牌（不是刚摸到的同种牌）就能听牌的牌
        """
        validate_hand(hand, READY_HAND_SIZE, self.config.max_tile_copies)

        useful = []
        for test_tile in self._candidates(hand):
            test_hand = list(hand) + [test_tile]
            for discard in sorted(set(hand)):
                if discard == test_tile:
                    continue
                reduced = list(test_hand)
                reduced.remove(discard)
                if self.is_tenpai(reduced):
                    useful.append(test_tile)
                    break
        return useful


_default_evaluator = HandEvaluator()

is_winning_hand = _default_evaluator.is_winning_hand
can_win = _default_evaluator.can_win
is_tenpai = _default_evaluator.is_tenpai
get_waiting_tiles = _default_evaluator.get_waiting_tiles
calculate_shanten = _default_evaluator.calculate_shanten
check_all_yaku = _default_evaluator.check_all_yaku


if __name__ == "__main__":
    # 示例用法
    from .utils.constants import WIND_NAMES, YAKU_DISPLAY_NAMES
    from .utils.logging import setup_logging
    from .utils.tile_converter import from_string, hand_to_string, parse_tiles

    setup_logging()
    evaluator = HandEvaluator()

    # 示例: 立直 平和 断幺九
    sample_hand = parse_tiles("234m567p2234678s")
    sample_context = Context(
        seat_wind="south",
        round_wind="east",
        is_riichi=True,
        dora_indicators=[from_string("1m")],
    )

    print("=" * 50)
    print(f"自风: {WIND_NAMES[sample_context.seat_wind]}  场风: {WIND_NAMES[sample_context.round_wind]}")
    print(f"手牌: {hand_to_string(sample_hand)}")
    print(f"听牌: {' '.join(str(t) for t in evaluator.get_waiting_tiles(sample_hand))}")
    yaku_list = evaluator.check_all_yaku(sample_hand, from_string("5s"), sample_context)
    print("役种:")
    for yaku in yaku_list:
        print(f"  - {YAKU_DISPLAY_NAMES.get(yaku.name, yaku.name)}: {yaku.han}番")
    print(f"番数: {evaluator.total_han(yaku_list)}番")
    print("=" * 50)
