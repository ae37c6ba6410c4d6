# mahjong_evaluator/yaku_checker.py
import logging
from collections import Counter
from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence, Tuple

from .config import DEFAULT_CONFIG, EvaluatorConfig
from .dora import DoraCalculator
from .exceptions import UnsupportedContextError
from .hand_analyzer import to_counts
from .tile import HONOR_START, NUMBER_SUITS, Tile
from .utils.constants import *
from .utils.structures import Context, HandAnalysis, YakuRecord

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class YakuRule:
    """
    役种表中的一条规则。

    han_open 为 None 表示门前限定；suffix 用于自风/场风这类带后缀的役名；
    double 表示在允许双倍役满时记26番。
    """

    name: str
    predicate: Callable[["YakuChecker"], bool]
    han_closed: int
    han_open: Optional[int] = None
    is_yakuman: bool = False
    double: bool = False
    suffix: Optional[Callable[["YakuChecker"], str]] = None


class YakuChecker:
    def __init__(
        self,
        hand: Sequence[Tile],
        win_tile: Tile,
        context: Context,
        analysis: HandAnalysis,
        config: EvaluatorConfig = DEFAULT_CONFIG,
    ):
        self.hand = list(hand)
        self.win_tile = win_tile
        self.context = context
        self.analysis = analysis
        self.config = config
        self.all_tiles = self.hand + [win_tile]
        self.counts = to_counts(self.all_tiles)
        self.decomposition = analysis.decomposition

    def check_all_yaku(self) -> List[YakuRecord]:
        """检查所有役种"""
        # 首先检查役满，有役满时不再检查其他役
        yakuman_list = self.evaluate(YAKUMAN_RULES)
        if yakuman_list:
            logger.debug(f"yakuman found: {[y.name for y in yakuman_list]}")
            return yakuman_list

        yaku_list = []
        for rules in STANDARD_RULE_GROUPS:
            yaku_list.extend(self.evaluate(rules))

        # 宝牌
        yaku_list.extend(DoraCalculator(self.all_tiles, self.context).check())

        return yaku_list

    def evaluate(self, rules: Sequence[YakuRule]) -> List[YakuRecord]:
        """按顺序检查一组规则"""
        records = []
        concealed = self.context.is_concealed

        for rule in rules:
            if rule.han_open is None and not concealed:
                continue
            try:
                matched = rule.predicate(self)
            except UnsupportedContextError as e:
                logger.debug(f"skipping {rule.name}: {e}")
                continue
            if not matched:
                continue

            han = rule.han_closed if concealed else rule.han_open
            if rule.double and not self.config.double_yakuman:
                han = YAKUMAN_HAN
            name = f"{rule.name}_{rule.suffix(self)}" if rule.suffix else rule.name
            records.append(YakuRecord(name, han, rule.is_yakuman))

        return records

    # ===== 辅助函数 =====

    @property
    def is_regular(self) -> bool:
        return self.decomposition is not None

    def _count(self, index: int) -> int:
        return self.counts[index]

    def _present(self) -> List[int]:
        return [i for i, count in enumerate(self.counts) if count > 0]

    def _suits(self) -> Tuple[set, bool]:
        """(出现的数牌花色, 是否含字牌)"""
        present = self._present()
        suits = {i // 9 for i in present if i < HONOR_START}
        has_honors = any(i >= HONOR_START for i in present)
        return suits, has_honors

    def _is_open_meld(self, tile: Tile) -> bool:
        return any(
            m.is_open and m.is_triplet and m.tiles[0] == tile
            for m in self.context.open_melds
        )

    def _concealed_triplet_count(self) -> int:
        """暗刻数"""
        if not self.is_regular:
            return 0

        count = 0
        for meld in self.decomposition.triplets:
            tile = meld.tiles[0]
            if self._is_open_meld(tile):
                continue
            # 荣和时，和牌张所在的刻子算明刻
            if not self.context.is_tsumo and tile == self.win_tile:
                continue
            count += 1
        return count

    def _is_value_tile(self, tile: Tile) -> bool:
        if tile.is_dragon:
            return True
        if not tile.is_wind:
            return False
        return tile in (self.context.seat_wind_tile, self.context.round_wind_tile)

    def _sequence_starts(self) -> List[int]:
        return [m.first.index for m in self.decomposition.sequences]

    def _triplet_indices(self) -> List[int]:
        return [m.tiles[0].index for m in self.decomposition.triplets]

    def _peikou_count(self) -> int:
        """相同顺子的组数"""
        if not self.is_regular:
            return 0
        return sum(c // 2 for c in Counter(self._sequence_starts()).values())

    def _all_groups_contain(self, accepted: frozenset) -> bool:
        return all(
            any(t.index in accepted for t in group)
            for group in self.decomposition.groups()
        )

    # ===== 役满判断函数 =====

    def _is_kokushi(self) -> bool:
        """判断国士无双"""
        return self.analysis.pattern == "kokushi"

    def _is_suuankou(self) -> bool:
        """判断四暗刻"""
        return self._concealed_triplet_count() == 4

    def _is_daisangen(self) -> bool:
        """判断大三元"""
        return all(self._count(d) >= 3 for d in DRAGONS)

    def _is_shousuushii(self) -> bool:
        """判断小四喜：风牌中有3个刻子和1个雀头"""
        wind_triplets = sum(1 for w in WINDS if self._count(w) >= 3)
        wind_pairs = sum(1 for w in WINDS if self._count(w) == 2)
        return wind_triplets == 3 and wind_pairs == 1

    def _is_daisuushii(self) -> bool:
        """判断大四喜"""
        return all(self._count(w) >= 3 for w in WINDS)

    def _is_tsuuiisou(self) -> bool:
        """判断字一色"""
        return all(i in HONORS for i in self._present())

    def _is_chinroutou(self) -> bool:
        """判断清老头"""
        return all(i in TERMINALS for i in self._present())

    def _is_ryuuiisou(self) -> bool:
        """判断绿一色"""
        return all(i in GREEN_TILES for i in self._present())

    def _is_chuurenpoutou(self) -> bool:
        """判断九莲宝灯：同一花色 1112345678999 再加任意一张"""
        suits, has_honors = self._suits()
        if has_honors or len(suits) != 1:
            return False
        start = suits.pop() * 9
        return all(
            self._count(start + i) >= need for i, need in enumerate(CHUUREN_PATTERN)
        )

    def _is_suukantsu(self) -> bool:
        """判断四杠子"""
        return len(self.context.declared_quads) == 4

    def _is_tenhou(self) -> bool:
        return self.context.is_tenhou

    def _is_chiihou(self) -> bool:
        return self.context.is_chiihou

    # ===== 基本役 =====

    def _is_riichi(self) -> bool:
        # 两立直单独计算
        return self.context.is_riichi and not self.context.is_double_riichi

    def _is_ippatsu(self) -> bool:
        return self.context.is_ippatsu and self.context.any_riichi

    def _is_menzen_tsumo(self) -> bool:
        return self.context.is_tsumo

    def _is_tanyao(self) -> bool:
        """判断断幺九"""
        if not self.context.is_concealed and not self.config.allow_kuitan:
            return False
        return all(tile.is_simple for tile in self.all_tiles)

    def _is_pinfu(self) -> bool:
        """判断平和：四个顺子，雀头不是役牌，两面听"""
        if not self.is_regular or self.decomposition.triplets:
            return False
        if self.analysis.wait_type != "ryanmen":
            return False
        return not self._is_value_tile(self.decomposition.pair)

    def _is_chiitoitsu(self) -> bool:
        """判断七对子"""
        return self.analysis.pattern == "chitoitsu"

    # ===== 顺子相关役 =====

    def _is_iipeikou(self) -> bool:
        """判断一杯口"""
        return self._peikou_count() == 1

    def _is_ryanpeikou(self) -> bool:
        """判断两杯口"""
        return self._peikou_count() == 2

    def _is_sanshoku_doujun(self) -> bool:
        """判断三色同顺"""
        if not self.is_regular:
            return False
        starts = set(self._sequence_starts())
        return any(all(s * 9 + n in starts for s in range(3)) for n in range(7))

    def _is_ittsu(self) -> bool:
        """判断一气通贯：同一花色的123、456、789"""
        if not self.is_regular:
            return False
        starts = set(self._sequence_starts())
        return any(
            all(s * 9 + n in starts for n in (0, 3, 6)) for s in range(len(NUMBER_SUITS))
        )

    # ===== 役牌及刻子相关役 =====

    def _is_seat_wind(self) -> bool:
        return self._count(self.context.seat_wind_tile.index) >= 3

    def _is_round_wind(self) -> bool:
        return self._count(self.context.round_wind_tile.index) >= 3

    def _is_haku(self) -> bool:
        return self._count(DRAGON_WHITE) >= 3

    def _is_hatsu(self) -> bool:
        return self._count(DRAGON_GREEN) >= 3

    def _is_chun(self) -> bool:
        return self._count(DRAGON_RED) >= 3

    def _is_sanshoku_doukou(self) -> bool:
        """判断三色同刻"""
        if not self.is_regular:
            return False
        triplets = set(self._triplet_indices())
        return any(all(s * 9 + n in triplets for s in range(3)) for n in range(9))

    def _is_sanankou(self) -> bool:
        """判断三暗刻"""
        return self._concealed_triplet_count() == 3

    def _is_shousangen(self) -> bool:
        """判断小三元：三元牌中有2个刻子和1个雀头"""
        dragon_triplets = sum(1 for d in DRAGONS if self._count(d) >= 3)
        dragon_pairs = sum(1 for d in DRAGONS if self._count(d) == 2)
        return dragon_triplets == 2 and dragon_pairs == 1

    def _is_honroutou(self) -> bool:
        """判断混老头：全是幺九牌，同时包含字牌和老头牌"""
        present = self._present()
        return (
            all(i in TERMINALS_AND_HONORS for i in present)
            and any(i in HONORS for i in present)
            and any(i in TERMINALS for i in present)
        )

    def _is_junchan(self) -> bool:
        """判断纯全带幺九"""
        if not self.is_regular or not self.decomposition.sequences:
            return False
        _, has_honors = self._suits()
        return not has_honors and self._all_groups_contain(TERMINALS)

    def _is_chanta(self) -> bool:
        """判断混全带幺九（必须含有字牌和顺子）"""
        if not self.is_regular or not self.decomposition.sequences:
            return False
        _, has_honors = self._suits()
        return has_honors and self._all_groups_contain(TERMINALS_AND_HONORS)

    def _is_toitoi(self) -> bool:
        """判断对对和"""
        return self.is_regular and not self.decomposition.sequences

    def _is_sankantsu(self) -> bool:
        """判断三杠子"""
        return len(self.context.declared_quads) == 3

    def _is_honitsu(self) -> bool:
        """判断混一色"""
        suits, has_honors = self._suits()
        return len(suits) == 1 and has_honors

    def _is_chinitsu(self) -> bool:
        """判断清一色"""
        suits, has_honors = self._suits()
        return len(suits) == 1 and not has_honors

    # ===== 场况役 =====

    def _is_rinshan(self) -> bool:
        return self.context.is_rinshan

    def _is_chankan(self) -> bool:
        return self.context.is_chankan

    def _is_haitei(self) -> bool:
        return self.context.is_haitei

    def _is_houtei(self) -> bool:
        return self.context.is_houtei

    def _is_double_riichi(self) -> bool:
        return self.context.is_double_riichi


def _seat_wind_suffix(checker: YakuChecker) -> str:
    return checker.context.seat_wind


def _round_wind_suffix(checker: YakuChecker) -> str:
    return checker.context.round_wind


# ===== 役种表（顺序即输出顺序） =====

YAKUMAN_RULES: Tuple[YakuRule, ...] = (
    YakuRule(KOKUSHI, YakuChecker._is_kokushi, YAKUMAN_HAN, is_yakuman=True),
    YakuRule(SUUANKOU, YakuChecker._is_suuankou, YAKUMAN_HAN, is_yakuman=True),
    YakuRule(DAISANGEN, YakuChecker._is_daisangen, YAKUMAN_HAN, YAKUMAN_HAN, True),
    YakuRule(SHOUSUUSHII, YakuChecker._is_shousuushii, YAKUMAN_HAN, YAKUMAN_HAN, True),
    YakuRule(
        DAISUUSHII,
        YakuChecker._is_daisuushii,
        DOUBLE_YAKUMAN_HAN,
        DOUBLE_YAKUMAN_HAN,
        True,
        double=True,
    ),
    YakuRule(TSUUIISOU, YakuChecker._is_tsuuiisou, YAKUMAN_HAN, YAKUMAN_HAN, True),
    YakuRule(CHINROUTOU, YakuChecker._is_chinroutou, YAKUMAN_HAN, YAKUMAN_HAN, True),
    YakuRule(RYUUIISOU, YakuChecker._is_ryuuiisou, YAKUMAN_HAN, YAKUMAN_HAN, True),
    YakuRule(CHUURENPOUTOU, YakuChecker._is_chuurenpoutou, YAKUMAN_HAN, is_yakuman=True),
    YakuRule(SUUKANTSU, YakuChecker._is_suukantsu, YAKUMAN_HAN, YAKUMAN_HAN, True),
    YakuRule(TENHOU, YakuChecker._is_tenhou, YAKUMAN_HAN, is_yakuman=True),
    YakuRule(CHIIHOU, YakuChecker._is_chiihou, YAKUMAN_HAN, is_yakuman=True),
)

BASIC_RULES: Tuple[YakuRule, ...] = (
    YakuRule(RIICHI, YakuChecker._is_riichi, 1),
    YakuRule(IPPATSU, YakuChecker._is_ippatsu, 1),
    YakuRule(MENZEN_TSUMO, YakuChecker._is_menzen_tsumo, 1),
    YakuRule(TANYAO, YakuChecker._is_tanyao, 1, 1),
    YakuRule(PINFU, YakuChecker._is_pinfu, 1),
    YakuRule(CHIITOITSU, YakuChecker._is_chiitoitsu, 2),
)

SEQUENCE_RULES: Tuple[YakuRule, ...] = (
    YakuRule(IIPEIKOU, YakuChecker._is_iipeikou, 1),
    YakuRule(RYANPEIKOU, YakuChecker._is_ryanpeikou, 3),
    YakuRule(SANSHOKU_DOUJUN, YakuChecker._is_sanshoku_doujun, 2, 1),
    YakuRule(ITTSU, YakuChecker._is_ittsu, 2, 1),
)

VALUE_RULES: Tuple[YakuRule, ...] = (
    YakuRule(SEAT_WIND, YakuChecker._is_seat_wind, 1, 1, suffix=_seat_wind_suffix),
    YakuRule(ROUND_WIND, YakuChecker._is_round_wind, 1, 1, suffix=_round_wind_suffix),
    YakuRule(HAKU, YakuChecker._is_haku, 1, 1),
    YakuRule(HATSU, YakuChecker._is_hatsu, 1, 1),
    YakuRule(CHUN, YakuChecker._is_chun, 1, 1),
    YakuRule(SANSHOKU_DOUKOU, YakuChecker._is_sanshoku_doukou, 2, 2),
    YakuRule(SANANKOU, YakuChecker._is_sanankou, 2, 2),
    YakuRule(SHOUSANGEN, YakuChecker._is_shousangen, 2, 2),
    YakuRule(HONROUTOU, YakuChecker._is_honroutou, 2, 2),
    YakuRule(JUNCHAN, YakuChecker._is_junchan, 3, 2),
    YakuRule(CHANTA, YakuChecker._is_chanta, 2, 1),
    YakuRule(TOITOI, YakuChecker._is_toitoi, 2, 2),
    YakuRule(SANKANTSU, YakuChecker._is_sankantsu, 2, 2),
    YakuRule(HONITSU, YakuChecker._is_honitsu, 3, 2),
    YakuRule(CHINITSU, YakuChecker._is_chinitsu, 6, 5),
)

SITUATIONAL_RULES: Tuple[YakuRule, ...] = (
    YakuRule(RINSHAN, YakuChecker._is_rinshan, 1, 1),
    YakuRule(CHANKAN, YakuChecker._is_chankan, 1, 1),
    YakuRule(HAITEI, YakuChecker._is_haitei, 1, 1),
    YakuRule(HOUTEI, YakuChecker._is_houtei, 1, 1),
    YakuRule(DOUBLE_RIICHI, YakuChecker._is_double_riichi, 2),
)

STANDARD_RULE_GROUPS = (BASIC_RULES, SEQUENCE_RULES, VALUE_RULES, SITUATIONAL_RULES)


def total_han(yaku_list: Sequence[YakuRecord]) -> int:
    """总番数"""
    return sum(y.han for y in yaku_list)
