# mahjong_evaluator/utils/structures.py
from dataclasses import dataclass, field
from typing import List, Literal, Optional, Tuple

from ..exceptions import UnsupportedContextError
from ..tile import HONOR, Tile

Wind = Literal["east", "south", "west", "north"]


@dataclass(frozen=True)
class Meld:
    """面子：顺子 / 刻子 / 杠子"""

    meld_type: Literal["sequence", "triplet", "quad"]
    tiles: Tuple[Tile, ...]
    is_open: bool = False  # 是否通过吃碰杠他家的牌形成

    @property
    def first(self) -> Tile:
        return min(self.tiles)

    @property
    def is_sequence(self) -> bool:
        return self.meld_type == "sequence"

    @property
    def is_triplet(self) -> bool:
        """刻子或杠子"""
        return self.meld_type in ("triplet", "quad")


@dataclass(frozen=True)
class Decomposition:
    """四面子一雀头的分解结果"""

    melds: Tuple[Meld, ...]
    pair: Tile

    @property
    def sequences(self) -> List[Meld]:
        return [m for m in self.melds if m.is_sequence]

    @property
    def triplets(self) -> List[Meld]:
        return [m for m in self.melds if m.is_triplet]

    def groups(self) -> List[Tuple[Tile, ...]]:
        """所有面子加上雀头，用于全带幺九类的判断"""
        return [m.tiles for m in self.melds] + [(self.pair, self.pair)]


@dataclass(frozen=True)
class HandAnalysis:
    """手牌分析结果"""

    is_complete: bool = False
    pattern: Literal["regular", "chitoitsu", "kokushi", ""] = ""
    decomposition: Optional[Decomposition] = None
    pairs: Tuple[Tile, ...] = ()  # 七对子的七个对子
    wait_type: Literal[
        "ryanmen",
        "kanchan",
        "penchan",
        "tanki",
        "shanpon",
        "kokushi",
        "",
    ] = ""  # 两面 坎张 边张 单骑 双碰


@dataclass
class Context:
    """描述和牌时的场况（与手牌本身无关的信息）"""

    seat_wind: Optional[Wind] = None  # 自风
    round_wind: Optional[Wind] = None  # 场风

    is_tsumo: bool = False  # 自摸 / 荣和

    # 立直相关
    is_riichi: bool = False
    is_double_riichi: bool = False
    is_ippatsu: bool = False

    # 特殊时机
    is_rinshan: bool = False  # 岭上开花
    is_chankan: bool = False  # 抢杠
    is_haitei: bool = False  # 海底摸月
    is_houtei: bool = False  # 河底捞鱼
    is_tenhou: bool = False  # 天和
    is_chiihou: bool = False  # 地和

    # 副露
    is_open: bool = False
    open_melds: List[Meld] = field(default_factory=list)
    # 已宣言的杠（明杠暗杠都算），每个杠在14张手牌中只算3张
    declared_quads: List[Tile] = field(default_factory=list)

    dora_indicators: List[Tile] = field(default_factory=list)
    ura_dora_indicators: List[Tile] = field(default_factory=list)
    red_fives_enabled: bool = True

    @property
    def is_concealed(self) -> bool:
        """门前清（暗杠不破坏门清）"""
        return not self.is_open and not any(m.is_open for m in self.open_melds)

    @property
    def any_riichi(self) -> bool:
        return self.is_riichi or self.is_double_riichi

    @property
    def seat_wind_tile(self) -> Tile:
        """返回自风对应的牌"""
        if self.seat_wind is None:
            raise UnsupportedContextError("seat_wind")
        return Tile(HONOR, self.seat_wind)

    @property
    def round_wind_tile(self) -> Tile:
        """返回场风对应的牌"""
        if self.round_wind is None:
            raise UnsupportedContextError("round_wind")
        return Tile(HONOR, self.round_wind)


@dataclass(frozen=True)
class YakuRecord:
    name: str
    han: int
    is_yakuman: bool = False


@dataclass(frozen=True)
class PartialSequence:
    """搭子（两面 / 边张 / 坎张）"""

    shape: Literal["ryanmen", "penchan", "kanchan"]
    tiles: Tuple[Tile, Tile]
    waiting: Tuple[Tile, ...]


@dataclass
class HandShape:
    """不做完整搜索的手牌结构扫描结果"""

    pairs: List[Tile] = field(default_factory=list)
    triplets: List[Tile] = field(default_factory=list)
    sequences: List[Tuple[Tile, Tile, Tile]] = field(default_factory=list)
    isolated: List[Tile] = field(default_factory=list)
    partial_sequences: List[PartialSequence] = field(default_factory=list)
    is_complete: bool = False
    is_tenpai: bool = False
    waiting_tiles: List[Tile] = field(default_factory=list)


@dataclass
class WaitAnalysis:
    """听牌形态分析"""

    waiting_tiles: List[Tile] = field(default_factory=list)
    # (听的牌, "kokushi" / "chitoitsu" / "regular")
    patterns: List[Tuple[Tile, str]] = field(default_factory=list)
    wait_type: Literal["none", "single", "ryanmen", "multiple"] = "none"
