# mahjong_evaluator/__init__.py
"""
立直麻将手牌评估器

这个包提供日本麻将（立直麻将）的手牌判断功能，包括：
- 和牌判断（四面子一雀头、七对子、国士无双）
- 听牌判断和听牌列表
- 近似向听数
- 役种判断（包括役满）
- 宝牌计算

不换算点数，只给出役种和番数。

主要使用方式：
    from mahjong_evaluator import HandEvaluator, Context, parse_tiles

    evaluator = HandEvaluator()
    yaku_list = evaluator.check_all_yaku(hand, win_tile, context)
"""

from .config import DEFAULT_CONFIG, STRICT_CONFIG, EvaluatorConfig
from .dora import DoraCalculator, get_dora_tile
from .evaluator import (
    HandEvaluator,
    calculate_shanten,
    can_win,
    check_all_yaku,
    get_waiting_tiles,
    is_tenpai,
    is_winning_hand,
)
from .exceptions import (
    HandEvaluationError,
    InvalidHandSizeError,
    InvalidTileCountError,
    InvalidTileError,
    UnsupportedContextError,
)
from .hand_analyzer import HandAnalyzer
from .tile import Tile, all_tile_kinds, compare, equals, is_red_five, key
from .yaku_checker import YakuChecker, YakuRule, total_han

from .utils.structures import (
    Context,
    Decomposition,
    HandAnalysis,
    HandShape,
    Meld,
    WaitAnalysis,
    YakuRecord,
)

from .utils.tile_converter import (
    from_string,
    hand_to_34_array,
    hand_to_string,
    parse_tiles,
    to_string,
)

__version__ = "1.0.0"

__all__ = [
    # 主要类
    "HandEvaluator",
    "HandAnalyzer",
    "YakuChecker",
    "YakuRule",
    "DoraCalculator",
    "EvaluatorConfig",
    "DEFAULT_CONFIG",
    "STRICT_CONFIG",
    # 查询函数
    "is_winning_hand",
    "can_win",
    "is_tenpai",
    "get_waiting_tiles",
    "calculate_shanten",
    "check_all_yaku",
    "total_han",
    "get_dora_tile",
    # 牌
    "Tile",
    "all_tile_kinds",
    "compare",
    "equals",
    "key",
    "is_red_five",
    # 数据结构
    "Context",
    "Decomposition",
    "HandAnalysis",
    "HandShape",
    "Meld",
    "WaitAnalysis",
    "YakuRecord",
    # 异常
    "HandEvaluationError",
    "InvalidHandSizeError",
    "InvalidTileCountError",
    "InvalidTileError",
    "UnsupportedContextError",
    # 工具函数
    "to_string",
    "from_string",
    "parse_tiles",
    "hand_to_34_array",
    "hand_to_string",
]
