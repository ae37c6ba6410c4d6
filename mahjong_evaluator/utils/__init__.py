"""
工具模块

包含常量定义、数据结构、牌的转换函数和日志配置
"""

from .structures import *
from .tile_converter import *

__all__ = [
    # 从 structures 导出
    "Context",
    "Decomposition",
    "HandAnalysis",
    "HandShape",
    "Meld",
    "PartialSequence",
    "WaitAnalysis",
    "YakuRecord",
    # 从 tile_converter 导出
    "to_string",
    "from_string",
    "parse_tiles",
    "hand_to_34_array",
    "hand_to_string",
]
