# mahjong_evaluator/exceptions.py
"""
手牌评估相关的异常类型

结构性错误（张数不对、同种牌超过4张）直接抛给调用方，
由调用方决定记录日志或拒绝操作，而不是静默返回 False。
"""


class HandEvaluationError(Exception):
    """所有评估错误的基类"""


class InvalidHandSizeError(HandEvaluationError):
    """手牌张数不符合要求（应为13张，或加上和牌张后为14张）"""

    def __init__(self, *, expected: int, actual: int) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(f"hand must contain {expected} tiles, got {actual}")


class InvalidTileCountError(HandEvaluationError):
    """同一种牌出现了5张以上"""

    def __init__(self, *, tile: str, count: int) -> None:
        self.tile = tile
        self.count = count
        super().__init__(f"tile {tile} appears {count} times")


class InvalidTileError(HandEvaluationError, ValueError):
    """无法识别的花色、点数或牌的字符串"""


class UnsupportedContextError(HandEvaluationError):
    """
    役种判断需要的场况字段缺失。

    只在役种判断内部使用：该役视为不成立，不会传播到 check_all_yaku 之外。
    """

    def __init__(self, field_name: str) -> None:
        self.field_name = field_name
        super().__init__(f"context field {field_name!r} is not set")
