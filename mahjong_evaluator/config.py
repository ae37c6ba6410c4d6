# mahjong_evaluator/config.py
"""
规则配置

不同平台对个别役的处理略有不同，这里把这些差异集中到一个数据类里。
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class EvaluatorConfig:
    """手牌评估的规则配置"""

    name: str = "Default"

    # 食断（副露后的断幺九）
    allow_kuitan: bool = True

    # 双倍役满（大四喜记26番，否则记13番）
    double_yakuman: bool = True

    # 同一种牌最多张数
    max_tile_copies: int = 4

    def __repr__(self) -> str:
        return f"EvaluatorConfig({self.name})"


DEFAULT_CONFIG = EvaluatorConfig()

# 无食断、不计双倍役满
STRICT_CONFIG = EvaluatorConfig(
    name="Strict",
    allow_kuitan=False,
    double_yakuman=False,
    max_tile_copies=4,
)
