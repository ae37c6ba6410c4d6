# mahjong_evaluator/utils/tile_converter.py
"""
牌与字符串、计数数组之间的转换

字符串记法：
    1m~9m 表示 1~9万，1p~9p 表示 1~9筒，1s~9s 表示 1~9索
    1z~7z 表示东南西北白发中
    0m0p0s 表示赤宝牌
"""

from typing import Iterable, List

from ..exceptions import InvalidTileError
from ..tile import (
    HONOR,
    HONOR_RANKS,
    NUM_TILE_KINDS,
    NUMBER_SUITS,
    Tile,
)

SUIT_LETTERS = {"m": NUMBER_SUITS[0], "p": NUMBER_SUITS[1], "s": NUMBER_SUITS[2]}

# 调试输出用的名称
HONOR_NAMES = {
    "east": "东",
    "south": "南",
    "west": "西",
    "north": "北",
    "white": "白",
    "green": "发",
    "red": "中",
}
SUIT_NAMES = {"characters": "万", "circles": "筒", "bamboo": "索"}


def to_string(tile: Tile) -> str:
    """将牌转换为字符串"""
    return str(tile)


def from_string(tile_str: str) -> Tile:
    """将字符串转换为牌，例如 "5m"、"0p"（赤5筒）、"7z"（中）"""
    if len(tile_str) != 2 or not tile_str[0].isdigit():
        raise InvalidTileError(f"cannot parse tile: {tile_str!r}")

    num, letter = int(tile_str[0]), tile_str[1]
    if letter == "z":
        if not 1 <= num <= len(HONOR_RANKS):
            raise InvalidTileError(f"cannot parse tile: {tile_str!r}")
        return Tile(HONOR, HONOR_RANKS[num - 1])
    if letter not in SUIT_LETTERS:
        raise InvalidTileError(f"cannot parse tile: {tile_str!r}")
    if num == 0:
        return Tile(SUIT_LETTERS[letter], 5, is_red=True)
    return Tile(SUIT_LETTERS[letter], num)


def parse_tiles(short_hand: str) -> List[Tile]:
    """
    解析简短格式的手牌
    例如: "466m1p107s122567z" -> 4m 6m 6m 1p 1s 0s 7s 1z 2z 2z 5z 6z 7z
    """
    tiles = []
    current_numbers = []

    for char in short_hand.replace(" ", ""):
        if char.isdigit():
            current_numbers.append(char)
        elif char in ("m", "p", "s", "z"):
            # 遇到花色，将之前收集的数字转换为牌
            tiles.extend(from_string(f"{num}{char}") for num in current_numbers)
            current_numbers = []
        else:
            raise InvalidTileError(f"unexpected character {char!r} in {short_hand!r}")

    if current_numbers:
        raise InvalidTileError(f"missing suit letter at the end of {short_hand!r}")
    return tiles


def hand_to_34_array(tiles: Iterable[Tile]) -> List[int]:
    """将手牌转换为34维数组 (计数)，赤宝牌计入对应的5"""
    array = [0] * NUM_TILE_KINDS
    for tile in tiles:
        array[tile.index] += 1
    return array


def hand_to_string(tiles: Iterable[Tile]) -> str:
    """调试用：按顺序输出手牌，如 1万 2万 3万 东 东"""
    names = []
    for tile in sorted(tiles):
        if tile.is_honor:
            names.append(HONOR_NAMES[tile.rank])
        else:
            prefix = "赤" if tile.is_red else ""
            names.append(f"{prefix}{tile.rank}{SUIT_NAMES[tile.suit]}")
    return " ".join(names)
