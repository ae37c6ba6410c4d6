"""向听数（启发式）"""

import numpy as np
import pytest

from mahjong_evaluator import InvalidHandSizeError, calculate_shanten, parse_tiles
from mahjong_evaluator.shanten import (
    AGARI_STATE,
    TENPAI_STATE,
    estimate_shanten,
    hand_to_counts,
    scan_hand,
)


def test_agari_state_constant():
    assert AGARI_STATE == -1
    assert TENPAI_STATE == 0


class TestCalculateShanten:
    def test_complete_hand(self):
        assert calculate_shanten(parse_tiles("123m456p789s11122z")) == AGARI_STATE

    def test_tenpai(self):
        assert calculate_shanten(parse_tiles("234m234p23567s99s")) == TENPAI_STATE

    def test_seven_pairs_tenpai(self):
        assert calculate_shanten(parse_tiles("1199m1199p1199s1z")) == TENPAI_STATE

    def test_incomplete_fourteen_uses_estimate(self):
        tiles = parse_tiles("159m159p159s12345z")
        assert calculate_shanten(tiles) == estimate_shanten(tiles)
        assert calculate_shanten(tiles) >= 1

    def test_far_hand(self):
        assert calculate_shanten(parse_tiles("159m159p159s1234z")) == 8

    def test_estimate_decreases_as_shape_improves(self):
        # 启发式估计，只在固定样例上检查单调性
        far = calculate_shanten(parse_tiles("159m159p159s1234z"))
        one_partial = calculate_shanten(parse_tiles("125m159p159s1234z"))
        one_sequence = calculate_shanten(parse_tiles("123m159p159s1234z"))
        assert far == 8
        assert one_partial == 7
        assert one_sequence == 3
        assert far > one_partial > one_sequence

    def test_estimate_never_below_one(self):
        # 搭子重复计数，数值会被截到1
        assert estimate_shanten(parse_tiles("1234567m1234567p")) == 1

    def test_wrong_size(self):
        with pytest.raises(InvalidHandSizeError):
            calculate_shanten(parse_tiles("123m456p789s"))


class TestScanHand:
    def test_counts(self):
        counts = hand_to_counts(parse_tiles("0m55m1z"))
        assert counts.shape == (34,)
        assert counts[4] == 3
        assert counts[27] == 1
        assert int(np.sum(counts)) == 4

    def test_empty_counts(self):
        assert int(np.sum(hand_to_counts([]))) == 0

    def test_shape(self):
        shape = scan_hand(parse_tiles("123m55p79s1z"))
        assert [str(t) for t in shape.pairs] == ["5p"]
        assert shape.triplets == []
        assert [tuple(str(t) for t in s) for s in shape.sequences] == [("1m", "2m", "3m")]
        assert [str(t) for t in shape.isolated] == ["1z"]
        assert [p.shape for p in shape.partial_sequences] == [
            "penchan",
            "kanchan",
            "ryanmen",
            "kanchan",
        ]
        assert [str(t) for t in shape.partial_sequences[2].waiting] == ["1m", "4m"]
        assert [str(t) for t in shape.partial_sequences[3].waiting] == ["8s"]
