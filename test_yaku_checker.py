"""役种判断"""

import pytest

from mahjong_evaluator import (
    STRICT_CONFIG,
    Context,
    HandEvaluator,
    Meld,
    UnsupportedContextError,
    YakuRecord,
    check_all_yaku,
    from_string,
    parse_tiles,
    total_han,
)
from mahjong_evaluator.utils.constants import (
    CHANTA,
    CHIIHOU,
    CHIITOITSU,
    CHINITSU,
    CHINROUTOU,
    CHUURENPOUTOU,
    DAISANGEN,
    DAISUUSHII,
    DORA,
    DOUBLE_RIICHI,
    HAKU,
    HATSU,
    HONITSU,
    HONROUTOU,
    IIPEIKOU,
    ITTSU,
    JUNCHAN,
    KOKUSHI,
    MENZEN_TSUMO,
    PINFU,
    RIICHI,
    RYANPEIKOU,
    RYUUIISOU,
    SANANKOU,
    SANKANTSU,
    SANSHOKU_DOUJUN,
    SANSHOKU_DOUKOU,
    SHOUSANGEN,
    SHOUSUUSHII,
    SUUANKOU,
    SUUKANTSU,
    TANYAO,
    TENHOU,
    TOITOI,
    TSUUIISOU,
)


def _check(hand, win, context=None, evaluator=None):
    evaluator = evaluator or HandEvaluator()
    return evaluator.check_all_yaku(parse_tiles(hand), from_string(win), context)


def _names(yaku_list):
    return [y.name for y in yaku_list]


class TestStandardYaku:
    def test_riichi_tanyao_pinfu_dora(self):
        context = Context(
            seat_wind="south",
            round_wind="east",
            is_riichi=True,
            dora_indicators=[from_string("1m")],
        )
        yaku_list = _check("234m567p2234678s", "5s", context)
        assert yaku_list == [
            YakuRecord(RIICHI, 1),
            YakuRecord(TANYAO, 1),
            YakuRecord(PINFU, 1),
            YakuRecord(DORA, 1),
        ]
        assert total_han(yaku_list) == 4

    def test_pinfu_and_iipeikou(self):
        yaku_list = _check("112233m456p78s55s", "6s")
        assert _names(yaku_list) == [PINFU, IIPEIKOU]

    def test_ryanpeikou_beats_seven_pairs(self):
        yaku_list = _check("112233m445566p7s", "7s")
        assert yaku_list == [YakuRecord(RYANPEIKOU, 3)]

    def test_seven_pairs(self):
        yaku_list = _check("1199m1199p1199s1z", "1z")
        assert yaku_list == [YakuRecord(CHIITOITSU, 2), YakuRecord(HONROUTOU, 2)]

    def test_triplets_over_identical_sequences(self):
        # 111m222m333m 按刻子分解：三暗刻成立，一杯口不成立
        names = _names(_check("111m222m333m45p77s", "6p"))
        assert SANANKOU in names
        assert IIPEIKOU not in names

    def test_toitoi_tanki(self):
        """
        单骑荣和：和牌张落在雀头上，四个刻子都算暗刻，按四暗刻计。
        有的规则荣和一律不计四暗刻，这里不采用。
        """
        names = _names(_check("222m333p444s666s8s", "8s"))
        assert names == [SUUANKOU]

    def test_shanpon_ron_is_not_four_concealed(self):
        # 荣和双碰：和牌张所在的刻子算明刻
        names = _names(_check("222m333p444s66s88s", "8s"))
        assert names == [TANYAO, SANANKOU, TOITOI]
        tsumo = _names(_check("222m333p444s66s88s", "8s", Context(is_tsumo=True)))
        assert tsumo == [SUUANKOU]

    def test_toitoi_open(self):
        context = Context(
            is_open=True,
            open_melds=[Meld("triplet", tuple(parse_tiles("222m")), is_open=True)],
        )
        names = _names(_check("222m333p444s666s8s", "8s", context))
        assert TOITOI in names
        assert SANANKOU in names
        assert TANYAO in names

    def test_terminal_blocks_tanyao(self):
        names = _names(_check("234m567p2234s789s", "5s"))
        assert TANYAO not in names
        assert PINFU in names

    def test_red_five_is_simple(self):
        assert TANYAO in _names(_check("234m067p2234678s", "5s"))

    def test_incomplete_hand_has_no_yaku(self):
        assert _check("123m456p789s1122z", "3z") == []

    def test_idempotent(self):
        hand = parse_tiles("234m567p2234678s")
        context = Context(is_riichi=True, is_tsumo=True)
        first = check_all_yaku(hand, from_string("5s"), context)
        second = check_all_yaku(hand, from_string("5s"), context)
        assert first == second
        assert MENZEN_TSUMO in _names(first)


class TestOpenHand:
    def test_open_han(self):
        closed = _check("123m123p123s456s9p", "9p")
        opened = _check("123m123p123s456s9p", "9p", Context(is_open=True))
        assert closed == [YakuRecord(SANSHOKU_DOUJUN, 2)]
        assert opened == [YakuRecord(SANSHOKU_DOUJUN, 1)]

    def test_closed_only_yaku_skipped(self):
        context = Context(is_open=True, is_tsumo=True)
        names = _names(_check("123m123p123s456s9p", "9p", context))
        assert MENZEN_TSUMO not in names

    def test_kuitan_depends_on_config(self):
        context = Context(is_open=True)
        assert _names(_check("234m567p2234678s", "5s", context)) == [TANYAO]
        strict = HandEvaluator(STRICT_CONFIG)
        assert _check("234m567p2234678s", "5s", context, strict) == []


class TestValueTiles:
    def test_missing_winds_are_skipped(self):
        context = Context(is_riichi=True)
        assert _names(_check("123m456p789s111z2z", "2z", context)) == [RIICHI]

    def test_double_wind(self):
        context = Context(seat_wind="east", round_wind="east", is_riichi=True)
        yaku_list = _check("123m456p789s111z2z", "2z", context)
        assert _names(yaku_list) == [RIICHI, "seat_wind_east", "round_wind_east"]
        assert total_han(yaku_list) == 3

    def test_other_wind_not_counted(self):
        context = Context(seat_wind="south", round_wind="south")
        assert _check("123m456p789s111z2z", "2z", context) == []

    def test_wind_pair_blocks_pinfu(self):
        context = Context(seat_wind="east", round_wind="south")
        names = _names(_check("234m567p34678s11z", "5s", context))
        assert PINFU not in names


class TestYakuman:
    def test_yakuman_short_circuit(self):
        context = Context(is_riichi=True, dora_indicators=[from_string("9s")])
        yaku_list = _check("19m19p19s1234567z", "1m", context)
        assert yaku_list == [YakuRecord(KOKUSHI, 13, True)]
        assert all(y.is_yakuman for y in yaku_list)
        assert RIICHI not in _names(yaku_list)

    def test_big_dragons(self):
        yaku_list = _check("555666777z123m4p", "4p", Context(is_riichi=True))
        assert yaku_list == [YakuRecord(DAISANGEN, 13, True)]

    def test_big_winds_double(self):
        yaku_list = _check("111222333444z5m", "5m")
        assert yaku_list == [
            YakuRecord(SUUANKOU, 13, True),
            YakuRecord(DAISUUSHII, 26, True),
        ]
        assert total_han(yaku_list) == 39

    def test_big_winds_without_double_yakuman(self):
        yaku_list = _check("111222333444z5m", "5m", evaluator=HandEvaluator(STRICT_CONFIG))
        assert YakuRecord(DAISUUSHII, 13, True) in yaku_list

    def test_heavenly_hand(self):
        context = Context(seat_wind="east", is_tsumo=True, is_tenhou=True)
        assert _check("234m567p2234678s", "5s", context) == [YakuRecord(TENHOU, 13, True)]


class TestSituational:
    def test_double_riichi_replaces_riichi(self):
        context = Context(is_riichi=True, is_double_riichi=True, is_ippatsu=True)
        names = _names(_check("234m567p2234678s", "5s", context))
        assert RIICHI not in names
        assert DOUBLE_RIICHI in names
        assert "ippatsu" in names

    @pytest.mark.parametrize(
        "flag, name",
        [
            ("is_rinshan", "rinshan"),
            ("is_chankan", "chankan"),
            ("is_haitei", "haitei"),
            ("is_houtei", "houtei"),
        ],
    )
    def test_timing_yaku(self, flag, name):
        context = Context(**{flag: True})
        assert name in _names(_check("234m567p2234678s", "5s", context))


class TestPatternYaku:
    def test_full_straight_half_flush(self):
        yaku_list = _check("123m456m789m111z2z", "2z")
        assert yaku_list == [YakuRecord(ITTSU, 2), YakuRecord(HONITSU, 3)]

    def test_full_flush(self):
        yaku_list = _check("1122334567899m", "9m")
        assert yaku_list == [
            YakuRecord(PINFU, 1),
            YakuRecord(IIPEIKOU, 1),
            YakuRecord(ITTSU, 2),
            YakuRecord(CHINITSU, 6),
        ]
        assert total_han(yaku_list) == 10

    def test_junchan(self):
        yaku_list = _check("123789m123p789s1p", "1p")
        assert yaku_list == [YakuRecord(PINFU, 1), YakuRecord(JUNCHAN, 3)]

    def test_chanta(self):
        assert _check("123789m123p789s1z", "1z") == [YakuRecord(CHANTA, 2)]

    def test_little_dragons(self):
        yaku_list = _check("555666z7z123m456p", "7z")
        assert _names(yaku_list) == [HAKU, HATSU, SHOUSANGEN]
        assert total_han(yaku_list) == 4

    def test_triple_triplets(self):
        names = _names(_check("222m222p222s345s6p", "6p"))
        assert names == [TANYAO, SANSHOKU_DOUKOU, SANANKOU]

    def test_three_quads(self):
        context = Context(declared_quads=parse_tiles("2m2p2s"))
        names = _names(_check("222m222p222s345s6p", "6p", context))
        assert SANKANTSU in names


class TestOtherYakuman:
    @pytest.mark.parametrize(
        "hand, win, expected",
        [
            ("111222333z5566z", "6z", [TSUUIISOU]),
            ("111m999m111p999p9s", "9s", [SUUANKOU, CHINROUTOU]),
            ("22334466888s66z", "6s", [RYUUIISOU]),
            ("1112345678999m", "5m", [CHUURENPOUTOU]),
            ("111222333z4z123m", "4z", [SHOUSUUSHII]),
        ],
    )
    def test_yakuman(self, hand, win, expected):
        yaku_list = _check(hand, win)
        assert _names(yaku_list) == expected
        assert all(y.is_yakuman and y.han == 13 for y in yaku_list)

    def test_four_quads(self):
        context = Context(declared_quads=parse_tiles("2m3p4s6s"))
        names = _names(_check("222m333p444s666s8s", "8s", context))
        assert names == [SUUANKOU, SUUKANTSU]

    def test_earthly_hand(self):
        context = Context(seat_wind="south", is_tsumo=True, is_chiihou=True)
        assert _check("234m567p2234678s", "5s", context) == [YakuRecord(CHIIHOU, 13, True)]


class TestContext:
    def test_closed_quad_keeps_hand_concealed(self):
        closed_kan = Meld("quad", tuple(parse_tiles("2222m")), is_open=False)
        assert Context(open_melds=[closed_kan]).is_concealed
        open_pon = Meld("triplet", tuple(parse_tiles("222m")), is_open=True)
        assert not Context(open_melds=[open_pon]).is_concealed

    def test_missing_wind_raises_inside_context(self):
        with pytest.raises(UnsupportedContextError):
            Context().seat_wind_tile
        assert Context(round_wind="north").round_wind_tile == from_string("4z")
