# mahjong_evaluator/utils/constants.py

# ===== 役种名称常量 =====

# 1番役
RIICHI = "riichi"
IPPATSU = "ippatsu"
MENZEN_TSUMO = "menzen_tsumo"
PINFU = "pinfu"
TANYAO = "tanyao"
IIPEIKOU = "iipeikou"
HAKU = "yakuhai_white"
HATSU = "yakuhai_green"
CHUN = "yakuhai_red"
SEAT_WIND = "seat_wind"  # 动态添加（seat_wind_east 等）
ROUND_WIND = "round_wind"  # 动态添加（round_wind_east 等）
HAITEI = "haitei"
HOUTEI = "houtei"
RINSHAN = "rinshan"
CHANKAN = "chankan"

# 2番役
DOUBLE_RIICHI = "double_riichi"
CHIITOITSU = "chiitoitsu"
CHANTA = "chanta"
ITTSU = "ittsu"
SANSHOKU_DOUJUN = "sanshoku_doujun"
SANSHOKU_DOUKOU = "sanshoku_doukou"
SANKANTSU = "sankantsu"
TOITOI = "toitoi"
SANANKOU = "sanankou"
SHOUSANGEN = "shousangen"
HONROUTOU = "honroutou"

# 3番役
HONITSU = "honitsu"
JUNCHAN = "junchan"
RYANPEIKOU = "ryanpeikou"

# 6番役
CHINITSU = "chinitsu"

# 宝牌（不是役，统一汇总为一条记录）
DORA = "dora"

# 役满
KOKUSHI = "kokushi"
SUUANKOU = "suuankou"
DAISANGEN = "daisangen"
SHOUSUUSHII = "shousuushii"
DAISUUSHII = "daisuushii"
TSUUIISOU = "tsuuiisou"
RYUUIISOU = "ryuuiisou"
CHINROUTOU = "chinroutou"
SUUKANTSU = "suukantsu"
CHUURENPOUTOU = "chuurenpoutou"
TENHOU = "tenhou"
CHIIHOU = "chiihou"

YAKUMAN_HAN = 13
DOUBLE_YAKUMAN_HAN = 26

# 显示用名称
YAKU_DISPLAY_NAMES = {
    RIICHI: "立直",
    IPPATSU: "一发",
    MENZEN_TSUMO: "门前清自摸和",
    PINFU: "平和",
    TANYAO: "断幺九",
    IIPEIKOU: "一杯口",
    HAKU: "役牌 白",
    HATSU: "役牌 发",
    CHUN: "役牌 中",
    HAITEI: "海底摸月",
    HOUTEI: "河底捞鱼",
    RINSHAN: "岭上开花",
    CHANKAN: "抢杠",
    DOUBLE_RIICHI: "两立直",
    CHIITOITSU: "七对子",
    CHANTA: "混全带幺九",
    ITTSU: "一气通贯",
    SANSHOKU_DOUJUN: "三色同顺",
    SANSHOKU_DOUKOU: "三色同刻",
    SANKANTSU: "三杠子",
    TOITOI: "对对和",
    SANANKOU: "三暗刻",
    SHOUSANGEN: "小三元",
    HONROUTOU: "混老头",
    HONITSU: "混一色",
    JUNCHAN: "纯全带幺九",
    RYANPEIKOU: "两杯口",
    CHINITSU: "清一色",
    DORA: "宝牌",
    KOKUSHI: "国士无双",
    SUUANKOU: "四暗刻",
    DAISANGEN: "大三元",
    SHOUSUUSHII: "小四喜",
    DAISUUSHII: "大四喜",
    TSUUIISOU: "字一色",
    RYUUIISOU: "绿一色",
    CHINROUTOU: "清老头",
    SUUKANTSU: "四杠子",
    CHUURENPOUTOU: "九莲宝灯",
    TENHOU: "天和",
    CHIIHOU: "地和",
}

WIND_NAMES = {"east": "东", "south": "南", "west": "西", "north": "北"}

# ===== 牌的常量（34种编号） =====

# 幺九牌：国士无双所需的13种
TERMINALS = frozenset({0, 8, 9, 17, 18, 26})  # 老头牌
WINDS = (27, 28, 29, 30)  # 东南西北
DRAGONS = (31, 32, 33)  # 白发中
HONORS = frozenset(WINDS + DRAGONS)
TERMINALS_AND_HONORS = TERMINALS | HONORS

DRAGON_WHITE = 31
DRAGON_GREEN = 32
DRAGON_RED = 33

# 绿一色用牌：2s 3s 4s 6s 8s 发
GREEN_TILES = frozenset({19, 20, 21, 23, 25, DRAGON_GREEN})

# 九莲宝灯的基本形 1112345678999
CHUUREN_PATTERN = (3, 1, 1, 1, 1, 1, 1, 1, 3)

# 宝牌指示牌的循环
WIND_CYCLE = ("east", "south", "west", "north")
DRAGON_CYCLE = ("white", "green", "red")
