"""
扑克牌相关类型定义.

定义花色、点数、排序模式枚举以及显示用的标签表.
"""

from enum import Enum, IntEnum
from typing import Dict, List


class Suit(IntEnum):
    """
    扑克牌花色枚举.

    数值越大花色越大: 黑桃 > 红桃 > 方块 > 梅花.
    """

    CLUB = 0
    DIAMOND = 1
    HEART = 2
    SPADE = 3


class Rank(IntEnum):
    """
    扑克牌点数枚举.

    0 表示"无牌"占位符，14 表示大小王.
    排序时A的大小由SortMode决定，不依赖这里的数值.
    """

    NONE = 0
    ACE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    JOKER = 14


class SortMode(Enum):
    """手牌排序模式"""
    RANK_FIRST = "rank_first"          # 点数优先降序，A最大，同点数按花色降序
    SUIT_FIRST = "suit_first"          # 花色优先降序，同花色按点数降序（A最大）
    RANK_ASCENDING = "rank_ascending"  # 点数升序（A最小），同点数按花色升序


# 花色图形 (UTF-8)
SUIT_GLYPHS: Dict[int, str] = {
    Suit.CLUB: "♣",
    Suit.DIAMOND: "♦",
    Suit.HEART: "♥",
    Suit.SPADE: "♠",
}

# 点数标签，2-10 直接使用数字
RANK_LABELS: Dict[int, str] = {
    Rank.NONE: "",
    Rank.ACE: "A",
    Rank.JACK: "J",
    Rank.QUEEN: "Q",
    Rank.KING: "K",
    Rank.JOKER: "JOKER",
}

# 一副牌中的标准点数（不含占位符和王）
STANDARD_RANKS = tuple(Rank(r) for r in range(Rank.ACE, Rank.KING + 1))

CARDS_PER_DECK = len(Suit) * len(STANDARD_RANKS)
JOKERS_PER_DECK = 2

# 王牌的花色字段固定为方块（历史约定）
JOKER_SUIT = Suit.DIAMOND


def get_all_suits() -> List[Suit]:
    """
    获取所有花色.

    Returns:
        List[Suit]: 从梅花到黑桃的四种花色
    """
    return list(Suit)


def rank_label(rank: int) -> str:
    """返回点数的显示标签"""
    if rank in RANK_LABELS:
        return RANK_LABELS[rank]
    return str(int(rank))
