"""
扑克牌数据结构.

定义不可变的Card类. 构造时不做取值校验，调用方负责传入合法的花色和点数.
"""

from dataclasses import dataclass
from typing import Dict

from ..exceptions import InvalidArgumentError
from .types import Suit, Rank, SUIT_GLYPHS, JOKER_SUIT, rank_label


_RANK_PARSE: Dict[str, int] = {
    "A": Rank.ACE, "2": Rank.TWO, "3": Rank.THREE, "4": Rank.FOUR,
    "5": Rank.FIVE, "6": Rank.SIX, "7": Rank.SEVEN, "8": Rank.EIGHT,
    "9": Rank.NINE, "10": Rank.TEN, "T": Rank.TEN, "J": Rank.JACK,
    "Q": Rank.QUEEN, "K": Rank.KING,
}

_SUIT_PARSE: Dict[str, int] = {
    "C": Suit.CLUB, "D": Suit.DIAMOND, "H": Suit.HEART, "S": Suit.SPADE,
    SUIT_GLYPHS[Suit.CLUB]: Suit.CLUB,
    SUIT_GLYPHS[Suit.DIAMOND]: Suit.DIAMOND,
    SUIT_GLYPHS[Suit.HEART]: Suit.HEART,
    SUIT_GLYPHS[Suit.SPADE]: Suit.SPADE,
}


@dataclass(frozen=True)
class Card:
    """
    表示一张扑克牌.

    相等性和哈希只由(花色, 点数)决定. 多副牌混合时可能出现完全相同的牌.
    王牌的花色字段固定为方块，因此按花色筛选时王会被当作方块.

    Attributes:
        suit: 花色 (0-3)
        rank: 点数 (0 无牌, 1 A, 2-10, 11-13 J/Q/K, 14 王)

    Examples:
        >>> card = Card(Suit.SPADE, Rank.ACE)
        >>> card.rank_label
        'A'
        >>> Card(3, 1) == card
        True
    """

    suit: int
    rank: int

    @property
    def suit_glyph(self) -> str:
        """花色图形"""
        return SUIT_GLYPHS[self.suit]

    @property
    def rank_label(self) -> str:
        """点数标签: A, 2-10, J, Q, K, JOKER，占位符为空串"""
        return rank_label(self.rank)

    @property
    def is_joker(self) -> bool:
        return self.rank == Rank.JOKER

    @property
    def is_placeholder(self) -> bool:
        return self.rank == Rank.NONE

    @classmethod
    def joker(cls) -> 'Card':
        """创建一张王牌（花色字段为方块）"""
        return cls(JOKER_SUIT, Rank.JOKER)

    @classmethod
    def from_str(cls, card_str: str) -> 'Card':
        """
        从字符串创建扑克牌对象.

        支持"点数花色"("AS", "10d", "Th")和"花色点数"("♠K")两种写法，
        以及"JOKER".

        Args:
            card_str: 扑克牌字符串

        Returns:
            Card: 对应的扑克牌对象

        Raises:
            InvalidArgumentError: 当字符串格式无效时
        """
        if not isinstance(card_str, str):
            raise InvalidArgumentError(f"输入必须是字符串，实际: {type(card_str)}")

        text = card_str.strip().upper()
        if text == "JOKER":
            return cls.joker()
        if len(text) < 2:
            raise InvalidArgumentError(f"卡牌字符串格式错误: {card_str!r}")

        if text[0] in _SUIT_PARSE:
            suit_str, rank_str = text[0], text[1:]
        else:
            rank_str, suit_str = text[:-1], text[-1]

        if rank_str not in _RANK_PARSE:
            raise InvalidArgumentError(f"无效的点数: {card_str!r}")
        if suit_str not in _SUIT_PARSE:
            raise InvalidArgumentError(f"无效的花色: {card_str!r}")

        return cls(Suit(_SUIT_PARSE[suit_str]), Rank(_RANK_PARSE[rank_str]))

    def __repr__(self) -> str:
        try:
            return f"Card({Rank(self.rank).name}, {Suit(self.suit).name})"
        except ValueError:
            return f"Card(rank={self.rank!r}, suit={self.suit!r})"
