"""
牌组管理.

定义Deck类：一个有序、可变、独占其牌列表的扑克牌序列.
牌堆、玩家手牌和弃牌堆都是Deck.
"""

from typing import Callable, Dict, Iterable, Iterator, List, Optional, Tuple

from ..exceptions import CardNotFoundError, EmptyCollectionError, OutOfRangeError
from .card import Card
from .types import (
    Rank, SortMode, STANDARD_RANKS, JOKERS_PER_DECK, get_all_suits
)


def _rank_strength(rank: int) -> int:
    """A比其他所有点数都大（包括王）"""
    return Rank.JOKER + 1 if rank == Rank.ACE else int(rank)


def _rank_first_key(card: Card) -> Tuple[int, int]:
    return (_rank_strength(card.rank), int(card.suit))


def _suit_first_key(card: Card) -> Tuple[int, int]:
    return (int(card.suit), _rank_strength(card.rank))


def _ascending_key(card: Card) -> Tuple[int, int]:
    return (int(card.rank), int(card.suit))


# 排序模式 -> (排序键, 是否降序)
_SORT_KEYS: Dict[SortMode, Tuple[Callable[[Card], Tuple[int, int]], bool]] = {
    SortMode.RANK_FIRST: (_rank_first_key, True),
    SortMode.SUIT_FIRST: (_suit_first_key, True),
    SortMode.RANK_ASCENDING: (_ascending_key, False),
}


class Deck:
    """
    表示一组有序的扑克牌.

    支持追加、按值移除（第一张匹配的牌）、从末尾取牌、下标访问、排序和按花色筛选.
    末尾即"牌顶"：发牌和摸牌都从末尾取.

    Attributes:
        _cards: 当前牌组中的牌列表

    Examples:
        >>> deck = Deck.standard()
        >>> len(deck)
        52
        >>> deck.pop_last()
        Card(KING, SPADE)
    """

    def __init__(self, cards: Optional[Iterable[Card]] = None) -> None:
        """
        初始化牌组.

        Args:
            cards: 初始的牌，会被复制到新的列表中
        """
        self._cards: List[Card] = list(cards) if cards is not None else []

    @classmethod
    def standard(cls, deck_count: int = 1, include_jokers: bool = False) -> 'Deck':
        """
        按历史顺序构建多副牌组成的牌堆.

        每副牌依次加入梅花到黑桃、A到K的52张牌，需要时再追加两张王.

        Args:
            deck_count: 牌的副数
            include_jokers: 是否加入王

        Returns:
            Deck: 未洗的牌堆
        """
        deck = cls()
        for _ in range(deck_count):
            for suit in get_all_suits():
                for rank in STANDARD_RANKS:
                    deck.append(Card(suit, rank))
            if include_jokers:
                for _ in range(JOKERS_PER_DECK):
                    deck.append(Card.joker())
        return deck

    def append(self, card: Card) -> None:
        """把一张牌放到牌组末尾"""
        self._cards.append(card)

    def pop_last(self) -> Card:
        """
        取出末尾的一张牌.

        Returns:
            Card: 取出的牌

        Raises:
            EmptyCollectionError: 当牌组为空时
        """
        if not self._cards:
            raise EmptyCollectionError("Cannot pop from an empty deck")
        return self._cards.pop()

    def pop_at(self, index: int) -> Card:
        """
        取出指定位置的牌.

        Raises:
            OutOfRangeError: 当位置越界时
        """
        if not 0 <= index < len(self._cards):
            raise OutOfRangeError(
                f"Card index {index} out of range for deck of {len(self._cards)}"
            )
        return self._cards.pop(index)

    def remove_card(self, card: Card) -> Card:
        """
        移除第一张与给定牌相等的牌.

        Args:
            card: 要移除的牌（按花色和点数匹配）

        Returns:
            Card: 被移除的牌

        Raises:
            CardNotFoundError: 当牌组中没有该牌时，牌组保持不变
        """
        try:
            index = self._cards.index(card)
        except ValueError:
            raise CardNotFoundError(f"{card!r} not found in deck") from None
        return self._cards.pop(index)

    def swap(self, a: int, b: int) -> None:
        """交换两个位置上的牌"""
        self._cards[a], self._cards[b] = self._cards[b], self._cards[a]

    def sort(self, mode: SortMode = SortMode.RANK_FIRST) -> None:
        """
        原地排序.

        Args:
            mode: 排序模式，见SortMode. 两种降序模式中A都是最大的点数.
        """
        key, descending = _SORT_KEYS[mode]
        self._cards.sort(key=key, reverse=descending)

    def subset_by_suit(self, suit: int) -> 'Deck':
        """
        按花色筛选，返回新的牌组，不修改原牌组.

        Args:
            suit: 花色

        Returns:
            Deck: 该花色的所有牌，保持原相对顺序
        """
        return Deck(card for card in self._cards if card.suit == suit)

    def peek_last(self) -> Optional[Card]:
        """查看末尾的牌但不取出，牌组为空时返回None"""
        return self._cards[-1] if self._cards else None

    def count(self, card: Card) -> int:
        """与给定牌相等的牌的数量"""
        return self._cards.count(card)

    def copy(self) -> 'Deck':
        return Deck(self._cards)

    @property
    def cards(self) -> Tuple[Card, ...]:
        """牌组内容的只读副本"""
        return tuple(self._cards)

    @property
    def size(self) -> int:
        return len(self._cards)

    @property
    def is_empty(self) -> bool:
        return len(self._cards) == 0

    def __getitem__(self, index: int) -> Card:
        return self._cards[index]

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)

    def __contains__(self, card: object) -> bool:
        return card in self._cards

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Deck):
            return NotImplemented
        return self._cards == other._cards

    def __repr__(self) -> str:
        return f"Deck(size={len(self._cards)})"
