"""
扑克牌组管理模块.

提供Card、Deck类、排序模式和随机对换洗牌算法.
"""

from .types import (
    Suit, Rank, SortMode, SUIT_GLYPHS, RANK_LABELS, CARDS_PER_DECK, JOKERS_PER_DECK
)
from .card import Card
from .deck import Deck
from .shuffle import transposition_shuffle, DEFAULT_SHUFFLE_REPEAT

__all__ = [
    'Suit',
    'Rank',
    'SortMode',
    'SUIT_GLYPHS',
    'RANK_LABELS',
    'CARDS_PER_DECK',
    'JOKERS_PER_DECK',
    'Card',
    'Deck',
    'transposition_shuffle',
    'DEFAULT_SHUFFLE_REPEAT',
]
