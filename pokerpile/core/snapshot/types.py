"""
牌桌状态快照类型定义

定义牌桌状态的不可变数据结构，供不变量检查和调试输出使用。
"""

from dataclasses import dataclass, field
from typing import Tuple, Dict, Any
import time

from ..deck.card import Card

__all__ = ['TableSnapshot']


def _card_to_dict(card: Card) -> Dict[str, int]:
    return {'suit': int(card.suit), 'rank': int(card.rank)}


@dataclass(frozen=True)
class TableSnapshot:
    """牌桌状态快照"""
    table_id: str
    pile: Tuple[Card, ...]                 # 牌堆，末尾为牌顶
    hands: Tuple[Tuple[Card, ...], ...]    # 每个玩家的手牌
    discard: Tuple[Card, ...]              # 已打出的牌
    timestamp: float = field(default_factory=time.time)

    def __post_init__(self):
        """验证快照的有效性"""
        if not self.table_id:
            raise ValueError("table_id不能为空")
        if self.timestamp <= 0:
            raise ValueError("timestamp必须为正数")

    @property
    def player_count(self) -> int:
        return len(self.hands)

    @property
    def hand_sizes(self) -> Tuple[int, ...]:
        return tuple(len(hand) for hand in self.hands)

    @property
    def total_cards(self) -> int:
        """牌堆、手牌和弃牌的总张数"""
        return len(self.pile) + sum(self.hand_sizes) + len(self.discard)

    def all_cards(self) -> Tuple[Card, ...]:
        cards = list(self.pile)
        for hand in self.hands:
            cards.extend(hand)
        cards.extend(self.discard)
        return tuple(cards)

    def to_dict(self) -> Dict[str, Any]:
        """转换为可JSON序列化的字典"""
        return {
            'table_id': self.table_id,
            'timestamp': self.timestamp,
            'pile': [_card_to_dict(card) for card in self.pile],
            'hands': [[_card_to_dict(card) for card in hand] for hand in self.hands],
            'discard': [_card_to_dict(card) for card in self.discard],
        }
