"""
牌数守恒检查器

检查牌桌上的牌数守恒不变量：构建牌堆之后不再产生或销毁任何一张牌。
"""

from collections import Counter
from typing import Iterable, Optional

from ..deck.card import Card
from ..snapshot.types import TableSnapshot
from .base_checker import BaseInvariantChecker
from .types import InvariantType

__all__ = ['CardConservationChecker', 'CardDistributionChecker']


def _describe(cards: Counter) -> str:
    return ", ".join(f"{card!r}x{count}" for card, count in sorted(
        cards.items(), key=lambda item: (int(item[0].suit), int(item[0].rank))))


class CardConservationChecker(BaseInvariantChecker):
    """牌数守恒检查器

    验证以下守恒规则：
    1. 总张数守恒：牌堆 + 所有手牌 + 弃牌 = 初始总张数
    2. 牌的组成守恒：每种(花色, 点数)的张数与初始牌堆一致
    """

    def __init__(self, initial_cards: Optional[Iterable[Card]] = None):
        """初始化牌数守恒检查器

        Args:
            initial_cards: 初始牌堆的全部牌，如果为None则从第一次检查中推断
        """
        super().__init__(InvariantType.CARD_CONSERVATION)
        self.initial_composition: Optional[Counter] = (
            Counter(initial_cards) if initial_cards is not None else None
        )

    @property
    def initial_total(self) -> Optional[int]:
        if self.initial_composition is None:
            return None
        return sum(self.initial_composition.values())

    def reset(self, initial_cards: Iterable[Card]) -> None:
        """用新的初始牌组重置检查器"""
        self.initial_composition = Counter(initial_cards)

    def _perform_check(self, snapshot: TableSnapshot) -> bool:
        current = Counter(snapshot.all_cards())

        # 第一次检查时记录初始组成
        if self.initial_composition is None:
            self.initial_composition = current
            return True

        total_ok = self._check_total(snapshot)
        composition_ok = self._check_composition(current)
        return total_ok and composition_ok

    def _check_total(self, snapshot: TableSnapshot) -> bool:
        current_total = snapshot.total_cards
        if current_total == self.initial_total:
            return True

        self._create_violation(
            f"总张数不守恒: 初始{self.initial_total}, 当前{current_total}",
            'CRITICAL',
            {
                'initial_total': self.initial_total,
                'current_total': current_total,
                'difference': current_total - self.initial_total,
                'pile': len(snapshot.pile),
                'hands': sum(snapshot.hand_sizes),
                'discard': len(snapshot.discard),
            }
        )
        return False

    def _check_composition(self, current: Counter) -> bool:
        missing = self.initial_composition - current
        extra = current - self.initial_composition
        if not missing and not extra:
            return True

        self._create_violation(
            "牌的组成发生变化",
            'CRITICAL',
            {
                'missing': _describe(missing),
                'extra': _describe(extra),
            }
        )
        return False


class CardDistributionChecker(BaseInvariantChecker):
    """牌分发一致性检查器

    验证玩家手牌数量与玩家数一致，且任何位置都没有"无牌"占位符。
    """

    def __init__(self, player_count: Optional[int] = None):
        super().__init__(InvariantType.CARD_DISTRIBUTION)
        self.player_count = player_count

    def _perform_check(self, snapshot: TableSnapshot) -> bool:
        all_valid = True

        if self.player_count is not None and snapshot.player_count != self.player_count:
            self._create_violation(
                f"手牌数量{snapshot.player_count}与玩家数{self.player_count}不一致",
                'CRITICAL',
                {'expected': self.player_count, 'actual': snapshot.player_count}
            )
            all_valid = False

        locations = [('pile', snapshot.pile), ('discard', snapshot.discard)]
        locations.extend((f'hand_{i}', hand) for i, hand in enumerate(snapshot.hands))
        for name, cards in locations:
            placeholders = sum(1 for card in cards if card.is_placeholder)
            if placeholders:
                self._create_violation(
                    f"{name}中有{placeholders}张占位牌",
                    'CRITICAL',
                    {'location': name, 'placeholders': placeholders}
                )
                all_valid = False

        return all_valid
