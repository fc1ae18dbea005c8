"""
牌桌不变量检查器

整合所有不变量检查器，提供统一的检查接口。
"""

from typing import Dict, List, Optional, Iterable

from ..deck.card import Card
from ..snapshot.types import TableSnapshot
from .types import InvariantType, InvariantCheckResult, InvariantError, InvariantViolation
from .card_conservation_checker import CardConservationChecker, CardDistributionChecker

__all__ = ['TableInvariants']


class TableInvariants:
    """牌桌不变量检查器

    整合牌数守恒和牌分发检查，支持单独检查和批量检查。
    """

    def __init__(self, initial_cards: Optional[Iterable[Card]] = None,
                 player_count: Optional[int] = None):
        """初始化牌桌不变量检查器

        Args:
            initial_cards: 初始牌堆的全部牌
            player_count: 玩家数
        """
        self.conservation_checker = CardConservationChecker(initial_cards)
        self.distribution_checker = CardDistributionChecker(player_count)

        self._checkers = {
            InvariantType.CARD_CONSERVATION: self.conservation_checker,
            InvariantType.CARD_DISTRIBUTION: self.distribution_checker,
        }

    @classmethod
    def create_for_table(cls, snapshot: TableSnapshot) -> 'TableInvariants':
        """以当前快照为初始状态创建检查器"""
        return cls(initial_cards=snapshot.all_cards(), player_count=snapshot.player_count)

    def check_all(self, snapshot: TableSnapshot,
                  raise_on_violation: bool = False) -> Dict[InvariantType, InvariantCheckResult]:
        """检查所有不变量

        Args:
            snapshot: 牌桌状态快照
            raise_on_violation: 是否在有严重违反时抛出异常

        Returns:
            Dict[InvariantType, InvariantCheckResult]: 检查结果字典

        Raises:
            InvariantError: 当raise_on_violation=True且有严重违反时
        """
        results = {}
        all_violations: List[InvariantViolation] = []

        for invariant_type, checker in self._checkers.items():
            result = checker.check(snapshot)
            results[invariant_type] = result
            all_violations.extend(result.violations)

        if raise_on_violation:
            critical = [v for v in all_violations if v.severity == 'CRITICAL']
            if critical:
                raise InvariantError(
                    f"发现{len(critical)}个严重不变量违反",
                    all_violations
                )

        return results

    def check_card_conservation(self, snapshot: TableSnapshot) -> InvariantCheckResult:
        return self.conservation_checker.check(snapshot)

    def is_valid_state(self, snapshot: TableSnapshot) -> bool:
        results = self.check_all(snapshot)
        return all(result.is_valid for result in results.values())

    def get_violations(self, snapshot: TableSnapshot) -> List[InvariantViolation]:
        violations = []
        for result in self.check_all(snapshot).values():
            violations.extend(result.violations)
        return violations

    def validate_and_raise(self, snapshot: TableSnapshot, context: str = "牌桌操作") -> None:
        """验证状态并在违反时抛出异常

        Args:
            snapshot: 牌桌状态快照
            context: 操作上下文描述

        Raises:
            InvariantError: 当有严重违反时
        """
        violations = [v for v in self.get_violations(snapshot) if v.severity == 'CRITICAL']
        if violations:
            raise InvariantError(
                f"{context}后发现{len(violations)}个严重不变量违反",
                violations
            )
