"""
Invariant Module - 不变量

该模块实现牌桌的不变量检查，包括：
- 牌数守恒验证
- 牌分发一致性检查

Classes:
    TableInvariants: 牌桌不变量检查器
    CardConservationChecker: 牌数守恒检查器
    CardDistributionChecker: 牌分发一致性检查器
    BaseInvariantChecker: 不变量检查器基类
"""

from .types import (
    InvariantType,
    InvariantViolation,
    InvariantCheckResult,
    InvariantError
)
from .base_checker import BaseInvariantChecker
from .card_conservation_checker import CardConservationChecker, CardDistributionChecker
from .table_invariants import TableInvariants

__all__ = [
    'TableInvariants',
    'CardConservationChecker',
    'CardDistributionChecker',
    'BaseInvariantChecker',
    'InvariantType',
    'InvariantViolation',
    'InvariantCheckResult',
    'InvariantError'
]
