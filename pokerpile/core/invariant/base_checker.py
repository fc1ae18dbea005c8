"""
不变量检查器基础类

定义不变量检查器的抽象基类和通用功能。
"""

from abc import ABC, abstractmethod
from typing import List, Dict, Any, Optional
import logging
import time
import uuid

from ..snapshot.types import TableSnapshot
from .types import InvariantType, InvariantViolation, InvariantCheckResult

__all__ = ['BaseInvariantChecker']

logger = logging.getLogger(__name__)


class BaseInvariantChecker(ABC):
    """不变量检查器基础抽象类"""

    def __init__(self, invariant_type: InvariantType):
        """初始化检查器

        Args:
            invariant_type: 不变量类型
        """
        self.invariant_type = invariant_type
        self._violations: List[InvariantViolation] = []

    @abstractmethod
    def _perform_check(self, snapshot: TableSnapshot) -> bool:
        """执行具体的不变量检查逻辑

        Args:
            snapshot: 牌桌状态快照

        Returns:
            bool: 检查是否通过
        """

    def check(self, snapshot: TableSnapshot) -> InvariantCheckResult:
        """执行不变量检查

        Args:
            snapshot: 牌桌状态快照

        Returns:
            InvariantCheckResult: 检查结果
        """
        start_time = time.perf_counter()
        self._violations.clear()

        is_valid = self._perform_check(snapshot)
        check_duration = time.perf_counter() - start_time

        if is_valid:
            return InvariantCheckResult.create_success(
                invariant_type=self.invariant_type,
                check_duration=check_duration
            )

        for violation in self._violations:
            logger.warning("%s violated: %s", self.invariant_type.name, violation.description)
        return InvariantCheckResult.create_failure(
            invariant_type=self.invariant_type,
            violations=self._violations.copy(),
            check_duration=check_duration
        )

    def _create_violation(self, description: str, severity: str = 'CRITICAL',
                          context: Optional[Dict[str, Any]] = None) -> InvariantViolation:
        """创建违反记录

        Args:
            description: 违反描述
            severity: 严重程度
            context: 上下文信息

        Returns:
            InvariantViolation: 违反记录
        """
        violation = InvariantViolation(
            invariant_type=self.invariant_type,
            violation_id=f"{self.invariant_type.name.lower()}_{uuid.uuid4().hex[:8]}",
            description=description,
            severity=severity,
            timestamp=time.time(),
            context=context or {}
        )

        self._violations.append(violation)
        return violation
