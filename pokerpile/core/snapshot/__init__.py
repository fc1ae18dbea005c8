"""
Snapshot Module - 状态快照

Classes:
    TableSnapshot: 牌桌状态的不可变快照
"""

from .types import TableSnapshot

__all__ = ['TableSnapshot']
