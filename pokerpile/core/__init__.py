"""
Core Module - 纯领域逻辑层

该模块包含多副牌、多玩家牌堆的核心逻辑。
核心模块只能依赖其他核心模块，不能依赖UI层。

Modules:
    deck: 扑克牌、牌组和洗牌算法
    table: 牌桌（牌堆 + 玩家手牌）
    config: 牌桌和日志配置
    snapshot: 状态快照
    invariant: 牌数守恒检查
    events: 领域事件系统
"""

from .exceptions import (
    CardPileError,
    InvalidArgumentError,
    OutOfRangeError,
    CardNotFoundError,
    EmptyCollectionError,
    InsufficientCardsError,
)
from .deck import Card, Deck, Suit, Rank, SortMode, transposition_shuffle
from .config import TableConfig, LoggingConfig, DealPolicy, setup_logging
from .table import Table

__all__ = [
    'CardPileError',
    'InvalidArgumentError',
    'OutOfRangeError',
    'CardNotFoundError',
    'EmptyCollectionError',
    'InsufficientCardsError',
    'Card',
    'Deck',
    'Suit',
    'Rank',
    'SortMode',
    'transposition_shuffle',
    'TableConfig',
    'LoggingConfig',
    'DealPolicy',
    'setup_logging',
    'Table',
]
