"""
牌桌模块.

提供Table类：持有牌堆和玩家手牌，负责洗牌、发牌、摸牌、出牌和理牌.
"""

from .table import Table

__all__ = ['Table']
