"""
pokerpile Test Configuration - pytest配置文件

提供测试的公共fixture：
- 固定种子的随机数生成器和牌桌
- 事件记录器
- 牌数守恒跟踪器
"""

import random
from typing import List

import pytest

from pokerpile.core import Card, Deck, Suit, Rank, Table
from pokerpile.core.events import DomainEvent, EventBus, create_function_handler
from pokerpile.core.snapshot import TableSnapshot


@pytest.fixture
def rng():
    """固定种子的随机数生成器"""
    return random.Random(20190101)


@pytest.fixture
def table(rng):
    """一副牌、四个玩家、不含王的牌桌"""
    return Table(deck_count=1, player_count=4, include_jokers=False, rng=rng)


@pytest.fixture
def mixed_hand():
    """包含A、K、王和各种花色的手牌"""
    return Deck([
        Card(Suit.HEART, Rank.KING),
        Card(Suit.CLUB, Rank.ACE),
        Card(Suit.SPADE, Rank.TWO),
        Card.joker(),
        Card(Suit.SPADE, Rank.ACE),
        Card(Suit.DIAMOND, Rank.TEN),
        Card(Suit.HEART, Rank.TWO),
    ])


@pytest.fixture
def event_recorder():
    """订阅所有事件的事件总线和事件列表"""
    bus = EventBus()
    received: List[DomainEvent] = []
    bus.subscribe_all(create_function_handler(received.append))
    return bus, received


@pytest.fixture
def card_conservation_tracker():
    """牌数守恒跟踪器fixture"""
    class CardTracker:
        def __init__(self):
            self.snapshots: List[TableSnapshot] = []

        def record_snapshot(self, snapshot: TableSnapshot):
            self.snapshots.append(snapshot)

        def verify_conservation(self):
            """验证整个测试过程中的牌数守恒"""
            if len(self.snapshots) < 2:
                return

            initial = sorted(self.snapshots[0].all_cards(), key=lambda c: (int(c.suit), int(c.rank)))
            for i, snapshot in enumerate(self.snapshots[1:], 1):
                current = sorted(snapshot.all_cards(), key=lambda c: (int(c.suit), int(c.rank)))
                assert current == initial, f"第{i}个快照牌数不守恒"

    return CardTracker()
