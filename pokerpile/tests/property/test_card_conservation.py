"""
Property-based Tests for Card Conservation - 牌数守恒属性测试

该模块使用hypothesis进行基于属性的测试，确保任意操作序列下牌数都守恒。

Tests:
    test_card_conservation_property: 任意操作序列后牌数守恒
    test_shuffle_permutation_property: 洗牌只改变顺序
    test_sort_properties: 排序是幂等的排列
    test_deal_distribution_property: 发牌按轮流顺序平均分配
"""

import random
from collections import Counter
from typing import List, Tuple

import pytest
from hypothesis import given, settings, strategies as st, assume

from pokerpile.core import (
    Card, Deck, SortMode, Table, DealPolicy, CardPileError, transposition_shuffle
)
from pokerpile.core.invariant import TableInvariants


# Hypothesis策略定义
card_strategy = st.builds(Card, st.integers(min_value=0, max_value=3), st.integers(min_value=1, max_value=14))
deck_count_strategy = st.integers(min_value=1, max_value=3)
player_count_strategy = st.integers(min_value=1, max_value=8)
operation_strategy = st.lists(
    st.tuples(
        st.sampled_from(["shuffle", "deal", "draw", "play", "play_at", "sort"]),
        st.integers(min_value=0, max_value=20),
        st.integers(min_value=0, max_value=20),
    ),
    max_size=25,
)


def _apply(table: Table, operation: Tuple[str, int, int]) -> None:
    name, a, b = operation
    player = a % table.player_count
    if name == "shuffle":
        table.shuffle(a * 10)
    elif name == "deal":
        table.deal(a % 6)
    elif name == "draw":
        table.draw(player)
    elif name == "play":
        hand = table.hand(player)
        if not hand.is_empty:
            table.play(player, hand[b % len(hand)])
    elif name == "play_at":
        table.play_at(player, b)
    elif name == "sort":
        table.sort_all_hands(list(SortMode)[b % len(SortMode)])


@pytest.mark.property_test
@settings(max_examples=60, deadline=None)
@given(deck_count_strategy, player_count_strategy, st.booleans(), st.integers(), operation_strategy)
def test_card_conservation_property(deck_count: int, player_count: int, jokers: bool,
                                    seed: int, operations: List[Tuple[str, int, int]]):
    """Property test: 无论如何操作，牌的总数和组成都守恒"""
    table = Table(deck_count=deck_count, player_count=player_count, include_jokers=jokers,
                  seed=seed, deal_policy=DealPolicy.TRUNCATE)
    expected_total = deck_count * 52 + (deck_count * 2 if jokers else 0)
    invariants = TableInvariants.create_for_table(table.snapshot())
    assert table.total_cards == expected_total

    for operation in operations:
        before = table.snapshot()
        try:
            _apply(table, operation)
        except CardPileError:
            # 失败的操作不能改变任何状态
            after = table.snapshot()
            assert (after.pile, after.hands, after.discard) == (before.pile, before.hands, before.discard)

        snapshot = table.snapshot()
        assert snapshot.total_cards == expected_total
        assert invariants.is_valid_state(snapshot)


@pytest.mark.property_test
@settings(deadline=None)
@given(st.lists(card_strategy, max_size=60), st.integers(min_value=0, max_value=500), st.integers())
def test_shuffle_permutation_property(cards: List[Card], repeat: int, seed: int):
    """Property test: 洗牌后牌的多重集合不变"""
    deck = Deck(cards)
    transposition_shuffle(deck, repeat, random.Random(seed))
    assert Counter(deck) == Counter(cards)
    if len(cards) < 2:
        assert deck.cards == tuple(cards)


@pytest.mark.property_test
@given(st.lists(card_strategy, max_size=30), st.sampled_from(list(SortMode)))
def test_sort_properties(cards: List[Card], mode: SortMode):
    """Property test: 排序是排列，且重复排序结果相同"""
    deck = Deck(cards)
    deck.sort(mode)
    once = deck.cards
    assert Counter(once) == Counter(cards)
    deck.sort(mode)
    assert deck.cards == once


@pytest.mark.property_test
@given(st.lists(card_strategy, min_size=2, max_size=30))
def test_ace_high_rule(cards: List[Card]):
    """Property test: 降序排序时A排在所有非A牌之前"""
    deck = Deck(cards)
    deck.sort(SortMode.RANK_FIRST)
    ranks = [card.rank for card in deck]
    ace_count = ranks.count(1)
    assert ranks[:ace_count] == [1] * ace_count


@pytest.mark.property_test
@settings(deadline=None)
@given(player_count_strategy, st.integers(min_value=0, max_value=13), st.integers())
def test_deal_distribution_property(player_count: int, cards_per_player: int, seed: int):
    """Property test: 每个玩家恰好得到k张，且按牌堆末尾顺序轮流发放"""
    assume(player_count * cards_per_player <= 52)
    table = Table(deck_count=1, player_count=player_count, seed=seed)
    table.shuffle(200)
    order = list(reversed(table.pile.cards))

    dealt = table.deal(cards_per_player)

    assert dealt == player_count * cards_per_player
    assert len(table.pile) == 52 - dealt
    for index, hand in enumerate(table.hands):
        assert len(hand) == cards_per_player
        assert list(hand) == order[index:dealt:player_count]
