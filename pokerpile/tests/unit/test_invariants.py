"""
不变量检查器的单元测试.

使用手工构造的快照验证牌数守恒和牌分发检查能发现破坏.
"""

import pytest

from pokerpile.core import Card, Suit, Rank, Table
from pokerpile.core.invariant import (
    CardConservationChecker,
    CardDistributionChecker,
    InvariantError,
    InvariantType,
    TableInvariants,
)
from pokerpile.core.snapshot import TableSnapshot

ACE = Card(Suit.SPADE, Rank.ACE)
KING = Card(Suit.HEART, Rank.KING)
TWO = Card(Suit.CLUB, Rank.TWO)


def _snapshot(pile=(), hands=((), ()), discard=()):
    return TableSnapshot(table_id="t", pile=tuple(pile),
                         hands=tuple(tuple(h) for h in hands), discard=tuple(discard))


@pytest.mark.unit
@pytest.mark.fast
class TestCardConservationChecker:

    def test_moving_cards_is_valid(self):
        checker = CardConservationChecker([ACE, KING, TWO])
        result = checker.check(_snapshot(pile=[TWO], hands=[[ACE], []], discard=[KING]))
        assert result.is_valid
        assert result.invariant_type is InvariantType.CARD_CONSERVATION

    def test_first_check_records_initial_state(self):
        checker = CardConservationChecker()
        assert checker.check(_snapshot(pile=[ACE, KING])).is_valid
        assert checker.initial_total == 2
        assert not checker.check(_snapshot(pile=[ACE])).is_valid

    def test_lost_card(self):
        checker = CardConservationChecker([ACE, KING, TWO])
        result = checker.check(_snapshot(pile=[TWO], hands=[[ACE], []]))
        assert not result.is_valid
        descriptions = [v.description for v in result.violations]
        assert any("总张数不守恒" in d for d in descriptions)
        composition = [v for v in result.violations if v.context.get('missing')]
        assert "Card(KING, HEART)" in composition[0].context['missing']

    def test_swapped_identity_with_same_total(self):
        checker = CardConservationChecker([ACE, KING])
        result = checker.check(_snapshot(pile=[ACE, ACE]))
        assert not result.is_valid
        assert len(result.violations) == 1
        assert "Card(ACE, SPADE)x1" in result.violations[0].context['extra']

    def test_reset(self):
        checker = CardConservationChecker([ACE])
        checker.reset([ACE, KING])
        assert checker.check(_snapshot(hands=[[ACE], [KING]])).is_valid


@pytest.mark.unit
@pytest.mark.fast
class TestCardDistributionChecker:

    def test_player_count_mismatch(self):
        checker = CardDistributionChecker(player_count=3)
        result = checker.check(_snapshot(pile=[ACE]))
        assert not result.is_valid

    def test_placeholder_detected(self):
        checker = CardDistributionChecker(player_count=2)
        result = checker.check(_snapshot(hands=[[], [Card(Suit.CLUB, Rank.NONE)]]))
        assert not result.is_valid
        assert result.violations[0].context['location'] == 'hand_1'


@pytest.mark.unit
@pytest.mark.fast
class TestTableInvariants:

    def test_fresh_table_is_valid(self):
        table = Table(deck_count=2, player_count=3, include_jokers=True)
        invariants = TableInvariants.create_for_table(table.snapshot())
        table.shuffle(100)
        table.deal(5)
        table.play_at(0, 0)
        assert invariants.is_valid_state(table.snapshot())
        assert invariants.get_violations(table.snapshot()) == []

    def test_check_all_raises_on_violation(self):
        invariants = TableInvariants([ACE, KING], player_count=2)
        with pytest.raises(InvariantError) as exc_info:
            invariants.check_all(_snapshot(pile=[ACE]), raise_on_violation=True)
        assert exc_info.value.get_critical_violations()

    def test_validate_and_raise_message(self):
        invariants = TableInvariants([ACE], player_count=2)
        with pytest.raises(InvariantError, match="出牌"):
            invariants.validate_and_raise(_snapshot(), "出牌")

    def test_check_card_conservation(self):
        invariants = TableInvariants([ACE], player_count=2)
        assert invariants.check_card_conservation(_snapshot(discard=[ACE])).is_valid
