"""
Card类的单元测试.

测试牌的相等性、标签表、王牌的花色约定和字符串解析.
"""

import pytest

from pokerpile.core import Card, Suit, Rank, InvalidArgumentError
from pokerpile.core.deck import SUIT_GLYPHS


@pytest.mark.unit
@pytest.mark.fast
class TestCard:
    """Card类的单元测试."""

    def test_card_creation(self):
        card = Card(Suit.HEART, Rank.ACE)
        assert card.suit == Suit.HEART
        assert card.rank == Rank.ACE
        assert card.rank == 1

    def test_plain_ints_equal_enum_values(self):
        """构造不做转换，整数和枚举值相等"""
        assert Card(3, 1) == Card(Suit.SPADE, Rank.ACE)
        assert hash(Card(3, 1)) == hash(Card(Suit.SPADE, Rank.ACE))

    def test_card_immutability(self):
        card = Card(Suit.SPADE, Rank.KING)
        with pytest.raises(AttributeError):
            card.suit = Suit.HEART

    def test_equality_by_suit_and_rank(self):
        assert Card(Suit.HEART, Rank.ACE) == Card(Suit.HEART, Rank.ACE)
        assert Card(Suit.HEART, Rank.ACE) != Card(Suit.SPADE, Rank.ACE)
        assert Card(Suit.HEART, Rank.ACE) != Card(Suit.HEART, Rank.KING)

    def test_jokers_with_same_suit_are_equal(self):
        assert Card.joker() == Card.joker()
        assert Card.joker() == Card(Suit.DIAMOND, Rank.JOKER)
        assert Card.joker().suit == Suit.DIAMOND

    def test_no_validation_on_construction(self):
        card = Card(9, 99)
        assert card.rank == 99

    @pytest.mark.parametrize("rank,label", [
        (Rank.NONE, ""),
        (Rank.ACE, "A"),
        (Rank.TWO, "2"),
        (Rank.TEN, "10"),
        (Rank.JACK, "J"),
        (Rank.QUEEN, "Q"),
        (Rank.KING, "K"),
        (Rank.JOKER, "JOKER"),
    ])
    def test_rank_label(self, rank, label):
        assert Card(Suit.CLUB, rank).rank_label == label

    def test_suit_glyph(self):
        assert Card(Suit.CLUB, Rank.TWO).suit_glyph == "♣"
        assert Card(Suit.DIAMOND, Rank.TWO).suit_glyph == "♦"
        assert Card(Suit.HEART, Rank.TWO).suit_glyph == "♥"
        assert Card(Suit.SPADE, Rank.TWO).suit_glyph == "♠"
        assert len(SUIT_GLYPHS) == 4

    def test_flags(self):
        assert Card.joker().is_joker
        assert not Card(Suit.SPADE, Rank.ACE).is_joker
        assert Card(Suit.CLUB, Rank.NONE).is_placeholder
        assert not Card(Suit.CLUB, Rank.ACE).is_placeholder

    def test_repr(self):
        assert repr(Card(Suit.SPADE, Rank.ACE)) == "Card(ACE, SPADE)"
        assert repr(Card(9, 99)) == "Card(rank=99, suit=9)"


@pytest.mark.unit
@pytest.mark.fast
class TestCardFromStr:
    """Card.from_str的单元测试."""

    @pytest.mark.parametrize("text,expected", [
        ("AS", Card(Suit.SPADE, Rank.ACE)),
        ("KH", Card(Suit.HEART, Rank.KING)),
        ("10d", Card(Suit.DIAMOND, Rank.TEN)),
        ("Th", Card(Suit.HEART, Rank.TEN)),
        ("2c", Card(Suit.CLUB, Rank.TWO)),
        ("♠Q", Card(Suit.SPADE, Rank.QUEEN)),
        ("♥10", Card(Suit.HEART, Rank.TEN)),
        ("joker", Card.joker()),
    ])
    def test_valid_strings(self, text, expected):
        assert Card.from_str(text) == expected

    @pytest.mark.parametrize("text", ["", "A", "XH", "AX", "1S", "11H"])
    def test_invalid_strings(self, text):
        with pytest.raises(InvalidArgumentError):
            Card.from_str(text)

    def test_non_string_input(self):
        with pytest.raises(InvalidArgumentError):
            Card.from_str(12)

    def test_invalid_argument_is_value_error(self):
        with pytest.raises(ValueError):
            Card.from_str("ZZ")
