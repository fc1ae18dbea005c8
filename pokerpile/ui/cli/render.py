"""牌堆CLI渲染模块.

这个模块负责把牌组和牌桌渲染为命令行显示的字符串，
显示方式作为参数传入，不保存在牌组对象上。
"""

from enum import Enum
from typing import List

from pokerpile.core import Card, Deck, SortMode, Suit, Table

CARD_SEPARATOR = "  "


class DisplayMode(Enum):
    """牌组显示方式"""
    AS_IS = "as_is"              # 保持原顺序
    BY_RANK = "by_rank"          # 点数优先降序
    BY_SUIT = "by_suit"          # 按花色分行
    RANKS_ONLY = "ranks_only"    # 只显示点数


class CLIRenderer:
    """CLI渲染器.

    所有渲染方法都是纯函数，只读取传入的牌组，不修改它。
    """

    @staticmethod
    def format_card(card: Card) -> str:
        """渲染一张牌.

        Args:
            card: 要渲染的牌

        Returns:
            花色图形加右对齐的点数，如"♠  A"、"♥ 10"；王为"JOKER"
        """
        if card.is_joker:
            return card.rank_label
        return f"{card.suit_glyph} {card.rank_label:>2}"

    @staticmethod
    def render_cards(cards: List[Card]) -> str:
        return CARD_SEPARATOR.join(CLIRenderer.format_card(card) for card in cards)

    @staticmethod
    def render_deck(deck: Deck, mode: DisplayMode = DisplayMode.AS_IS) -> str:
        """渲染牌组.

        Args:
            deck: 要渲染的牌组
            mode: 显示方式

        Returns:
            用两个空格分隔的牌；按花色显示时每个花色一行；空牌组返回空串
        """
        if mode is DisplayMode.RANKS_ONLY:
            return CARD_SEPARATOR.join(card.rank_label for card in deck)

        if mode is DisplayMode.BY_RANK:
            ordered = deck.copy()
            ordered.sort(SortMode.RANK_FIRST)
            return CLIRenderer.render_cards(list(ordered))

        if mode is DisplayMode.BY_SUIT:
            lines = []
            for suit in sorted(Suit, reverse=True):
                subset = deck.subset_by_suit(suit)
                if subset.is_empty:
                    continue
                subset.sort(SortMode.SUIT_FIRST)
                lines.append(CLIRenderer.render_cards(list(subset)))
            return "\n".join(lines)

        return CLIRenderer.render_cards(list(deck))

    @staticmethod
    def render_table(table: Table, mode: DisplayMode = DisplayMode.AS_IS) -> str:
        """渲染牌桌：牌堆一行，每个玩家一行."""
        lines = [f"Pile ({len(table.pile)}): {CLIRenderer.render_deck(table.pile)}"]
        for index, hand in enumerate(table.hands):
            rendered = CLIRenderer.render_deck(hand, mode)
            if mode is DisplayMode.BY_SUIT:
                rendered = rendered.replace("\n", "\n    ")
            lines.append(f"Player {index} ({len(hand)}): {rendered}")
        return "\n".join(lines)
