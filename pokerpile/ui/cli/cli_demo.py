"""牌堆CLI演示.

按顺序演示：建牌堆 -> 洗牌 -> 发牌 -> 理牌 -> 出牌，每一步打印牌桌。
"""

import argparse
import logging
import sys
from typing import List, Optional, TextIO

from pokerpile.core import (
    CardPileError, LoggingConfig, SortMode, Table, TableConfig, setup_logging
)
from pokerpile.ui.cli.render import CLIRenderer, DisplayMode

logger = logging.getLogger(__name__)

SORT_CHOICES = {
    'rank': SortMode.RANK_FIRST,
    'suit': SortMode.SUIT_FIRST,
    'ascending': SortMode.RANK_ASCENDING,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pokerpile-demo",
        description="Build, shuffle, deal, sort and play a multi-deck card pile.",
    )
    parser.add_argument("--decks", type=int, default=1, help="number of source decks (default: 1)")
    parser.add_argument("--players", type=int, default=4, help="number of players (default: 4)")
    parser.add_argument("--jokers", action="store_true", help="add two jokers per deck")
    parser.add_argument("--cards", type=int, default=13, help="cards dealt to each player (default: 13)")
    parser.add_argument("--repeat", type=int, default=1000, help="swaps performed by the shuffle")
    parser.add_argument("--seed", type=int, default=None, help="random seed for a reproducible shuffle")
    parser.add_argument("--sort", choices=sorted(SORT_CHOICES), default="rank", help="hand sort order")
    parser.add_argument("--play", type=int, nargs=2, metavar=("PLAYER", "INDEX"), default=None,
                        help="play the card at INDEX from PLAYER's sorted hand")
    parser.add_argument("--log-level", default=None, help="logging level (default: $POKERPILE_LOG_LEVEL or WARNING)")
    return parser


class PileDemo:
    """演示流程，输出写到给定的流中."""

    def __init__(self, config: TableConfig, cards_per_player: int, sort_mode: SortMode,
                 out: Optional[TextIO] = None):
        self.table = Table.from_config(config)
        self.cards_per_player = cards_per_player
        self.sort_mode = sort_mode
        self.out = out or sys.stdout

    def _print(self, text: str = "") -> None:
        print(text, file=self.out)

    def _print_hands(self) -> None:
        for index, hand in enumerate(self.table.hands):
            self._print(f"Player {index} {CLIRenderer.render_deck(hand)}")

    def run(self, play: Optional[List[int]] = None) -> None:
        self._print(CLIRenderer.render_deck(self.table.pile))
        self.table.shuffle()
        self._print(CLIRenderer.render_deck(self.table.pile))

        self.table.deal(self.cards_per_player)
        self._print_hands()

        self._print("Sort")
        self.table.sort_all_hands(self.sort_mode)
        self._print_hands()

        if play is not None:
            player_index, card_index = play
            card = self.table.play_at(player_index, card_index)
            self._print(f"Play {player_index}, {card_index}: {CLIRenderer.format_card(card)}")
            self._print(f"Player {player_index} {CLIRenderer.render_deck(self.table.hand(player_index))}")

        self._print(CLIRenderer.render_table(self.table, DisplayMode.BY_SUIT))


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging_config = LoggingConfig.from_env()
    if args.log_level:
        logging_config.log_level = args.log_level.upper()
    setup_logging(logging_config)

    try:
        config = TableConfig(
            deck_count=args.decks,
            player_count=args.players,
            include_jokers=args.jokers,
            shuffle_repeat=args.repeat,
            random_seed=args.seed,
        )
        PileDemo(config, args.cards, SORT_CHOICES[args.sort]).run(args.play)
    except CardPileError as e:
        logger.debug("Demo aborted", exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
