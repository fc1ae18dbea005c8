"""
牌桌（扑克牌局）的实现
管理牌堆、每个玩家的手牌和弃牌堆，负责洗牌、发牌、摸牌、出牌和理牌
"""

import logging
import random
import uuid
from typing import Any, Dict, Optional, Tuple

from ..config import DealPolicy, TableConfig
from ..deck import Card, Deck, SortMode, transposition_shuffle, DEFAULT_SHUFFLE_REPEAT
from ..events import DomainEvent, EventBus, EventType
from ..exceptions import (
    EmptyCollectionError, InsufficientCardsError, InvalidArgumentError, OutOfRangeError
)
from ..invariant import TableInvariants
from ..snapshot import TableSnapshot

logger = logging.getLogger(__name__)


class Table:
    """
    牌桌类

    牌堆在构造时一次性生成，之后的牌只会在牌堆、手牌和弃牌堆之间移动，
    总张数始终等于 deck_count * 52 (+ 每副两张王).

    Examples:
        >>> table = Table(deck_count=1, player_count=4, seed=7)
        >>> table.shuffle()
        >>> table.deal(13)
        52
        >>> [len(hand) for hand in table.hands]
        [13, 13, 13, 13]
    """

    def __init__(self, deck_count: int = 1, player_count: int = 2, include_jokers: bool = False, *,
                 rng: Optional[random.Random] = None,
                 seed: Optional[int] = None,
                 deal_policy: DealPolicy = DealPolicy.STRICT,
                 shuffle_repeat: int = DEFAULT_SHUFFLE_REPEAT,
                 check_invariants: bool = False,
                 event_bus: Optional[EventBus] = None):
        """
        初始化牌桌

        Args:
            deck_count: 放入牌堆的牌的副数
            player_count: 玩家数
            include_jokers: 每副牌是否加入两张王
            rng: 随机数生成器，优先于seed
            seed: 随机种子，用于可重现的洗牌结果
            deal_policy: 牌堆不足时的发牌策略
            shuffle_repeat: shuffle()默认的交换次数
            check_invariants: 每次操作后是否检查牌数守恒
            event_bus: 可选的事件总线

        Raises:
            InvalidArgumentError: 当玩家数或牌的副数小于1时
        """
        if player_count < 1:
            raise InvalidArgumentError("Argument 'player_count' cannot be zero")
        if deck_count < 1:
            raise InvalidArgumentError("Argument 'deck_count' must be at least 1")
        if shuffle_repeat < 0:
            raise InvalidArgumentError(f"shuffle_repeat must be non-negative, got {shuffle_repeat}")

        self.table_id = uuid.uuid4().hex
        self._deck_count = deck_count
        self._player_count = player_count
        self._include_jokers = include_jokers
        self._deal_policy = DealPolicy(deal_policy)
        self._shuffle_repeat = shuffle_repeat
        self._rng = rng or (random.Random(seed) if seed is not None else random.Random())
        self._event_bus = event_bus

        self._pile = Deck.standard(deck_count, include_jokers)
        self._hands: Tuple[Deck, ...] = tuple(Deck() for _ in range(player_count))
        self._discard = Deck()
        self._total_cards = len(self._pile)

        self._invariants: Optional[TableInvariants] = None
        if check_invariants:
            self._invariants = TableInvariants.create_for_table(self.snapshot())

        logger.info("Table %s created: %d deck(s), %d player(s), jokers=%s, %d cards",
                    self.table_id, deck_count, player_count, include_jokers, self._total_cards)
        self._publish(EventType.TABLE_CREATED, {
            'deck_count': deck_count,
            'player_count': player_count,
            'include_jokers': include_jokers,
            'total_cards': self._total_cards,
        })

    @classmethod
    def from_config(cls, config: TableConfig, *, rng: Optional[random.Random] = None,
                    event_bus: Optional[EventBus] = None) -> 'Table':
        """根据TableConfig创建牌桌"""
        return cls(
            deck_count=config.deck_count,
            player_count=config.player_count,
            include_jokers=config.include_jokers,
            rng=rng,
            seed=config.random_seed,
            deal_policy=config.deal_policy,
            shuffle_repeat=config.shuffle_repeat,
            check_invariants=config.check_invariants,
            event_bus=event_bus,
        )

    # ------------------------------------------------------------------
    # 操作
    # ------------------------------------------------------------------

    def shuffle(self, repeat: Optional[int] = None) -> None:
        """
        洗牌

        Args:
            repeat: 交换次数，默认使用牌桌的shuffle_repeat
        """
        repeat = self._shuffle_repeat if repeat is None else repeat
        transposition_shuffle(self._pile, repeat, self._rng)
        logger.info("Table %s pile shuffled (%d swaps, %d cards)", self.table_id, repeat, len(self._pile))
        self._after_mutation("洗牌", EventType.PILE_SHUFFLED, {'repeat': repeat})

    def deal(self, cards_per_player: int) -> int:
        """
        给每个玩家发牌

        从牌堆末尾逐张取牌，从0号玩家开始轮流发放.

        Args:
            cards_per_player: 每个玩家发几张

        Returns:
            int: 实际发出的总张数

        Raises:
            InvalidArgumentError: 当cards_per_player为负数时
            InsufficientCardsError: STRICT策略下牌堆不足时，此时不发任何牌
        """
        if cards_per_player < 0:
            raise InvalidArgumentError(f"cards_per_player must be non-negative, got {cards_per_player}")

        total = cards_per_player * self._player_count
        available = len(self._pile)
        if total > available and self._deal_policy is DealPolicy.STRICT:
            raise InsufficientCardsError(
                f"Cannot deal {total} cards, only {available} remaining in pile",
                requested=total,
                available=available,
            )

        dealt = 0
        player_no = 0
        while dealt < total and not self._pile.is_empty:
            self._hands[player_no].append(self._pile.pop_last())
            dealt += 1
            player_no = (player_no + 1) % self._player_count

        if dealt < total:
            logger.warning("Table %s pile exhausted: dealt %d of %d cards", self.table_id, dealt, total)
        logger.info("Table %s dealt %d card(s), %d left in pile", self.table_id, dealt, len(self._pile))
        self._after_mutation("发牌", EventType.CARDS_DEALT, {
            'cards_per_player': cards_per_player,
            'requested': total,
            'dealt': dealt,
        })
        return dealt

    def draw(self, player_index: int) -> Card:
        """
        从牌堆摸一张牌给指定玩家

        Args:
            player_index: 玩家编号

        Returns:
            Card: 摸到的牌

        Raises:
            OutOfRangeError: 当玩家编号越界时
            EmptyCollectionError: 当牌堆为空时
        """
        hand = self.hand(player_index)
        if self._pile.is_empty:
            raise EmptyCollectionError("Cannot draw from an empty pile")

        card = self._pile.pop_last()
        hand.append(card)
        logger.debug("Player %d drew %r", player_index, card)
        self._after_mutation("摸牌", EventType.CARD_DRAWN, {
            'player_index': player_index,
            'card': _card_data(card),
        })
        return card

    def play(self, player_index: int, card: Card) -> Card:
        """
        指定玩家打出一张牌，打出的牌进入弃牌堆

        Args:
            player_index: 玩家编号
            card: 要打出的牌（按花色和点数匹配第一张）

        Returns:
            Card: 打出的牌

        Raises:
            OutOfRangeError: 当玩家编号越界时
            CardNotFoundError: 当手牌中没有该牌时
        """
        played = self.hand(player_index).remove_card(card)
        return self._discard_played(player_index, played)

    def play_at(self, player_index: int, card_index: int) -> Card:
        """
        指定玩家按位置打出一张牌

        Raises:
            OutOfRangeError: 当玩家编号或牌的位置越界时
        """
        played = self.hand(player_index).pop_at(card_index)
        return self._discard_played(player_index, played)

    def sort_all_hands(self, mode: SortMode = SortMode.RANK_FIRST) -> None:
        """
        整理所有玩家的手牌

        Args:
            mode: 排序模式，默认点数优先降序（A最大）
        """
        for hand in self._hands:
            hand.sort(mode)
        self._after_mutation("理牌", EventType.HANDS_SORTED, {'mode': mode.value})

    def sort_hand(self, player_index: int, mode: SortMode = SortMode.RANK_FIRST) -> None:
        """整理指定玩家的手牌"""
        self.hand(player_index).sort(mode)
        self._after_mutation("理牌", EventType.HANDS_SORTED, {
            'mode': mode.value,
            'player_index': player_index,
        })

    # ------------------------------------------------------------------
    # 查询
    # ------------------------------------------------------------------

    def hand(self, player_index: int) -> Deck:
        """
        获取指定玩家的手牌（可修改的Deck）

        Raises:
            OutOfRangeError: 当玩家编号越界时
        """
        if not 0 <= player_index < self._player_count:
            raise OutOfRangeError(
                f"The player number {player_index} is out of range (0-{self._player_count - 1})"
            )
        return self._hands[player_index]

    def __getitem__(self, player_index: int) -> Deck:
        return self.hand(player_index)

    @property
    def pile(self) -> Deck:
        return self._pile

    @property
    def hands(self) -> Tuple[Deck, ...]:
        return self._hands

    @property
    def discard(self) -> Deck:
        return self._discard

    @property
    def player_count(self) -> int:
        return self._player_count

    @property
    def deck_count(self) -> int:
        return self._deck_count

    @property
    def include_jokers(self) -> bool:
        return self._include_jokers

    @property
    def deal_policy(self) -> DealPolicy:
        return self._deal_policy

    @property
    def total_cards(self) -> int:
        """构造时牌堆的总张数"""
        return self._total_cards

    def snapshot(self) -> TableSnapshot:
        """生成当前状态的不可变快照"""
        return TableSnapshot(
            table_id=self.table_id,
            pile=self._pile.cards,
            hands=tuple(hand.cards for hand in self._hands),
            discard=self._discard.cards,
        )

    def __repr__(self) -> str:
        return (f"Table(players={self._player_count}, pile={len(self._pile)}, "
                f"hands={[len(hand) for hand in self._hands]}, discard={len(self._discard)})")

    # ------------------------------------------------------------------
    # 内部方法
    # ------------------------------------------------------------------

    def _discard_played(self, player_index: int, card: Card) -> Card:
        self._discard.append(card)
        logger.debug("Player %d played %r", player_index, card)
        self._after_mutation("出牌", EventType.CARD_PLAYED, {
            'player_index': player_index,
            'card': _card_data(card),
        })
        return card

    def _after_mutation(self, context: str, event_type: EventType, data: Dict[str, Any]) -> None:
        if self._invariants is not None:
            self._invariants.validate_and_raise(self.snapshot(), context)
        self._publish(event_type, data)

    def _publish(self, event_type: EventType, data: Dict[str, Any]) -> None:
        if self._event_bus is not None:
            self._event_bus.publish(DomainEvent.create(event_type, self.table_id, data))


def _card_data(card: Card) -> Dict[str, int]:
    return {'suit': int(card.suit), 'rank': int(card.rank)}
