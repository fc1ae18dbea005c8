"""
洗牌算法.

随机对换洗牌：重复R次，每次随机选两个不同的位置并交换.
这不是严格均匀的随机排列，R相对牌数较小时混合程度不足，属于已知限制.
"""

import logging
import random
from typing import Optional

from ..exceptions import InvalidArgumentError
from .deck import Deck

DEFAULT_SHUFFLE_REPEAT = 1000

logger = logging.getLogger(__name__)


def transposition_shuffle(deck: Deck, repeat: int = DEFAULT_SHUFFLE_REPEAT,
                          rng: Optional[random.Random] = None) -> None:
    """
    原地洗牌.

    Args:
        deck: 要洗的牌组
        repeat: 交换次数
        rng: 随机数生成器，用于确定性测试. 为None时使用新的系统随机种子

    Raises:
        InvalidArgumentError: 当repeat为负数时
    """
    if repeat < 0:
        raise InvalidArgumentError(f"repeat must be non-negative, got {repeat}")

    size = len(deck)
    if size < 2:
        # 少于两张牌时无法选出两个不同的位置
        logger.debug("Skip shuffling deck of %d card(s)", size)
        return

    rng = rng or random.Random()
    for _ in range(repeat):
        a = rng.randrange(size)
        b = rng.randrange(size)
        while a == b:
            b = rng.randrange(size)
        deck.swap(a, b)
