"""
牌桌配置相关类的实现
包含牌桌设置、发牌策略和日志配置
"""

import logging
import os
from dataclasses import dataclass, asdict
from enum import Enum
from typing import Any, Dict, Optional

from .deck.shuffle import DEFAULT_SHUFFLE_REPEAT
from .exceptions import InvalidArgumentError


class DealPolicy(Enum):
    """牌堆不足时的发牌策略"""
    STRICT = "strict"       # 发牌前检查，不足则抛出InsufficientCardsError
    TRUNCATE = "truncate"   # 发到牌堆为空为止，返回实际发出的张数


@dataclass
class TableConfig:
    """
    牌桌配置类
    包含构建牌堆和发牌所需的全部参数
    """
    deck_count: int = 1                        # 牌的副数
    player_count: int = 2                      # 玩家数
    include_jokers: bool = False               # 每副牌是否加入两张王
    shuffle_repeat: int = DEFAULT_SHUFFLE_REPEAT
    random_seed: Optional[int] = None          # 随机种子，用于可重现的洗牌
    deal_policy: DealPolicy = DealPolicy.STRICT
    check_invariants: bool = False             # 每次操作后检查牌数守恒

    def __post_init__(self):
        """验证配置的有效性"""
        if isinstance(self.deal_policy, str):
            try:
                self.deal_policy = DealPolicy(self.deal_policy)
            except ValueError:
                raise InvalidArgumentError(f"无效的发牌策略: {self.deal_policy}") from None

        if self.player_count < 1:
            raise InvalidArgumentError(f"玩家数必须大于0: {self.player_count}")

        if self.deck_count < 1:
            raise InvalidArgumentError(f"牌的副数必须大于0: {self.deck_count}")

        if self.shuffle_repeat < 0:
            raise InvalidArgumentError(f"洗牌次数不能为负数: {self.shuffle_repeat}")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'TableConfig':
        """从字典创建配置，忽略未知字段"""
        known = {name: value for name, value in data.items()
                 if name in cls.__dataclass_fields__}
        return cls(**known)

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data['deal_policy'] = self.deal_policy.value
        return data

    @classmethod
    def default_4_player(cls) -> 'TableConfig':
        """
        创建默认的4人配置
        一副牌，不含王，每人13张正好发完
        """
        return cls(deck_count=1, player_count=4, include_jokers=False)


@dataclass
class LoggingConfig:
    """日志配置"""
    log_level: str = 'WARNING'
    log_format: str = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

    ENV_LOG_LEVEL = 'POKERPILE_LOG_LEVEL'

    @classmethod
    def from_env(cls) -> 'LoggingConfig':
        """从环境变量POKERPILE_LOG_LEVEL读取日志级别"""
        return cls(log_level=os.getenv(cls.ENV_LOG_LEVEL, cls.log_level).upper())

    @property
    def level(self) -> int:
        return getattr(logging, self.log_level.upper(), logging.WARNING)


def setup_logging(config: Optional[LoggingConfig] = None) -> None:
    """在程序入口调用一次"""
    config = config or LoggingConfig.from_env()
    logging.basicConfig(level=config.level, format=config.log_format)
