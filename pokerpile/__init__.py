"""
pokerpile - 多副牌、多玩家的扑克牌堆

构建洗好的牌堆，给玩家发牌，跟踪并整理每个玩家的手牌，出牌。
"""

from .core import *  # noqa: F401,F403
from .core import __all__

__version__ = "1.0.0"
