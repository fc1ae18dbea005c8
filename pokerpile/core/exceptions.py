"""
牌堆业务异常定义
所有异常都在调用边界抛出，不做内部重试或吞掉
"""


class CardPileError(Exception):
    """牌堆基础异常类"""
    pass


class InvalidArgumentError(CardPileError, ValueError):
    """参数无效异常（例如玩家数为0）"""
    pass


class OutOfRangeError(CardPileError, IndexError):
    """玩家编号或牌位置越界异常"""
    pass


class CardNotFoundError(CardPileError, LookupError):
    """要移除或打出的牌不在牌组中"""
    pass


class EmptyCollectionError(CardPileError, IndexError):
    """从空牌组中取牌异常"""
    pass


class InsufficientCardsError(CardPileError):
    """牌堆剩余牌数不足以完成发牌"""

    def __init__(self, message: str, requested: int, available: int):
        super().__init__(message)
        self.requested = requested
        self.available = available
