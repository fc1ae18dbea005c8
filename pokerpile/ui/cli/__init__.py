"""牌堆CLI界面模块."""

from .render import CLIRenderer, DisplayMode

__all__ = ['CLIRenderer', 'DisplayMode']
