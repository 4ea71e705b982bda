"""Decorators: @safe and @retrying."""

from boxed.decorators.retrying import retrying
from boxed.decorators.safe import safe

__all__ = [
    'retrying',
    'safe',
]
