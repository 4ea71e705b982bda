"""Internal helpers shared by the container modules."""

from boxed._internal.callables import accepts

__all__ = ['accepts']
