"""Storage layer of blockframe.

Frames don't hold their cells directly, they delegate
that to a :class:`BlockStore` which keeps them in
column major order.
"""

from .blocks import BlockStore

__all__ = ("BlockStore",)
