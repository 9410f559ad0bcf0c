"""Dataframe library built on top of the blockframe storage.

A dataframe library is a tool designed to handle and manipulate structured data,
typically in the form of tables (i.e., rows and columns).
It allows users to load data, explore it, apply transformations
and combine it with other data.

The :class:`Frame` is the user facing object, it keeps
track of the names of the columns and delegates storing
the cells to a :class:`blockframe.storage.BlockStore`
and the heavy lifting to the :mod:`blockframe.compute` functions.
"""

from .frame import Frame

__all__ = ("Frame",)
