"""
Data Holders
============

Typed slots used to pass values from one experiment action to the next.
"""

from .holders import ConstantDataHolder, DataHolder, DataHolderNotSetError

__all__ = ["ConstantDataHolder", "DataHolder", "DataHolderNotSetError"]
