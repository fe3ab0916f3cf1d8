"""Pool management package.

Provides PoolRegistry for storing pool configs and serializing operations.
"""

from .registry import PoolRegistry

__all__ = ["PoolRegistry"]
