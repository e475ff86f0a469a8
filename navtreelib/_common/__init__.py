"""Common components shared by the core engine and the high-level API.

This internal package contains configuration classes and must NEVER import
from navtreelib.core or the API modules, to avoid circular dependencies.
It should not be imported directly by users.
"""

from .config import (
    TraversalConfig,
    TraversalDirection,
    CacheStrategy,
    CacheConfig,
    FilterConfig,
    DepthConfig,
)

__all__ = [
    'TraversalConfig',
    'TraversalDirection',
    'CacheStrategy',
    'CacheConfig',
    'FilterConfig',
    'DepthConfig',
]
