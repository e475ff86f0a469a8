"""Configuration re-export.

The configuration classes live in the internal _common package; this module
is the public import location.
"""

from ._common.config import (
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
