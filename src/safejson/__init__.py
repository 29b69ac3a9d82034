"""
SafeJson - null-safe navigation and typed extraction for JSON trees.

Wraps parsed JSON in an immutable node that can be navigated with
chained key/index lookups without existence checks at each step.
"""

from .config import DEFAULT_CONFIG, SafeJsonConfig
from .dates import DEFAULT_DATE_PATTERNS
from .node import MISSING, SafeNode
from .types import ConfigurationError, JsonTag, Presence, SafeJsonError

__version__ = "1.0.0"
__all__ = [
    "SafeNode",
    "MISSING",
    "JsonTag",
    "Presence",
    "SafeJsonConfig",
    "DEFAULT_CONFIG",
    "DEFAULT_DATE_PATTERNS",
    "SafeJsonError",
    "ConfigurationError",
]
