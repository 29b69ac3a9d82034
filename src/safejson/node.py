"""Null-safe navigation over JSON value trees."""

import json
import logging
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Any, Dict, List, Optional, Union

from . import conversions
from .config import DEFAULT_CONFIG, SafeJsonConfig
from .dates import parse_date
from .serializer import display_string, dumps
from .types import NUMERIC_TAGS, JsonTag, Presence, classify


logger = logging.getLogger(__name__)

Key = Union[str, int]


def _reject_constant(name: str):
    raise ValueError(f"Non-standard JSON constant {name}")


@dataclass(frozen=True, eq=False, repr=False)
class SafeNode:
    """
    Immutable handle on a location in a JSON tree.

    A node is either present, wrapping whatever value lives at that
    location (JSON null included), or missing because the path did not
    resolve. Navigating from a missing node yields the missing node
    again, so arbitrarily long chains of ``get`` calls never raise.

    Nodes reference the underlying dicts and lists without copying them.
    Mutations made through ``put``/``add``/``put_at`` change that shared
    tree and are visible through every node pointing into it.

    Attributes:
        presence: Whether a path resolved to this node
        payload: Wrapped tree value; always None for missing nodes
    """
    presence: Presence = Presence.MISSING
    payload: Any = None

    def __post_init__(self):
        if self.presence is Presence.MISSING and self.payload is not None:
            object.__setattr__(self, "payload", None)

    # Construction

    @classmethod
    def parse(cls, text: Optional[Union[str, bytes, bytearray]],
              config: Optional[SafeJsonConfig] = None) -> "SafeNode":
        """
        Parse JSON text into a node.

        Args:
            text: JSON text; None, empty or blank text gives MISSING
            config: Parsing options, DEFAULT_CONFIG when omitted

        Returns:
            Present node wrapping the parsed root, or MISSING if the text
            is blank or not valid JSON
        """
        if text is None:
            return MISSING
        if not isinstance(text, (str, bytes, bytearray)):
            raise TypeError(f"Cannot parse JSON from {type(text).__name__}")
        if not text.strip():
            return MISSING

        config = config or DEFAULT_CONFIG
        options = {}
        if config.parse_decimal:
            options["parse_float"] = Decimal
        if not config.allow_constants:
            options["parse_constant"] = _reject_constant

        try:
            value = json.loads(text, **options)
        except json.JSONDecodeError as e:
            logger.debug(f"Failed to parse JSON: {e.msg} at line {e.lineno}, column {e.colno}")
            return MISSING
        except (ValueError, RecursionError) as e:
            logger.debug(f"Failed to parse JSON: {e}")
            return MISSING
        return cls(Presence.PRESENT, value)

    @classmethod
    def wrap_object(cls, obj: Optional[Dict[str, Any]]) -> "SafeNode":
        """Wrap an existing dict without copying it. None gives MISSING."""
        if obj is None:
            return MISSING
        if not isinstance(obj, dict):
            raise TypeError(f"Expected dict, got {type(obj).__name__}")
        return cls(Presence.PRESENT, obj)

    @classmethod
    def wrap_array(cls, arr: Optional[List[Any]]) -> "SafeNode":
        """Wrap an existing list without copying it. None gives MISSING."""
        if arr is None:
            return MISSING
        if not isinstance(arr, list):
            raise TypeError(f"Expected list, got {type(arr).__name__}")
        return cls(Presence.PRESENT, arr)

    @classmethod
    def empty_object(cls) -> "SafeNode":
        return cls(Presence.PRESENT, {})

    @classmethod
    def empty_array(cls) -> "SafeNode":
        return cls(Presence.PRESENT, [])

    # Navigation

    def get(self, key: Key, index: Optional[int] = None) -> "SafeNode":
        """
        Navigate to a child node.

        A string looks up an object key and an integer looks up an array
        element. Passing both is the same as ``get(key).get(index)``.
        Anything that does not resolve (wrong container type, absent key,
        index out of range, missing parent) yields MISSING.

        Args:
            key: Object key or array index
            index: Optional array index applied to the result of ``key``

        Returns:
            Child node, or MISSING
        """
        if index is not None:
            return self.get(key).get(index)
        if self.presence is Presence.MISSING:
            return MISSING

        if isinstance(key, str):
            if not isinstance(self.payload, dict) or key not in self.payload:
                return MISSING
            return SafeNode(Presence.PRESENT, self.payload[key])

        if isinstance(key, int) and not isinstance(key, bool):
            if not isinstance(self.payload, list):
                return MISSING
            if 0 <= key < len(self.payload):
                return SafeNode(Presence.PRESENT, self.payload[key])
        return MISSING

    def __getitem__(self, key: Key) -> "SafeNode":
        return self.get(key)

    # State checks

    @property
    def tag(self) -> JsonTag:
        """Tag of the wrapped value; NULL for missing nodes."""
        if self.presence is Presence.MISSING:
            return JsonTag.NULL
        return classify(self.payload)

    def exists(self) -> bool:
        """True when the path resolved, even to a JSON null."""
        return self.presence is Presence.PRESENT

    def is_null(self) -> bool:
        """True for missing nodes and for JSON null values."""
        return self.presence is Presence.MISSING or self.payload is None

    def is_json_object(self) -> bool:
        return self.tag is JsonTag.OBJECT

    def is_json_array(self) -> bool:
        return self.tag is JsonTag.ARRAY

    def is_string(self) -> bool:
        return self.tag is JsonTag.STRING

    def is_number(self) -> bool:
        return self.tag in NUMERIC_TAGS

    def is_integer(self) -> bool:
        """True for integers that fit in 32 bits."""
        return self.tag is JsonTag.INTEGER

    def is_long(self) -> bool:
        """True for integers that fit in 64 bits."""
        return self.tag in (JsonTag.INTEGER, JsonTag.LONG)

    def is_double(self) -> bool:
        """True for floating point and decimal numbers."""
        return self.tag in (JsonTag.FLOAT, JsonTag.DECIMAL)

    def is_big_decimal(self) -> bool:
        return self.tag is JsonTag.DECIMAL

    def is_boolean(self) -> bool:
        return self.tag is JsonTag.BOOLEAN

    def is_date(self, *patterns: str) -> bool:
        """True if ``get_date(*patterns)`` would return a datetime."""
        return self.get_date(*patterns) is not None

    # Value retrieval

    def get_value(self) -> Any:
        """Raw wrapped value, or None for missing nodes and JSON null."""
        if self.is_null():
            return None
        return self.payload

    def get_as_string(self) -> Optional[str]:
        """Display form of any value, or None for missing nodes and JSON null."""
        if self.is_null():
            return None
        return display_string(self.payload)

    def get_string(self) -> Optional[str]:
        """The value if it is a string. No coercion from other types."""
        if self.is_string():
            return self.payload
        return None

    def get_integer(self) -> Optional[int]:
        """
        The value as a signed 32-bit integer.

        Numbers are narrowed (floats truncate toward zero); numeric text
        must be exactly representable, so "3.5" gives None.
        """
        if self.is_null():
            return None
        return conversions.to_integer(self.payload, self.tag)

    def get_long(self) -> Optional[int]:
        """The value as a signed 64-bit integer. Same rules as get_integer."""
        if self.is_null():
            return None
        return conversions.to_long(self.payload, self.tag)

    def get_double(self) -> Optional[float]:
        if self.is_null():
            return None
        return conversions.to_double(self.payload, self.tag)

    def get_big_decimal(self) -> Optional[Decimal]:
        if self.is_null():
            return None
        return conversions.to_decimal(self.payload, self.tag)

    def get_boolean(self) -> Optional[bool]:
        """Booleans as-is; "true"/"false" text in any case."""
        if self.is_null():
            return None
        return conversions.to_boolean(self.payload, self.tag)

    def get_date(self, *patterns: str) -> Optional[datetime]:
        """
        Parse a string value as a date.

        Args:
            *patterns: strptime formats tried before the built-in ones

        Returns:
            Parsed datetime, or None if the value is not a string or no
            pattern matches it
        """
        if not self.is_string():
            return None
        return parse_date(self.payload, patterns)

    def get_json_object(self) -> Optional[Dict[str, Any]]:
        """The live dict this node wraps; changes to it affect the tree."""
        if self.is_json_object():
            return self.payload
        return None

    def get_json_array(self) -> Optional[List[Any]]:
        """The live list this node wraps; changes to it affect the tree."""
        if self.is_json_array():
            return self.payload
        return None

    # Mutation

    @staticmethod
    def _prepare_value(value: Any) -> Any:
        if isinstance(value, SafeNode):
            return value.payload if value.exists() else None
        if isinstance(value, tuple):
            return list(value)
        return value

    def put(self, key: str, value: Any) -> "SafeNode":
        """
        Set ``key`` on the wrapped object.

        Does nothing unless this node wraps an object.

        Returns:
            This node, for chaining

        Raises:
            TypeError: If the node wraps an object and ``key`` is not a str
        """
        if not self.is_json_object():
            return self
        if not isinstance(key, str):
            raise TypeError(f"Object keys must be str, got {type(key).__name__}")
        self.payload[key] = self._prepare_value(value)
        return self

    def add(self, value: Any) -> "SafeNode":
        """Append to the wrapped array. Does nothing unless this node wraps one."""
        if self.is_json_array():
            self.payload.append(self._prepare_value(value))
        return self

    def put_at(self, index: int, value: Any) -> "SafeNode":
        """
        Replace an existing element of the wrapped array.

        Out-of-range indices are ignored; the array is never extended.
        """
        if not self.is_json_array() or isinstance(index, bool) or not isinstance(index, int):
            return self
        if 0 <= index < len(self.payload):
            self.payload[index] = self._prepare_value(value)
        return self

    # Utilities

    def size(self) -> int:
        """Number of entries of an object or elements of an array; 0 otherwise."""
        if self.is_json_object() or self.is_json_array():
            return len(self.payload)
        return 0

    def is_empty(self) -> bool:
        """True for missing nodes, JSON null and empty containers."""
        if self.is_null():
            return True
        if self.is_json_object() or self.is_json_array():
            return len(self.payload) == 0
        return False

    def to_json_string(self, indent: int = 0) -> str:
        """
        Serialize the wrapped value.

        Args:
            indent: Spaces per nesting level; 0 gives compact output

        Returns:
            JSON text; "null" for missing nodes and JSON null
        """
        if self.is_null():
            return "null"
        return dumps(self.payload, indent)

    def __repr__(self) -> str:
        if self.presence is Presence.MISSING:
            return "SafeNode[MISSING]"
        if self.payload is None:
            return "SafeNode[JSON_NULL]"
        return f"SafeNode[{display_string(self.payload)}]"


MISSING = SafeNode(Presence.MISSING)
