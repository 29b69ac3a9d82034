"""Date parsing for string values."""

import logging
from datetime import datetime, timezone
from typing import Iterable, Optional, Sequence, Tuple


logger = logging.getLogger(__name__)

# Tried in order after any caller-supplied formats. ISO 8601 first.
DEFAULT_DATE_PATTERNS: Tuple[str, ...] = (
    "%Y-%m-%dT%H:%M:%S.%f%z",  # 2024-07-15T10:30:00.123+01:00
    "%Y-%m-%dT%H:%M:%S%z",     # 2024-07-15T10:30:00+01:00
    "%Y-%m-%dT%H:%M:%S.%fZ",   # 2024-07-15T10:30:00.123Z
    "%Y-%m-%dT%H:%M:%SZ",      # 2024-07-15T10:30:00Z
    "%Y-%m-%d",
    "%Y/%m/%d %H:%M:%S",
    "%Y/%m/%d",
    "%m/%d/%Y %H:%M:%S",
    "%m/%d/%Y",
)


def candidate_patterns(custom_patterns: Sequence[str] = ()) -> Iterable[str]:
    """Yield caller patterns first, then the built-in ones."""
    for pattern in custom_patterns:
        if pattern:
            yield pattern
    yield from DEFAULT_DATE_PATTERNS


def parse_date(text: str, custom_patterns: Sequence[str] = ()) -> Optional[datetime]:
    """
    Parse text with the first strptime pattern that matches all of it.

    Patterns ending in a literal "Z" describe UTC timestamps and produce
    timezone-aware results in UTC.

    Args:
        text: Date text to parse
        custom_patterns: strptime formats to try before the defaults

    Returns:
        Parsed datetime, or None if no pattern matches
    """
    for pattern in candidate_patterns(custom_patterns):
        try:
            parsed = datetime.strptime(text, pattern)
        except (ValueError, TypeError):
            continue
        if pattern.endswith("Z") and not pattern.endswith("%Z"):
            parsed = parsed.replace(tzinfo=timezone.utc)
        return parsed
    logger.debug(f"No date pattern matched {text!r}")
    return None
