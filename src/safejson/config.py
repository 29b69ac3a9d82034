"""Parsing and rendering options for SafeJson."""

from dataclasses import dataclass, replace

from .types import ConfigurationError


@dataclass(frozen=True)
class SafeJsonConfig:
    """
    Options applied when turning text into a node tree.

    Attributes:
        parse_decimal: Parse JSON fractions as decimal.Decimal instead of float
        allow_constants: Accept the non-standard NaN/Infinity/-Infinity literals
        indent: Default indent used when printing documents from the CLI
    """
    parse_decimal: bool = False
    allow_constants: bool = False
    indent: int = 2

    def __post_init__(self):
        if isinstance(self.indent, bool) or not isinstance(self.indent, int):
            raise ConfigurationError(
                f"indent must be an integer, got {type(self.indent).__name__}",
                option="indent"
            )
        if self.indent < 0:
            raise ConfigurationError("indent cannot be negative", option="indent")

    def with_options(self, **changes) -> "SafeJsonConfig":
        """Return a copy with the given options replaced."""
        return replace(self, **changes)


DEFAULT_CONFIG = SafeJsonConfig()
