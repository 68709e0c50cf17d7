import re
import math
import logging
from dataclasses import dataclass
from .grammar import (
    AttributeKind,
    GrammarConfig,
    INT_VALUE_DEFAULTS,
    FLOAT_VALUE_DEFAULTS,
    is_value_kind,
    value_default,
)

logger = logging.getLogger(__name__)

# Collision and render layers are 32-bit unsigned bitmasks
MAX_UINT32 = 2**32 - 1

# ----------------------------------------------------------------------------------------

@dataclass(frozen=True)
class AttributeToken:
    """
    A parsed attribute.

    Attributes:
        kind: the kind of the attribute
        value: the numeric value for value-bearing kinds, None for flags
    """

    kind: AttributeKind
    value: int | float | None = None

@dataclass(frozen=True)
class NodeAttributes:
    """
    All attributes found in a single node name.
    """

    name: str
    tokens: dict[AttributeKind, AttributeToken]

    def has(self, kind: AttributeKind) -> bool:
        return kind in self.tokens

    def value(self, kind: AttributeKind, default: int | float | None = None) -> int | float | None:
        token = self.tokens.get(kind)
        if token is None or token.value is None:
            return default
        return token.value

    def __contains__(self, kind: AttributeKind) -> bool:
        return self.has(kind)

# ----------------------------------------------------------------------------------------

class AttributeParser:
    def __init__(self, grammar: GrammarConfig | None = None) -> None:
        """
        Initialize a parser for node-name attributes.

        Args:
            grammar: the grammar to parse with, the default grammar if None
        """

        self.grammar = grammar if grammar is not None else GrammarConfig()

        # Precompute the markers and value patterns of every configured kind
        self._markers: dict[AttributeKind, str] = {}
        self._value_patterns: dict[AttributeKind, re.Pattern] = {}
        start = re.escape(self.grammar.value_start)
        end = re.escape(self.grammar.value_end)
        for kind in self.grammar.kinds:
            marker = f"{self.grammar.indicator}{self.grammar.keyword(kind)}"
            self._markers[kind] = marker
            if is_value_kind(kind):
                # The literal is captured loosely so that malformed values still count as present
                self._value_patterns[kind] = re.compile(f"{re.escape(marker)}{start}([^{end}]*){end}")

    def has_attribute(self, name: str, kind: AttributeKind) -> bool:
        """
        Check whether a name carries an attribute.

        Flag kinds only need the indicator followed by the keyword somewhere in the name.
        Value kinds additionally need the bracketed value right after the keyword.

        Args:
            name: the node name
            kind: the attribute kind to look for

        Returns:
            True if the attribute is present
        """

        if kind not in self._markers:
            return False
        if kind in self._value_patterns:
            return self._value_patterns[kind].search(name) is not None
        return self._markers[kind] in name

    def parse_value(self, name: str, kind: AttributeKind) -> int | float | None:
        """
        Parse the bracketed value of a value-bearing attribute.
        The first occurrence in the name wins if the attribute is repeated.

        Args:
            name: the node name
            kind: the value-bearing attribute kind

        Returns:
            value: the parsed value, the kind's default if the literal is malformed,
                   or None if the attribute is absent
        """

        pattern = self._value_patterns.get(kind)
        if pattern is None:
            return None
        match = pattern.search(name)
        if match is None:
            return None

        literal = match.group(1)
        if kind in INT_VALUE_DEFAULTS:
            value = _parse_uint(literal)
        elif kind in FLOAT_VALUE_DEFAULTS:
            value = _parse_positive_float(literal)
        else:
            value = None

        if value is None:
            logger.debug(f"Malformed value '{literal}' for {kind.name} in '{name}', using default.")
            return value_default(kind)
        return value

    def tokenize(self, name: str) -> NodeAttributes:
        """
        Collect every configured attribute present in a name.

        Args:
            name: the node name

        Returns:
            attributes: the attributes of the name
        """

        tokens = {}
        for kind in self._markers:
            if not self.has_attribute(name, kind):
                continue
            value = self.parse_value(name, kind) if kind in self._value_patterns else None
            tokens[kind] = AttributeToken(kind, value)
        return NodeAttributes(name, tokens)

# ----------------------------------------------------------------------------------------

def _parse_uint(literal: str) -> int | None:
    if not literal.isascii() or not literal.isdigit():
        return None
    value = int(literal)
    return value if value <= MAX_UINT32 else None

def _parse_positive_float(literal: str) -> float | None:
    try:
        value = float(literal)
    except ValueError:
        return None
    if not math.isfinite(value) or value <= 0:
        return None
    return value

_default_parser: AttributeParser | None = None

def _get_default_parser() -> AttributeParser:
    global _default_parser
    if _default_parser is None:
        _default_parser = AttributeParser()
    return _default_parser

def parse_attributes(name: str, kind: AttributeKind) -> bool:
    """Presence test with the default grammar."""
    return _get_default_parser().has_attribute(name, kind)

def parse_attribute_value(name: str, kind: AttributeKind) -> int | float | None:
    """Value parsing with the default grammar."""
    return _get_default_parser().parse_value(name, kind)
