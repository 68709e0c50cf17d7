from .grammar import AttributeKind, GrammarConfig, DEFAULT_KEYWORDS
from .parser import (
    AttributeParser,
    AttributeToken,
    NodeAttributes,
    parse_attributes,
    parse_attribute_value,
)

__all__ = [
    "AttributeKind",
    "GrammarConfig",
    "DEFAULT_KEYWORDS",
    "AttributeParser",
    "AttributeToken",
    "NodeAttributes",
    "parse_attributes",
    "parse_attribute_value",
]
