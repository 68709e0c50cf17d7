from enum import Enum
from dataclasses import dataclass, field

# ----------------------------------------------------------------------------------------

class AttributeKind(Enum):
    """
    The import behaviours that can be requested from inside a node name.
    """

    NO_COLLISION = "no_collision"
    CONVEX_COLLISION = "convex_collision"
    COLLISION_LAYER = "collision_layer"
    COLLISION_MASK = "collision_mask"
    NO_RENDER = "no_render"
    COLLISION_ONLY = "collision_only"
    NO_BAKE = "no_bake"
    TEXEL_MULTIPLIER = "texel_multiplier"
    NO_SHADOW = "no_shadow"
    RENDER_LAYER = "render_layer"

# Kinds carrying a bracketed numeric literal, with the value used when the literal does not parse
INT_VALUE_DEFAULTS: dict[AttributeKind, int] = {
    AttributeKind.COLLISION_LAYER: 0,
    AttributeKind.COLLISION_MASK: 0,
    AttributeKind.RENDER_LAYER: 1,
}
FLOAT_VALUE_DEFAULTS: dict[AttributeKind, float] = {
    AttributeKind.TEXEL_MULTIPLIER: 1.0,
}

DEFAULT_KEYWORDS: dict[str, str] = {
    AttributeKind.NO_COLLISION.value: "NoCol",
    AttributeKind.CONVEX_COLLISION.value: "ConvexCol",
    AttributeKind.COLLISION_LAYER.value: "Col",
    AttributeKind.COLLISION_MASK.value: "ColMask",
    AttributeKind.NO_RENDER.value: "NoRender",
    AttributeKind.COLLISION_ONLY.value: "OnlyCol",
    AttributeKind.NO_BAKE.value: "NoBake",
    AttributeKind.TEXEL_MULTIPLIER.value: "Texel",
    AttributeKind.NO_SHADOW.value: "NoShadow",
    AttributeKind.RENDER_LAYER.value: "Layer",
}

def is_value_kind(kind: AttributeKind) -> bool:
    return kind in INT_VALUE_DEFAULTS or kind in FLOAT_VALUE_DEFAULTS

def value_default(kind: AttributeKind) -> int | float | None:
    if kind in INT_VALUE_DEFAULTS:
        return INT_VALUE_DEFAULTS[kind]
    return FLOAT_VALUE_DEFAULTS.get(kind)

# ----------------------------------------------------------------------------------------

@dataclass
class GrammarConfig:
    """
    Configuration of the attribute micro-language embedded in node names.

    Attributes:
        indicator: the character preceding every attribute keyword
        value_start: the character opening a bracketed value
        value_end: the character closing a bracketed value
        keywords: the keyword of each attribute kind, keyed by the kind's value
    """

    indicator: str = "="
    value_start: str = "{"
    value_end: str = "}"
    keywords: dict[str, str] = field(default_factory=lambda: dict(DEFAULT_KEYWORDS))

    def __post_init__(self):
        for label, char in (("indicator", self.indicator),
                            ("value_start", self.value_start),
                            ("value_end", self.value_end)):
            if len(char) != 1:
                raise ValueError(f"Grammar {label} must be a single character, got '{char}'.")

        # Configs coming from YAML arrive as DictConfig
        self.keywords = dict(self.keywords)
        known_kinds = {kind.value for kind in AttributeKind}
        for kind_name, keyword in self.keywords.items():
            if kind_name not in known_kinds:
                raise ValueError(f"Unknown attribute kind: {kind_name}. Available kinds: {sorted(known_kinds)}")
            if not keyword:
                raise ValueError(f"Attribute kind '{kind_name}' has an empty keyword.")

    def keyword(self, kind: AttributeKind) -> str | None:
        """
        Returns:
            The keyword configured for the kind, or None if the kind is not recognized
        """

        return self.keywords.get(kind.value)

    @property
    def kinds(self) -> list[AttributeKind]:
        return [AttributeKind(kind_name) for kind_name in self.keywords]

    def overlapping_keywords(self) -> list[tuple[str, str]]:
        """
        Find keyword pairs where one keyword is contained in the other, e.g. "Col" and "ColMask".
        Such pairs are allowed; value kinds disambiguate through the bracket that must follow
        the keyword, but flag kinds sharing a prefix will both match.

        Returns:
            overlaps: (shorter, longer) keyword pairs
        """

        overlaps = []
        keywords = sorted(set(self.keywords.values()), key=len)
        for i, shorter in enumerate(keywords):
            for longer in keywords[i + 1:]:
                if shorter in longer:
                    overlaps.append((shorter, longer))
        return overlaps
