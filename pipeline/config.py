from dataclasses import dataclass, field
from attributes import GrammarConfig
from assets import CatalogConfig

DEFAULT_STATIC_PASSES = ["collision", "render_removal", "lightmap", "shadow", "render_layer", "material"]

@dataclass
class ImportConfig:
    """
    Configuration for turning an imported scene into a level.

    Attributes:
        level_name_indicator: scenes whose name contains this substring are processed as levels
        base_texel_size: the lightmap texel size before the per-node texel multiplier is applied
        grammar: the attribute grammar used in node names
        catalogs: the replacement catalogs, keyed by catalog name ("packed_scene", "material")
        static_passes: the ordered names of the passes applied to static nodes
    """

    level_name_indicator: str = "Level"
    base_texel_size: float = 0.2
    grammar: GrammarConfig = field(default_factory=GrammarConfig)
    catalogs: dict[str, CatalogConfig] = field(default_factory=lambda: {
        "packed_scene": CatalogConfig(catalog_root_path="Game/LevelPackedScene/"),
        "material": CatalogConfig(catalog_root_path="Assets/Level/Material/", file_extension=".tres"),
    })
    static_passes: list[str] = field(default_factory=lambda: list(DEFAULT_STATIC_PASSES))

    def __post_init__(self):
        # Nested sections arrive as plain mappings when loaded from a config file
        if not isinstance(self.grammar, GrammarConfig):
            self.grammar = GrammarConfig(**self.grammar)
        self.catalogs = {
            name: catalog_cfg if isinstance(catalog_cfg, CatalogConfig) else CatalogConfig(**catalog_cfg)
            for name, catalog_cfg in self.catalogs.items()
        }
        self.static_passes = list(self.static_passes)

        if self.base_texel_size <= 0:
            raise ValueError(f"Base texel size must be positive, got {self.base_texel_size}.")
