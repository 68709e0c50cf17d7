"""
Catalog of packaged scenes that replace imported nodes wholesale.

Every file in the catalog directory is a candidate, except the `.import` sidecar
files the engine writes next to imported resources:
    Game/LevelPackedScene/InteractableDoor.tscn        -> "InteractableDoor"
    Game/LevelPackedScene/InteractableDoor.tscn.import -> skipped

Node names are matched case-insensitively, so "interactabledoor_01" still resolves
to "InteractableDoor".
"""

from .base import BaseCatalog, CatalogConfig, CatalogEntry, list_catalog_entries
from .registry import register_catalog

PACKED_SCENE_SIDECAR_MARKER = ".import"


@register_catalog("packed_scene")
class PackedSceneCatalog(BaseCatalog):
    """
    Catalog of packaged scenes, matched against the names of top-level level nodes.
    """

    case_sensitive = False

    def __init__(self, catalog_config: CatalogConfig) -> None:
        """
        Initialize the catalog and list its directory.

        Args:
            catalog_config: the configuration for the catalog
        """
        if catalog_config.excluded_marker is None:
            catalog_config = CatalogConfig(
                catalog_root_path=catalog_config.catalog_root_path,
                file_extension=catalog_config.file_extension,
                excluded_marker=PACKED_SCENE_SIDECAR_MARKER,
            )
        self.catalog_config = catalog_config
        self._entries = list_catalog_entries(catalog_config)

    @property
    def entries(self) -> list[CatalogEntry]:
        return self._entries
