"""
Catalog of materials that replace the imported surface materials.

Only files carrying the material extension are listed:
    Assets/Level/Material/Stone.tres      -> "Stone"
    Assets/Level/Material/Stone_albedo.png -> skipped

Surface material names are matched case-sensitively.
"""

from .base import BaseCatalog, CatalogConfig, CatalogEntry, list_catalog_entries
from .registry import register_catalog

MATERIAL_EXTENSION = ".tres"


@register_catalog("material")
class MaterialCatalog(BaseCatalog):
    """
    Catalog of materials, matched against the material names of mesh surfaces.
    """

    case_sensitive = True

    def __init__(self, catalog_config: CatalogConfig) -> None:
        """
        Initialize the catalog and list its directory.

        Args:
            catalog_config: the configuration for the catalog
        """
        if catalog_config.file_extension is None:
            catalog_config = CatalogConfig(
                catalog_root_path=catalog_config.catalog_root_path,
                file_extension=MATERIAL_EXTENSION,
                excluded_marker=catalog_config.excluded_marker,
            )
        self.catalog_config = catalog_config
        self._entries = list_catalog_entries(catalog_config)

    @property
    def entries(self) -> list[CatalogEntry]:
        return self._entries
