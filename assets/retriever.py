import copy
import logging
from scenes.mesh import Material
from scenes.node import Node
from .base import BaseCatalog, CatalogConfig, CatalogEntry
from .loader import AssetLoader
from .registry import CatalogRegistry

logger = logging.getLogger(__name__)

class Retriever:
    """
    A retriever class that manages the replacement catalogs of one pipeline run.
    """

    def __init__(self, catalog_cfgs: dict[str, CatalogConfig], loader: AssetLoader | None = None) -> None:
        """
        Initialize the retriever with catalog configurations.
        Catalog directories are listed here, once; loaded assets are cached for the lifetime of the retriever.

        Args:
            catalog_cfgs: the configuration for each catalog, keyed by registered catalog name
            loader: the loader for catalog files
        """

        self.loader = loader if loader is not None else AssetLoader()
        self.catalog_map: dict[str, BaseCatalog] = {}
        for catalog_name, catalog_cfg in catalog_cfgs.items():
            catalog_class = CatalogRegistry.get_catalog_class(catalog_name)
            self.catalog_map[catalog_name] = catalog_class(catalog_cfg)

        self._materials: dict[str, Material] = {}
        self._packed_scenes: dict[str, Node] = {}

    def get_catalog(self, catalog_name: str) -> BaseCatalog:
        if catalog_name not in self.catalog_map:
            raise ValueError(f"Catalog '{catalog_name}' not configured.")
        return self.catalog_map[catalog_name]

    @property
    def packed_scenes(self) -> BaseCatalog:
        return self.get_catalog("packed_scene")

    @property
    def materials(self) -> BaseCatalog:
        return self.get_catalog("material")

    def is_replaceable(self, node_name: str) -> bool:
        return self.packed_scenes.best_match(node_name) is not None

    def get_material_replacement(self, material_name: str) -> Material:
        """
        Get the replacement for a surface material.

        Args:
            material_name: the resource name of the surface's current material

        Returns:
            The catalog material with the best matching name, or a blank material
        """

        entry = self.materials.best_match(material_name)
        if entry is None:
            logger.debug(f"No material replacement for '{material_name}', using a blank material.")
            return Material()

        if entry.asset_id not in self._materials:
            self._materials[entry.asset_id] = self.loader.load_material(entry.file_path, entry.short_name)
        return self._materials[entry.asset_id]

    def get_packed_scene_replacement(self, node_name: str) -> Node:
        """
        Instantiate the replacement for a node.

        Args:
            node_name: the name of the node to replace

        Returns:
            A fresh instance of the best matching packaged scene, or an empty placeholder node,
            named "<node_name> (replaced)"
        """

        entry = self.packed_scenes.best_match(node_name)
        if entry is None:
            logger.debug(f"No packaged scene for '{node_name}', using an empty placeholder.")
            replacement = Node()
        else:
            replacement = self._instantiate(entry)

        replacement.name = f"{node_name} (replaced)"
        return replacement

    def _instantiate(self, entry: CatalogEntry) -> Node:
        if entry.asset_id not in self._packed_scenes:
            self._packed_scenes[entry.asset_id] = self.loader.load_packed_scene(entry.file_path)
        return copy.deepcopy(self._packed_scenes[entry.asset_id])
