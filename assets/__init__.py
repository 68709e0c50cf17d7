from .base import CatalogConfig, CatalogEntry, BaseCatalog
from .matcher import best_match
from .loader import AssetLoader
from .registry import CatalogRegistry, register_catalog
from .retriever import Retriever

# Import all catalog implementations to ensure they are registered
from . import packed_scene, material

__all__ = [
    "CatalogConfig",
    "CatalogEntry",
    "BaseCatalog",
    "best_match",
    "AssetLoader",
    "CatalogRegistry",
    "register_catalog",
    "Retriever",
]
