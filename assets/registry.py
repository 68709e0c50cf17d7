from .base import BaseCatalog

class CatalogRegistry:
    """
    Registry for catalog classes.
    """

    _catalogs: dict[str, type[BaseCatalog]] = {}

    @classmethod
    def register(cls, name: str, catalog_class: type[BaseCatalog]) -> None:
        """
        Register a catalog class.

        Args:
            name: the name the catalog is configured under.
            catalog_class: the catalog class to register.
        """

        cls._catalogs[name] = catalog_class

    @classmethod
    def get_catalog_class(cls, name: str) -> type[BaseCatalog]:
        """
        Get the class of a catalog by its name.

        Args:
            name: the name of the catalog.

        Returns:
            The class of the catalog.

        Raises:
            KeyError: If the catalog is not registered.
        """

        if name not in cls._catalogs:
            raise KeyError(f"Unknown catalog: {name}. Available catalogs: {list(cls._catalogs.keys())}")

        return cls._catalogs[name]

    @classmethod
    def get_catalog_names(cls) -> list[str]:
        return list(cls._catalogs.keys())

# Decorators
def register_catalog(name: str):
    """
    Decorator to register a catalog class under a name.

    Args:
        name: the name the catalog is configured under.
    """

    def decorator(catalog_class: type[BaseCatalog]):
        CatalogRegistry.register(name, catalog_class)
        return catalog_class

    return decorator
