from pathlib import Path
from abc import ABC, abstractmethod
from dataclasses import dataclass
from natsort import natsorted
from .matcher import best_match

@dataclass
class CatalogConfig:
    """
    Configuration for a catalog of replacement assets.

    Attributes:
        catalog_root_path: the directory holding the candidate asset files
        file_extension: if set, only files whose name contains this extension are listed
        excluded_marker: if set, files whose name contains this marker are skipped
    """

    catalog_root_path: str
    file_extension: str | None = None
    excluded_marker: str | None = None

@dataclass(frozen=True)
class CatalogEntry:
    """
    A candidate asset of a catalog.

    Attributes:
        short_name: the file name up to its first dot, matched against node or material names
        asset_id: the file name inside the catalog directory
        file_path: the path to the asset file
    """

    short_name: str
    asset_id: str
    file_path: Path

class BaseCatalog(ABC):
    """
    Base class for a catalog of replacement assets.
    """

    # Whether short names must match with the same letter case
    case_sensitive: bool = True

    @abstractmethod
    def __init__(self, catalog_config: CatalogConfig) -> None:
        """
        Initialize the catalog.

        Args:
            catalog_config: the configuration for the catalog
        """

        raise NotImplementedError

    @property
    @abstractmethod
    def entries(self) -> list[CatalogEntry]:
        """
        Returns:
            The entries of the catalog, in natural file-name order
        """

        raise NotImplementedError

    def best_match(self, candidate_name: str) -> CatalogEntry | None:
        """
        Find the entry whose short name is the longest one contained in the candidate name.

        Args:
            candidate_name: the node or material name

        Returns:
            The matching entry, or None if no entry matches
        """

        return best_match(candidate_name, self.entries, case_sensitive=self.case_sensitive)

# ----------------------------------------------------------------------------------------

def list_catalog_entries(catalog_config: CatalogConfig) -> list[CatalogEntry]:
    """
    List the files of a catalog directory.

    Args:
        catalog_config: the configuration for the catalog

    Returns:
        entries: one entry per eligible file, in natural file-name order

    Raises:
        FileNotFoundError: if the catalog directory does not exist
    """

    root_dir = Path(catalog_config.catalog_root_path).expanduser()
    if not root_dir.is_dir():
        raise FileNotFoundError(f"Catalog directory '{root_dir}' is missing.")

    entries = []
    for file_path in natsorted(root_dir.iterdir(), key=lambda p: p.name):
        if not file_path.is_file():
            continue
        file_name = file_path.name
        if catalog_config.excluded_marker and catalog_config.excluded_marker in file_name:
            continue
        if catalog_config.file_extension and catalog_config.file_extension not in file_name:
            continue
        entries.append(CatalogEntry(short_name=file_name.split(".")[0], asset_id=file_name, file_path=file_path))

    return entries
