from pathlib import Path

import pytest

from assets import CatalogConfig, CatalogEntry, Retriever, best_match
from assets.material import MaterialCatalog
from assets.packed_scene import PackedSceneCatalog
from scenes import MeshInstance, Node


def _entry(short_name: str, asset_id: str) -> CatalogEntry:
    return CatalogEntry(short_name=short_name, asset_id=asset_id, file_path=Path(asset_id))


# ============================================================================
# MATCHER
# ============================================================================

def test_longest_match_wins():
    catalog = [_entry("Door", "A"), _entry("DoorLocked", "B")]
    assert best_match("DoorLocked_002", catalog).asset_id == "B"
    # Order of the catalog does not matter for different lengths
    assert best_match("DoorLocked_002", list(reversed(catalog))).asset_id == "B"


def test_shorter_match_when_longer_is_not_contained():
    catalog = [_entry("Door", "A"), _entry("DoorLocked", "B")]
    assert best_match("Door_Open", catalog).asset_id == "A"


def test_no_match_returns_none():
    assert best_match("Window", [_entry("Door", "A")]) is None
    assert best_match("Window", []) is None


def test_case_sensitivity():
    catalog = [_entry("InteractableDoor", "A")]
    assert best_match("interactabledoor_01", catalog, case_sensitive=True) is None
    assert best_match("interactabledoor_01", catalog, case_sensitive=False).asset_id == "A"


def test_equal_length_resolves_to_first_entry():
    catalog = [_entry("Oak", "first"), _entry("Elm", "second")]
    assert best_match("Oak_Elm", catalog).asset_id == "first"
    assert best_match("Oak_Elm", list(reversed(catalog))).asset_id == "second"


def test_empty_short_name_never_matches():
    assert best_match("Anything", [_entry("", "hidden")]) is None


# ============================================================================
# CATALOGS
# ============================================================================

def test_packed_scene_catalog_skips_import_sidecars(catalog_dirs):
    catalog = PackedSceneCatalog(CatalogConfig(catalog_root_path=str(catalog_dirs["packed_scene"])))
    assert [entry.short_name for entry in catalog.entries] == ["InteractableDoor", "InteractableDoorLocked"]
    assert all(".import" not in entry.asset_id for entry in catalog.entries)


def test_material_catalog_filters_extension(catalog_dirs):
    catalog = MaterialCatalog(CatalogConfig(catalog_root_path=str(catalog_dirs["material"])))
    assert [entry.short_name for entry in catalog.entries] == ["Stone", "StoneMossy"]
    assert catalog.best_match("StoneMossy_02").asset_id == "StoneMossy.tres"
    assert catalog.best_match("stone") is None


def test_catalog_entries_use_natural_order(tmp_path):
    for name in ["Rock10.tres", "Rock2.tres", "Rock1.tres"]:
        (tmp_path / name).write_text("")
    catalog = MaterialCatalog(CatalogConfig(catalog_root_path=str(tmp_path)))
    assert [entry.short_name for entry in catalog.entries] == ["Rock1", "Rock2", "Rock10"]


def test_missing_catalog_directory_is_fatal(tmp_path):
    with pytest.raises(FileNotFoundError):
        MaterialCatalog(CatalogConfig(catalog_root_path=str(tmp_path / "missing")))


# ============================================================================
# RETRIEVER
# ============================================================================

@pytest.fixture
def retriever(import_cfg) -> Retriever:
    return Retriever(import_cfg.catalogs)


def test_material_replacement(retriever, catalog_dirs):
    material = retriever.get_material_replacement("Stone")
    assert material.name == "Stone"
    assert material.resource_path == catalog_dirs["material"] / "Stone.tres"
    # Loaded once per retriever
    assert retriever.get_material_replacement("Stone_Wall") is material


def test_unmatched_material_is_blank(retriever):
    material = retriever.get_material_replacement("Glass")
    assert material.is_blank


def test_packed_scene_replacement_is_a_fresh_instance(retriever):
    first = retriever.get_packed_scene_replacement("InteractableDoor_01")
    second = retriever.get_packed_scene_replacement("InteractableDoor_02")

    assert first.name == "InteractableDoor_01 (replaced)"
    assert second.name == "InteractableDoor_02 (replaced)"
    assert first is not second
    assert first.children[0] is not second.children[0]
    assert isinstance(first.children[0], MeshInstance)
    assert first.children[0].name == "DoorPanel"


def test_packed_scene_replacement_prefers_longest_name(retriever):
    replacement = retriever.get_packed_scene_replacement("InteractableDoorLocked_01")
    assert replacement.children[0].name == "LockedPanel"


def test_unmatched_packed_scene_is_an_empty_placeholder(retriever):
    replacement = retriever.get_packed_scene_replacement("Barrel")
    assert type(replacement) is Node
    assert replacement.children == []
    assert replacement.name == "Barrel (replaced)"


def test_is_replaceable_ignores_case(retriever):
    assert retriever.is_replaceable("interactabledoor")
    assert not retriever.is_replaceable("Rock")


def test_unknown_catalog_name(catalog_dirs):
    with pytest.raises(KeyError):
        Retriever({"texture": CatalogConfig(catalog_root_path=str(catalog_dirs["material"]))})
