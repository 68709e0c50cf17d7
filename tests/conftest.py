"""
Shared pytest fixtures for the level import tests.

Scenes are built in memory; catalogs live in tmp_path. Lightmap unwrapping is replaced by a
recording stand-in so the pipeline tests do not depend on xatlas.
"""

from __future__ import annotations

import json
from pathlib import Path

import numpy as np
import pytest
import trimesh

from assets import CatalogConfig
from pipeline import ImportConfig, LevelImportProcessor
from scenes import Material, Mesh, MeshInstance, Node, SceneState


# ============================================================================
# SCENE HELPERS
# ============================================================================

def make_box_mesh(material_name: str | None = "Stone", extents=(1.0, 1.0, 1.0), surfaces: int = 1) -> Mesh:
    """Build a mesh of box surfaces, each with its own material instance."""
    mesh = Mesh(name="box")
    for _ in range(surfaces):
        material = Material(name=material_name) if material_name is not None else None
        mesh.add_surface(trimesh.creation.box(extents=extents), material)
    return mesh


def make_mesh_node(name: str, material_name: str | None = "Stone", **kwargs) -> MeshInstance:
    return MeshInstance(name=name, mesh=make_box_mesh(material_name, **kwargs))


def make_scene(name: str, *children: Node) -> Node:
    root = Node(name=name)
    for child in children:
        root.add_child(child)
        child.set_owner_recursive(root)
    return root


class RecordingUnwrapper:
    """Lightmap unwrapper stand-in: zero UVs, one record per call."""

    def __init__(self):
        self.calls: list[tuple[Mesh, np.ndarray, float]] = []

    def unwrap(self, mesh: Mesh, transform: np.ndarray, texel_size: float) -> None:
        self.calls.append((mesh, transform, texel_size))
        for surface in mesh.surfaces:
            surface.lightmap_uv = np.zeros((len(surface.geometry.vertices), 2))
        mesh.lightmap_size_hint = (16, 16)


# ============================================================================
# FIXTURES
# ============================================================================

@pytest.fixture
def unwrapper() -> RecordingUnwrapper:
    return RecordingUnwrapper()


@pytest.fixture
def catalog_dirs(tmp_path: Path) -> dict[str, Path]:
    """Create a packaged-scene catalog and a material catalog on disk."""
    packed_dir = tmp_path / "Game" / "LevelPackedScene"
    material_dir = tmp_path / "Assets" / "Level" / "Material"
    packed_dir.mkdir(parents=True)
    material_dir.mkdir(parents=True)

    door = make_scene("InteractableDoor", make_mesh_node("DoorPanel", material_name="Wood"))
    (packed_dir / "InteractableDoor.json").write_text(json.dumps(SceneState.from_root(door).to_dict()))
    (packed_dir / "InteractableDoor.json.import").write_text("[remap]\n")

    locked = make_scene("InteractableDoorLocked", make_mesh_node("LockedPanel", material_name="Metal"))
    (packed_dir / "InteractableDoorLocked.json").write_text(json.dumps(SceneState.from_root(locked).to_dict()))

    (material_dir / "Stone.tres").write_text("[gd_resource type=\"StandardMaterial3D\"]\n")
    (material_dir / "StoneMossy.tres").write_text("[gd_resource type=\"StandardMaterial3D\"]\n")
    (material_dir / "Stone_albedo.png").write_bytes(b"")

    return {"packed_scene": packed_dir, "material": material_dir}


@pytest.fixture
def import_cfg(catalog_dirs: dict[str, Path]) -> ImportConfig:
    return ImportConfig(
        catalogs={
            "packed_scene": CatalogConfig(catalog_root_path=str(catalog_dirs["packed_scene"]), excluded_marker=".import"),
            "material": CatalogConfig(catalog_root_path=str(catalog_dirs["material"]), file_extension=".tres"),
        }
    )


@pytest.fixture
def processor(import_cfg: ImportConfig, unwrapper: RecordingUnwrapper) -> LevelImportProcessor:
    return LevelImportProcessor(import_cfg, unwrapper=unwrapper)
