import numpy as np
import pytest
import trimesh

from scenes import (
    ConcavePolygonShape,
    CollisionShape,
    GIMode,
    MeshInstance,
    Node,
    SceneState,
    ShadowCasting,
    StaticBody,
    from_trimesh_scene,
    load_scene_file,
    to_trimesh_scene,
)
from scenes.scene_state import node_to_dict
from utils.traversal import get_all_children, get_all_children_with_self, relative_transform

from conftest import make_box_mesh, make_mesh_node, make_scene


# ============================================================================
# NODES AND MESHES
# ============================================================================

def test_add_child_rejects_second_parent():
    parent, other = Node("A"), Node("B")
    child = Node("C")
    parent.add_child(child)
    with pytest.raises(ValueError):
        other.add_child(child)


def test_queued_nodes_are_detached_on_flush():
    root = make_scene("Level", Node("Keep"), Node("Drop"))
    root.children[1].queue_free()
    assert root.get_child_count() == 2

    assert root.free_queued() == 1
    assert [child.name for child in root.children] == ["Keep"]


def test_mesh_faces_and_convex_shape():
    mesh = make_box_mesh(surfaces=2)
    faces = mesh.get_faces()
    assert faces.shape == (2 * 12 * 3, 3)

    shape = mesh.create_convex_shape()
    assert len(shape.points) == 8


def test_rebuild_copies_geometry_and_materials():
    mesh = make_box_mesh()
    rebuilt = mesh.rebuild()
    assert rebuilt is not mesh
    assert rebuilt.surfaces[0].geometry is not mesh.surfaces[0].geometry
    assert rebuilt.surface_get_material(0) is mesh.surface_get_material(0)
    assert np.allclose(rebuilt.surfaces[0].geometry.vertices, mesh.surfaces[0].geometry.vertices)


# ============================================================================
# TRAVERSAL
# ============================================================================

def test_traversal_is_a_snapshot():
    branch = make_mesh_node("Branch")
    branch.add_child(make_mesh_node("Leaf"))
    root = make_scene("Level", branch)

    nodes = get_all_children_with_self(root)
    for node in nodes:
        node.add_child(Node(f"{node.name}_extra"))

    assert [node.name for node in nodes] == ["Level", "Branch", "Leaf"]
    assert len(get_all_children(root)) == 5


def test_relative_transform():
    parent = Node("Parent", transform=trimesh.transformations.translation_matrix([1, 0, 0]))
    child = Node("Child", transform=trimesh.transformations.translation_matrix([0, 2, 0]))
    parent.add_child(child)
    root = make_scene("Level", parent)

    assert np.allclose(relative_transform(child, root)[:3, 3], [1, 2, 0])
    assert np.allclose(relative_transform(child, parent)[:3, 3], [0, 2, 0])
    assert np.allclose(relative_transform(child, child), np.eye(4))
    with pytest.raises(ValueError):
        relative_transform(parent, child)


# ============================================================================
# SCENE STATE
# ============================================================================

def test_scene_state_round_trip(tmp_path):
    rock = make_mesh_node("Rock=NoBake")
    rock.gi_mode = GIMode.DYNAMIC
    rock.cast_shadow = ShadowCasting.DOUBLE_SIDED
    body = StaticBody("Rock_StaticBody")
    body.collision_layer = 5
    body.add_child(CollisionShape("CollisionShape", shape=ConcavePolygonShape(faces=rock.mesh.get_faces())))
    rock.add_child(body)
    root = make_scene("Level_Intro", rock)

    file_path = tmp_path / "scene.json"
    SceneState.from_root(root).save(file_path)
    loaded = SceneState(file_path)

    assert loaded.name == "Level_Intro"
    assert node_to_dict(loaded.root) == node_to_dict(root)

    loaded_rock = loaded.root.children[0]
    assert isinstance(loaded_rock, MeshInstance)
    assert loaded_rock.gi_mode == GIMode.DYNAMIC
    assert loaded_rock.mesh.surface_get_material(0).name == "Stone"
    assert loaded_rock.children[0].collision_layer == 5
    assert loaded_rock.owner is loaded.root


def test_scene_state_material_shorthand():
    scene_state = SceneState({
        "format": "sceneTree",
        "version": "sceneTree@1.0",
        "root": {
            "type": "Node3D",
            "name": "Level_Hub",
            "children": [{
                "type": "MeshInstance3D",
                "name": "Floor",
                "mesh": {"surfaces": [{
                    "vertices": [[0, 0, 0], [1, 0, 0], [0, 1, 0]],
                    "faces": [[0, 1, 2]],
                    "material": "Tiles",
                }]},
            }],
        },
    })
    floor = scene_state.root.children[0]
    assert floor.mesh.surface_get_material(0).name == "Tiles"
    assert floor.layers == 1
    assert floor.cast_shadow == ShadowCasting.ON


def test_scene_state_rejects_wrong_format():
    with pytest.raises(ValueError):
        SceneState({"format": "sceneState", "root": {}})


def test_scene_state_warns_on_unknown_version():
    with pytest.warns(UserWarning):
        SceneState({"format": "sceneTree", "version": "sceneTree@0.1", "root": {"name": "Level"}})


def test_scene_state_rejects_unknown_node_type():
    with pytest.raises(ValueError):
        SceneState({"format": "sceneTree", "version": "sceneTree@1.0", "root": {"type": "Camera3D"}})


# ============================================================================
# TRIMESH CONVERSION
# ============================================================================

def _two_box_scene() -> trimesh.Scene:
    t_scene = trimesh.Scene()
    t_scene.add_geometry(trimesh.creation.box(), node_name="Rock=NoBake", geom_name="rock_geometry")
    t_scene.add_geometry(
        trimesh.creation.box(),
        node_name="Crate=ConvexCol",
        geom_name="crate_geometry",
        transform=trimesh.transformations.translation_matrix([3, 0, 0]),
    )
    return t_scene


def test_from_trimesh_scene():
    root = from_trimesh_scene(_two_box_scene(), "Level_Test")

    assert root.name == "Level_Test"
    names = sorted(child.name for child in root.children)
    assert names == ["Crate=ConvexCol", "Rock=NoBake"]

    crate = root.find_child("Crate=ConvexCol")
    assert isinstance(crate, MeshInstance)
    assert crate.mesh.get_surface_count() == 1
    assert np.allclose(crate.transform[:3, 3], [3, 0, 0])
    assert crate.owner is root


def test_to_trimesh_scene_skips_nodes_without_mesh():
    hidden = make_mesh_node("Hidden")
    hidden.mesh = None
    root = make_scene("Level", make_mesh_node("Visible"), hidden)

    t_scene = to_trimesh_scene(root)
    assert len(t_scene.geometry) == 1


def test_load_scene_file(tmp_path):
    glb_path = tmp_path / "Level_Yard.glb"
    _two_box_scene().export(str(glb_path))

    root = load_scene_file(glb_path)
    assert root.name == "Level_Yard"
    mesh_nodes = [node for node in get_all_children(root) if isinstance(node, MeshInstance)]
    assert len(mesh_nodes) == 2

    with pytest.raises(FileNotFoundError):
        load_scene_file(tmp_path / "missing.glb")
