import json
import pathlib
import warnings
import trimesh
import numpy as np
from .mesh import Mesh, Material, ConcavePolygonShape, ConvexPolygonShape
from .node import Node, MeshInstance, StaticBody, CollisionShape, ShadowCasting, GIMode, NODE_TYPES

SCENE_TREE_FORMAT = "sceneTree"
SCENE_TREE_VERSION = "sceneTree@1.0"

class SceneState:
    def __init__(self, source: pathlib.Path | dict = None) -> None:
        """
        Initialize a scene state object.

        Args:
            source: the source of the scene tree dictionary
        """

        self.raw_json: dict = None
        self.name: str = None
        self.version: str = None
        self.root: Node = None

        # Load the scene tree dictionary if provided
        if source is not None:
            self.load(source)

    def load(self, source: pathlib.Path | dict) -> None:
        """
        Load a scene tree dictionary from a file or a dictionary.

        Args:
            source: the source of the scene tree dictionary
        """

        # Load the scene tree dictionary
        if isinstance(source, pathlib.Path):
            with open(source, "r") as f:
                scene_tree_dict = json.load(f)
        elif isinstance(source, dict):
            scene_tree_dict = source
        else:
            raise TypeError(f"Cannot load a scene tree from {type(source).__name__}.")

        self.raw_json = scene_tree_dict

        # Verify it is a scene tree dictionary
        if scene_tree_dict.get("format") != SCENE_TREE_FORMAT:
            raise ValueError(f"The format of the dictionary is not '{SCENE_TREE_FORMAT}'.")

        # Check version
        self.version = scene_tree_dict.get("version", None)
        if self.version != SCENE_TREE_VERSION:
            warnings.warn(f"This module is developed for {SCENE_TREE_VERSION}, but the scene tree version is {self.version}.")

        root_spec: dict = scene_tree_dict.get("root", None)
        if root_spec is None:
            raise ValueError("The dictionary does not contain a 'root' key.")

        self.root = node_from_dict(root_spec)
        self.root.set_owner_recursive(self.root)
        self.root.owner = None
        self.name = self.root.name

    def to_dict(self) -> dict:
        """
        Returns:
            The scene tree dictionary of the current root, including any changes made after loading
        """

        return {
            "format": SCENE_TREE_FORMAT,
            "version": SCENE_TREE_VERSION,
            "root": node_to_dict(self.root),
        }

    def save(self, file_path: pathlib.Path) -> None:
        with open(file_path, "w") as f:
            json.dump(self.to_dict(), f, indent=4)

    @classmethod
    def from_root(cls, root: Node) -> "SceneState":
        scene_state = cls()
        scene_state.root = root
        scene_state.name = root.name
        scene_state.version = SCENE_TREE_VERSION
        return scene_state

# ----------------------------------------------------------------------------------------

def node_from_dict(node_dict: dict) -> Node:
    """
    Build a node and its subtree from a node dictionary.

    Args:
        node_dict: the node dictionary

    Returns:
        node: the root of the built subtree
    """

    type_name = node_dict.get("type", Node.type_name)
    if type_name not in NODE_TYPES:
        raise ValueError(f"Unknown node type: {type_name}. Available types: {list(NODE_TYPES.keys())}")

    node_class = NODE_TYPES[type_name]
    node = node_class(name=node_dict.get("name", type_name))
    if "transform" in node_dict:
        node.transform = np.asarray(node_dict["transform"], dtype=float).reshape(4, 4)

    match node:
        case MeshInstance():
            mesh_spec = node_dict.get("mesh", None)
            node.mesh = _mesh_from_dict(mesh_spec) if mesh_spec is not None else None
            node.cast_shadow = ShadowCasting(node_dict.get("castShadow", ShadowCasting.ON.value))
            node.gi_mode = GIMode(node_dict.get("giMode", GIMode.STATIC.value))
            node.layers = int(node_dict.get("layers", 1))
            node.ignore_occlusion_culling = bool(node_dict.get("ignoreOcclusionCulling", False))
        case StaticBody():
            node.collision_layer = int(node_dict.get("collisionLayer", 1))
            node.collision_mask = int(node_dict.get("collisionMask", 1))
        case CollisionShape():
            shape_spec = node_dict.get("shape", None)
            node.shape = _shape_from_dict(shape_spec) if shape_spec is not None else None

    for child_spec in node_dict.get("children", []):
        node.add_child(node_from_dict(child_spec))

    return node

def node_to_dict(node: Node) -> dict:
    """
    Serialize a node and its subtree.

    Args:
        node: the root of the subtree

    Returns:
        node_dict: the node dictionary
    """

    node_dict = {
        "type": node.type_name,
        "name": node.name,
        "transform": node.transform.tolist(),
    }

    match node:
        case MeshInstance():
            node_dict["mesh"] = _mesh_to_dict(node.mesh) if node.mesh is not None else None
            node_dict["castShadow"] = node.cast_shadow.value
            node_dict["giMode"] = node.gi_mode.value
            node_dict["layers"] = node.layers
            node_dict["ignoreOcclusionCulling"] = node.ignore_occlusion_culling
        case StaticBody():
            node_dict["collisionLayer"] = node.collision_layer
            node_dict["collisionMask"] = node.collision_mask
        case CollisionShape():
            node_dict["shape"] = _shape_to_dict(node.shape) if node.shape is not None else None

    node_dict["children"] = [node_to_dict(child) for child in node.children]
    return node_dict

# ----------------------------------------------------------------------------------------

def _mesh_from_dict(mesh_dict: dict) -> Mesh:
    mesh = Mesh(name=mesh_dict.get("name", ""))
    for surface_spec in mesh_dict.get("surfaces", []):
        geometry = trimesh.Trimesh(
            vertices=np.asarray(surface_spec["vertices"], dtype=float).reshape(-1, 3),
            faces=np.asarray(surface_spec["faces"], dtype=np.int64).reshape(-1, 3),
            process=False,
        )
        material_spec = surface_spec.get("material", None)
        mesh.add_surface(geometry, _material_from_spec(material_spec))
        if "lightmapUv" in surface_spec:
            mesh.surfaces[-1].lightmap_uv = np.asarray(surface_spec["lightmapUv"], dtype=float).reshape(-1, 2)
    if "lightmapSizeHint" in mesh_dict:
        mesh.lightmap_size_hint = tuple(mesh_dict["lightmapSizeHint"])
    return mesh

def _mesh_to_dict(mesh: Mesh) -> dict:
    surfaces = []
    for surface in mesh.surfaces:
        surface_dict = {
            "vertices": np.asarray(surface.geometry.vertices).tolist(),
            "faces": np.asarray(surface.geometry.faces).tolist(),
            "material": _material_to_spec(surface.material),
        }
        if surface.lightmap_uv is not None:
            surface_dict["lightmapUv"] = np.asarray(surface.lightmap_uv).tolist()
        surfaces.append(surface_dict)

    mesh_dict = {"name": mesh.name, "surfaces": surfaces}
    if mesh.lightmap_size_hint is not None:
        mesh_dict["lightmapSizeHint"] = list(mesh.lightmap_size_hint)
    return mesh_dict

def _material_from_spec(material_spec: str | dict | None) -> Material | None:
    # A bare string is shorthand for an imported material with only a name
    if material_spec is None:
        return None
    if isinstance(material_spec, str):
        return Material(name=material_spec)
    resource_path = material_spec.get("resourcePath", None)
    return Material(
        name=material_spec.get("name", ""),
        resource_path=pathlib.Path(resource_path) if resource_path else None,
    )

def _material_to_spec(material: Material | None) -> dict | None:
    if material is None:
        return None
    return {
        "name": material.name,
        "resourcePath": str(material.resource_path) if material.resource_path is not None else None,
    }

def _shape_from_dict(shape_dict: dict) -> ConcavePolygonShape | ConvexPolygonShape:
    match shape_dict.get("type"):
        case "ConcavePolygonShape3D":
            return ConcavePolygonShape(faces=np.asarray(shape_dict["faces"], dtype=float).reshape(-1, 3))
        case "ConvexPolygonShape3D":
            return ConvexPolygonShape(points=np.asarray(shape_dict["points"], dtype=float).reshape(-1, 3))
        case other:
            raise ValueError(f"Unknown collision shape type: {other}")

def _shape_to_dict(shape: ConcavePolygonShape | ConvexPolygonShape) -> dict:
    if isinstance(shape, ConcavePolygonShape):
        return {"type": "ConcavePolygonShape3D", "faces": np.asarray(shape.faces).tolist()}
    return {"type": "ConvexPolygonShape3D", "points": np.asarray(shape.points).tolist()}
