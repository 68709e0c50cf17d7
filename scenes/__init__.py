from .mesh import Mesh, Surface, Material, ConcavePolygonShape, ConvexPolygonShape
from .node import Node, MeshInstance, StaticBody, CollisionShape, ShadowCasting, GIMode
from .config import SceneConfig
from .scene_state import SceneState
from .trimesh_scene import load_scene_file, from_trimesh_scene, to_trimesh_scene, export_scene

__all__ = [
    "Mesh",
    "Surface",
    "Material",
    "ConcavePolygonShape",
    "ConvexPolygonShape",
    "Node",
    "MeshInstance",
    "StaticBody",
    "CollisionShape",
    "ShadowCasting",
    "GIMode",
    "SceneConfig",
    "SceneState",
    "load_scene_file",
    "from_trimesh_scene",
    "to_trimesh_scene",
    "export_scene",
]
