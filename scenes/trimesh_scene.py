import logging
import pathlib
import trimesh
import numpy as np
from .mesh import Mesh, Material
from .node import Node, MeshInstance
from .scene_state import SceneState

logger = logging.getLogger(__name__)

# NOTE: prefix t_ for Trimesh related objects

# ----------------------------------------------------------------------------------------

def load_scene_file(file_path: pathlib.Path) -> Node:
    """
    Load a scene file into a node tree.
    JSON files are read as scene trees, anything else goes through trimesh.

    Args:
        file_path: the file to load

    Returns:
        root: the root node, named after the file stem for trimesh formats
    """

    file_path = pathlib.Path(file_path)
    if not file_path.is_file():
        raise FileNotFoundError(f"Scene file '{file_path}' is missing.")

    if file_path.suffix.lower() == ".json":
        return SceneState(file_path).root

    t_scene = trimesh.load(file_path, force="scene")
    return from_trimesh_scene(t_scene, file_path.stem)

def from_trimesh_scene(t_scene: trimesh.Scene, name: str) -> Node:
    """
    Convert the graph of a Trimesh scene into a node tree.
    Graph nodes with geometry become mesh instances with one surface.

    Args:
        t_scene: the Trimesh scene
        name: the name of the root node

    Returns:
        root: the root node
    """

    graph = t_scene.graph
    base_frame = graph.base_frame
    children_of = graph.transforms.children

    root = Node(name=name)
    pending = [(base_frame, root)]
    while pending:
        frame, node = pending.pop(0)
        for child_frame in children_of.get(frame, []):
            matrix, geometry_name = graph.get(frame_to=child_frame, frame_from=frame)
            t_geometry = t_scene.geometry.get(geometry_name) if geometry_name is not None else None

            if isinstance(t_geometry, trimesh.Trimesh):
                mesh = Mesh(name=geometry_name)
                mesh.add_surface(t_geometry.copy(), _material_of(t_geometry))
                child = MeshInstance(name=str(child_frame), mesh=mesh, transform=matrix)
            else:
                if t_geometry is not None:
                    logger.debug(f"Ignoring non-triangle geometry '{geometry_name}' of node '{child_frame}'.")
                child = Node(name=str(child_frame), transform=matrix)

            node.add_child(child)
            pending.append((child_frame, child))

    root.set_owner_recursive(root)
    root.owner = None
    return root

def to_trimesh_scene(root: Node) -> trimesh.Scene:
    """
    Convert the rendered part of a node tree into a Trimesh scene.
    Mesh instances without a mesh, physics bodies and collision shapes have no geometry to export.

    Args:
        root: the root node

    Returns:
        t_scene: the Trimesh scene
    """

    t_scene = trimesh.Scene()
    used_names: set[str] = set()

    def unique(name: str) -> str:
        candidate, suffix = name, 2
        while candidate in used_names:
            candidate = f"{name}_{suffix}"
            suffix += 1
        used_names.add(candidate)
        return candidate

    pending = [(root, t_scene.graph.base_frame)]
    while pending:
        node, parent_frame = pending.pop(0)
        for child in node.children:
            frame = unique(child.name)
            t_scene.graph.update(frame_to=frame, frame_from=parent_frame, matrix=child.transform)

            if isinstance(child, MeshInstance) and child.mesh is not None:
                for i, surface in enumerate(child.mesh.surfaces):
                    surface_frame = unique(f"{frame}_surface{i}")
                    t_scene.add_geometry(
                        surface.geometry,
                        node_name=surface_frame,
                        geom_name=surface_frame,
                        parent_node_name=frame,
                    )

            pending.append((child, frame))

    return t_scene

def _material_of(t_geometry: trimesh.Trimesh) -> Material | None:
    t_material = getattr(t_geometry.visual, "material", None)
    if t_material is None:
        return None
    return Material(name=getattr(t_material, "name", None) or "")

def export_scene(root: Node, file_path: str, convert_to_y_up: bool = False) -> None:
    """
    Export the rendered part of a node tree to a file (e.g., GLB).

    Args:
        root: the root node
        file_path: the path to export to
        convert_to_y_up: if True, apply Z-up to Y-up conversion for glTF convention
    """

    t_scene = to_trimesh_scene(root)
    if convert_to_y_up:
        z_up_to_y_up = trimesh.transformations.rotation_matrix(np.pi / 2, [1, 0, 0])
        t_scene.apply_transform(z_up_to_y_up)
    t_scene.export(file_path)
