import trimesh
import numpy as np
from pathlib import Path
from dataclasses import dataclass, field

# ----------------------------------------------------------------------------------------

@dataclass
class Material:
    """
    A surface material.

    Attributes:
        name: the resource name of the material, used for catalog matching
        resource_path: the file the material was loaded from, None for imported or blank materials
    """

    name: str = ""
    resource_path: Path | None = None

    @property
    def is_blank(self) -> bool:
        return not self.name and self.resource_path is None

@dataclass
class ConcavePolygonShape:
    """
    Triangle-soup collision shape.

    Attributes:
        faces: (N * 3, 3) array of triangle corner positions
    """

    faces: np.ndarray

@dataclass
class ConvexPolygonShape:
    """
    Convex collision shape.

    Attributes:
        points: (M, 3) array of hull vertices
    """

    points: np.ndarray

# ----------------------------------------------------------------------------------------

@dataclass
class Surface:
    """
    A single surface of a mesh.

    Attributes:
        geometry: the triangle geometry of the surface
        material: the material assigned to the surface
        lightmap_uv: per-vertex lightmap UV coordinates, once unwrapped
    """

    geometry: trimesh.Trimesh
    material: Material | None = None
    lightmap_uv: np.ndarray | None = None

class Mesh:
    def __init__(self, surfaces: list[Surface] = None, name: str = "") -> None:
        """
        Initialize a mesh made of surfaces.

        Args:
            surfaces: the surfaces of the mesh
            name: the resource name of the mesh
        """

        self.name = name
        self.surfaces: list[Surface] = list(surfaces) if surfaces else []
        self.lightmap_size_hint: tuple[int, int] | None = None

    def add_surface(self, geometry: trimesh.Trimesh, material: Material | None = None) -> None:
        self.surfaces.append(Surface(geometry, material))

    def get_surface_count(self) -> int:
        return len(self.surfaces)

    def surface_get_material(self, index: int) -> Material | None:
        return self.surfaces[index].material

    def surface_set_material(self, index: int, material: Material | None) -> None:
        self.surfaces[index].material = material

    def get_faces(self) -> np.ndarray:
        """
        Get the triangles of all surfaces as a flat list of corner positions.

        Returns:
            faces: (N * 3, 3) array, three consecutive rows per triangle
        """

        if not self.surfaces:
            return np.zeros((0, 3))
        return np.concatenate([np.asarray(surface.geometry.triangles).reshape(-1, 3) for surface in self.surfaces])

    def create_convex_shape(self) -> ConvexPolygonShape:
        """
        Create a convex collision shape enclosing all surfaces.

        Returns:
            shape: the convex shape built from the convex hull of the mesh
        """

        if not self.surfaces:
            raise ValueError(f"Cannot create a convex shape for mesh '{self.name}' without surfaces.")
        combined = trimesh.util.concatenate([surface.geometry for surface in self.surfaces])
        hull = combined.convex_hull
        return ConvexPolygonShape(points=np.asarray(hull.vertices).copy())

    def rebuild(self) -> "Mesh":
        """
        Create a fresh mesh with copies of the surface geometry and the same materials.
        Lightmap data is not carried over.

        Returns:
            mesh: the rebuilt mesh
        """

        rebuilt = Mesh(name=self.name)
        for surface in self.surfaces:
            rebuilt.add_surface(surface.geometry.copy(), surface.material)
        return rebuilt
