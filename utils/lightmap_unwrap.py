"""Lightmap UV unwrapping for rebuilt meshes.

All surfaces of a mesh are packed into a single atlas with xatlas. The surfaces are
unwrapped in the space of the node they belong to, so the texel density follows the
node's scale. xatlas splits vertices along chart seams, so each surface's geometry is
replaced by the re-indexed one that matches the generated UVs.
"""

import logging
from typing import Protocol

import numpy as np
import trimesh

from scenes.mesh import Mesh

logger = logging.getLogger(__name__)


class LightmapUnwrapper(Protocol):
    def unwrap(self, mesh: Mesh, transform: np.ndarray, texel_size: float) -> None:
        """Annotate every surface of the mesh with lightmap UVs, in place."""
        ...


class XatlasUnwrapper:
    """Unwraps lightmap UVs with xatlas."""

    def __init__(self, padding: int = 2, max_resolution: int = 4096):
        """
        Args:
            padding: Texels between charts in the atlas.
            max_resolution: Upper bound on the atlas size; 0 lets xatlas pick from the texel density.
        """
        self.padding = padding
        self.max_resolution = max_resolution

    def unwrap(self, mesh: Mesh, transform: np.ndarray, texel_size: float) -> None:
        """Generate lightmap UVs for all surfaces of the mesh.

        Args:
            mesh: The mesh to unwrap; surface geometry and UVs are replaced in place.
            transform: 4x4 transform of the mesh's node, applied before measuring texel density.
            texel_size: World-space size of one lightmap texel.
        """
        import xatlas

        if texel_size <= 0:
            raise ValueError(f"Texel size must be positive, got {texel_size}.")
        if not mesh.surfaces:
            return

        atlas = xatlas.Atlas()
        for surface in mesh.surfaces:
            positions = trimesh.transform_points(np.asarray(surface.geometry.vertices), transform)
            atlas.add_mesh(positions.astype(np.float32), np.asarray(surface.geometry.faces, dtype=np.uint32))

        pack_options = xatlas.PackOptions()
        pack_options.padding = self.padding
        pack_options.texels_per_unit = 1.0 / texel_size
        if self.max_resolution:
            pack_options.resolution = self.max_resolution
        atlas.generate(pack_options=pack_options)

        for i, surface in enumerate(mesh.surfaces):
            vmapping, indices, uvs = atlas[i]
            vertices = np.asarray(surface.geometry.vertices)[vmapping]
            surface.geometry = trimesh.Trimesh(vertices=vertices, faces=indices, process=False)
            surface.lightmap_uv = np.asarray(uvs, dtype=float)

        mesh.lightmap_size_hint = (int(atlas.width), int(atlas.height))
        logger.debug(f"Unwrapped mesh '{mesh.name}' into a {atlas.width}x{atlas.height} lightmap.")
