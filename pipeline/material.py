import logging
from scenes.node import Node, MeshInstance
from utils.traversal import get_all_children_with_self
from .base import BasePass, PassContext
from .registry import register_pass

logger = logging.getLogger(__name__)

@register_pass
class MaterialPass(BasePass):
    """
    Swap every surface material for the material catalog entry matching its name.
    Surfaces without a match get a blank material.
    """

    name = "material"
    requires = ("lightmap",)

    def apply(self, node: Node, context: PassContext) -> Node:
        mesh_nodes = [
            n for n in get_all_children_with_self(node)
            if isinstance(n, MeshInstance) and n.mesh is not None
        ]

        for mesh_node in mesh_nodes:
            mesh = mesh_node.mesh
            for surface_index in range(mesh.get_surface_count()):
                material = mesh.surface_get_material(surface_index)
                material_name = material.name if material is not None else ""
                replacement = context.retriever.get_material_replacement(material_name)
                mesh.surface_set_material(surface_index, replacement)
                logger.debug(f"Surface {surface_index} of '{mesh_node.name}': '{material_name}' -> '{replacement.name}'.")

        return node
