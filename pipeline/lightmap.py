import logging
from attributes import AttributeKind
from scenes.node import Node, MeshInstance, GIMode
from utils.traversal import get_all_children_with_self
from .base import BasePass, PassContext
from .registry import register_pass

logger = logging.getLogger(__name__)

# ----------------------------------------------------------------------------------------

@register_pass
class LightmapPass(BasePass):
    """
    Rebuild every remaining mesh with lightmap UVs.

    Unwrapping is unconditional; "NoBake" only switches the node to dynamic GI afterwards.
    Rebuilt meshes lose any per-instance shadow setup, so the shadow pass must come later.
    """

    name = "lightmap"
    requires = ("collision", "render_removal")

    def apply(self, node: Node, context: PassContext) -> Node:
        """
        Apply the pass.

        Args:
            node: the root of the static subtree
            context: the pass context

        Returns:
            The same node, with rebuilt and unwrapped meshes
        """

        mesh_nodes = [
            n for n in get_all_children_with_self(node)
            if isinstance(n, MeshInstance) and n.mesh is not None
        ]

        for mesh_node in mesh_nodes:
            multiplier = context.parser.parse_value(mesh_node.name, AttributeKind.TEXEL_MULTIPLIER)
            texel_size = context.cfg.base_texel_size * (multiplier if multiplier is not None else 1.0)

            new_mesh = mesh_node.mesh.rebuild()
            context.unwrapper.unwrap(new_mesh, mesh_node.transform, texel_size)
            mesh_node.mesh = new_mesh
            logger.debug(f"Unwrapped lightmap UVs of '{mesh_node.name}' at texel size {texel_size}.")

        for mesh_node in mesh_nodes:
            if context.parser.has_attribute(mesh_node.name, AttributeKind.NO_BAKE):
                mesh_node.gi_mode = GIMode.DYNAMIC

        return node
