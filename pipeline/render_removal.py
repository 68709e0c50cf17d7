import logging
from attributes import AttributeKind
from scenes.node import Node, MeshInstance
from utils.traversal import get_all_children_with_self
from .base import BasePass, PassContext
from .registry import register_pass

logger = logging.getLogger(__name__)

@register_pass
class RenderRemovalPass(BasePass):
    """
    Strip the mesh from nodes that only exist to carry collision ("NoRender", legacy "OnlyCol").
    The nodes stay in the tree and are left out of occlusion culling.
    """

    name = "render_removal"
    requires = ("collision",)

    def apply(self, node: Node, context: PassContext) -> Node:
        for mesh_node in get_all_children_with_self(node):
            if not isinstance(mesh_node, MeshInstance):
                continue
            if not (context.parser.has_attribute(mesh_node.name, AttributeKind.NO_RENDER)
                    or context.parser.has_attribute(mesh_node.name, AttributeKind.COLLISION_ONLY)):
                continue

            mesh_node.mesh = None
            mesh_node.ignore_occlusion_culling = True
            logger.debug(f"Removed mesh of collision-only node '{mesh_node.name}'.")

        return node
