from attributes import AttributeKind
from scenes.node import Node, MeshInstance, ShadowCasting
from utils.traversal import get_all_children_with_self
from .base import BasePass, PassContext
from .registry import register_pass

@register_pass
class ShadowPass(BasePass):
    """
    Cast double-sided shadows from every mesh, except the ones marked "NoShadow".
    """

    name = "shadow"
    requires = ("lightmap",)

    def apply(self, node: Node, context: PassContext) -> Node:
        for mesh_node in get_all_children_with_self(node):
            if not isinstance(mesh_node, MeshInstance):
                continue
            if context.parser.has_attribute(mesh_node.name, AttributeKind.NO_SHADOW):
                mesh_node.cast_shadow = ShadowCasting.OFF
            else:
                mesh_node.cast_shadow = ShadowCasting.DOUBLE_SIDED
        return node
