from attributes import AttributeKind
from scenes.node import Node, MeshInstance
from utils.traversal import get_all_children_with_self
from .base import BasePass, PassContext
from .registry import register_pass

@register_pass
class RenderLayerPass(BasePass):
    """
    Set the render-layer bitmask of meshes named with "Layer{n}". Other meshes keep their layers.
    """

    name = "render_layer"
    requires = ("lightmap",)

    def apply(self, node: Node, context: PassContext) -> Node:
        for mesh_node in get_all_children_with_self(node):
            if not isinstance(mesh_node, MeshInstance):
                continue
            layers = context.parser.parse_value(mesh_node.name, AttributeKind.RENDER_LAYER)
            if layers is not None:
                mesh_node.layers = layers
        return node
