import logging
from attributes import AttributeKind
from scenes.mesh import ConcavePolygonShape
from scenes.node import Node, MeshInstance, StaticBody, CollisionShape
from utils.traversal import get_all_children_with_self, relative_transform
from .base import BasePass, PassContext
from .registry import register_pass

logger = logging.getLogger(__name__)

# ----------------------------------------------------------------------------------------

@register_pass
class CollisionPass(BasePass):
    """
    Give every mesh of a static subtree a static body with a collision shape built from the mesh.
    The bodies are added as children of the subtree root.
    """

    name = "collision"

    def apply(self, node: Node, context: PassContext) -> Node:
        """
        Apply the pass.

        Args:
            node: the root of the static subtree
            context: the pass context

        Returns:
            The same node, with one static body child per collidable mesh
        """

        mesh_nodes = [
            n for n in get_all_children_with_self(node)
            if isinstance(n, MeshInstance) and not context.parser.has_attribute(n.name, AttributeKind.NO_COLLISION)
        ]

        for mesh_node in mesh_nodes:
            attributes = context.parser.tokenize(mesh_node.name)

            if AttributeKind.CONVEX_COLLISION in attributes:
                shape = self.create_convex_shape(mesh_node)
            else:
                shape = self.create_concave_shape(mesh_node)

            body = StaticBody(name=f"{mesh_node.name}_StaticBody", transform=relative_transform(mesh_node, node))
            collision_shape = CollisionShape(name="CollisionShape", shape=shape)
            body.add_child(collision_shape)
            node.add_child(body)
            body.owner = context.scene
            collision_shape.owner = context.scene

            # Bits are only touched when the name asks for them
            if AttributeKind.COLLISION_LAYER in attributes:
                body.collision_layer = attributes.value(AttributeKind.COLLISION_LAYER)
            if AttributeKind.COLLISION_MASK in attributes:
                body.collision_mask = attributes.value(AttributeKind.COLLISION_MASK)

            logger.debug(f"Added {type(shape).__name__} body for '{mesh_node.name}' "
                         f"(layer {body.collision_layer}, mask {body.collision_mask}).")

        return node

    @staticmethod
    def create_concave_shape(mesh_node: MeshInstance) -> ConcavePolygonShape:
        if mesh_node.mesh is None:
            raise ValueError(f"Cannot create collision for '{mesh_node.name}': it has no mesh.")
        return ConcavePolygonShape(faces=mesh_node.mesh.get_faces())

    @staticmethod
    def create_convex_shape(mesh_node: MeshInstance):
        if mesh_node.mesh is None:
            raise ValueError(f"Cannot create collision for '{mesh_node.name}': it has no mesh.")
        return mesh_node.mesh.create_convex_shape()
