import logging
from assets import Retriever
from scenes.node import Node, MeshInstance

logger = logging.getLogger(__name__)

def replace_with_packed_scene(scene: Node, node: Node, retriever: Retriever) -> Node:
    """
    Swap the content of a node for an instance of its packaged scene.

    The node itself stays in place so its transform is kept; its children are queued for
    deletion, its mesh is cleared and the instance becomes its only live child.

    Args:
        scene: the level root, owner of the instance
        node: the node to replace
        retriever: the replacement catalogs of the current run

    Returns:
        replacement: the instantiated packaged scene, or an empty placeholder if nothing matched
    """

    replacement = retriever.get_packed_scene_replacement(node.name)

    for child in node.get_children():
        child.queue_free()
    if isinstance(node, MeshInstance):
        node.mesh = None

    node.add_child(replacement)
    replacement.set_owner_recursive(scene)

    logger.debug(f"Replaced content of '{node.name}' with '{replacement.name}'.")
    return replacement
