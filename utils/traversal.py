"""Scene tree traversal helpers.

Every helper returns a list snapshot of the tree at call time, so callers can add or
remove nodes while iterating without disturbing the traversal.
"""

import numpy as np
from scenes.node import Node


def get_all_children(node: Node) -> list[Node]:
    """Retrieve all descendants of the node in breadth-first order.

    Args:
        node: The root node to retrieve descendants for.

    Returns:
        List of descendants, not including the node itself.
    """
    result: list[Node] = []
    frontier = node.get_children()
    while frontier:
        result.extend(frontier)
        frontier = [grandchild for child in frontier for grandchild in child.get_children()]
    return result


def get_all_children_with_self(node: Node) -> list[Node]:
    """Retrieve the node followed by all of its descendants.

    Args:
        node: The root node to retrieve.

    Returns:
        List starting with the node itself.
    """
    return [node] + get_all_children(node)


def relative_transform(node: Node, ancestor: Node) -> np.ndarray:
    """Compose the local transforms from just below the ancestor down to the node.

    Args:
        node: The node whose transform is wanted.
        ancestor: A node on the path to the root, or the node itself.

    Returns:
        4x4 transform of the node in the ancestor's space.
    """
    transform = np.eye(4)
    current = node
    while current is not ancestor:
        if current is None:
            raise ValueError(f"Node '{ancestor.name}' is not an ancestor of '{node.name}'.")
        transform = current.transform @ transform
        current = current.parent
    return transform
