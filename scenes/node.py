import numpy as np
from enum import Enum
from .mesh import Mesh, ConcavePolygonShape, ConvexPolygonShape

# ----------------------------------------------------------------------------------------

class ShadowCasting(Enum):
    OFF = "off"
    ON = "on"
    DOUBLE_SIDED = "double_sided"
    SHADOWS_ONLY = "shadows_only"

class GIMode(Enum):
    DISABLED = "disabled"
    STATIC = "static"
    DYNAMIC = "dynamic"

# ----------------------------------------------------------------------------------------

class Node:
    """
    A node of a scene tree.
    """

    type_name = "Node3D"

    def __init__(self, name: str = "Node", transform: np.ndarray | None = None) -> None:
        """
        Initialize a node.

        Args:
            name: the name of the node
            transform: the 4x4 local transform, identity if None
        """

        self.name = name
        self.transform: np.ndarray = np.eye(4) if transform is None else np.asarray(transform, dtype=float).reshape(4, 4)
        self.parent: Node | None = None
        self.owner: Node | None = None
        self.children: list[Node] = []
        self.queued_for_deletion = False

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"

    def add_child(self, child: "Node") -> None:
        """
        Append a child node.

        Args:
            child: the node to add, must not have a parent yet
        """

        if child.parent is not None:
            raise ValueError(f"Node '{child.name}' already has parent '{child.parent.name}'.")
        if child is self:
            raise ValueError(f"Node '{self.name}' cannot be its own child.")
        child.parent = self
        self.children.append(child)

    def remove_child(self, child: "Node") -> None:
        self.children.remove(child)
        child.parent = None

    def get_children(self) -> list["Node"]:
        """
        Returns:
            A copy of the list of children, safe to iterate while the tree changes
        """

        return list(self.children)

    def get_child_count(self) -> int:
        return len(self.children)

    def find_child(self, name: str) -> "Node | None":
        for child in self.children:
            if child.name == name:
                return child
        return None

    def queue_free(self) -> None:
        """
        Mark the node for deletion. The node stays in the tree until free_queued() runs on an ancestor.
        """

        self.queued_for_deletion = True

    def free_queued(self) -> int:
        """
        Detach every queued node from this subtree.

        Returns:
            count: the number of detached subtrees
        """

        count = 0
        for child in self.get_children():
            if child.queued_for_deletion:
                self.remove_child(child)
                count += 1
            else:
                count += child.free_queued()
        return count

    def set_owner_recursive(self, owner: "Node") -> None:
        self.owner = owner
        for child in self.children:
            child.set_owner_recursive(owner)

class MeshInstance(Node):
    """
    A node displaying a mesh.
    """

    type_name = "MeshInstance3D"

    def __init__(self, name: str = "MeshInstance", mesh: Mesh | None = None, transform: np.ndarray | None = None) -> None:
        super().__init__(name, transform)
        self.mesh = mesh
        self.cast_shadow = ShadowCasting.ON
        self.gi_mode = GIMode.STATIC
        self.layers = 1
        self.ignore_occlusion_culling = False

class StaticBody(Node):
    """
    A non-moving physics body.
    """

    type_name = "StaticBody3D"

    def __init__(self, name: str = "StaticBody", transform: np.ndarray | None = None) -> None:
        super().__init__(name, transform)
        self.collision_layer = 1
        self.collision_mask = 1

class CollisionShape(Node):
    """
    A node holding the collision shape of its parent body.
    """

    type_name = "CollisionShape3D"

    def __init__(self,
                 name: str = "CollisionShape",
                 shape: ConcavePolygonShape | ConvexPolygonShape | None = None,
                 transform: np.ndarray | None = None) -> None:
        super().__init__(name, transform)
        self.shape = shape

NODE_TYPES: dict[str, type[Node]] = {
    node_class.type_name: node_class for node_class in (Node, MeshInstance, StaticBody, CollisionShape)
}
