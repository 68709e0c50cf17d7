from abc import ABC, abstractmethod
from dataclasses import dataclass
from attributes import AttributeParser
from assets import Retriever
from scenes.node import Node
from utils.lightmap_unwrap import LightmapUnwrapper
from .config import ImportConfig

@dataclass
class PassContext:
    """
    Everything a pass needs besides the subtree it works on.

    Attributes:
        scene: the root of the level being processed, owner of every node the passes create
        cfg: the import configuration
        parser: the attribute parser built from the configured grammar
        retriever: the replacement catalogs of the current run
        unwrapper: the lightmap UV unwrapper
    """

    scene: Node
    cfg: ImportConfig
    parser: AttributeParser
    retriever: Retriever
    unwrapper: LightmapUnwrapper

class BasePass(ABC):
    """
    Base class for a pass applied to the subtree of a static node.
    """

    # The name the pass is configured under
    name: str = ""

    # Passes that must run before this one
    requires: tuple[str, ...] = ()

    @abstractmethod
    def apply(self, node: Node, context: PassContext) -> Node:
        """
        Apply the pass to a static node and all of its descendants.

        Args:
            node: the root of the static subtree, a direct child of the level root
            context: the pass context

        Returns:
            The same node, mutated in place
        """

        raise NotImplementedError
