import logging
from typing import NamedTuple
from assets import BaseCatalog
from scenes.node import Node

logger = logging.getLogger(__name__)

class Classification(NamedTuple):
    static_nodes: list[Node]
    replaceable_nodes: list[Node]

def classify(children: list[Node], packed_scene_catalog: BaseCatalog) -> Classification:
    """
    Split the top-level nodes of a level into nodes kept in place and nodes replaced by packaged scenes.
    Descendants follow the branch of their top-level ancestor, so only the given nodes are classified.

    Args:
        children: the direct children of the level root
        packed_scene_catalog: the catalog of packaged scenes

    Returns:
        classification: both partitions, each in input order
    """

    static_nodes, replaceable_nodes = [], []
    for child in children:
        entry = packed_scene_catalog.best_match(child.name)
        if entry is None:
            static_nodes.append(child)
        else:
            logger.debug(f"'{child.name}' will be replaced by packaged scene '{entry.asset_id}'.")
            replaceable_nodes.append(child)

    return Classification(static_nodes, replaceable_nodes)
