import logging
from attributes import AttributeParser
from assets import AssetLoader, Retriever
from scenes.node import Node
from utils.lightmap_unwrap import LightmapUnwrapper, XatlasUnwrapper
from .base import PassContext
from .classifier import classify
from .config import ImportConfig
from .level import is_level
from .registry import PassRegistry
from .replacement import replace_with_packed_scene

logger = logging.getLogger(__name__)

# ----------------------------------------------------------------------------------------

class LevelImportProcessor:
    """
    Prepares an imported scene as a playable level.

    Top-level nodes whose name contains the short name of a packaged scene are replaced by an
    instance of that scene. All other nodes are kept and transformed in place by the static passes:
    collision bodies, render removal, lightmap UVs, shadow casting, render layers and materials,
    each steered by the attributes embedded in the node names.
    """

    def __init__(self,
                 cfg: ImportConfig | None = None,
                 unwrapper: LightmapUnwrapper | None = None,
                 loader: AssetLoader | None = None) -> None:
        """
        Initialize the processor.

        Args:
            cfg: the import configuration, the defaults if None
            unwrapper: the lightmap UV unwrapper, xatlas if None
            loader: the loader for catalog files
        """

        self.cfg = cfg if cfg is not None else ImportConfig()
        self.parser = AttributeParser(self.cfg.grammar)
        self.unwrapper = unwrapper if unwrapper is not None else XatlasUnwrapper()
        self.loader = loader if loader is not None else AssetLoader()
        self.static_passes = PassRegistry.build_pipeline(self.cfg.static_passes)

        for shorter, longer in self.cfg.grammar.overlapping_keywords():
            logger.debug(f"Attribute keyword '{shorter}' is contained in '{longer}'.")

    def post_process(self, scene: Node) -> Node:
        """
        Process the scene as a level if its name marks it as one, leave it untouched otherwise.

        Args:
            scene: the root of the imported scene

        Returns:
            The same scene
        """

        if not is_level(scene.name, self.cfg.level_name_indicator):
            logger.debug(f"Scene '{scene.name}' is not a level, skipping.")
            return scene

        self.convert_to_game_scene(scene)
        logger.info(f"Import processed {scene.name} as a level.")
        return scene

    def convert_to_game_scene(self, scene: Node) -> Node:
        """
        Run the full conversion on a scene, regardless of its name.

        Args:
            scene: the root of the imported scene

        Returns:
            The same scene, mutated in place
        """

        # Catalogs are listed once per run
        retriever = Retriever(self.cfg.catalogs, self.loader)
        context = PassContext(
            scene=scene,
            cfg=self.cfg,
            parser=self.parser,
            retriever=retriever,
            unwrapper=self.unwrapper,
        )

        static_nodes, replaceable_nodes = classify(scene.get_children(), retriever.packed_scenes)
        logger.debug(f"Scene '{scene.name}': {len(static_nodes)} static and {len(replaceable_nodes)} replaceable nodes.")

        for node in static_nodes:
            for static_pass in self.static_passes:
                static_pass.apply(node, context)

        for node in replaceable_nodes:
            replace_with_packed_scene(scene, node, retriever)

        scene.free_queued()
        return scene
