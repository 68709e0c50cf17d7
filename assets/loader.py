import logging
from pathlib import Path
from scenes.mesh import Material
from scenes.node import Node
from scenes.trimesh_scene import load_scene_file

logger = logging.getLogger(__name__)

class AssetLoader:
    """
    Loads catalog files into scene resources.
    """

    def load_material(self, file_path: Path, short_name: str) -> Material:
        """
        Load a material resource.

        Args:
            file_path: the path to the material file
            short_name: the catalog short name, used as the material's resource name

        Returns:
            material: the loaded material
        """

        if not file_path.is_file():
            raise FileNotFoundError(f"Material file '{file_path}' is missing.")
        return Material(name=short_name, resource_path=file_path)

    def load_packed_scene(self, file_path: Path) -> Node:
        """
        Load a packaged scene.

        Args:
            file_path: the path to the scene file (JSON scene tree or any format trimesh loads)

        Returns:
            root: the root node of the packaged scene
        """

        root = load_scene_file(file_path)
        logger.debug(f"Loaded packaged scene '{file_path.name}' with {len(root.children)} top-level nodes.")
        return root
