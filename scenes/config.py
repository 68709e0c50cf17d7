from dataclasses import dataclass

@dataclass
class SceneConfig:
    """
    Configuration for loading and saving scenes.

    Attributes:
        skip_failed_scenes: whether to report scenes that fail to load or process and continue with the next one
        save_scene_tree: whether to write the processed scene tree as JSON
        save_glb: whether to export the rendered part of the processed scene as GLB
        export_y_up: whether to convert from Z-up to Y-up when exporting GLB files
    """

    skip_failed_scenes: bool = True
    save_scene_tree: bool = True
    save_glb: bool = False
    export_y_up: bool = False
