import logging
import pathlib
import traceback
import hydra
from natsort import natsorted
from dataclasses import dataclass, field
from omegaconf import DictConfig, OmegaConf

from scenes import SceneConfig, SceneState, load_scene_file, export_scene
from pipeline import ImportConfig, LevelImportProcessor
from utils.logging_context import FileLoggingContext

logger = logging.getLogger(__name__)

# ========================================================================================

@dataclass
class InputConfig:
    root_dir: str
    scene_patterns: list[str] = field(default_factory=lambda: ["*.json", "*.glb", "*.gltf", "*.obj"])
    scene_list: list[str] | None = None

@dataclass
class OutputConfig:
    output_dir: str
    log_file_name: str = "import.log"
    scene_tree_file_name: str = "scene_tree.json"
    glb_file_name: str = "scene.glb"

@dataclass
class ImportPlan:
    input_cfg: InputConfig
    output_cfg: OutputConfig

    def __post_init__(self):
        self.input_cfg = InputConfig(**self.input_cfg)
        self.output_cfg = OutputConfig(**self.output_cfg)

# ========================================================================================

def _fetch_scene_files(input_cfg: InputConfig) -> list[pathlib.Path]:
    """
    Fetch the scene files to import.

    Args:
        input_cfg: the input configuration

    Returns:
        scene_files: the scene files in natural order, without duplicates
    """

    root_dir = pathlib.Path(input_cfg.root_dir).expanduser().resolve()
    if not root_dir.is_dir():
        raise FileNotFoundError(f"Input directory '{root_dir}' is missing.")

    if input_cfg.scene_list:
        return [root_dir / scene_name for scene_name in input_cfg.scene_list]

    scene_files = set()
    for pattern in input_cfg.scene_patterns:
        scene_files.update(root_dir.glob(pattern))
    return natsorted(scene_files, key=lambda p: p.name)

def _import_scene(processor: LevelImportProcessor,
                  scene_file: pathlib.Path,
                  output_dir: pathlib.Path,
                  output_cfg: OutputConfig,
                  scene_cfg: SceneConfig) -> None:
    """
    Load, process and save a single scene.

    Args:
        processor: the level import processor
        scene_file: the scene file to import
        output_dir: the output directory for this scene
        output_cfg: the output configuration
        scene_cfg: the scene configuration
    """

    scene = load_scene_file(scene_file)
    processor.post_process(scene)

    if scene_cfg.save_scene_tree:
        scene_tree_file = output_dir / output_cfg.scene_tree_file_name
        SceneState.from_root(scene).save(scene_tree_file)
        logger.info(f"Saved scene tree to: {scene_tree_file}")

    if scene_cfg.save_glb:
        glb_file = output_dir / output_cfg.glb_file_name
        export_scene(scene, str(glb_file), convert_to_y_up=scene_cfg.export_y_up)
        logger.info(f"Exported scene to: {glb_file}")

# ========================================================================================

@hydra.main(version_base=None, config_path="configs", config_name="config")
def main(cfg: DictConfig) -> None:

    # Load the import plan and configurations
    import_plan = ImportPlan(**cfg.import_plan)
    import_cfg = ImportConfig(**OmegaConf.to_container(cfg.importer, resolve=True))
    scene_cfg = SceneConfig(**cfg.scene)

    processor = LevelImportProcessor(import_cfg)

    # Fetch all scene files that are to be imported
    scene_files = _fetch_scene_files(import_plan.input_cfg)
    print(f"\nImporting {len(scene_files)} scenes:")
    [print(f" - {scene_file}") for scene_file in scene_files]
    print()

    # ----------------------------------------------------------------------------------------

    failed_scenes = []
    for i, scene_file in enumerate(scene_files):

        print(f"--- ({i+1}/{len(scene_files)}) --- {scene_file}\n")

        output_dir = pathlib.Path(import_plan.output_cfg.output_dir) / scene_file.stem
        output_dir.mkdir(parents=True, exist_ok=True)

        # Set up per-scene logging (logs to both file and stdout)
        log_path = output_dir / import_plan.output_cfg.log_file_name
        with FileLoggingContext(log_file_path=log_path, suppress_stdout=False):
            try:
                _import_scene(processor, scene_file, output_dir, import_plan.output_cfg, scene_cfg)
            except Exception as e:
                if not scene_cfg.skip_failed_scenes:
                    raise
                logger.error(f"Error importing scene: {scene_file} - error: {e}\n{traceback.format_exc()}")
                failed_scenes.append(scene_file)

    print(f"\nAll done. {len(scene_files) - len(failed_scenes)}/{len(scene_files)} scenes imported.")
    if failed_scenes:
        print("Failed scenes:")
        [print(f" - {scene_file}") for scene_file in failed_scenes]

if __name__ == "__main__":
    main()
