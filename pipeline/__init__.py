from .base import BasePass, PassContext
from .config import ImportConfig, DEFAULT_STATIC_PASSES
from .classifier import classify, Classification
from .level import is_level
from .replacement import replace_with_packed_scene
from .processor import LevelImportProcessor

# Import all pass implementations to ensure they are registered
from . import collision, render_removal, lightmap, shadow, render_layer, material

from .registry import PassRegistry, register_pass

__all__ = [
    "BasePass",
    "PassContext",
    "ImportConfig",
    "DEFAULT_STATIC_PASSES",
    "classify",
    "Classification",
    "is_level",
    "replace_with_packed_scene",
    "LevelImportProcessor",
    "PassRegistry",
    "register_pass",
]
