DEFAULT_LEVEL_NAME_INDICATOR = "Level"

def is_level(scene_name: str, indicator: str = DEFAULT_LEVEL_NAME_INDICATOR) -> bool:
    """Return True if the imported scene should be processed as a level."""
    return indicator in scene_name
