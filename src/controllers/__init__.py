"""Controllers layer - one controller per operating mode"""

from .lightstage_controller import LightstageController
from .color_picker_controller import ColorPickerController
from .scene_player_controller import ScenePlayerController

__all__ = [
    "LightstageController",
    "ColorPickerController",
    "ScenePlayerController",
]
