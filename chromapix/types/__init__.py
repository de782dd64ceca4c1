from .color_types import (
    ColorModel,
    HueDirection,
    MODEL_SPECS,
    ModelSpec,
    as_model,
    element_to_array,
    get_spec,
    is_hue_space,
)
from .format_type import AlphaMode, ChannelType, ExtensionMode, GammaMode

__all__ = [
    "ColorModel",
    "HueDirection",
    "MODEL_SPECS",
    "ModelSpec",
    "as_model",
    "element_to_array",
    "get_spec",
    "is_hue_space",
    "AlphaMode",
    "ChannelType",
    "ExtensionMode",
    "GammaMode",
]
