from typing import Optional, TypeVar

from .types.color_types import ColorModel
from .types.format_type import AlphaMode, ChannelType, ExtensionMode, GammaMode
from .whitepoint import D65

T = TypeVar('T')

DEFAULT_WHITE = D65
DEFAULT_MODEL = ColorModel.RGB
DEFAULT_CHANNEL = ChannelType.UINT8
DEFAULT_ALPHA_MODE = AlphaMode.NONE
DEFAULT_GAMMA = GammaMode.LINEAR
DEFAULT_EXTENSION = ExtensionMode.CLAMP
DEFAULT_ALPHA = 1.0


def value_or_default(value: Optional[T], default: T) -> T:
    """Return the value if it is not None, otherwise return the default."""
    return value if value is not None else default
