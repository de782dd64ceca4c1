from enum import Enum
import numpy as np
from boundednumbers import BoundType


class ChannelType(str, Enum):
    UINT8 = "uint8"
    UINT16 = "uint16"
    FLOAT32 = "float32"


class AlphaMode(str, Enum):
    NONE = "none"
    STRAIGHT = "straight"
    PREMULTIPLIED = "premultiplied"


class GammaMode(str, Enum):
    LINEAR = "linear"
    SRGB = "srgb"


class ExtensionMode(str, Enum):
    CLAMP = "clamp"
    REPEAT = "repeat"
    MIRROR = "mirror"


channel_maxima = {
    ChannelType.UINT8: 255,
    ChannelType.UINT16: 65535,
    ChannelType.FLOAT32: 1.0,
}

# Little-endian on every platform so packed bytes are portable
channel_dtypes = {
    ChannelType.UINT8: np.dtype("u1"),
    ChannelType.UINT16: np.dtype("<u2"),
    ChannelType.FLOAT32: np.dtype("<f4"),
}

channel_widths = {
    ChannelType.UINT8: 1,
    ChannelType.UINT16: 2,
    ChannelType.FLOAT32: 4,
}

channel_quanta = {
    ChannelType.UINT8: 1.0 / 255,
    ChannelType.UINT16: 1.0 / 65535,
    ChannelType.FLOAT32: float(np.finfo(np.float32).eps),
}

extension_bound_types = {
    ExtensionMode.CLAMP: BoundType.CLAMP,
    ExtensionMode.REPEAT: BoundType.CYCLIC,
    ExtensionMode.MIRROR: BoundType.BOUNCE,
}

HUE_360 = 360.0
