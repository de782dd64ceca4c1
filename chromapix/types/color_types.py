from __future__ import annotations
from enum import Enum
from typing import Dict, Literal, NamedTuple, Optional, Tuple, Union
import numpy as np
from numpy import ndarray


class ColorModel(str, Enum):
    RGB = "rgb"
    CMYK = "cmyk"
    HSV = "hsv"
    HSL = "hsl"
    HSI = "hsi"
    HWB = "hwb"
    GRAY = "gray"
    XYZ = "xyz"
    LAB = "lab"
    LCH = "lch"


Scalar = Union[int, float]
ScalarVector = Tuple[Scalar, ...]
ColorElement = Union[Scalar, ScalarVector]
ColorValue = Union[ColorElement, ndarray]  # Includes array support
ModelName = Union[ColorModel, Literal["rgb", "cmyk", "hsv", "hsl", "hsi", "hwb", "gray", "xyz", "lab", "lch"]]
HueDirection = Literal["cw", "ccw", "shortest", "longest"]

HUE_SPACES = {ColorModel.HSV, ColorModel.HSL, ColorModel.HSI, ColorModel.HWB, ColorModel.LCH}
RGB_FAMILY = {
    ColorModel.RGB,
    ColorModel.CMYK,
    ColorModel.HSV,
    ColorModel.HSL,
    ColorModel.HSI,
    ColorModel.HWB,
    ColorModel.GRAY,
}


class ModelSpec(NamedTuple):
    channels: Tuple[str, ...]
    ranges: Tuple[Tuple[float, float], ...]
    hue_index: Optional[int] = None

    @property
    def num_channels(self) -> int:
        return len(self.channels)


_UNIT = (0.0, 1.0)
_HUE = (0.0, 360.0)

MODEL_SPECS: Dict[ColorModel, ModelSpec] = {
    ColorModel.RGB: ModelSpec(("red", "green", "blue"), (_UNIT, _UNIT, _UNIT)),
    ColorModel.CMYK: ModelSpec(("cyan", "magenta", "yellow", "key"), (_UNIT, _UNIT, _UNIT, _UNIT)),
    ColorModel.HSV: ModelSpec(("hue", "saturation", "value"), (_HUE, _UNIT, _UNIT), 0),
    ColorModel.HSL: ModelSpec(("hue", "saturation", "lightness"), (_HUE, _UNIT, _UNIT), 0),
    ColorModel.HSI: ModelSpec(("hue", "saturation", "intensity"), (_HUE, _UNIT, _UNIT), 0),
    ColorModel.HWB: ModelSpec(("hue", "whiteness", "blackness"), (_HUE, _UNIT, _UNIT), 0),
    ColorModel.GRAY: ModelSpec(("gray",), (_UNIT,)),
    # Headroom above 1.0 for whites such as D65 (Z = 1.089) and A (X = 1.098)
    ColorModel.XYZ: ModelSpec(("x", "y", "z"), ((0.0, 1.25), (0.0, 1.25), (0.0, 1.25))),
    ColorModel.LAB: ModelSpec(("lightness", "a", "b"), ((0.0, 100.0), (-128.0, 128.0), (-128.0, 128.0))),
    ColorModel.LCH: ModelSpec(("lightness", "chroma", "hue"), ((0.0, 100.0), (0.0, 150.0), _HUE), 2),
}


def get_spec(model: ModelName) -> ModelSpec:
    return MODEL_SPECS[as_model(model)]


def as_model(model: ModelName) -> ColorModel:
    """
    Resolve a model name or enum member to a ColorModel.

    Raises:
        ValueError: if the name is not a known color model
    """
    if isinstance(model, ColorModel):
        return model
    try:
        return ColorModel(str(model).lower())
    except ValueError:
        raise ValueError(f"Unknown color model: {model!r}") from None


def element_to_array(element: Union[ColorElement, ndarray]) -> np.ndarray:
    """
    Convert a color element to a float64 numpy array.

    Args:
        element: Scalar, tuple, or already an ndarray

    Returns:
        numpy array representation
    """
    if isinstance(element, ndarray):
        return element.astype(np.float64, copy=False)
    if isinstance(element, (int, float)):
        return np.array([element], dtype=np.float64)
    return np.array(element, dtype=np.float64)


def is_hue_space(model: ModelName) -> bool:
    """
    Check if the given color model carries a hue channel.

    Args:
        model: Color model or its name
    Returns:
        True if hue-based, False otherwise
    """
    return as_model(model) in HUE_SPACES
