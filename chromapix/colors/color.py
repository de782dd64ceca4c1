from __future__ import annotations
from typing import Dict, Iterator, Optional, Tuple, Union
import math

import numpy as np
from boundednumbers import clamp01

from ..channel import decode_gamma, encode_gamma
from ..conversions import np_convert
from ..conversions.hue import wrap_hue
from ..conversions.xyz import SRGB, RgbSpace
from ..defaults import DEFAULT_ALPHA, DEFAULT_WHITE, value_or_default
from ..types.color_types import ColorModel, ModelName, ModelSpec, MODEL_SPECS, as_model
from ..types.format_type import HUE_360
from ..whitepoint import WhitePoint


class Color:
    """
    An immutable color: model-unit channel values plus straight alpha.

    Values are in the model's natural units (hue in degrees, LAB lightness in
    0-100, everything else usually 0-1). Hue channels are wrapped into
    ``[0, 360)``; other channels are stored as given so that out-of-gamut
    intermediate results survive a round trip. Alpha is clamped to ``[0, 1]``.

    >>> red = Color("rgb", (1.0, 0.0, 0.0))
    >>> red.convert("hsv").values
    (0.0, 1.0, 1.0)
    """

    __slots__ = ('_model', '_values', '_alpha', '_white', '_frozen')

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(
        self,
        model: ModelName,
        values: Union[Tuple[float, ...], list, np.ndarray, "Color"],
        alpha: Optional[float] = None,
        white: Optional[WhitePoint] = None,
    ) -> None:
        model = as_model(model)
        spec = MODEL_SPECS[model]

        # ---- Handle Color input ----
        if isinstance(values, Color):
            converted = values.convert(model, white)
            values = converted.values
            alpha = value_or_default(alpha, converted.alpha)
            white = converted.white

        vals = tuple(float(v) for v in np.asarray(values, dtype=np.float64).ravel())
        if len(vals) != spec.num_channels:
            raise ValueError(f"{model.value} expects {spec.num_channels} channels, got {len(vals)}")
        if not all(math.isfinite(v) for v in vals):
            raise ValueError(f"{model.value} channel values must be finite, got {vals!r}")

        if spec.hue_index is not None:
            hue = float(wrap_hue(vals[spec.hue_index]))
            vals = vals[:spec.hue_index] + (hue,) + vals[spec.hue_index + 1:]

        self._model = model
        self._values = vals
        self._alpha = float(clamp01(float(value_or_default(alpha, DEFAULT_ALPHA))))
        self._white = value_or_default(white, DEFAULT_WHITE)

        # freeze instance, no more writes allowed
        super().__setattr__('_frozen', True)

    # ------------------ FACTORIES ------------------
    @classmethod
    def from_hex(cls, text: str, white: Optional[WhitePoint] = None) -> "Color":
        """
        Parse ``#rrggbb`` / ``#rrggbbaa`` (or the 3/4 digit short forms).

        Hex digits are taken as sRGB gamma-encoded and decoded to linear RGB.
        """
        digits = text.strip().lstrip('#')
        if len(digits) in (3, 4):
            digits = ''.join(d * 2 for d in digits)
        if len(digits) not in (6, 8):
            raise ValueError(f"Invalid hex color: {text!r}")
        try:
            raw = [int(digits[i:i + 2], 16) / 255.0 for i in range(0, len(digits), 2)]
        except ValueError:
            raise ValueError(f"Invalid hex color: {text!r}") from None
        rgb = decode_gamma(np.array(raw[:3]))
        alpha = raw[3] if len(raw) == 4 else None
        return cls(ColorModel.RGB, rgb, alpha, white)

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def model(self) -> ColorModel:
        return self._model

    @property
    def values(self) -> Tuple[float, ...]:
        return self._values

    @property
    def alpha(self) -> float:
        return self._alpha

    @property
    def white(self) -> WhitePoint:
        return self._white

    @property
    def spec(self) -> ModelSpec:
        return MODEL_SPECS[self._model]

    @property
    def channels(self) -> Dict[str, float]:
        """Channel values keyed by channel name."""
        return dict(zip(self.spec.channels, self._values))

    @property
    def has_hue(self) -> bool:
        """Check if this color's model includes a hue channel."""
        return self.spec.hue_index is not None

    # ------------------ CONVERSION ------------------
    def convert(
        self,
        model: Optional[ModelName] = None,
        white: Optional[WhitePoint] = None,
        rgb_space: RgbSpace = SRGB,
    ) -> "Color":
        """
        Convert this color to another model and/or white point.

        Args:
            model: Target color model. Defaults to the current model.
            white: Target white point. Defaults to the current white point;
                   a different white applies chromatic adaptation.
            rgb_space: RGB primaries used by RGB-family models

        Returns:
            New Color instance; alpha is carried over unchanged
        """
        target = as_model(value_or_default(model, self._model))
        target_white = value_or_default(white, self._white)
        if target == self._model and target_white == self._white:
            return self
        values = np_convert(
            np.array(self._values),
            self._model,
            target,
            src_white=self._white,
            dst_white=target_white,
            rgb_space=rgb_space,
        )
        return Color(target, values, self._alpha, target_white)

    def with_alpha(self, alpha: float) -> "Color":
        """Return a copy with a different (clamped) alpha."""
        return Color(self._model, self._values, alpha, self._white)

    def to_hex(self, include_alpha: bool = False) -> str:
        """Format as ``#rrggbb`` (sRGB gamma-encoded), clamping out-of-gamut values."""
        rgb = np.asarray(self.convert(ColorModel.RGB).values)
        encoded = np.rint(encode_gamma(rgb) * 255).astype(int)
        text = '#' + ''.join(f'{v:02x}' for v in encoded)
        if include_alpha:
            text += f'{int(round(self._alpha * 255)):02x}'
        return text

    def to_array(self) -> np.ndarray:
        return np.array(self._values, dtype=np.float64)

    def isclose(self, other: "Color", atol: float = 1e-6) -> bool:
        """Compare with ``other`` after converting it to this color's model."""
        other = other.convert(self._model, self._white)
        diff = np.abs(self.to_array() - other.to_array())
        hue_index = self.spec.hue_index
        if hue_index is not None:
            diff[hue_index] = min(diff[hue_index], HUE_360 - diff[hue_index])
        return bool(np.all(diff <= atol)) and abs(self._alpha - other.alpha) <= atol

    # ------------------ PROTOCOLS ------------------
    def __iter__(self) -> Iterator[float]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __getitem__(self, key: Union[int, str]) -> float:
        if isinstance(key, str):
            try:
                return self._values[self.spec.channels.index(key)]
            except ValueError:
                raise KeyError(f"{self._model.value} has no channel {key!r}") from None
        return self._values[key]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return (
            self._model == other._model
            and self._values == other._values
            and self._alpha == other._alpha
            and self._white == other._white
        )

    def __hash__(self) -> int:
        return hash((self._model, self._values, self._alpha, self._white))

    def __repr__(self) -> str:
        return f"Color({self._model.value!r}, {self._values!r}, alpha={self._alpha!r}, white={self._white.name!r})"
