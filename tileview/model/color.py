"""Float RGBA color as logged by the compositor (channels nominally 0..1)."""

import math
from dataclasses import dataclass
from typing import Tuple


def _channel_to_u8(value: float) -> int:
    # Saturating float -> byte conversion; NaN maps to 0.
    if math.isnan(value):
        return 0
    return int(max(0.0, min(255.0, value * 255.0)))


@dataclass(frozen=True)
class ColorF:
    """RGBA color with float channels.

    Attributes:
        r: Red channel.
        g: Green channel.
        b: Blue channel.
        a: Alpha channel.
    """

    r: float
    g: float
    b: float
    a: float = 1.0

    def to_rgb8(self) -> Tuple[int, int, int]:
        """Return the color as 8-bit RGB, truncating and clamping each channel."""
        return _channel_to_u8(self.r), _channel_to_u8(self.g), _channel_to_u8(self.b)
