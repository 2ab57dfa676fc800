"""Gamma-correct averaging of 8-bit RGBA samples.

Colour channels are stored gamma-encoded, so averaging the raw bytes darkens
bright detail. Each colour sample is moved to linear light, averaged, and
encoded again. Alpha is coverage, not light, and is averaged as-is.
"""

from typing import NamedTuple

import numpy as np

DEFAULT_GAMMA = 2.2


class Rgba(NamedTuple):
    """One 8-bit RGBA pixel."""

    r: int
    g: int
    b: int
    a: int


def average_color(c0, c1, c2, c3, gamma=DEFAULT_GAMMA) -> Rgba:
    """Average four RGBA pixels, gamma-correct for colour and linear for alpha."""
    r0, g0, b0, a0 = c0
    r1, g1, b1, a1 = c1
    r2, g2, b2, a2 = c2
    r3, g3, b3, a3 = c3
    return Rgba(
        average_channel_gamma(r0, r1, r2, r3, gamma),
        average_channel_gamma(g0, g1, g2, g3, gamma),
        average_channel_gamma(b0, b1, b2, b3, gamma),
        # alpha is linear and does not need gamma correction
        average_channel_linear(a0, a1, a2, a3),
    )


def average_channel_gamma(i, j, k, l, gamma=DEFAULT_GAMMA) -> int:
    """Average four gamma-encoded 8-bit components in linear light.

    The result is truncated toward zero, not rounded, so averaging four equal
    interior values can come back one below the input.
    """
    linear = [(c / 255.0) ** gamma for c in (i, j, k, l)]
    mean = sum(linear) / 4
    encoded = mean ** (1.0 / gamma)
    return max(0, int(min(255, 255 * encoded)))


def average_channel_linear(i, j, k, l) -> int:
    """Integer average of four linear 8-bit components."""
    mean = (i + j + k + l) // 4
    return max(0, min(255, mean))


def average_colors(c0, c1, c2, c3, gamma=DEFAULT_GAMMA):
    """Array form of average_color over (..., 4) integer RGBA arrays.

    Produces the same bytes as calling average_color on every pixel.
    """
    samples = [np.asarray(c, dtype=np.int64) for c in (c0, c1, c2, c3)]

    l0, l1, l2, l3 = [np.power(s[..., :3] / 255.0, gamma) for s in samples]
    mean = (l0 + l1 + l2 + l3) / 4
    encoded = np.power(mean, 1.0 / gamma)
    rgb = np.clip(255 * encoded, 0, 255).astype(np.uint8)

    # alpha is linear and does not need gamma correction
    a0, a1, a2, a3 = [s[..., 3] for s in samples]
    alpha = np.clip((a0 + a1 + a2 + a3) // 4, 0, 255).astype(np.uint8)

    return np.concatenate([rgb, alpha[..., np.newaxis]], axis=-1)
