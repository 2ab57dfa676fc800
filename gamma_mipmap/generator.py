"""Mipmap chain generation with a gamma-correct 2x2 box filter."""

import logging

import numpy as np
from PIL import Image

from gamma_mipmap.averager import DEFAULT_GAMMA, average_colors

logger = logging.getLogger(__name__)


def next_level_size(width, height):
    """Return the size of the level below a width x height level."""
    return max(1, width // 2), max(1, height // 2)


def level_sizes(width, height):
    """Yield the size of every level generated from a width x height base."""
    while True:
        width, height = next_level_size(width, height)
        yield width, height
        if width == 1 and height == 1:
            return


def downsample(image, gamma=DEFAULT_GAMMA):
    """Create the half-resolution level of an RGBA image.

    Output pixel (x, y) averages source columns i0, i1 and rows j0, j1.
    Odd source dimensions reuse the last column or row instead of sampling
    past the edge.
    """
    src = np.asarray(image, dtype=np.int64)
    src_height, src_width = src.shape[:2]
    width, height = next_level_size(src_width, src_height)

    x = np.arange(width)
    y = np.arange(height)[:, np.newaxis]
    i0 = np.minimum(src_width - 1, 2 * x)
    i1 = np.minimum(src_width - 1, 2 * x + 1)
    j0 = np.minimum(src_height - 1, 2 * y)
    j1 = np.minimum(src_height - 1, 2 * y + 1)

    level = average_colors(src[j0, i0], src[j1, i0], src[j0, i1], src[j1, i1], gamma)
    return Image.fromarray(np.ascontiguousarray(level))


def generate_chain(base_image, level_sink, gamma=DEFAULT_GAMMA):
    """Generate levels 1..n from base_image down to 1x1.

    Each level is passed to level_sink(level, image) as soon as it is built.
    Errors from the sink propagate and end the chain; levels already handed
    over are left alone. Returns the number of levels written.
    """
    current = base_image
    if current.mode != "RGBA":
        current = current.convert("RGBA")

    level = 0
    while True:
        level += 1
        next_image = downsample(current, gamma)
        level_sink(level, next_image)
        logger.info(f"Generated level {level}: {next_image.width}x{next_image.height}")

        # Stop once both dimensions have reached 1
        if next_image.size == (1, 1):
            return level
        current = next_image
