"""Gamma-correct mipmap chain generation for RGBA images."""

from gamma_mipmap.averager import (
    DEFAULT_GAMMA,
    Rgba,
    average_channel_gamma,
    average_channel_linear,
    average_color,
    average_colors,
)
from gamma_mipmap.config import MipmapConfig
from gamma_mipmap.errors import DecodeError, MipmapError, PersistenceError
from gamma_mipmap.generator import downsample, generate_chain, level_sizes, next_level_size
from gamma_mipmap.image_io import FileLevelSink, load_base_image

__all__ = [
    "__version__",
    "DEFAULT_GAMMA",
    "Rgba",
    "average_channel_gamma",
    "average_channel_linear",
    "average_color",
    "average_colors",
    "MipmapConfig",
    "MipmapError",
    "DecodeError",
    "PersistenceError",
    "downsample",
    "generate_chain",
    "level_sizes",
    "next_level_size",
    "FileLevelSink",
    "load_base_image",
]

__version__ = "1.0.0"
