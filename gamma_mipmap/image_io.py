"""Reading base images and writing mipmap levels with Pillow."""

import logging
import os

from PIL import Image, UnidentifiedImageError

from gamma_mipmap.errors import DecodeError, PersistenceError

logger = logging.getLogger(__name__)

LEVEL_FORMAT = "PNG"
LEVEL_EXTENSION = ".png"


def load_base_image(path):
    """Load an image from disk as an RGBA level 0."""
    try:
        with Image.open(path) as source_img:
            source_img.load()
            if source_img.mode == "RGBA":
                return source_img.copy()
            return source_img.convert("RGBA")
    except FileNotFoundError as exc:
        raise DecodeError(f"Source file '{path}' not found", path=path) from exc
    except UnidentifiedImageError as exc:
        raise DecodeError(f"Source file '{path}' is not a readable image", path=path) from exc
    except (OSError, ValueError, Image.DecompressionBombError) as exc:
        raise DecodeError(f"Failed to decode '{path}': {exc}", path=path) from exc


class FileLevelSink:
    """Write each level as <stem>_<level>.png beside the source image.

    Levels go into output_dir instead when one is given. Levels are always
    PNG whatever the source format, so all four 8-bit channels survive.
    """

    def __init__(self, source_path, output_dir=None):
        source_dir = os.path.dirname(os.fspath(source_path))
        self.base_name = os.path.splitext(os.path.basename(os.fspath(source_path)))[0]
        self.output_dir = os.fspath(output_dir) if output_dir is not None else source_dir
        self.extension = LEVEL_EXTENSION
        self.format = LEVEL_FORMAT

    def level_path(self, level):
        if level < 1:
            raise ValueError(f"level must be >= 1, got {level}")
        return os.path.join(self.output_dir, f"{self.base_name}_{level}{self.extension}")

    def __call__(self, level, image):
        path = self.level_path(level)
        try:
            if self.output_dir:
                os.makedirs(self.output_dir, exist_ok=True)
            image.save(path, format=self.format)
        except (OSError, ValueError) as exc:
            raise PersistenceError(f"Failed to write level {level} to '{path}': {exc}", path=path) from exc
        logger.debug(f"Wrote {path}")
        return path
