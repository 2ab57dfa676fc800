"""Run configuration for the mipmap generator."""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from gamma_mipmap.averager import DEFAULT_GAMMA


@dataclass
class MipmapConfig:
    """Settings shared by every image in a batch.

    gamma is the encoding exponent applied to colour channels. output_dir is
    where levels are written; None writes them next to their source image.
    fail_fast stops the batch at the first image that fails.
    """

    gamma: float = DEFAULT_GAMMA
    output_dir: Optional[Path] = None
    fail_fast: bool = False

    def validate(self) -> None:
        """Raise ValueError if any setting is unusable."""
        if not self.gamma > 0:
            raise ValueError(f"gamma must be > 0, got {self.gamma}")
        if self.output_dir is not None and Path(self.output_dir).is_file():
            raise ValueError(f"output_dir is a file: {self.output_dir}")
