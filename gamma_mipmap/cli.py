"""Command-line driver: generate mipmap chains for one or more images."""

import argparse
import logging
import sys
from pathlib import Path

from gamma_mipmap.averager import DEFAULT_GAMMA
from gamma_mipmap.config import MipmapConfig
from gamma_mipmap.errors import MipmapError
from gamma_mipmap.generator import generate_chain
from gamma_mipmap.image_io import FileLevelSink, load_base_image

logger = logging.getLogger(__name__)


def setup_logging(level=logging.INFO):
    """Configure logging for the command-line tool."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
    )


def process_image(source_path, config):
    """Generate every level for one image. Returns True on success."""
    logger.info(f"make_mipmaps: {source_path}")
    try:
        base_image = load_base_image(source_path)
        sink = FileLevelSink(source_path, config.output_dir)
        levels = generate_chain(base_image, sink, config.gamma)
    except MipmapError as e:
        logger.error(f"{source_path}: {e}")
        return False

    logger.info(f"Generated {levels} mip levels for {source_path}")
    return True


def run_batch(paths, config):
    """Process each image in turn and return the paths that failed."""
    failed = []
    stems = {}
    for path in paths:
        if config.output_dir is not None:
            stem = Path(path).stem
            if stem in stems:
                logger.warning(
                    f"{path} and {stems[stem]} share the name '{stem}'; "
                    f"levels in {config.output_dir} will be overwritten"
                )
            stems[stem] = path
        if process_image(path, config):
            continue
        failed.append(path)
        if config.fail_fast:
            logger.warning("Stopping after first failure (--fail-fast)")
            break
    return failed


def build_parser():
    parser = argparse.ArgumentParser(
        description="Generate gamma-correct RGBA mipmaps for levels [1, n] from base images"
    )
    parser.add_argument("images", nargs="+", help="Base (level 0) image paths")
    parser.add_argument(
        "--gamma",
        type=float,
        default=DEFAULT_GAMMA,
        help=f"Gamma used to linearize colour channels (default: {DEFAULT_GAMMA})",
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=None,
        help=(
            "Directory for generated levels (default: next to each source image). "
            "Sources sharing a file name overwrite each other's levels there"
        ),
    )
    parser.add_argument(
        "--fail-fast",
        action="store_true",
        help="Stop the whole batch at the first image that fails",
    )
    parser.add_argument(
        "--legacy-exit-code",
        action="store_true",
        help="Exit with status 0 even when an image fails",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging (DEBUG level)")
    return parser


def main(argv=None):
    """Entry point. Returns the process exit code."""
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(logging.DEBUG if args.verbose else logging.INFO)

    config = MipmapConfig(gamma=args.gamma, output_dir=args.output_dir, fail_fast=args.fail_fast)
    try:
        config.validate()
    except ValueError as e:
        parser.error(str(e))

    failed = run_batch(args.images, config)
    if not failed:
        return 0

    logger.warning(f"{len(failed)} of {len(args.images)} images failed:")
    for path in failed:
        logger.warning(f"  - {path}")
    return 0 if args.legacy_exit_code else 1


if __name__ == "__main__":
    sys.exit(main())
