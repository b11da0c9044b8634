import argparse
import asyncio
import logging
from pathlib import Path
from typing import List, Optional

from pydantic import ValidationError

from config import LOG_LEVELS, Settings
from services.sources import SourceFetchError
from workers.build_pipeline import ConfigurationError, run_build

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Build the catalog snapshot and health report")
    parser.add_argument("--public-dir", type=Path, help="Directory holding data.json, thumbs/ and assets")
    parser.add_argument("--build-dir", type=Path, help="Directory for health.json")
    parser.add_argument("--skip-assets", action="store_true", help="Do not minify CSS/JS")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        help="Logging level (default from LOG_LEVEL)",
    )
    return parser.parse_args(argv)


def load_settings(args: argparse.Namespace) -> Settings:
    overrides = {}
    if args.public_dir:
        overrides["public_dir"] = args.public_dir
    if args.build_dir:
        overrides["build_dir"] = args.build_dir
    if args.skip_assets:
        overrides["optimize_assets"] = False
    if args.log_level:
        overrides["log_level"] = args.log_level
    return Settings(**overrides)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    try:
        settings = load_settings(args)
    except ValidationError as e:
        logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)
        logger.error(f"Invalid configuration: {e}")
        return 1

    logging.basicConfig(level=settings.logging_level, format=LOG_FORMAT)

    try:
        outcome = asyncio.run(run_build(settings))
    except (ConfigurationError, SourceFetchError) as e:
        logger.error(f"Build aborted: {e}")
        return 1

    if outcome.exit_code:
        logger.error("Build failed due to critical errors")
        return outcome.exit_code

    logger.info(
        f"Built catalog with {outcome.report.performance.total_products} products "
        f"-> {outcome.snapshot_path}"
    )
    return 0
