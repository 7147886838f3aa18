"""Build the data service seed file from the nested places data.

Usage:
    python -m app.seed [--source resources/places.json] [--output db/db.json]
"""
import argparse
import json
import logging
import sys

from app.config import Settings
from app.seed.denormalize import denormalize, load_nested_places, write_seed_file

logger = logging.getLogger(__name__)


def main(argv=None) -> int:
    settings = Settings()

    parser = argparse.ArgumentParser(description="Flatten nested places into db.json")
    parser.add_argument(
        "--source",
        default=str(settings.get_resource_path(settings.seed_source_file)),
        help="JSON array of places with nested reviews and images",
    )
    parser.add_argument(
        "--output",
        default=str(settings.get_resource_path(settings.seed_output_file)),
        help="Seed document served by the mock data service",
    )
    args = parser.parse_args(argv)

    try:
        data = load_nested_places(args.source)
        seed = denormalize(data)
        write_seed_file(seed, args.output)
    except (OSError, json.JSONDecodeError, ValueError) as e:
        logger.error(f"[Seed] Failed to build seed file: {e}")
        return 1

    return 0


if __name__ == "__main__":
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    sys.exit(main())
