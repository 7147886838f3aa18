"""Flattens the nested places array into the seed document of the data service."""
import json
import logging
from pathlib import Path
from typing import Any, Union

from app.models import SeedDocument

logger = logging.getLogger(__name__)

NESTED_COLLECTIONS = ("reviews", "images")


def denormalize(data: list[dict[str, Any]]) -> SeedDocument:
    """Split each place into the place itself and its reviews and images.

    Children keep their fields and get a `placeId` back-reference to their
    place; order is preserved within every collection.

    Raises:
        ValueError: If a place has no id to reference
    """
    seed = SeedDocument()

    for item in data:
        place = {key: value for key, value in item.items() if key not in NESTED_COLLECTIONS}
        if place.get("id") is None:
            raise ValueError(f"Place without id: {place.get('slug') or place.get('name')!r}")

        seed.places.append(place)

        for review in item.get("reviews") or []:
            seed.reviews.append({**review, "placeId": place["id"]})

        for image in item.get("images") or []:
            seed.images.append({**image, "placeId": place["id"]})

    logger.info(
        f"[Seed] Denormalized {len(seed.places)} places, "
        f"{len(seed.reviews)} reviews, {len(seed.images)} images"
    )
    return seed


def load_nested_places(path: Union[str, Path]) -> list[dict[str, Any]]:
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, list):
        raise ValueError(f"{path} must contain a JSON array of places")
    return data


def write_seed_file(seed: SeedDocument, path: Union[str, Path]) -> Path:
    """Write the seed document as 2-space indented UTF-8 JSON."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(seed.model_dump(), f, indent=2, ensure_ascii=False)
    logger.info(f"[Seed] Wrote {path}")
    return path
