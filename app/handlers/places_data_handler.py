"""Query logic of the mock places data service.

Serves a seed document the way a json-server backend does: every query
parameter is a field equality filter (values compared as strings, booleans
as "true"/"false") and `_embed` inlines child collections linked by
`<singular parent>Id` (placeId for places).
"""
import json
import logging
from pathlib import Path
from typing import Any, Iterable, Optional, Union

from app.models import SeedDocument

logger = logging.getLogger(__name__)

EMBED_PARAM = "_embed"


class UnknownCollectionError(LookupError):
    """Requested collection does not exist in the seed document."""


def as_query_value(value: Any) -> str:
    """String form of a field value as it appears in a query string."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "null"
    return str(value)


def foreign_key(collection: str) -> str:
    """Back-reference field children carry for a parent collection (places -> placeId)."""
    singular = collection[:-1] if collection.endswith("s") else collection
    return f"{singular}Id"


class PlacesDataHandler:
    """Read-only queries over an in-memory seed document."""

    def __init__(self, seed: SeedDocument):
        self.seed = seed

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "PlacesDataHandler":
        with open(path, "r", encoding="utf-8") as f:
            seed = SeedDocument.model_validate(json.load(f))
        logger.info(
            f"[PlacesDataHandler] Loaded {path}: {len(seed.places)} places, "
            f"{len(seed.reviews)} reviews, {len(seed.images)} images"
        )
        return cls(seed)

    def _collection(self, name: str) -> list[dict]:
        records = self.seed.collection(name)
        if records is None:
            raise UnknownCollectionError(name)
        return records

    def list_records(
        self, collection: str, params: Iterable[tuple[str, str]] = ()
    ) -> list[dict]:
        """Records of `collection` matching every filter, with requested embeds."""
        records = self._collection(collection)

        filters: dict[str, list[str]] = {}
        embeds: list[str] = []
        for key, value in params:
            if key == EMBED_PARAM:
                embeds.append(value)
            elif not key.startswith("_"):
                filters.setdefault(key, []).append(value)

        matches = [record for record in records if self._matches(record, filters)]
        logger.debug(
            f"[PlacesDataHandler] {collection} filters={filters} embeds={embeds} "
            f"-> {len(matches)} records"
        )
        return [self._embed(collection, record, embeds) for record in matches]

    def get_record(
        self, collection: str, record_id: str, embeds: Iterable[str] = ()
    ) -> Optional[dict]:
        """Single record by id, or None."""
        for record in self._collection(collection):
            if as_query_value(record.get("id")) == record_id:
                return self._embed(collection, record, list(embeds))
        return None

    def _matches(self, record: dict, filters: dict[str, list[str]]) -> bool:
        for field, accepted in filters.items():
            if field not in record:
                return False
            if as_query_value(record[field]) not in accepted:
                return False
        return True

    def _embed(self, collection: str, record: dict, embeds: list[str]) -> dict:
        if not embeds:
            return dict(record)

        result = dict(record)
        key = foreign_key(collection)
        parent_id = as_query_value(record.get("id"))
        for child in embeds:
            children = self.seed.collection(child)
            if children is None:
                logger.warning(f"[PlacesDataHandler] Ignoring unknown embed {child!r}")
                continue
            result[child] = [
                dict(item) for item in children if as_query_value(item.get(key)) == parent_id
            ]
        return result
