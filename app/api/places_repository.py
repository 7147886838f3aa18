"""Read-only async client for the places data service."""
import logging
import time
from typing import Any, Optional, Union

import httpx
from pydantic import ValidationError

from app.models import Place, PlaceDetail
from app.metrics import (
    PLACES_API_CALLS_TOTAL,
    PLACES_API_CALL_DURATION_SECONDS,
    PLACES_API_ERRORS_TOTAL,
)

logger = logging.getLogger(__name__)

QueryParams = Union[dict[str, str], list[tuple[str, str]]]


class PlacesRepositoryError(Exception):
    """A places data service query failed.

    Attributes:
        operation: Repository method that failed (e.g. "get_place_by_slug")
        key: Query key of the failing call (slug, name filter), if any
        status_code: HTTP status for non-2xx answers, None for transport errors
    """

    def __init__(
        self,
        operation: str,
        key: Optional[str] = None,
        status_code: Optional[int] = None,
        message: str = "",
    ):
        self.operation = operation
        self.key = key
        self.status_code = status_code
        detail = f"HTTP {status_code}" if status_code is not None else message
        target = f"{operation}({key!r})" if key is not None else f"{operation}()"
        super().__init__(f"{target} failed: {detail}")


class PlacesRepository:
    """Async HTTP client for the places data service.

    Every query is a single GET attempt: no retries and no backoff.
    Failures are logged with the operation and key and raised as
    PlacesRepositoryError with the original exception chained.
    """

    def __init__(self, base_url: str, timeout: Optional[float] = None):
        """Initialize the repository.

        Args:
            base_url: Base URL of the data service (e.g. "http://localhost:3000")
            timeout: Request timeout in seconds, None to wait indefinitely
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

        self.client = httpx.AsyncClient(timeout=timeout)

    async def close(self):
        """Close the HTTP client and clean up resources."""
        await self.client.aclose()

    async def _get(
        self,
        operation: str,
        path: str,
        params: Optional[QueryParams] = None,
        key: Optional[str] = None,
    ) -> list[dict[str, Any]]:
        """GET a collection from the data service.

        Returns:
            Parsed JSON array

        Raises:
            PlacesRepositoryError: On non-2xx status, transport failure or
                a body that is not a JSON array
        """
        url = f"{self.base_url}{path}"

        logger.debug(f"[PlacesRepository] GET {url} params={params}")

        start_time = time.perf_counter()

        try:
            response = await self.client.request(method="GET", url=url, params=params)

            logger.debug(f"[PlacesRepository] Response status: {response.status_code}")

            response.raise_for_status()

            data = response.json()
            if not isinstance(data, list):
                raise ValueError(f"expected a JSON array, got {type(data).__name__}")

        except httpx.HTTPStatusError as e:
            status_code = e.response.status_code
            self._record_error(operation, start_time, "http_error")
            logger.error(
                f"[PlacesRepository] HTTP {status_code} on {operation} key={key!r}: {e}"
            )
            raise PlacesRepositoryError(operation, key, status_code=status_code) from e
        except httpx.TimeoutException as e:
            self._record_error(operation, start_time, "timeout")
            logger.error(f"[PlacesRepository] Timeout on {operation} key={key!r}: {e}")
            raise PlacesRepositoryError(operation, key, message=f"timeout: {e}") from e
        except httpx.RequestError as e:
            self._record_error(operation, start_time, "connection_error")
            logger.error(
                f"[PlacesRepository] Request error on {operation} key={key!r}: {e}"
            )
            raise PlacesRepositoryError(operation, key, message=str(e)) from e
        except ValueError as e:
            self._record_error(operation, start_time, "invalid_response")
            logger.error(
                f"[PlacesRepository] Invalid response on {operation} key={key!r}: {e}"
            )
            raise PlacesRepositoryError(operation, key, message=str(e)) from e

        duration = time.perf_counter() - start_time
        PLACES_API_CALL_DURATION_SECONDS.labels(operation=operation).observe(duration)
        PLACES_API_CALLS_TOTAL.labels(operation=operation, status="success").inc()

        return data

    def _record_error(self, operation: str, start_time: float, error_type: str):
        duration = time.perf_counter() - start_time
        PLACES_API_CALL_DURATION_SECONDS.labels(operation=operation).observe(duration)
        PLACES_API_CALLS_TOTAL.labels(operation=operation, status="error").inc()
        PLACES_API_ERRORS_TOTAL.labels(operation=operation, error_type=error_type).inc()

    def _parse(self, operation: str, key: Optional[str], model, records: list[dict]):
        try:
            return [model.model_validate(record) for record in records]
        except ValidationError as e:
            PLACES_API_ERRORS_TOTAL.labels(
                operation=operation, error_type="invalid_response"
            ).inc()
            logger.error(
                f"[PlacesRepository] Malformed record on {operation} key={key!r}: {e}"
            )
            raise PlacesRepositoryError(operation, key, message=str(e)) from e

    async def get_all_places(self) -> list[Place]:
        """Retrieve every place, unfiltered."""
        records = await self._get("get_all_places", "/places")
        places = self._parse("get_all_places", None, Place, records)
        logger.info(f"[PlacesRepository] get_all_places returned {len(places)} places")
        return places

    async def get_place_by_slug(self, slug: str) -> Optional[PlaceDetail]:
        """Retrieve one place by slug with its reviews and images embedded.

        Returns:
            The first matching place, or None if no place has this slug
        """
        params = [("slug", slug), ("_embed", "reviews"), ("_embed", "images")]
        records = await self._get("get_place_by_slug", "/places", params=params, key=slug)

        if not records:
            logger.info(f"[PlacesRepository] No place found for slug={slug!r}")
            return None

        return self._parse("get_place_by_slug", slug, PlaceDetail, records[:1])[0]

    async def get_places_by_name(self, name: str) -> list[Place]:
        """Retrieve places whose name matches the filter.

        Matching semantics are those of the data service.
        """
        records = await self._get(
            "get_places_by_name", "/places", params={"name": name}, key=name
        )
        return self._parse("get_places_by_name", name, Place, records)

    async def get_highlighted_places(self) -> list[Place]:
        """Retrieve places flagged for the home page highlight carousel."""
        records = await self._get(
            "get_highlighted_places", "/places", params={"highlight": "true"}
        )
        places = self._parse("get_highlighted_places", None, Place, records)
        logger.info(
            f"[PlacesRepository] get_highlighted_places returned {len(places)} places"
        )
        return places
