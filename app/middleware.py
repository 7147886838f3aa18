"""FastAPI middleware for Prometheus metrics instrumentation."""
import time
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from app.metrics import (
    HTTP_REQUESTS_TOTAL,
    HTTP_REQUEST_DURATION_SECONDS,
    HTTP_REQUESTS_IN_PROGRESS,
    HTTP_RESPONSE_SIZE_BYTES,
)


class PrometheusMiddleware(BaseHTTPMiddleware):
    """Middleware to collect HTTP request metrics for Prometheus."""

    # Endpoints to exclude from metrics (like /metrics itself)
    EXCLUDE_PATHS = {"/metrics", "/health"}

    async def dispatch(self, request: Request, call_next) -> Response:
        """Process request and collect metrics."""
        path = request.url.path
        method = request.method

        if path in self.EXCLUDE_PATHS:
            return await call_next(request)

        endpoint = self._normalize_endpoint(path)

        HTTP_REQUESTS_IN_PROGRESS.labels(method=method, endpoint=endpoint).inc()

        start_time = time.perf_counter()

        try:
            response = await call_next(request)
            status_code = response.status_code
        except Exception:
            status_code = 500
            raise
        finally:
            duration = time.perf_counter() - start_time
            HTTP_REQUEST_DURATION_SECONDS.labels(
                method=method, endpoint=endpoint
            ).observe(duration)

            HTTP_REQUESTS_IN_PROGRESS.labels(method=method, endpoint=endpoint).dec()

            HTTP_REQUESTS_TOTAL.labels(
                method=method, endpoint=endpoint, status_code=str(status_code)
            ).inc()

        response_size = response.headers.get("content-length")
        if response_size:
            try:
                HTTP_RESPONSE_SIZE_BYTES.labels(
                    method=method, endpoint=endpoint
                ).observe(int(response_size))
            except ValueError:
                pass

        return response

    def _normalize_endpoint(self, path: str) -> str:
        """Normalize URL path to avoid high cardinality from path parameters.

        Converts paths like /places/12 to /places/{id} and collapses
        static assets to /assets/{file}.
        """
        segments = path.strip("/").split("/")

        if segments and segments[0] == "assets":
            return "/assets/{file}"

        normalized = []
        for segment in segments:
            if self._is_id_segment(segment):
                normalized.append("{id}")
            else:
                normalized.append(segment)

        return "/" + "/".join(normalized) if normalized else "/"

    def _is_id_segment(self, segment: str) -> bool:
        """Check if a path segment looks like an ID."""
        if len(segment) >= 20 and segment.replace("-", "").isalnum():
            return True
        if segment.isdigit():
            return True
        return False
