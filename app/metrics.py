"""Prometheus metrics definitions for places-guide.

Exposes metrics for:
1. HTTP API metrics (requests, latency, errors)
2. Places data service client metrics (calls, latency, errors)
3. Page rendering metrics (renders, section failures, redirects)
"""
from prometheus_client import Counter, Histogram, Gauge

# =============================================================================
# HTTP API METRICS
# =============================================================================

# Request counter with method, endpoint, and status labels
HTTP_REQUESTS_TOTAL = Counter(
    "http_requests_total",
    "Total number of HTTP requests",
    ["method", "endpoint", "status_code"],
)

# Request latency histogram
HTTP_REQUEST_DURATION_SECONDS = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency in seconds",
    ["method", "endpoint"],
    buckets=(0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0),
)

# Active requests gauge
HTTP_REQUESTS_IN_PROGRESS = Gauge(
    "http_requests_in_progress",
    "Number of HTTP requests currently being processed",
    ["method", "endpoint"],
)

# Response size histogram
HTTP_RESPONSE_SIZE_BYTES = Histogram(
    "http_response_size_bytes",
    "HTTP response body size in bytes",
    ["method", "endpoint"],
    buckets=(100, 500, 1000, 5000, 10000, 50000, 100000, 500000),
)

# =============================================================================
# PLACES DATA SERVICE CLIENT METRICS
# =============================================================================

# API call counter
PLACES_API_CALLS_TOTAL = Counter(
    "places_api_calls_total",
    "Total number of places data service calls",
    ["operation", "status"],  # status: success, error
)

# API call latency
PLACES_API_CALL_DURATION_SECONDS = Histogram(
    "places_api_call_duration_seconds",
    "Places data service call latency in seconds",
    ["operation"],
    buckets=(0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0),
)

# API error counter by error type
PLACES_API_ERRORS_TOTAL = Counter(
    "places_api_errors_total",
    "Total number of places data service errors",
    ["operation", "error_type"],  # error_type: http_error, timeout, connection_error, invalid_response
)

# =============================================================================
# PAGE RENDERING METRICS
# =============================================================================

PAGE_RENDERS_TOTAL = Counter(
    "page_renders_total",
    "Total number of page renders",
    ["page", "status"],  # status: success, error, redirect
)

PAGE_SECTION_ERRORS_TOTAL = Counter(
    "page_section_errors_total",
    "Page sections replaced by an error banner",
    ["section"],  # section: highlights, places, detail, init
)
