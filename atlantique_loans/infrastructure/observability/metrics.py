"""Prometheus metrics for calculation volume, rejected input and cache efficiency"""

from prometheus_client import Counter, Histogram

# Calculation metrics
calculation_counter = Counter(
    "atlantique_calculation_total",
    "Total calculations served",
    ["operation"],  # payment | schedule | summary | affordability | report | quote | format | convert | transfer
)

calculation_error_counter = Counter(
    "atlantique_calculation_errors_total",
    "Calculations rejected because of caller input",
    ["operation", "error"],  # InvalidInputError | UnsupportedCurrencyError
)

schedule_length_histogram = Histogram(
    "atlantique_schedule_length_months",
    "Number of months in generated amortization schedules",
    buckets=[6, 12, 24, 36, 60, 120, 240, 360, 480],
)

# Cache metrics
schedule_cache_counter = Counter(
    "atlantique_schedule_cache_total",
    "Schedule cache lookups",
    ["result"],  # hit | miss
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_calculation(operation: str, schedule_months: int | None = None) -> None:
    """Record a successful calculation; schedules also feed the length histogram"""
    calculation_counter.labels(operation=operation).inc()
    if schedule_months is not None:
        schedule_length_histogram.observe(schedule_months)


def record_rejection(operation: str, error: Exception) -> None:
    calculation_error_counter.labels(operation=operation, error=type(error).__name__).inc()


def record_cache_lookup(hit: bool) -> None:
    schedule_cache_counter.labels(result="hit" if hit else "miss").inc()
