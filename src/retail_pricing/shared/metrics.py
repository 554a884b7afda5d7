"""Prometheus metrics for order pricing and validation."""
from prometheus_client import REGISTRY, Counter, Histogram


def _matches(collector, name: str) -> bool:
    # Counters store their name without the "_total" suffix
    collector_name = getattr(collector, "_name", None)
    return collector_name in (name, name.removesuffix("_total"))


def _get_or_create_metric(metric_class, name: str, doc: str, labelnames=None, **kwargs):
    """Get existing metric or create new one to avoid duplication errors in tests."""
    for collector in list(REGISTRY._collector_to_names.keys()):
        if _matches(collector, name):
            return collector
    try:
        if labelnames is not None:
            kwargs["labelnames"] = labelnames
        return metric_class(name, doc, registry=REGISTRY, **kwargs)
    except ValueError as e:
        if "Duplicated timeseries" in str(e):
            for collector in list(REGISTRY._collector_to_names.keys()):
                if _matches(collector, name):
                    return collector
        raise


# Pricing metrics
orders_priced_total = _get_or_create_metric(
    Counter,
    "orders_priced_total",
    "Total number of orders priced successfully",
)

order_pricing_failures_total = _get_or_create_metric(
    Counter,
    "order_pricing_failures_total",
    "Total number of orders rejected with ORDER_INVALID",
    ["reason"],
)

order_pricing_duration_seconds = _get_or_create_metric(
    Histogram,
    "order_pricing_duration_seconds",
    "Time taken to price a single order",
    buckets=[0.0005, 0.001, 0.005, 0.01, 0.05, 0.1, 0.5],
)

# Validation metrics
order_validations_total = _get_or_create_metric(
    Counter,
    "order_validations_total",
    "Total number of order validations by outcome",
    ["result"],
)

order_validation_errors_total = _get_or_create_metric(
    Counter,
    "order_validation_errors_total",
    "Total number of validation errors reported across all orders",
)


def record_order_priced(duration_seconds: float) -> None:
    """Record a successfully priced order."""
    orders_priced_total.inc()
    order_pricing_duration_seconds.observe(duration_seconds)


def record_pricing_failure(reason: str) -> None:
    """Record an order rejected before pricing completed."""
    order_pricing_failures_total.labels(reason=reason).inc()


def record_validation(error_count: int) -> None:
    """Record one validation run and the number of errors it reported."""
    result = "valid" if error_count == 0 else "invalid"
    order_validations_total.labels(result=result).inc()
    if error_count:
        order_validation_errors_total.inc(error_count)
