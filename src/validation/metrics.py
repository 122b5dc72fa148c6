"""
Prometheus Metrics — validation chain observability.

Exposes counters and histograms for:
- Validation outcomes per handler and kind
- Exceptions caught inside handlers
- Requests no handler accepted (chain misconfiguration)
- Validation latency per kind

Usage
-----
    from src.validation.metrics import record_outcome, timed_validation

    with timed_validation("PAGEABLE"):
        result = chain.validate(request)
    record_outcome(result.handler_name, "PAGEABLE", result.valid)
"""
from __future__ import annotations

from contextlib import contextmanager
from typing import Generator, Optional

from prometheus_client import Counter, Histogram


# ---------------------------------------------------------------------------
# Metric definitions
# ---------------------------------------------------------------------------

# Validation results, labelled by handler, kind and outcome (valid/invalid).
VALIDATION_OUTCOMES: Counter = Counter(
    "validation_outcomes_total",
    "Validation results by handler, kind and outcome",
    ["handler_name", "kind", "outcome"],
)

# Exceptions converted into failures by the handler base class.
HANDLER_EXCEPTIONS: Counter = Counter(
    "validation_handler_exceptions_total",
    "Unexpected exceptions caught inside validation handlers",
    ["handler_name"],
)

# Requests that reached the end of the chain (or an empty chain).
UNHANDLED_REQUESTS: Counter = Counter(
    "validation_unhandled_requests_total",
    "Validation requests no handler accepted",
    ["kind"],
)

# Validation latency per kind (seconds). Validation is pure computation so the
# buckets are small.
VALIDATION_LATENCY: Histogram = Histogram(
    "validation_processing_seconds",
    "Time spent validating a request, by kind",
    ["kind"],
    buckets=(0.00005, 0.0001, 0.00025, 0.0005, 0.001, 0.005, 0.01),
)


# ---------------------------------------------------------------------------
# Convenience helpers
# ---------------------------------------------------------------------------

def record_outcome(handler_name: Optional[str], kind: str, valid: bool) -> None:
    """Increment the outcome counter for one validation result."""
    VALIDATION_OUTCOMES.labels(
        handler_name=handler_name or "unknown",
        kind=kind,
        outcome="valid" if valid else "invalid",
    ).inc()


def record_handler_exception(handler_name: str) -> None:
    """Increment the exception counter for *handler_name*."""
    HANDLER_EXCEPTIONS.labels(handler_name=handler_name).inc()


def record_unhandled(kind: str) -> None:
    """Increment the unhandled-request counter for *kind*."""
    UNHANDLED_REQUESTS.labels(kind=kind).inc()


@contextmanager
def timed_validation(kind: str) -> Generator[None, None, None]:
    """
    Context manager that records validation latency.

    Usage::

        with timed_validation("NUMBER_RANGE"):
            result = chain.validate(request)
    """
    with VALIDATION_LATENCY.labels(kind=kind).time():
        yield
