"""Prometheus metrics for monitoring form confirms and checkout outcomes"""

from prometheus_client import Counter, Histogram

# Receivable metrics
receivable_submission_counter = Counter(
    "tradesec_receivable_submissions_total",
    "Confirmed receivable submissions",
    ["due_diligence"],  # attached | none
)

receivable_rejected_field_counter = Counter(
    "tradesec_receivable_rejected_fields_total",
    "Invalid core fields on rejected receivable confirms",
    ["field"],
)

# Payment metrics
payment_submission_counter = Counter(
    "tradesec_payment_submissions_total",
    "Confirmed security purchases",
    ["method"],
)

payment_rejection_counter = Counter(
    "tradesec_payment_rejections_total",
    "Purchase confirms blocked by validation",
    ["method"],
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_receivable_submission(has_due_diligence: bool) -> None:
    receivable_submission_counter.labels(due_diligence="attached" if has_due_diligence else "none").inc()


def record_receivable_rejection(fields: list[str]) -> None:
    """Count each invalid field once per rejected confirm"""
    for field in set(fields):
        receivable_rejected_field_counter.labels(field=field).inc()


def record_payment_submission(method: str) -> None:
    payment_submission_counter.labels(method=method).inc()


def record_payment_rejection(method: str) -> None:
    payment_rejection_counter.labels(method=method).inc()
