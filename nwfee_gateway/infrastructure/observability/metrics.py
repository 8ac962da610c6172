"""Prometheus metrics for monitoring fee assessments and matched fee definitions"""

from decimal import Decimal
from prometheus_client import Counter, Histogram

# Assessment metrics
assessment_counter = Counter(
    "nwfee_assessment_total",
    "Total network fee assessments",
    ["outcome"],  # charged | no_fee
)

definition_match_counter = Counter(
    "nwfee_definition_match_total",
    "Fee definitions matched during assessments",
    ["fee_key"],
)

assessed_amount_histogram = Histogram(
    "nwfee_assessed_amount",
    "Network fee total per assessment",
    buckets=[0.01, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0],
)

# Ruleset loading
ruleset_load_failures_counter = Counter(
    "nwfee_ruleset_load_failures_total",
    "Failed ruleset loads",
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_assessment(matched_fee_keys: list[str], fee_total: Decimal) -> None:
    """Record assessment metrics for monitoring fee distribution per definition"""
    outcome = "charged" if fee_total > 0 else "no_fee"
    assessment_counter.labels(outcome=outcome).inc()

    for fee_key in matched_fee_keys:
        definition_match_counter.labels(fee_key=fee_key).inc()

    # Histogram only takes floats; this value is never reused for calculation
    assessed_amount_histogram.observe(float(fee_total))
