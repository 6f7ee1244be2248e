"""Prometheus metrics for the sign-up flow (exposed at /metrics)."""

from prometheus_client import Counter

SIGNUP_REQUESTS = Counter(
    "signup_requests",
    "Sign-up requests by outcome",
    ["outcome"],
)


def record_outcome(outcome: str) -> None:
    """outcome: created | invalid | conflict | error"""
    SIGNUP_REQUESTS.labels(outcome=outcome).inc()
