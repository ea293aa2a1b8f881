# Centralized Prometheus metrics. The middleware below records timing
# and counts for every request; the record_* helpers are called by the
# affiliate core so dashboards can follow orders and payouts.

from time import monotonic

from fastapi import Request
from prometheus_client import Counter, Histogram
from starlette.middleware.base import BaseHTTPMiddleware

# Generic API latency + request counters. We label by method and
# route so we can see hot paths and slow ones at a glance.
REQUEST_LATENCY = Histogram(
    "api_request_latency_seconds",
    "Latency of API requests in seconds",
    ["method", "endpoint"],
)
REQUEST_COUNT = Counter(
    "api_request_count_total",
    "Total API requests",
    ["method", "endpoint", "http_status"],
)

REQUEST_DURATION_MS = Histogram(
    "request_duration_ms",
    "API request duration in milliseconds",
    ["method", "route"],
    buckets=[5, 10, 25, 50, 100, 250, 500, 1000, 2000, 5000, 10000],
)

ORDERS_CONFIRMED_TOTAL = Counter(
    "affiliate_orders_confirmed_total",
    "Referred orders confirmed",
    ["order_type"],
)
ORDERS_REJECTED_TOTAL = Counter(
    "affiliate_orders_rejected_total",
    "Referred orders that did not produce a commission",
    ["reason"],
)
COMMISSION_EARNED_TOTAL = Counter(
    "affiliate_commission_earned_total",
    "Commission amount credited to affiliates",
    ["order_type"],
)
REFERRAL_VALIDATIONS_TOTAL = Counter(
    "affiliate_referral_validations_total",
    "Referral code lookups grouped by outcome",
    ["outcome"],   # outcome: valid|invalid
)
WITHDRAWAL_TRANSITIONS_TOTAL = Counter(
    "affiliate_withdrawal_transitions_total",
    "Withdrawal requests moved into a status",
    ["status"],
)


def _label(value: object | None, default: str = "unknown") -> str:
    if value is None:
        return default
    if isinstance(value, str) and not value.strip():
        return default
    return str(getattr(value, "value", value))


def record_order_confirmed(*, order_type: object, commission: float) -> None:
    label = _label(order_type)
    ORDERS_CONFIRMED_TOTAL.labels(order_type=label).inc()
    if commission > 0:
        COMMISSION_EARNED_TOTAL.labels(order_type=label).inc(commission)


def record_order_rejected(reason: str) -> None:
    ORDERS_REJECTED_TOTAL.labels(reason=_label(reason)).inc()


def record_referral_validation(valid: bool) -> None:
    REFERRAL_VALIDATIONS_TOTAL.labels(outcome=("valid" if valid else "invalid")).inc()


def record_withdrawal_transition(status: object) -> None:
    WITHDRAWAL_TRANSITIONS_TOTAL.labels(status=_label(status)).inc()


class MetricsMiddleware(BaseHTTPMiddleware):
    # Wraps every request to capture latency and count. It stays out
    # of the request's main logic.
    async def dispatch(self, request: Request, call_next):
        start = monotonic()
        response = await call_next(request)
        duration = monotonic() - start

        route = request.scope.get("route")
        route_path = getattr(route, "path", None) or request.url.path
        REQUEST_LATENCY.labels(request.method, route_path).observe(duration)
        REQUEST_COUNT.labels(request.method, route_path, response.status_code).inc()
        REQUEST_DURATION_MS.labels(request.method, route_path).observe(duration * 1000.0)
        return response
