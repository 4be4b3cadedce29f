"""Prometheus metrics for the customer API."""

from prometheus_client import Counter, Histogram

CUSTOMERS_CREATED = Counter(
    "customer_api_customers_created_total",
    "Total number of customers created",
    labelnames=["source"],
)

CUSTOMERS_DELETED = Counter(
    "customer_api_customers_deleted_total",
    "Total number of customers soft-deleted",
)

EMAIL_CONFLICTS = Counter(
    "customer_api_email_conflicts_total",
    "Total number of writes rejected because the email belongs to an active customer",
    labelnames=["operation"],
)

BULK_CREATE_ITEMS = Counter(
    "customer_api_bulk_create_items_total",
    "Bulk-create attempts by outcome",
    labelnames=["outcome"],
)

BULK_CREATE_LATENCY = Histogram(
    "customer_api_bulk_create_latency_seconds",
    "Latency of a whole bulk-create call in seconds",
    buckets=(0.01, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0, 30.0),
)

QUERY_LATENCY = Histogram(
    "customer_api_query_latency_seconds",
    "Latency of customer list queries in seconds",
    buckets=(0.001, 0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0),
)
