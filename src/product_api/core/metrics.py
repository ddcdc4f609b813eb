from prometheus_client import Counter, Gauge

REQUEST_COUNT = Counter(
    "http_requests_total",
    "Total number of HTTP requests",
    ["method", "path", "status_code"],
)

API_ERROR_COUNT = Counter(
    "api_errors_total",
    "Total number of error responses, by error name",
    ["name"],
)

PRODUCTS_IN_STORE = Gauge("products_in_store", "Number of products currently held in memory")
