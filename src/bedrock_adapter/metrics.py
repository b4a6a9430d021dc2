from __future__ import annotations

from prometheus_client import Counter, Histogram, start_http_server

requests_total = Counter(
    "bedrock_requests_total",
    "Total Bedrock converse calls made by the adapter",
    labelnames=["mode", "status"],
)

request_latency_seconds = Histogram(
    "bedrock_request_latency_seconds",
    "Bedrock converse latency, including client setup",
    buckets=[0.1, 0.3, 0.5, 1, 2, 5, 10, 30, 60],
    labelnames=["mode"],
)

structured_fallback_total = Counter(
    "bedrock_structured_fallback_total",
    "Structured completions answered from plain text instead of the forced tool",
)


def maybe_start_metrics(*, enable: bool, bind: str, port: int) -> None:
    if not enable:
        return
    start_http_server(port, addr=bind)
