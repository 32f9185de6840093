"""Metrics module for Travel Insights service."""

from prometheus_client import (
    Counter,
    Histogram,
)

# Counter to track REST API calls
# This will be used to count how many times each API endpoint is called
# and the status code of the response
rest_api_calls_total = Counter(
    "ti_rest_api_calls_total", "REST API calls counter", ["path", "status_code"]
)

# Histogram to measure response durations
# This will be used to track how long it takes to handle requests
response_duration_seconds = Histogram(
    "ti_response_duration_seconds", "Response durations", ["path"]
)

# Metric that counts how many LLM calls were made for each model
llm_calls_total = Counter("ti_llm_calls_total", "LLM calls counter", ["model"])

# Metric that counts how many LLM calls failed for each model
llm_calls_failures_total = Counter(
    "ti_llm_calls_failures_total", "LLM calls failures", ["model"]
)

# Metric that counts how many times the secondary model had to be used
llm_fallbacks_total = Counter("ti_llm_fallbacks_total", "LLM fallbacks counter")

# Metrics that count insights cache lookups
insights_cache_hits_total = Counter(
    "ti_insights_cache_hits_total", "Insights cache hits"
)
insights_cache_misses_total = Counter(
    "ti_insights_cache_misses_total", "Insights cache misses"
)
