"""Observability helpers.

Request IDs + structlog contextvars for logs, and a per-app Prometheus
registry exposed at /metrics for the cluster scraper.
"""
