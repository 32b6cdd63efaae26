"""Lightweight observability helpers.

Structured access logs via structlog contextvars, plus an in-memory metrics
snapshot served from a separate port.
"""
