"""Chaos-testing HTTP target that answers every request with success or a random error."""

__version__ = "0.1.0"
