"""Aggregate application use cases."""

from .signatures import capture_signature

__all__ = ["capture_signature"]
