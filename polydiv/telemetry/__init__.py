"""Telemetry and observability helpers.

This package emits structured phase events for division runs.
"""

from .logger import RunLogger

__all__ = ["RunLogger"]
