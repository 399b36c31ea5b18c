"""Telemetry and observability helpers.

This package emits deterministic stage events for normalization runs.
"""

from .logger import RunLogger

__all__ = ["RunLogger"]
