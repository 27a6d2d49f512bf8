"""Observability helpers.

This package emits stage-level parse events for deterministic diagnostics.
"""

from .logger import ParseLogger

__all__ = ["ParseLogger"]
