"""Core data models for Rehydrate."""

from .entities import HydrationResult, MarkerOutcome

__all__ = ["HydrationResult", "MarkerOutcome"]
