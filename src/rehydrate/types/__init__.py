"""Shared type aliases for Rehydrate."""

from .common import JsonObject, JsonScalar, JsonValue, OutcomeStatus

__all__ = ["JsonObject", "JsonScalar", "JsonValue", "OutcomeStatus"]
