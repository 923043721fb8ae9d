"""Domain layer with business entities and invariants."""

from . import calendar, factories, models

__all__ = ["calendar", "factories", "models"]
