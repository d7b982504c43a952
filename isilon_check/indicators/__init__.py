"""Indicator evaluators: turn fetched counters into a CheckResult."""
from .base import CheckResult
from .capacity import CapacityEvaluator

__all__ = ["CapacityEvaluator", "CheckResult"]
