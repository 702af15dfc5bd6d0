#!/usr/bin/env python3
"""
Weighting policies for temperature scoring.

A policy answers one question: which coefficient applies to a question
ordering key. The aggregation in temperature.py never looks at the table
directly, so policies can be swapped without touching it.
"""

from typing import Dict, Mapping, Optional, Protocol, runtime_checkable

from core.config_loader import ScorerConfig


@runtime_checkable
class WeightingPolicy(Protocol):
    def coefficient(self, question_order: int) -> Optional[float]:
        """Return the coefficient for an ordering key, or None to exclude it."""
        ...


class TableWeightingPolicy:
    """Coefficients looked up in a fixed {ordering key: coefficient} table."""

    def __init__(self, question_weights: Mapping[int, float]):
        # Non-positive coefficients behave exactly like missing ones
        self._weights: Dict[int, float] = {
            int(order): float(weight)
            for order, weight in question_weights.items()
            if weight is not None and float(weight) > 0
        }

    @classmethod
    def from_config(cls, config: ScorerConfig) -> "TableWeightingPolicy":
        return cls(config.question_weights)

    def coefficient(self, question_order: int) -> Optional[float]:
        return self._weights.get(question_order)

    def __repr__(self) -> str:
        return f"TableWeightingPolicy({self._weights!r})"
