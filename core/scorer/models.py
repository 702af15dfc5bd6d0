#!/usr/bin/env python3
"""
Scoring Models - Data structures for temperature scoring.
"""

from typing import Dict, Any, Optional
from dataclasses import dataclass, field


@dataclass(frozen=True)
class ScoringAnswer:
    """
    One answered question, reduced to what the scorer needs.

    choice_weight and question_order, when set, are the values captured with
    this answer and take precedence over the scorer's id lookups.
    """
    participant_id: Any
    question_id: Any
    choice_id: Any
    choice_weight: Optional[float] = None
    question_order: Optional[int] = None


@dataclass
class TemperatureResult:
    """Combined temperature of a matching."""
    average_temperature: float = 0.0
    temperature_diff: float = 0.0
    participant_temperatures: Dict[Any, float] = field(default_factory=dict)

    @property
    def participant_count(self) -> int:
        return len(self.participant_temperatures)
