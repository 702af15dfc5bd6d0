#!/usr/bin/env python3
"""
Temperature Scorer - turns weighted answers into one matching temperature.

Per participant:
    temperature = sum(choice_weight * coefficient) / sum(coefficient)

where the coefficient comes from the WeightingPolicy for the question's
ordering key. Answers whose key has no coefficient are left out of both sums.

Across participants:
    2 temperatures -> mean and absolute difference
    1 temperature  -> that value, difference 0.0
    0 temperatures -> 0.0 / 0.0 (logged, never raised)
"""

from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple
import logging

import numpy as np

from core.scorer.models import ScoringAnswer, TemperatureResult
from core.scorer.policy import WeightingPolicy

logger = logging.getLogger(__name__)


def _group_by_participant(answers: Iterable[ScoringAnswer]) -> Dict[Any, List[ScoringAnswer]]:
    # dicts keep first-seen order, which keeps the arithmetic order stable
    grouped: Dict[Any, List[ScoringAnswer]] = {}
    for answer in answers:
        grouped.setdefault(answer.participant_id, []).append(answer)
    return grouped


def combine_temperatures(temperatures: List[float]) -> Tuple[float, float]:
    """Combine per-participant temperatures into (average, difference)."""
    if len(temperatures) == 2:
        first, second = temperatures
        return (first + second) / 2.0, abs(first - second)
    if len(temperatures) == 1:
        return temperatures[0], 0.0
    if not temperatures:
        return 0.0, 0.0

    # Only reachable when more than two participants are allowed
    values = np.asarray(temperatures, dtype=np.float64)
    return float(values.mean()), float(values.max() - values.min())


class TemperatureScorer:
    """
    Pure temperature computation.

    Holds only the weighting policy; every call is independent of the
    previous ones and has no persistence side effects.
    """

    def __init__(self, policy: WeightingPolicy):
        self.policy = policy

    def participant_temperature(
        self,
        answers: Iterable[ScoringAnswer],
        choice_weights: Optional[Mapping[Any, float]] = None,
        question_orders: Optional[Mapping[Any, int]] = None,
    ) -> float:
        """Weighted temperature of one participant's answers."""
        choice_weights = choice_weights or {}
        question_orders = question_orders or {}
        weights: List[float] = []
        coefficients: List[float] = []

        for answer in answers:
            choice_weight = answer.choice_weight
            if choice_weight is None:
                choice_weight = choice_weights.get(answer.choice_id)
            question_order = answer.question_order
            if question_order is None:
                question_order = question_orders.get(answer.question_id)
            if choice_weight is None or question_order is None:
                continue

            coefficient = self.policy.coefficient(question_order)
            if coefficient is None or coefficient <= 0:
                continue

            weights.append(float(choice_weight))
            coefficients.append(float(coefficient))

        if not coefficients:
            return 0.0

        w = np.asarray(weights, dtype=np.float64)
        c = np.asarray(coefficients, dtype=np.float64)
        coefficient_sum = float(c.sum())
        if coefficient_sum <= 0:
            return 0.0
        return float(np.dot(w, c) / coefficient_sum)

    def score(
        self,
        answers: Iterable[ScoringAnswer],
        choice_weights: Optional[Mapping[Any, float]] = None,
        question_orders: Optional[Mapping[Any, int]] = None,
    ) -> TemperatureResult:
        """
        Score all answers of a matching.

        Args:
            answers: Answers of every participant of the matching.
            choice_weights: choice id -> temperature weight, for answers that
                carry no weight of their own.
            question_orders: question id -> ordering key, for answers that
                carry no ordering key of their own.

        Returns:
            TemperatureResult with average, difference and per-participant values.
        """
        answers = list(answers)
        grouped = _group_by_participant(answers)

        participant_temperatures = {
            participant_id: self.participant_temperature(group, choice_weights, question_orders)
            for participant_id, group in grouped.items()
        }

        temperatures = list(participant_temperatures.values())
        average, diff = combine_temperatures(temperatures)

        if not temperatures:
            logger.warning(f"No participant temperature could be computed (answers: {len(answers)})")

        return TemperatureResult(
            average_temperature=average,
            temperature_diff=diff,
            participant_temperatures=participant_temperatures,
        )
