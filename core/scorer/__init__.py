#!/usr/bin/env python3
"""
Scoring Module - temperature scoring of questionnaire answers.

Public API:
- TemperatureScorer: pure scorer, parameterised by a weighting policy
- WeightingPolicy / TableWeightingPolicy: ordering key -> coefficient
- ScoringAnswer / TemperatureResult: input and output structures

Modules:

- models.py: Data structures (ScoringAnswer, TemperatureResult)
- policy.py: Weighting policies
- temperature.py: Per-participant weighting and combination
"""

from core.scorer.models import ScoringAnswer, TemperatureResult
from core.scorer.policy import WeightingPolicy, TableWeightingPolicy
from core.scorer.temperature import TemperatureScorer, combine_temperatures

__all__ = [
    'TemperatureScorer',
    'combine_temperatures',
    'WeightingPolicy',
    'TableWeightingPolicy',
    'ScoringAnswer',
    'TemperatureResult',
]
