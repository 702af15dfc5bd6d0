#!/usr/bin/env python3
"""
Matching Module - lifecycle, answers and records of a matching.

Public API:
- CodeGenerator: matching codes, participant codes, record ids
- MatchingLifecycle: create / join / status
- AnswerStore: full-replace answer submission
- RecordOrchestrator: score a matching once and complete it
"""

from core.matching.codes import CodeGenerator
from core.matching.lifecycle import MatchingLifecycle, MatchingStatusView, transition
from core.matching.answers import AnswerStore
from core.matching.records import RecordOrchestrator, build_scoring_input, build_summary

__all__ = [
    'CodeGenerator',
    'MatchingLifecycle',
    'MatchingStatusView',
    'transition',
    'AnswerStore',
    'RecordOrchestrator',
    'build_scoring_input',
    'build_summary',
]
