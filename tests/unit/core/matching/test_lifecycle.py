#!/usr/bin/env python3
"""
Unit tests for the matching lifecycle: creation, joining and status changes.
"""

import unittest
from unittest.mock import patch

import pytest

from core.config_loader import MatchingConfig, CodeConfig
from core.errors import (
    NotFoundError,
    CapacityExceededError,
    InvalidStateError,
    CodeGenerationExhaustedError,
    BusinessRuleError,
)
from core.matching import MatchingLifecycle, CodeGenerator, transition
from database.models import MatchingStatus
from database.repository import Repository
from tests import create_test_engine, create_test_session, teardown_test_database


class FixedCodeGenerator(CodeGenerator):
    """Hands out a fixed sequence of matching codes."""

    def __init__(self, codes):
        super().__init__()
        self._codes = iter(codes)

    def generate_matching_code(self) -> str:
        return next(self._codes)


class TestCodeGenerator(unittest.TestCase):

    def test_matching_code_format(self):
        generator = CodeGenerator(CodeConfig(length=8, alphabet="AB"))
        code = generator.generate_matching_code()
        self.assertEqual(len(code), 8)
        self.assertTrue(set(code) <= {"A", "B"})

    def test_default_alphabet_has_no_lookalikes(self):
        code = CodeGenerator().generate_matching_code()
        self.assertEqual(len(code), 6)
        self.assertFalse(set(code) & set("0O1I"))

    def test_participant_codes_and_record_ids_are_unique(self):
        generator = CodeGenerator()
        codes = {generator.generate_participant_code() for _ in range(100)}
        self.assertEqual(len(codes), 100)
        self.assertNotEqual(generator.generate_record_id(), generator.generate_record_id())


@pytest.mark.db
class TestMatchingLifecycle(unittest.TestCase):

    def setUp(self):
        self.engine = create_test_engine()
        self.session = create_test_session(self.engine)
        self.repo = Repository(self.session)
        self.lifecycle = MatchingLifecycle(self.repo)

    def tearDown(self):
        self.session.close()
        teardown_test_database(self.engine)

    def test_create_matching_starts_waiting(self):
        matching = self.lifecycle.create_matching()

        self.assertIsNotNone(matching.id)
        self.assertEqual(matching.status, MatchingStatus.WAITING.value)
        self.assertEqual(len(matching.code), 6)
        self.assertIsNone(matching.completed_at)

    def test_join_assigns_slots_and_establishes(self):
        matching = self.lifecycle.create_matching()

        first = self.lifecycle.join_matching(matching.code)
        self.assertEqual(first.slot, 1)
        self.assertEqual(self.lifecycle.get_status(matching.code).status, "waiting")

        second = self.lifecycle.join_matching(matching.code)
        self.assertEqual(second.slot, 2)
        self.assertNotEqual(first.participant_code, second.participant_code)

        status = self.lifecycle.get_status(matching.code)
        self.assertEqual(status.status, "established")
        self.assertEqual(status.participant_count, 2)
        self.assertEqual(status.max_participants, 2)

    def test_third_join_is_rejected(self):
        matching = self.lifecycle.create_matching()
        self.lifecycle.join_matching(matching.code)
        self.lifecycle.join_matching(matching.code)

        with self.assertRaises(CapacityExceededError):
            self.lifecycle.join_matching(matching.code)

        self.assertEqual(self.repo.matchings.count_participants(matching.id), 2)

    def test_capacity_error_is_a_business_rule(self):
        self.assertTrue(issubclass(CapacityExceededError, BusinessRuleError))

    def test_join_unknown_code(self):
        with self.assertRaises(NotFoundError):
            self.lifecycle.join_matching("NOPE42")

    def test_join_closed_matching_below_capacity(self):
        matching = self.lifecycle.create_matching()
        self.lifecycle.join_matching(matching.code)
        matching.status = MatchingStatus.ESTABLISHED.value
        self.session.commit()

        with self.assertRaises(InvalidStateError):
            self.lifecycle.join_matching(matching.code)

    def test_lost_join_race_reports_capacity(self):
        matching = self.lifecycle.create_matching()
        self.lifecycle.join_matching(matching.code)
        self.lifecycle.join_matching(matching.code)

        # A stale count lets the insert reach the slot unique constraint
        matching.status = MatchingStatus.WAITING.value
        self.session.commit()
        with patch.object(self.repo.matchings, 'count_participants', return_value=1):
            with self.assertRaises(CapacityExceededError):
                self.lifecycle.join_matching(matching.code)

        self.assertEqual(self.repo.matchings.count_participants(matching.id), 2)

    def test_larger_capacity_from_config(self):
        lifecycle = MatchingLifecycle(self.repo, MatchingConfig(max_participants=3))
        matching = lifecycle.create_matching()

        lifecycle.join_matching(matching.code)
        lifecycle.join_matching(matching.code)
        self.assertEqual(lifecycle.get_status(matching.code).status, "waiting")

        lifecycle.join_matching(matching.code)
        self.assertEqual(lifecycle.get_status(matching.code).status, "established")

    def test_code_collision_is_retried(self):
        existing = self.lifecycle.create_matching()
        lifecycle = MatchingLifecycle(
            self.repo,
            code_generator=FixedCodeGenerator([existing.code, existing.code, "FRESH2"]),
        )

        matching = lifecycle.create_matching()

        self.assertEqual(matching.code, "FRESH2")

    def test_code_generation_exhausted(self):
        existing = self.lifecycle.create_matching()
        config = MatchingConfig(code=CodeConfig(max_attempts=3))
        lifecycle = MatchingLifecycle(
            self.repo,
            config,
            code_generator=FixedCodeGenerator([existing.code] * 3),
        )

        with self.assertRaises(CodeGenerationExhaustedError):
            lifecycle.create_matching()

    def test_ten_thousand_matchings_have_distinct_codes(self):
        codes = [self.lifecycle.create_matching().code for _ in range(10000)]

        self.assertEqual(len(set(codes)), 10000)

    def test_get_status_unknown_code(self):
        with self.assertRaises(NotFoundError):
            self.lifecycle.get_status("ZZZZZZ")

    def test_transition_cannot_skip_or_go_back(self):
        matching = self.lifecycle.create_matching()

        with self.assertRaises(InvalidStateError):
            transition(matching, MatchingStatus.COMPLETED)

        transition(matching, MatchingStatus.ESTABLISHED)
        with self.assertRaises(InvalidStateError):
            transition(matching, MatchingStatus.WAITING)


if __name__ == '__main__':
    unittest.main()
