#!/usr/bin/env python3
"""
Unit tests for answer submission (full replacement semantics).
"""

import unittest

import pytest

from core.errors import NotFoundError, BusinessRuleError, EmptySubmissionError
from core.matching import MatchingLifecycle, AnswerStore
from database.repository import Repository
from tests import (
    create_test_engine,
    create_test_session,
    teardown_test_database,
    seed_test_questions,
    answers,
)


@pytest.mark.db
class TestAnswerStore(unittest.TestCase):

    def setUp(self):
        self.engine = create_test_engine()
        self.session = create_test_session(self.engine)
        self.questions = seed_test_questions(self.session)
        self.repo = Repository(self.session)
        self.store = AnswerStore(self.repo)

        lifecycle = MatchingLifecycle(self.repo)
        self.matching = lifecycle.create_matching()
        self.participant = lifecycle.join_matching(self.matching.code)

    def tearDown(self):
        self.session.close()
        teardown_test_database(self.engine)

    def test_submit_stores_answers_with_snapshot(self):
        stored = self.store.submit(
            self.participant.participant_code,
            answers(self.questions, (3, 'excited'), (5, 'hug')),
        )

        self.assertEqual(len(stored), 2)
        by_order = {a.question_order: a for a in stored}
        self.assertAlmostEqual(by_order[3].choice_weight, 0.7)
        self.assertAlmostEqual(by_order[5].choice_weight, 0.6)

    def test_resubmission_replaces_previous_answers(self):
        code = self.participant.participant_code
        self.store.submit(code, answers(self.questions, (3, 'awkward'), (4, 'closer'), (5, 'hug')))
        self.store.submit(code, answers(self.questions, (3, 'close')))

        current = self.store.get_by_participant(code)

        self.assertEqual(len(current), 1)
        self.assertEqual(current[0].choice_id, self.questions[3]['close'])
        self.assertEqual(len(self.store.get_by_matching(self.matching.id)), 1)

    def test_duplicate_question_keeps_last_choice(self):
        code = self.participant.participant_code
        self.store.submit(code, answers(self.questions, (3, 'awkward'), (4, 'closer'), (3, 'close')))

        current = self.store.get_by_participant(code)

        self.assertEqual([a.question_order for a in current], [3, 4])
        self.assertEqual(current[0].choice_id, self.questions[3]['close'])

    def test_empty_submission(self):
        with self.assertRaises(EmptySubmissionError):
            self.store.submit(self.participant.participant_code, [])

    def test_unknown_participant(self):
        with self.assertRaises(NotFoundError):
            self.store.submit("no-such-participant", answers(self.questions, (3, 'close')))

    def test_unknown_question(self):
        with self.assertRaises(NotFoundError) as ctx:
            self.store.submit(
                self.participant.participant_code,
                [(99999, self.questions[3]['close'])],
            )
        self.assertIn("99999", str(ctx.exception))

    def test_unknown_choice(self):
        with self.assertRaises(NotFoundError) as ctx:
            self.store.submit(
                self.participant.participant_code,
                [(self.questions[3]['id'], 88888)],
            )
        self.assertIn("88888", str(ctx.exception))

    def test_choice_of_other_question(self):
        with self.assertRaises(BusinessRuleError):
            self.store.submit(
                self.participant.participant_code,
                [(self.questions[3]['id'], self.questions[4]['closer'])],
            )

    def test_failed_submission_keeps_previous_answers(self):
        code = self.participant.participant_code
        self.store.submit(code, answers(self.questions, (3, 'comfortable')))

        with self.assertRaises(NotFoundError):
            self.store.submit(code, answers(self.questions, (4, 'closer')) + [(99999, 1)])

        current = self.store.get_by_participant(code)
        self.assertEqual(len(current), 1)
        self.assertEqual(current[0].choice_id, self.questions[3]['comfortable'])

    def test_inactive_question_still_accepted(self):
        question_id = self.questions[2]['id']
        self.repo.questions.get_questions_by_ids([question_id])[question_id].is_active = False
        self.session.commit()

        stored = self.store.submit(self.participant.participant_code, answers(self.questions, (2, 'coincidence')))

        self.assertEqual(len(stored), 1)
        self.assertEqual(stored[0].question_order, 2)

    def test_answers_ordered_by_question_order(self):
        code = self.participant.participant_code
        self.store.submit(code, answers(self.questions, (6, 'ok'), (1, 'cafe'), (3, 'close')))

        orders = [a.question_order for a in self.store.get_by_participant(code)]

        self.assertEqual(orders, [1, 3, 6])


if __name__ == '__main__':
    unittest.main()
