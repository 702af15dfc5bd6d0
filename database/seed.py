"""
Default questionnaire (question set v1).

Questions 1 and 2 give context only; their choices carry no temperature
weight and their ordering keys have no coefficient in the default scoring
table. Questions 3-6 drive the temperature.
"""

import logging
from typing import Any, Dict, List

from database.repository import Repository

logger = logging.getLogger(__name__)


def _choices(*rows) -> List[Dict[str, Any]]:
    return [
        {'choice_text': text, 'choice_value': value, 'order': i, 'temperature_weight': weight}
        for i, (text, value, weight) in enumerate(rows, start=1)
    ]


DEFAULT_QUESTIONS: List[Dict[str, Any]] = [
    {
        'order': 1,
        'question_type': 'context',
        'question_text': 'Where did this meeting start?',
        'choices': _choices(
            ('Bar / pub', 'bar', 0.0),
            ('Restaurant', 'restaurant', 0.0),
            ('Cafe', 'cafe', 0.0),
            ('Street / neighbourhood', 'street', 0.0),
            ('Other', 'other', 0.0),
        ),
    },
    {
        'order': 2,
        'question_type': 'context',
        'question_text': 'How did the two of you meet?',
        'choices': _choices(
            ('Introduced by a friend', 'introduction', 0.0),
            ('By chance', 'coincidence', 0.0),
            ('Social media / app', 'sns_app', 0.0),
            ('Work / school', 'work_school', 0.0),
            ('Other', 'other', 0.0),
        ),
    },
    {
        'order': 3,
        'question_type': 'sentiment',
        'question_text': 'Right now, what is the mood of this meeting?',
        'choices': _choices(
            ('A little awkward', 'awkward', 0.2),
            ('Comfortable', 'comfortable', 0.5),
            ('Exciting', 'excited', 0.7),
            ('We feel really close', 'close', 0.9),
        ),
    },
    {
        'order': 4,
        'question_type': 'expectation',
        'question_text': 'What do you expect from this meeting today?',
        'choices': _choices(
            ('A conversation is enough', 'conversation', 0.2),
            ('I want to have a good time', 'good_time', 0.4),
            ('We might get closer', 'closer', 0.6),
            ('I will go with the flow', 'go_with_flow', 0.5),
        ),
    },
    {
        'order': 5,
        'question_type': 'distance',
        'question_text': 'Right now, what physical distance feels comfortable?',
        'choices': _choices(
            ('Conversation only', 'conversation_only', 0.1),
            ('Light touch (holding hands)', 'light_skin', 0.4),
            ('A hug', 'hug', 0.6),
            ('Closer is fine', 'closer_ok', 0.9),
        ),
    },
    {
        'order': 6,
        'question_type': 'comfort',
        'question_text': 'Does the current situation feel comfortable to you?',
        'choices': _choices(
            ('Yes, I am fine', 'ok', 0.7),
            ('I am a bit unsure', 'concerned', 0.3),
            ('I do not know yet', 'unsure', 0.5),
        ),
    },
]


def seed_questions(repo: Repository, questions: List[Dict[str, Any]] = None) -> int:
    """
    Insert the default questionnaire when the question table is empty.

    Returns:
        Number of questions inserted (0 if questions already existed).
    """
    if repo.questions.count_questions() > 0:
        logger.info("Questions already present, skipping seed")
        return 0

    questions = DEFAULT_QUESTIONS if questions is None else questions
    for q in questions:
        repo.questions.add_question(
            question_text=q['question_text'],
            question_type=q['question_type'],
            order=q['order'],
            choices=q['choices'],
            question_category=q.get('question_category'),
        )

    logger.info(f"Seeded {len(questions)} questions")
    return len(questions)
