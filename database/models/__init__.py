from .base import Base
from .matching import Matching, MatchingStatus, Participant
from .question import Question, QuestionChoice, QuestionCategory
from .answer import Answer
from .record import Record

__all__ = [
    'Base',
    'Matching',
    'MatchingStatus',
    'Participant',
    'Question',
    'QuestionChoice',
    'QuestionCategory',
    'Answer',
    'Record',
]
