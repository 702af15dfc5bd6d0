from database.repositories.base import BaseRepository
from database.repositories.matching import MatchingRepository
from database.repositories.question import QuestionRepository
from database.repositories.answer import AnswerRepository
from database.repositories.record import RecordRepository

__all__ = [
    'BaseRepository',
    'MatchingRepository',
    'QuestionRepository',
    'AnswerRepository',
    'RecordRepository',
]
