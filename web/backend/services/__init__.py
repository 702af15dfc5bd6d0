"""Business logic services."""

from .matching_service import MatchingService
from .answer_service import AnswerService
from .record_service import RecordService
from .question_service import QuestionService
