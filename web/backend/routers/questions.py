#!/usr/bin/env python3
"""
Question endpoints - read the active questionnaire.
"""

from typing import List, Optional
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from ..dependencies import get_db
from ..services.question_service import QuestionService
from ..models.responses import QuestionResponse

router = APIRouter(prefix="/questions", tags=["questions"])


@router.get("", response_model=List[QuestionResponse])
def get_questions(
    category: Optional[str] = Query(
        default=None,
        description="Question category: INITIAL_MATCHING or TEMPERATURE_REFINE"
    ),
    db: Session = Depends(get_db)
):
    """Active questions with their choices, ordered by question order."""
    return QuestionService(db).get_questions(category)


@router.get("/{question_id}", response_model=QuestionResponse)
def get_question(question_id: int, db: Session = Depends(get_db)):
    return QuestionService(db).get_question(question_id)
