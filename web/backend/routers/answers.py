#!/usr/bin/env python3
"""
Answer endpoints - submit and list a participant's answers.
"""

import logging
from typing import List
from fastapi import APIRouter, Depends, Response
from sqlalchemy.orm import Session

from ..dependencies import get_db
from ..services.answer_service import AnswerService
from ..models.requests import AnswerSubmission
from ..models.responses import AnswerResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/answers", tags=["answers"])


@router.post("/submit/{participant_code}", response_class=Response)
def submit_answers(
    participant_code: str,
    submission: AnswerSubmission,
    db: Session = Depends(get_db)
):
    """
    Submit the complete answer set of a participant.

    Any earlier submission of the same participant is replaced as a whole.
    """
    AnswerService(db).submit(participant_code, submission)
    return Response(status_code=200)


@router.get("/{participant_code}", response_model=List[AnswerResponse])
def get_answers(participant_code: str, db: Session = Depends(get_db)):
    return AnswerService(db).get_answers(participant_code)
