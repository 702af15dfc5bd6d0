#!/usr/bin/env python3
"""
Matching endpoints - create, join and inspect matchings.
"""

import logging
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ..config import get_config
from ..dependencies import get_db
from ..services.matching_service import MatchingService
from ..models.responses import (
    MatchingResponse,
    ParticipantResponse,
    MatchingStatusResponse
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/matching", tags=["matching"])


def _service(db: Session) -> MatchingService:
    return MatchingService(db, get_config().matching)


@router.post("/create", response_model=MatchingResponse)
def create_matching(db: Session = Depends(get_db)):
    """
    Create a new matching in the waiting state.

    The returned code is shared out of band with the people who should join.
    """
    return _service(db).create_matching()


@router.post("/join/{code}", response_model=ParticipantResponse)
def join_matching(code: str, db: Session = Depends(get_db)):
    """
    Join a matching by its code.

    The response carries the participant code needed to submit answers.
    The matching becomes established when the last seat is taken.
    """
    return _service(db).join_matching(code)


@router.get("/status/{code}", response_model=MatchingStatusResponse)
def get_matching_status(code: str, db: Session = Depends(get_db)):
    """Current lifecycle state and participant count."""
    return _service(db).get_status(code)


@router.get("/{code}", response_model=MatchingResponse)
def get_matching(code: str, db: Session = Depends(get_db)):
    return _service(db).get_matching(code)
