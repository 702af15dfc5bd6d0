#!/usr/bin/env python3
"""
Record endpoints - score a matching and read its record.
"""

import logging
from fastapi import APIRouter, Depends, Response
from sqlalchemy.orm import Session

from core.scorer import TemperatureScorer
from ..dependencies import get_db, get_scorer
from ..services.record_service import RecordService
from ..models.responses import RecordResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/records", tags=["records"])


@router.post("/create/{matching_id}", response_model=RecordResponse)
def create_record(
    matching_id: int,
    db: Session = Depends(get_db),
    scorer: TemperatureScorer = Depends(get_scorer)
):
    """
    Score an established matching and complete it.

    A matching is scored at most once; a second call is rejected.
    """
    return RecordService(db, scorer).create_record(matching_id)


@router.get("/matching/{matching_id}", response_model=RecordResponse)
def get_record_by_matching(
    matching_id: int,
    db: Session = Depends(get_db),
    scorer: TemperatureScorer = Depends(get_scorer)
):
    return RecordService(db, scorer).get_by_matching(matching_id)


@router.get("/{record_id}", response_model=RecordResponse)
def get_record(
    record_id: str,
    db: Session = Depends(get_db),
    scorer: TemperatureScorer = Depends(get_scorer)
):
    return RecordService(db, scorer).get_record(record_id)


@router.put("/{record_id}/deactivate", response_class=Response)
def deactivate_record(
    record_id: str,
    db: Session = Depends(get_db),
    scorer: TemperatureScorer = Depends(get_scorer)
):
    """Hide a record without touching its matching."""
    RecordService(db, scorer).deactivate(record_id)
    return Response(status_code=200)
