#!/usr/bin/env python3
"""
Response models for API endpoints.
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional, Dict, Any


class MatchingResponse(BaseModel):
    """A matching as seen by clients."""
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": 1,
                "code": "K7PX2M",
                "status": "waiting",
                "created_at": "2026-02-01T12:00:00+00:00",
                "completed_at": None
            }
        }
    )

    id: int
    code: str
    status: str
    created_at: Optional[str]
    completed_at: Optional[str]


class ParticipantResponse(BaseModel):
    """Returned to a participant on join; participant_code is their bearer handle."""
    id: int
    participant_code: str
    slot: int
    joined_at: Optional[str]
    matching_code: str


class MatchingStatusResponse(BaseModel):
    code: str
    status: str
    participant_count: int = Field(ge=0)
    max_participants: int = Field(ge=1)


class AnswerResponse(BaseModel):
    """A stored answer."""
    id: int
    question_id: int
    choice_id: int
    question_order: int
    choice_text: Optional[str]
    choice_value: Optional[str]
    answered_at: Optional[str]


class RecordResponse(BaseModel):
    """Scored outcome of a completed matching."""
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "record_id": "1b4e28ba-2fa1-11d2-883f-0016d3cca427",
                "matching_id": 1,
                "temperature": 0.6,
                "temperature_diff": 0.2,
                "is_active": True,
                "created_at": "2026-02-01T12:30:00+00:00",
                "summary": {
                    "Q3": {
                        "question_text": "How did the conversation feel?",
                        "question_type": "mood",
                        "answers": [
                            {"participant_slot": 1, "choice_text": "Warm", "choice_value": "warm"}
                        ]
                    }
                }
            }
        }
    )

    record_id: str
    matching_id: int
    temperature: float
    temperature_diff: float = Field(ge=0)
    is_active: bool
    created_at: Optional[str]
    summary: Optional[Dict[str, Any]]


class ChoiceResponse(BaseModel):
    id: int
    choice_text: str
    choice_value: str
    order: int


class QuestionResponse(BaseModel):
    """A question with its choices in display order."""
    id: int
    question_text: str
    question_type: str
    question_category: str
    order: int
    choices: List[ChoiceResponse]


class HealthResponse(BaseModel):
    status: str
    service: str
