#!/usr/bin/env python3
"""
Request models for API endpoints.
"""

from pydantic import BaseModel, Field
from typing import List


class AnswerItem(BaseModel):
    """One chosen option."""
    question_id: int = Field(..., description="Question being answered")
    choice_id: int = Field(..., description="Chosen option of that question")


class AnswerSubmission(BaseModel):
    """Complete answer set of a participant; replaces any earlier submission."""
    answers: List[AnswerItem] = Field(
        default_factory=list,
        description="Answers in submission order; must not be empty"
    )
