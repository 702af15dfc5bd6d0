"""API route handlers."""

from .matching import router as matching_router
from .answers import router as answers_router
from .records import router as records_router
from .questions import router as questions_router
