#!/usr/bin/env python3
"""
Domain exceptions raised by the matching core.

Every core operation either succeeds or raises one of these. The web layer
maps them to HTTP status codes in web/backend/exceptions.py.
"""


class ServiceException(Exception):
    """Base exception for service layer errors."""
    pass


class NotFoundError(ServiceException):
    """Raised when a referenced entity does not exist."""
    pass


class BusinessRuleError(ServiceException):
    """Raised when a request is inconsistent with the current state."""
    pass


class CapacityExceededError(BusinessRuleError):
    """Raised when a matching already has its maximum number of participants."""
    pass


class InvalidStateError(BusinessRuleError):
    """Raised when a matching is not in a state that allows the operation."""
    pass


class EmptySubmissionError(BusinessRuleError):
    """Raised when an answer submission contains no answers."""
    pass


class NoAnswersError(BusinessRuleError):
    """Raised when a record is requested for a matching without answers."""
    pass


class ConflictError(ServiceException):
    """Raised when a concurrent request won a race or the entity already exists."""
    pass


class CodeGenerationExhaustedError(ServiceException):
    """Raised when no unique matching code could be generated."""
    pass
