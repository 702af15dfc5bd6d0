#!/usr/bin/env python3
"""
Matching lifecycle - creation, participant admission and status transitions.

    waiting --(last seat taken)--> established --(record created)--> completed

Transitions never skip a state and never go back. Joining and establishing
happen in one transaction under a row lock on the matching; the
UNIQUE(matching_id, slot) constraint catches any join that slips past the lock.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from sqlalchemy.exc import IntegrityError

from core.config_loader import MatchingConfig
from core.errors import (
    NotFoundError,
    CapacityExceededError,
    InvalidStateError,
    ConflictError,
    CodeGenerationExhaustedError,
)
from core.matching.codes import CodeGenerator
from database.models import Matching, MatchingStatus, Participant
from database.repository import Repository

logger = logging.getLogger(__name__)


@dataclass
class MatchingStatusView:
    """Read-only projection of a matching's lifecycle state."""
    code: str
    status: str
    participant_count: int
    max_participants: int


def transition(matching: Matching, target: MatchingStatus) -> None:
    """Move a matching one step forward, or raise InvalidStateError."""
    current = MatchingStatus(matching.status)
    if not current.can_transition_to(target):
        raise InvalidStateError(
            f"Matching {matching.code} cannot move from {current.value} to {target.value}"
        )
    matching.status = target.value


class MatchingLifecycle:
    """Owns a matching's progression and participant admission."""

    def __init__(
        self,
        repo: Repository,
        config: Optional[MatchingConfig] = None,
        code_generator: Optional[CodeGenerator] = None,
    ):
        self.repo = repo
        self.config = config or MatchingConfig()
        self.codes = code_generator or CodeGenerator(self.config.code)

    @property
    def max_participants(self) -> int:
        return self.config.max_participants

    def _generate_unique_code(self) -> str:
        attempts = self.config.code.max_attempts
        for attempt in range(1, attempts + 1):
            code = self.codes.generate_matching_code()
            if not self.repo.matchings.code_exists(code):
                return code
            logger.debug(f"Matching code collision on attempt {attempt}: {code}")

        logger.error(f"Failed to generate unique matching code after {attempts} attempts")
        raise CodeGenerationExhaustedError(
            f"Could not generate a unique matching code after {attempts} attempts, please retry"
        )

    def create_matching(self) -> Matching:
        """
        Create a matching in the waiting state with a fresh unique code.

        Raises:
            CodeGenerationExhaustedError: If every generated code was taken.
            ConflictError: If a concurrent creation committed the same code first.
        """
        try:
            with self.repo.transaction():
                code = self._generate_unique_code()
                matching = self.repo.matchings.create_matching(code, MatchingStatus.WAITING.value)
        except IntegrityError as e:
            logger.warning(f"Matching code taken concurrently: {e.orig}")
            raise ConflictError("Matching code was taken concurrently, please retry") from e

        logger.info(f"Matching created: {matching.code}")
        return matching

    def join_matching(self, code: str) -> Participant:
        """
        Admit a participant into a matching.

        When the participant takes the last seat the matching becomes
        established in the same transaction.

        Raises:
            NotFoundError: Unknown code.
            CapacityExceededError: All seats are taken (including a lost race).
            InvalidStateError: The matching is no longer waiting.
        """
        max_participants = self.max_participants
        try:
            with self.repo.transaction():
                matching = self.repo.matchings.get_by_code(code, for_update=True)
                if matching is None:
                    raise NotFoundError(f"Matching not found: {code}")

                count = self.repo.matchings.count_participants(matching.id)
                if count >= max_participants:
                    raise CapacityExceededError(
                        f"Matching {code} already has {max_participants} participants"
                    )
                if matching.status != MatchingStatus.WAITING.value:
                    raise InvalidStateError(f"Matching {code} is already closed")

                participant = self.repo.matchings.add_participant(
                    matching,
                    participant_code=self.codes.generate_participant_code(),
                    slot=count + 1,
                )

                if count + 1 == max_participants:
                    transition(matching, MatchingStatus.ESTABLISHED)
                    self.repo.db.flush()
                    logger.info(f"Matching {code} status changed to established")
        except IntegrityError as e:
            logger.warning(f"Concurrent join lost on matching {code}: {e.orig}")
            raise CapacityExceededError(
                f"Matching {code} already has {max_participants} participants"
            ) from e

        logger.info(f"Participant joined matching: {code} (slot {participant.slot})")
        return participant

    def get_matching(self, code: str) -> Matching:
        matching = self.repo.matchings.get_by_code(code)
        if matching is None:
            raise NotFoundError(f"Matching not found: {code}")
        return matching

    def get_status(self, code: str) -> MatchingStatusView:
        matching = self.get_matching(code)
        return MatchingStatusView(
            code=matching.code,
            status=matching.status,
            participant_count=self.repo.matchings.count_participants(matching.id),
            max_participants=self.max_participants,
        )
