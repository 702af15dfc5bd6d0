#!/usr/bin/env python3
"""
Code generation for matchings, participants and records.

Matching codes are short and typed in by hand, so they come from a small
alphabet and can collide; MatchingLifecycle probes storage and retries.
Participant codes and record ids are UUID4 strings and act as bearer handles.
"""

import secrets
import uuid
from typing import Optional

from core.config_loader import CodeConfig


class CodeGenerator:
    """Produces matching codes, participant codes and record ids."""

    def __init__(self, config: Optional[CodeConfig] = None):
        self.config = config or CodeConfig()

    def generate_matching_code(self) -> str:
        alphabet = self.config.alphabet
        return "".join(secrets.choice(alphabet) for _ in range(self.config.length))

    def generate_participant_code(self) -> str:
        return str(uuid.uuid4())

    def generate_record_id(self) -> str:
        return str(uuid.uuid4())
