# filmorate/domain/errors.py
from __future__ import annotations

from typing import Any


class FilmorateError(Exception):
    """Base class for domain errors raised by stores and services."""


class ValidationFailure(FilmorateError):
    """
    Malformed or out-of-range input. Raised before any mutation happens.
    `rule` names the first violated constraint, e.g. "film.duration".
    """

    def __init__(self, rule: str, message: str) -> None:
        super().__init__(message)
        self.rule = rule
        self.message = message

    def __str__(self) -> str:
        return f"{self.rule}: {self.message}"


class NotFound(FilmorateError):
    """Reference to an identity that does not exist in its store."""

    def __init__(self, entity: str, entity_id: Any) -> None:
        super().__init__(f"{entity} {entity_id} not found")
        self.entity = entity
        self.entity_id = entity_id
