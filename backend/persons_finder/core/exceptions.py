"""Error types raised by the service layer."""

from __future__ import annotations


class PersonNotFoundError(LookupError):
    """Raised when no person exists for the requested id."""

    def __init__(self, person_id: int) -> None:
        self.person_id = person_id
        super().__init__(f"Person not found with id: {person_id}")


class BioGenerationError(RuntimeError):
    """Raised when the external bio provider fails or returns garbage."""
