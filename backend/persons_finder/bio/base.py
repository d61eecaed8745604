"""Interface shared by the bio generator implementations."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Sequence


class BioGenerator(ABC):
    """Produces a short descriptive sentence from a job title and hobbies.

    Only the job title and hobbies cross this boundary; callers must not pass
    names, coordinates or ids.
    """

    @abstractmethod
    def generate_bio(self, job_title: str | None, hobbies: Sequence[str] | None) -> str:
        raise NotImplementedError

    def close(self) -> None:
        """Release any resources held by the generator."""
