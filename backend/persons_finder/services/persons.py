"""Person upsert-and-enrichment workflow."""

from __future__ import annotations

import logging

from ..bio import BioGenerator
from ..core import InputSanitizer, Person, PersonNotFoundError, PersonRecord, PersonRequest
from .repository import PersonRepository
from .sequence import SequenceGenerator

logger = logging.getLogger("persons_finder.services.persons")

PERSON_SEQUENCE = "Person"


def normalize_email(email: str) -> str:
    return email.strip().lower()


class PersonService:
    """Resolves identity, sanitizes input, regenerates the bio and persists."""

    def __init__(
        self,
        repository: PersonRepository,
        sequence_generator: SequenceGenerator,
        bio_generator: BioGenerator,
        sanitizer: InputSanitizer | None = None,
    ) -> None:
        self.repository = repository
        self.sequence_generator = sequence_generator
        self.bio_generator = bio_generator
        self.sanitizer = sanitizer or InputSanitizer()

    def get_by_id(self, person_id: int) -> Person:
        record = self.repository.find_by_id(person_id)
        if record is None:
            raise PersonNotFoundError(person_id)
        return Person.from_record(record)

    def save(self, request: PersonRequest) -> Person:
        email = normalize_email(request.email)
        record = self._resolve(request, email)

        for field_name, raw in (("name", request.name), ("job_title", request.job_title)):
            if self.sanitizer.contains_injection_pattern(raw):
                logger.warning("Redacted suspicious input in %s for person id=%s", field_name, record.id)

        record.name = self.sanitizer.sanitize(request.name)
        record.email = email
        record.job_title = self.sanitizer.sanitize(request.job_title)
        record.hobbies = self.sanitizer.sanitize_list(request.hobbies)
        # Only job title and hobbies reach the generator.
        record.bio = self.bio_generator.generate_bio(record.job_title, record.hobbies)

        saved = self.repository.save(record)
        logger.info("Saved person id=%s", saved.id)
        return Person.from_record(saved)

    def _resolve(self, request: PersonRequest, email: str) -> PersonRecord:
        if request.id is not None:
            record = self.repository.find_by_id(request.id)
            if record is None:
                raise PersonNotFoundError(request.id)
            return record

        existing = self.repository.find_by_email(email)
        if existing is not None:
            logger.info("Email already registered, updating person id=%s", existing.id)
            return existing

        new_id = self.sequence_generator.generate_sequence(PERSON_SEQUENCE)
        logger.info("Creating person id=%s", new_id)
        return PersonRecord(id=new_id)
