"""Core data models, errors and utilities for the service."""

from .exceptions import BioGenerationError, PersonNotFoundError
from .models import (
    GeoPoint,
    Location,
    LocationRequest,
    Person,
    PersonRecord,
    PersonRequest,
)
from .sanitizer import InputSanitizer

__all__ = [
    "BioGenerationError",
    "GeoPoint",
    "InputSanitizer",
    "Location",
    "LocationRequest",
    "Person",
    "PersonNotFoundError",
    "PersonRecord",
    "PersonRequest",
]
