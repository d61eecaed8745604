"""Store-backed services for persons and their locations."""

from .locations import LocationService
from .persons import PersonService
from .repository import PersonRepository
from .sequence import SequenceGenerator

__all__ = [
    "LocationService",
    "PersonRepository",
    "PersonService",
    "SequenceGenerator",
]
