"""Bio generators: a deterministic mock and an external LLM provider."""

from .base import BioGenerator
from .external import ExternalBioConfig, ExternalBioGenerator
from .mock import FALLBACK_BIO, MockBioGenerator

__all__ = [
    "BioGenerator",
    "ExternalBioConfig",
    "ExternalBioGenerator",
    "FALLBACK_BIO",
    "MockBioGenerator",
]
