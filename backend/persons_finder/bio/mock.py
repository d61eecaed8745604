"""Deterministic bio generator that never leaves the process."""

from __future__ import annotations

import hashlib
import logging
from typing import Sequence

from .base import BioGenerator

logger = logging.getLogger("persons_finder.bio.mock")

FALLBACK_BIO = "A mysterious individual with untold talents."

OPENERS = [
    "Meet",
    "Behold",
    "Introducing",
    "Say hello to",
    "Here comes",
]

CONNECTORS = [
    "who moonlights as",
    "with a passion for",
    "enthusiastically pursuing",
    "obsessed with",
    "secretly devoted to",
]

CLOSERS = [
    "when not saving the world!",
    "in their spare time!",
    "like there's no tomorrow!",
    "with unwavering dedication!",
    "because why not?",
]


class MockBioGenerator(BioGenerator):
    """Builds a quirky bio from fixed phrase pools indexed by a stable hash."""

    def generate_bio(self, job_title: str | None, hobbies: Sequence[str] | None) -> str:
        if not job_title or not hobbies:
            return FALLBACK_BIO

        digest = hashlib.sha256((job_title + "".join(hobbies)).encode("utf-8")).digest()
        # Three disjoint 4-byte slices, one per phrase pool.
        opener = OPENERS[int.from_bytes(digest[0:4], "big") % len(OPENERS)]
        connector = CONNECTORS[int.from_bytes(digest[4:8], "big") % len(CONNECTORS)]
        closer = CLOSERS[int.from_bytes(digest[8:12], "big") % len(CLOSERS)]

        hobby_text = " and ".join(hobbies[:2])
        bio = f"{opener} a {job_title} {connector} {hobby_text} {closer}"
        logger.debug("Generated mock bio of %d chars", len(bio))
        return bio
