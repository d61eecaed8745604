"""Free-text sanitizer guarding the bio prompt against injection phrases."""

from __future__ import annotations

import re
from typing import Iterable, List

REDACTION_MARKER = "[REDACTED]"
DEFAULT_MAX_LENGTH = 500

INJECTION_PATTERNS = [
    re.compile(pattern, re.IGNORECASE)
    for pattern in (
        r"ignore\s+previous\s+instructions?",
        r"disregard\s+all\s+previous\s+instructions?",
        r"forget\s+everything\s+above",
        r"new\s+instructions?:",
        r"system\s*:",
        r"admin\s*:",
        r"\[\s*system\s*\]",
        r"\{\s*system\s*\}",
        r"<\s*system\s*>",
        r"you\s+are\s+now",
        r"pretend\s+you\s+are",
        r"from\s+now\s+on",
        r"act\s+as",
    )
]

_CONTROL_CHARS = re.compile(r"[\x00-\x1f\x7f]")


class InputSanitizer:
    """Strips control characters, truncates, and redacts injection phrases."""

    def __init__(self, max_length: int = DEFAULT_MAX_LENGTH) -> None:
        self.max_length = max_length

    def sanitize(self, text: str | None) -> str:
        """Return a cleaned copy of ``text`` no longer than ``max_length``.

        A redaction marker that would be cut by the final length cap is
        dropped whole rather than left partial.
        """

        if text is None:
            return ""

        sanitized = text.strip()[: self.max_length]
        for pattern in INJECTION_PATTERNS:
            sanitized = pattern.sub(REDACTION_MARKER, sanitized)
        sanitized = _CONTROL_CHARS.sub("", sanitized)
        if len(sanitized) <= self.max_length:
            return sanitized

        # The marker is longer than some of the phrases it replaces.
        cut = self.max_length
        start = sanitized.rfind(REDACTION_MARKER, 0, cut + len(REDACTION_MARKER) - 1)
        if start != -1 and start + len(REDACTION_MARKER) > cut:
            cut = start
        return sanitized[:cut].rstrip()

    def sanitize_list(self, items: Iterable[str | None] | None) -> List[str]:
        if items is None:
            return []
        cleaned = (self.sanitize(item) for item in items)
        return [item for item in cleaned if item]

    def contains_injection_pattern(self, text: str | None) -> bool:
        if text is None:
            return False
        return any(pattern.search(text) for pattern in INJECTION_PATTERNS)
