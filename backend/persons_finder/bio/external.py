"""Bio generator backed by an OpenAI-compatible chat completions endpoint."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

import httpx

from ..core import BioGenerationError
from .base import BioGenerator

logger = logging.getLogger("persons_finder.bio.external")

PROMPT_TEMPLATE = "Write a quirky one-sentence bio for someone who is a {job_title} and enjoys {hobbies}."


@dataclass(frozen=True)
class ExternalBioConfig:
    api_key: str
    base_url: str = "https://api.openai.com/v1"
    model: str = "gpt-3.5-turbo"
    max_tokens: int = 100
    temperature: float = 0.7
    timeout_seconds: float = 60.0


class ExternalBioGenerator(BioGenerator):
    """Sends the bio prompt to a remote text-generation model.

    Failures are raised as :class:`BioGenerationError`; there is no retry and
    no fallback to the mock generator.
    """

    def __init__(self, config: ExternalBioConfig, client: httpx.Client | None = None) -> None:
        self.config = config
        self._client = client or httpx.Client(
            base_url=config.base_url,
            timeout=config.timeout_seconds,
        )

    @staticmethod
    def build_prompt(job_title: str | None, hobbies: Sequence[str] | None) -> str:
        return PROMPT_TEMPLATE.format(
            job_title=job_title or "",
            hobbies=", ".join(hobbies or []),
        )

    def generate_bio(self, job_title: str | None, hobbies: Sequence[str] | None) -> str:
        payload = {
            "model": self.config.model,
            "messages": [{"role": "user", "content": self.build_prompt(job_title, hobbies)}],
            "max_tokens": self.config.max_tokens,
            "temperature": self.config.temperature,
            "top_p": 1.0,
        }
        headers = {"Authorization": f"Bearer {self.config.api_key}"}

        logger.info("Requesting bio from model=%s", self.config.model)
        try:
            response = self._client.post("/chat/completions", json=payload, headers=headers)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise BioGenerationError(
                f"Bio provider returned status {exc.response.status_code}"
            ) from exc
        except httpx.HTTPError as exc:
            raise BioGenerationError(f"Bio provider request failed: {exc}") from exc

        try:
            content = response.json()["choices"][0]["message"]["content"]
        except (ValueError, KeyError, IndexError, TypeError) as exc:
            raise BioGenerationError("Bio provider returned an unexpected payload") from exc

        if not isinstance(content, str) or not content.strip():
            raise BioGenerationError("Bio provider returned an empty bio")
        return content.strip()

    def close(self) -> None:
        self._client.close()
