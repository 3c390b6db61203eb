"""Profanity filter clients."""
import logging
from abc import ABC, abstractmethod

import httpx

from kitchenpos.core.config import settings

logger = logging.getLogger(__name__)


class ProfanityClient(ABC):
    """Abstract base class for profanity checks."""

    @abstractmethod
    async def contains_profanity(self, text: str) -> bool:
        """Check whether the text contains profanity."""
        pass


class PurgomalumClient(ProfanityClient):
    """Profanity client backed by the PurgoMalum web service."""

    def __init__(self, base_url: str | None = None, timeout: float | None = None):
        self.base_url = (base_url or settings.purgomalum_url).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.http_timeout_seconds

    async def contains_profanity(self, text: str) -> bool:
        """
        Ask PurgoMalum whether the text contains profanity.

        Args:
            text: Text to check

        Returns:
            True if the service flags the text
        """
        async with httpx.AsyncClient(timeout=self.timeout) as client:
            response = await client.get(
                f"{self.base_url}/service/containsprofanity",
                params={"text": text},
            )
            response.raise_for_status()

        flagged = response.text.strip().lower() == "true"
        if flagged:
            logger.info(f"[PROFANITY] Text flagged: {text!r}")
        return flagged
