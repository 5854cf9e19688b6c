from __future__ import annotations

import logging

from .. import keys
from ..errors import InvariantViolation
from ..urls import URLFormatter

logger = logging.getLogger(__name__)


class SplashImageResolver:
    """Resolves the home page background. Exactly one object must live under background/_."""

    def __init__(self, listing_client, urls: URLFormatter) -> None:
        self.listing_client = listing_client
        self.urls = urls

    async def get_splash_url(self) -> str:
        records = await self.listing_client.list_objects(keys.SPLASH_PREFIX)
        if not records:
            logger.error("No splash image under %s", keys.SPLASH_PREFIX)
            raise InvariantViolation(f"no splash image found under {keys.SPLASH_PREFIX}")
        if len(records) > 1:
            logger.warning(
                "Expected one splash image under %s, found %d; using %s",
                keys.SPLASH_PREFIX,
                len(records),
                records[0].key,
            )
        return self.urls.to_public_url(records[0].key)
