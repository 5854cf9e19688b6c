from __future__ import annotations

import logging
from typing import Any

import httpx

from ..errors import DescriptionFetchError

logger = logging.getLogger(__name__)


class DescriptionClient:
    """Fetches a collection's desc.json and returns the parsed document untouched."""

    def __init__(self, http_client: httpx.AsyncClient) -> None:
        self.http_client = http_client

    async def fetch(self, url: str) -> Any:
        try:
            response = await self.http_client.get(url)
            response.raise_for_status()
            return response.json()
        except httpx.HTTPStatusError as exc:
            status = exc.response.status_code
            logger.warning("Description fetch %s returned %d", url, status)
            raise DescriptionFetchError(url, f"upstream returned {status}", status_code=status) from exc
        except httpx.HTTPError as exc:
            logger.error("Description fetch %s failed: %s", url, exc)
            raise DescriptionFetchError(url, str(exc)) from exc
        except ValueError as exc:
            logger.error("Description at %s is not valid JSON", url)
            raise DescriptionFetchError(url, "invalid JSON document") from exc
