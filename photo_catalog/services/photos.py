from __future__ import annotations

import logging
from typing import Iterable

from .. import keys
from ..errors import EmptyResult
from ..models import ObjectRecord, Photo
from ..urls import URLFormatter

logger = logging.getLogger(__name__)


def photo_pairs(records: Iterable[ObjectRecord], urls: URLFormatter) -> list[Photo]:
    out: list[Photo] = []
    for record in records:
        if not keys.is_compressed_variant(record.key):
            continue
        half = urls.to_public_url(record.key)
        out.append(Photo(half_res_url=half, full_res_url=urls.to_full_res_url(half)))
    return out


def first_preview(records: Iterable[ObjectRecord]) -> ObjectRecord | None:
    for record in records:
        if keys.is_preview_tagged(record.key):
            return record
    return None


class PhotoSetResolver:
    """Photo pairs, preview and description location for a single collection."""

    def __init__(self, listing_client, urls: URLFormatter) -> None:
        self.listing_client = listing_client
        self.urls = urls

    async def _list_collection(self, name: str) -> list[ObjectRecord]:
        name = keys.strip_path_prefix(name)
        records = await self.listing_client.list_objects(keys.collection_prefix(name))
        if not records:
            logger.info("Collection %r is empty or missing", name)
            raise EmptyResult(name)
        return records

    async def list_photos(self, name: str) -> list[Photo]:
        records = await self._list_collection(name)
        return photo_pairs(records, self.urls)

    async def get_preview_url(self, name: str) -> str:
        records = await self._list_collection(name)
        preview = first_preview(records)
        if preview is None:
            logger.info("Collection %r has no preview-tagged image", name)
            raise EmptyResult(keys.strip_path_prefix(name))
        return self.urls.to_public_url(preview.key)

    def description_url(self, name: str) -> str:
        return self.urls.to_public_url(keys.collection_prefix(name) + keys.DESCRIPTION_FILENAME)
