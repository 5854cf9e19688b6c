from __future__ import annotations

from datetime import datetime, timezone
from typing import Iterable

from .. import keys
from ..models import Collection, ObjectRecord


def format_display_date(value: datetime) -> str:
    # "March 5, 2021"; naive timestamps are taken as UTC
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc)
    return f"{value:%B} {value.day}, {value.year}"


def list_collections(root_listing: Iterable[ObjectRecord]) -> list[Collection]:
    """Collections in listing order; the reserved background/ folder is skipped."""
    return [
        Collection(
            name=keys.strip_trailing_slash(record.key),
            last_modified=format_display_date(record.last_modified),
        )
        for record in root_listing
        if keys.is_collection_marker(record.key)
    ]


class CollectionCatalog:
    def __init__(self, listing_client) -> None:
        self.listing_client = listing_client

    async def get_collections(self) -> list[Collection]:
        records = await self.listing_client.list_objects()
        return list_collections(records)
