from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable

from .. import keys
from ..models import ObjectRecord, Stats

TWO_PLACES = Decimal("0.01")


def to_fixed(value: float) -> str:
    # Decimal(float) is exact, so halves round up the way JS toFixed(2) does
    return str(Decimal(value).quantize(TWO_PLACES, rounding=ROUND_HALF_UP))


def compute_stats(records: Iterable[ObjectRecord]) -> Stats:
    collection_count = 0
    image_count = 0
    total_bytes = 0
    for record in records:
        if keys.is_collection_marker(record.key):
            collection_count += 1
        if keys.is_image_file(record.key):
            image_count += 1
            total_bytes += record.size

    kib = total_bytes / 1024
    mib = kib / 1024
    gib = mib / 1024
    return Stats(
        image_count=image_count,
        storage_mib=to_fixed(mib),
        storage_gib=to_fixed(gib),
        collection_count=collection_count,
    )


class StatsAggregator:
    def __init__(self, listing_client) -> None:
        self.listing_client = listing_client

    async def get_stats(self) -> Stats:
        # unscoped: the listing client pages through the whole bucket
        records = await self.listing_client.list_objects()
        return compute_stats(records)
