from __future__ import annotations

from datetime import datetime, timezone

from photo_catalog.config import Settings
from photo_catalog.models import ObjectRecord

BUCKET = "test-bucket"
REGION = "us-east-1"
BASE_URL = f"https://s3.{REGION}.amazonaws.com/{BUCKET}"
STAMP = datetime(2021, 3, 5, 12, 30, tzinfo=timezone.utc)


def make_settings(**overrides) -> Settings:
    values = {"AWS_BUCKET_NAME": BUCKET, "AWS_REGION": REGION, "LOG_LEVEL": "WARNING"}
    values.update(overrides)
    return Settings(**values)


def rec(key: str, size: int = 0, last_modified: datetime = STAMP) -> ObjectRecord:
    return ObjectRecord(key=key, size=size, last_modified=last_modified)


class FakeListingClient:
    """Serves canned listings by exact prefix and records every call."""

    def __init__(self, listings: dict | None = None, error: Exception | None = None) -> None:
        self.listings = listings or {}
        self.error = error
        self.calls: list[str] = []

    async def list_objects(self, prefix: str = "") -> list[ObjectRecord]:
        self.calls.append(prefix)
        if self.error is not None:
            raise self.error
        return list(self.listings.get(prefix, []))
