from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Mapping


@dataclass(frozen=True)
class ObjectRecord:
    key: str
    size: int
    last_modified: datetime

    @classmethod
    def from_s3(cls, item: Mapping[str, Any]) -> "ObjectRecord":
        """Build from one entry of a list_objects_v2 "Contents" array."""
        return cls(key=item["Key"], size=int(item.get("Size") or 0), last_modified=item["LastModified"])
