from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Collection:
    name: str
    last_modified: str  # display date, e.g. "March 5, 2021"

    def to_dict(self) -> dict:
        return {"Key": self.name, "LastModified": self.last_modified}
