from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Stats:
    """
    Bucket-wide totals.

    Attributes:
        image_count: Number of .JPG objects
        storage_mib: Size of those objects in MiB, two decimals
        storage_gib: Size of those objects in GiB, two decimals
        collection_count: Number of collection folder markers
    """
    image_count: int
    storage_mib: str
    storage_gib: str
    collection_count: int

    def to_dict(self) -> dict:
        return {
            "imageCount": self.image_count,
            "storageMiB": self.storage_mib,
            "storageGiB": self.storage_gib,
            "collectionCount": self.collection_count,
        }
