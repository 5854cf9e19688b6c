from .object_record import ObjectRecord
from .collection import Collection
from .photo import Photo
from .stats import Stats

__all__ = ["ObjectRecord", "Collection", "Photo", "Stats"]
