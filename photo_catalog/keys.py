"""
Key namespace conventions for the catalog bucket.

    <collection>/                      folder marker, one per collection
    <collection>/_1-compressed.JPG     half resolution variant
    <collection>/_1.JPG                full resolution original
    <collection>/_0-preview.JPG        collection preview
    <collection>/desc.json             sidecar description
    background/                        reserved folder, never a collection
    background/_splash.JPG             the single splash image
"""
from __future__ import annotations

RESERVED_FOLDER = "background/"
SPLASH_PREFIX = "background/_"
COMPRESSED_TAG = "-compressed"
PREVIEW_TAG = "preview"
IMAGE_SUFFIX = ".JPG"
DESCRIPTION_FILENAME = "desc.json"


def is_folder_marker(key: str) -> bool:
    return key.endswith("/")


def is_reserved(key: str) -> bool:
    return key == RESERVED_FOLDER


def is_collection_marker(key: str) -> bool:
    return is_folder_marker(key) and not is_reserved(key)


def is_compressed_variant(key: str) -> bool:
    return COMPRESSED_TAG in key


def is_preview_tagged(key: str) -> bool:
    return PREVIEW_TAG in key


def is_image_file(key: str) -> bool:
    # case-sensitive: lowercase .jpg is not counted
    return key.endswith(IMAGE_SUFFIX)


def strip_trailing_slash(key: str) -> str:
    if key.endswith("/"):
        return key[:-1]
    return key


def strip_path_prefix(path: str) -> str:
    """Normalize a user supplied collection key so "foo/" and "foo" list the same prefix."""
    return strip_trailing_slash(path)


def collection_prefix(name: str) -> str:
    return f"{strip_path_prefix(name)}/"
