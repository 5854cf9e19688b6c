from __future__ import annotations

from typing import Any


class CatalogError(Exception):
    """Base class for errors surfaced by the catalog API."""

    status_code = 500

    def payload(self) -> Any:
        return str(self)


class ListingFailure(CatalogError):
    """The object store listing call itself failed (network, auth, service)."""

    def __init__(self, prefix: str, detail: Any) -> None:
        super().__init__(f"listing {prefix or '<bucket>'} failed: {detail}")
        self.prefix = prefix
        self.detail = detail

    def payload(self) -> Any:
        return self.detail


class EmptyResult(CatalogError):
    """A collection-scoped listing matched zero records."""

    status_code = 404

    def __init__(self, key: str) -> None:
        super().__init__(f"404: {key} returned 0 results")
        self.key = key


class InvariantViolation(CatalogError):
    """An operator-maintained bucket invariant does not hold."""


class DescriptionFetchError(CatalogError):
    """The sidecar desc.json could not be fetched."""

    def __init__(self, url: str, detail: str, status_code: int | None = None) -> None:
        super().__init__(f"fetching {url} failed: {detail}")
        self.url = url
        self.status_code = status_code or 502
