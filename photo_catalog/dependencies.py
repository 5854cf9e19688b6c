from __future__ import annotations

from fastapi import Request

from .services.catalog import CollectionCatalog
from .services.description_service import DescriptionClient
from .services.photos import PhotoSetResolver
from .services.splash import SplashImageResolver
from .services.stats import StatsAggregator
from .urls import URLFormatter


def get_url_formatter(request: Request) -> URLFormatter:
    return request.app.state.urls


def get_catalog(request: Request) -> CollectionCatalog:
    return CollectionCatalog(request.app.state.listing_client)


def get_photo_resolver(request: Request) -> PhotoSetResolver:
    return PhotoSetResolver(request.app.state.listing_client, request.app.state.urls)


def get_splash_resolver(request: Request) -> SplashImageResolver:
    return SplashImageResolver(request.app.state.listing_client, request.app.state.urls)


def get_stats_aggregator(request: Request) -> StatsAggregator:
    return StatsAggregator(request.app.state.listing_client)


def get_description_client(request: Request) -> DescriptionClient:
    return DescriptionClient(request.app.state.http_client)
