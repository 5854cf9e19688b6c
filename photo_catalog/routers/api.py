from __future__ import annotations

from fastapi import APIRouter, Depends, Request

from ..dependencies import (
    get_catalog,
    get_description_client,
    get_photo_resolver,
    get_splash_resolver,
    get_stats_aggregator,
)
from ..services.catalog import CollectionCatalog
from ..services.description_service import DescriptionClient
from ..services.photos import PhotoSetResolver
from ..services.splash import SplashImageResolver
from ..services.stats import StatsAggregator

router = APIRouter()


@router.get("/splash-image", name="splash_image")
async def splash_image(resolver: SplashImageResolver = Depends(get_splash_resolver)):
    return {"URL": await resolver.get_splash_url()}


@router.get("/collection-names", name="collection_names")
async def collection_names(catalog: CollectionCatalog = Depends(get_catalog)):
    collections = await catalog.get_collections()
    return [c.to_dict() for c in collections]


# {key:path} so "name/" is accepted; the resolvers strip the trailing slash
@router.get("/collection-description/{key:path}", name="collection_description")
async def collection_description(
    key: str,
    resolver: PhotoSetResolver = Depends(get_photo_resolver),
    descriptions: DescriptionClient = Depends(get_description_client),
):
    return await descriptions.fetch(resolver.description_url(key))


@router.get("/collection-contents/{key:path}", name="collection_contents")
async def collection_contents(key: str, resolver: PhotoSetResolver = Depends(get_photo_resolver)):
    photos = await resolver.list_photos(key)
    return [p.to_dict() for p in photos]


@router.get("/collection-preview/{key:path}", name="collection_preview")
async def collection_preview(key: str, resolver: PhotoSetResolver = Depends(get_photo_resolver)):
    return {"URL": await resolver.get_preview_url(key)}


@router.get("/S3-server-stats", name="server_stats")
async def server_stats(aggregator: StatsAggregator = Depends(get_stats_aggregator)):
    stats = await aggregator.get_stats()
    return stats.to_dict()


@router.get("/health", name="health")
def health(request: Request):
    """Configuration echo only; does not touch the bucket."""
    urls = request.app.state.urls
    return {"status": "healthy", "bucket": urls.bucket, "region": urls.region}
