from __future__ import annotations

import asyncio
import logging
from typing import Any

import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError

from ..config import Settings
from ..errors import ListingFailure
from ..models import ObjectRecord

logger = logging.getLogger(__name__)


def build_s3_client(cfg: Settings) -> Any:
    """
    Create an S3 client using either:
    - AWS_PROFILE (shared config/credentials), or
    - default credential chain (env vars, instance role, etc.)
    """
    if cfg.AWS_PROFILE:
        session = boto3.session.Session(profile_name=cfg.AWS_PROFILE, region_name=cfg.AWS_REGION)
    else:
        session = boto3.session.Session(region_name=cfg.AWS_REGION)

    return session.client(
        "s3",
        endpoint_url=cfg.S3_ENDPOINT_URL,
        config=Config(
            signature_version="s3v4",
            connect_timeout=cfg.S3_CONNECT_TIMEOUT_SECONDS,
            read_timeout=cfg.S3_READ_TIMEOUT_SECONDS,
            retries={"max_attempts": cfg.S3_MAX_ATTEMPTS, "mode": "standard"},
        ),
    )


def _error_payload(exc: Exception) -> Any:
    if isinstance(exc, ClientError):
        return exc.response.get("Error", {}) or str(exc)
    return str(exc)


class S3ListingClient:
    """Lists every object under a prefix, following continuation tokens to the end."""

    def __init__(self, client: Any, bucket: str) -> None:
        self._client = client
        self.bucket = bucket

    @classmethod
    def from_settings(cls, cfg: Settings) -> "S3ListingClient":
        return cls(build_s3_client(cfg), cfg.AWS_BUCKET_NAME)

    @property
    def client(self) -> Any:
        return self._client

    def list_objects_sync(self, prefix: str = "") -> list[ObjectRecord]:
        out: list[ObjectRecord] = []
        paginator = self._client.get_paginator("list_objects_v2")
        try:
            for page in paginator.paginate(Bucket=self.bucket, Prefix=prefix):
                for item in page.get("Contents", []) or []:
                    if item.get("Key"):
                        out.append(ObjectRecord.from_s3(item))
        except (ClientError, BotoCoreError) as exc:
            logger.error("Listing s3://%s/%s failed: %s", self.bucket, prefix, exc)
            raise ListingFailure(prefix, _error_payload(exc)) from exc

        logger.debug("Listed %d objects under s3://%s/%s", len(out), self.bucket, prefix)
        return out

    async def list_objects(self, prefix: str = "") -> list[ObjectRecord]:
        return await asyncio.to_thread(self.list_objects_sync, prefix)
