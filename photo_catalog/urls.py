from __future__ import annotations

from urllib.parse import quote

from .config import Settings
from .keys import COMPRESSED_TAG


class URLFormatter:
    """
    Maps object keys to their public, unsigned URLs.

    Path style:     https://<host>/<bucket>/<key>
    Virtual style:  https://<bucket>.<host>/<key>
    """

    def __init__(self, bucket: str, region: str, host: str | None = None, addressing_style: str = "path") -> None:
        if addressing_style not in ("path", "virtual"):
            raise ValueError(f"Unknown addressing style: {addressing_style!r}")
        self.bucket = bucket
        self.region = region
        self.host = host or f"s3.{region}.amazonaws.com"
        self.addressing_style = addressing_style

    @classmethod
    def from_settings(cls, cfg: Settings) -> "URLFormatter":
        return cls(
            bucket=cfg.AWS_BUCKET_NAME,
            region=cfg.AWS_REGION,
            host=cfg.public_host,
            addressing_style=cfg.S3_ADDRESSING_STYLE,
        )

    @property
    def base_url(self) -> str:
        if self.addressing_style == "virtual":
            return f"https://{self.bucket}.{self.host}/"
        return f"https://{self.host}/{self.bucket}/"

    def to_public_url(self, key: str) -> str:
        return self.base_url + quote(key, safe="/")

    def to_full_res_url(self, half_res_url: str) -> str:
        # only the key part carries the tag; the host and bucket are left alone
        base = self.base_url
        if half_res_url.startswith(base):
            return base + half_res_url[len(base):].replace(COMPRESSED_TAG, "", 1)
        return half_res_url.replace(COMPRESSED_TAG, "", 1)
