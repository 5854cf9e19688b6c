from __future__ import annotations

from typing import Literal, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Core
    APP_NAME: str = "Photography Catalog API"
    API_PREFIX: str = ""
    LOG_LEVEL: str = "INFO"

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 8000

    # AWS / S3
    AWS_REGION: str = "us-east-1"
    AWS_BUCKET_NAME: str = "photography-collections"
    AWS_PROFILE: Optional[str] = None
    S3_ENDPOINT_URL: Optional[str] = None

    # Public URLs
    S3_PUBLIC_HOST: Optional[str] = None  # default: s3.<region>.amazonaws.com
    S3_ADDRESSING_STYLE: Literal["path", "virtual"] = "path"

    # Store client behavior
    S3_CONNECT_TIMEOUT_SECONDS: float = Field(5, gt=0)
    S3_READ_TIMEOUT_SECONDS: float = Field(30, gt=0)
    S3_MAX_ATTEMPTS: int = Field(3, ge=1)

    # Sidecar desc.json fetch
    DESCRIPTION_TIMEOUT_SECONDS: float = Field(10, gt=0)

    @property
    def public_host(self) -> str:
        return self.S3_PUBLIC_HOST or f"s3.{self.AWS_REGION}.amazonaws.com"


settings = Settings()
