"""
Dependency wiring for the FastAPI app.
"""

from __future__ import annotations

from weather_backend.config import Settings, get_settings
from weather_backend.storage import (
    InMemoryStorageClient,
    S3StorageClient,
    StorageClient,
)

_storage_client: StorageClient | None = None


def build_storage_client(settings: Settings) -> StorageClient:
    if settings.use_in_memory_backends:
        return InMemoryStorageClient(
            bucket=settings.s3_bucket_name,
            max_object_bytes=settings.max_object_bytes,
        )
    return S3StorageClient(
        bucket=settings.s3_bucket_name,
        region=settings.aws_region,
        endpoint=settings.s3_endpoint_url,
        connect_timeout=settings.store_connect_timeout,
        read_timeout=settings.store_read_timeout,
        max_object_bytes=settings.max_object_bytes,
    )


def get_storage_client() -> StorageClient:
    """
    Return the process-wide storage client, creating it on first use.
    """
    global _storage_client
    if _storage_client:
        return _storage_client

    _storage_client = build_storage_client(get_settings())
    return _storage_client


def set_storage_client(client: StorageClient | None) -> None:
    """Install (or with ``None``, drop) the process-wide storage client."""
    global _storage_client
    _storage_client = client
