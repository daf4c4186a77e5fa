"""
Storage abstraction for S3 object storage and in-memory testing.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional, Protocol

import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError

NOT_FOUND_CODES = {"NoSuchKey", "404", "NotFound"}


class StorageError(Exception):
    """Any failure reported by the object store."""


class ObjectNotFound(StorageError):
    """The requested key does not exist in the bucket."""

    def __init__(self, path: str):
        super().__init__(f"No object at key {path!r}")
        self.path = path


class ObjectTooLarge(StorageError):
    """The object is bigger than the configured buffering cap."""

    def __init__(self, path: str, limit: int):
        super().__init__(f"Object {path!r} exceeds the {limit} byte limit")
        self.path = path
        self.limit = limit


class StorageClient(Protocol):
    """Defines the operations the API needs from object storage."""

    bucket: str

    def get_bytes(self, path: str) -> bytes:
        ...

    def put_bytes(self, path: str, body: bytes, content_type: str) -> None:
        ...


@dataclass
class StoredObject:
    body: bytes
    content_type: str


@dataclass
class InMemoryStorageClient:
    """Test double for storage interactions."""

    bucket: str = "in-memory"
    max_object_bytes: Optional[int] = None
    stored_objects: dict[str, StoredObject] = field(default_factory=dict)

    def get_bytes(self, path: str) -> bytes:
        stored = self.stored_objects.get(path)
        if stored is None:
            raise ObjectNotFound(path)
        if self.max_object_bytes is not None and len(stored.body) > self.max_object_bytes:
            raise ObjectTooLarge(path, self.max_object_bytes)
        return stored.body

    def put_bytes(self, path: str, body: bytes, content_type: str) -> None:
        self.stored_objects[path] = StoredObject(bytes(body), content_type)

    def reset(self) -> None:
        self.stored_objects.clear()


@dataclass
class S3StorageClient:
    """
    S3 storage client bound to a single bucket.

    Every call is a single attempt: botocore retries are disabled and the
    connect/read timeouts are bounded so a stalled store fails the request
    instead of hanging it. Object bodies are buffered in memory, capped at
    ``max_object_bytes``.
    """

    bucket: str
    region: str
    endpoint: Optional[str] = None
    connect_timeout: float = 5.0
    read_timeout: float = 10.0
    max_object_bytes: int = 1024 * 1024

    def __post_init__(self):
        config = Config(
            region_name=self.region,
            connect_timeout=self.connect_timeout,
            read_timeout=self.read_timeout,
            retries={"mode": "standard", "max_attempts": 1},
        )
        self._client = boto3.client(
            "s3",
            endpoint_url=self.endpoint,
            region_name=self.region,
            config=config,
        )

    def get_bytes(self, path: str) -> bytes:
        try:
            response = self._client.get_object(Bucket=self.bucket, Key=path)
            return self._read_body(path, response)
        except ClientError as exc:
            if _error_code(exc) in NOT_FOUND_CODES:
                raise ObjectNotFound(path) from exc
            raise StorageError(str(exc)) from exc
        except BotoCoreError as exc:
            raise StorageError(str(exc)) from exc

    def put_bytes(self, path: str, body: bytes, content_type: str) -> None:
        try:
            self._client.put_object(
                Bucket=self.bucket,
                Key=path,
                Body=body,
                ContentType=content_type,
            )
        except (ClientError, BotoCoreError) as exc:
            raise StorageError(str(exc)) from exc

    def _read_body(self, path: str, response: dict[str, Any]) -> bytes:
        stream = response["Body"]
        try:
            length = response.get("ContentLength")
            if length is not None and length > self.max_object_bytes:
                raise ObjectTooLarge(path, self.max_object_bytes)
            # Read one byte past the cap so a missing/lying length is caught too.
            data = stream.read(self.max_object_bytes + 1)
            if len(data) > self.max_object_bytes:
                raise ObjectTooLarge(path, self.max_object_bytes)
            return data
        finally:
            stream.close()


def _error_code(exc: ClientError) -> str:
    return str(exc.response.get("Error", {}).get("Code", ""))
