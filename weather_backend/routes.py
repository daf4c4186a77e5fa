"""
HTTP routes for the weather backend.
"""

from __future__ import annotations

import json
import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from weather_backend.dependencies import get_storage_client
from weather_backend.errors import INVALID_EMAIL_MESSAGE, ApiError
from weather_backend.schemas import ErrorResponse, MessageResponse, SubscribeRequest
from weather_backend.storage import ObjectNotFound, StorageClient, StorageError
from weather_backend.subscribers import (
    email_body,
    is_plausible_email,
    sanitize_email,
    subscriber_key,
)

logger = logging.getLogger(__name__)

router = APIRouter()

WEATHER_FILE_KEY = "daily-data/prediction.json"


def _reject_constant(name: str):
    raise ValueError(f"Non-standard JSON constant {name}")


@router.get(
    "/weather",
    responses={404: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def get_weather(storage: StorageClient = Depends(get_storage_client)):
    """
    Return the latest prediction document exactly as the daily job wrote it.
    """
    logger.info("Fetching weather from s3://%s/%s", storage.bucket, WEATHER_FILE_KEY)
    try:
        raw = storage.get_bytes(WEATHER_FILE_KEY)
        weather = json.loads(raw.decode("utf-8"), parse_constant=_reject_constant)
        # Rendering can still fail, e.g. on lone surrogate escapes.
        response = JSONResponse(status_code=200, content=weather)
    except ObjectNotFound as exc:
        logger.error("Weather prediction missing: %s", exc)
        raise ApiError(404, "Weather prediction file not found.") from exc
    except (StorageError, UnicodeDecodeError, ValueError) as exc:
        logger.exception("Failed to fetch weather data: %s", exc)
        raise ApiError(500, "Failed to fetch weather data.", error=str(exc)) from exc
    return response


@router.post(
    "/subscribe",
    response_model=MessageResponse,
    status_code=201,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def subscribe(
    payload: SubscribeRequest,
    storage: StorageClient = Depends(get_storage_client),
):
    email = payload.email
    if not is_plausible_email(email):
        raise ApiError(400, INVALID_EMAIL_MESSAGE)

    key = subscriber_key(email)
    if sanitize_email(email) != email:
        # Distinct raw emails may share this key; the later write wins.
        logger.warning("Email %r stored under sanitized key %s", email, key)

    logger.info("Saving subscription to s3://%s/%s", storage.bucket, key)
    try:
        storage.put_bytes(key, email_body(email), "text/plain")
    except StorageError as exc:
        logger.exception("Failed to save subscription: %s", exc)
        raise ApiError(500, "Failed to save subscription.", error=str(exc)) from exc
    return MessageResponse(message="Subscription successful!")
