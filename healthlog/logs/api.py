# -*- coding: utf-8 -*-
"""Health log — API endpoints."""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Depends, Request

from .errors import FETCH_FAILED_MESSAGE, SUBMIT_FAILED_MESSAGE, LogStoreError, ProcessingError
from .models import LogListResponse, SubmitLogResponse
from .storage import LogStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/log", tags=["Health log"])


def get_log_store(request: Request) -> LogStore:
    return request.app.state.log_store


async def read_json_body(request: Request) -> Any:
    # Read by hand so a malformed payload surfaces as a 500 with the fixed
    # error body rather than FastAPI's 422.
    try:
        return await request.json()
    except Exception as exc:
        logger.exception("Error processing health log")
        raise ProcessingError(SUBMIT_FAILED_MESSAGE) from exc


@router.post("", response_model=SubmitLogResponse, summary="Log one health record")
def submit_log(payload: Any = Depends(read_json_body), store: LogStore = Depends(get_log_store)):
    try:
        entry, total = store.submit(payload)
    except LogStoreError as exc:
        if isinstance(exc, ProcessingError):
            logger.error("Error processing health log: %s", exc.message)
            raise ProcessingError(SUBMIT_FAILED_MESSAGE) from exc
        raise
    except Exception as exc:
        logger.exception("Error processing health log")
        raise ProcessingError(SUBMIT_FAILED_MESSAGE) from exc

    return SubmitLogResponse(data=entry, total_logs=total)


@router.get("", response_model=LogListResponse, summary="List all health records")
def list_logs(store: LogStore = Depends(get_log_store)):
    try:
        entries, total = store.list()
    except Exception as exc:
        logger.exception("Error fetching health logs")
        raise ProcessingError(FETCH_FAILED_MESSAGE) from exc
    return LogListResponse(logs=entries, total_logs=total)
