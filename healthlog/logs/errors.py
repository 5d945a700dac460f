# -*- coding: utf-8 -*-
"""Health log — error taxonomy."""

from __future__ import annotations

from fastapi import status
from fastapi.responses import JSONResponse

REQUIRED_FIELDS_MESSAGE = "Date and Time are required fields"
SUBMIT_FAILED_MESSAGE = "Failed to process health data"
FETCH_FAILED_MESSAGE = "Failed to fetch health data"


class LogStoreError(Exception):
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def to_response(self) -> JSONResponse:
        return JSONResponse(status_code=self.status_code, content={"error": self.message})


class ValidationError(LogStoreError):
    """Caller omitted a required field; correctable by the client."""

    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str = REQUIRED_FIELDS_MESSAGE) -> None:
        super().__init__(message)


class ProcessingError(LogStoreError):
    """Any other fault while handling a request."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
