from http import HTTPStatus
from typing import Optional

from fastapi import HTTPException


class APIKeyError(HTTPException):
    """Base class for rejected analytics API keys."""

    status_code = HTTPStatus.UNAUTHORIZED
    message = "Fleet analytics request was not authorized."

    def __init__(self, detail: Optional[str] = None):
        super().__init__(self.status_code, detail or self.message)


class MissingAPIKeyError(APIKeyError):
    status_code = HTTPStatus.UNAUTHORIZED
    message = "Fleet analytics endpoints require an API key header."


class InvalidAPIKeyError(APIKeyError):
    status_code = HTTPStatus.FORBIDDEN
    message = "API key is not allowed to read fleet analytics."

    def __init__(self, api_key: Optional[str] = None):
        detail = f"{self.message} Key: {api_key}" if api_key else None
        super().__init__(detail)
