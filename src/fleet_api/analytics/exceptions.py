from http import HTTPStatus

from fastapi import HTTPException


class AnalyticsException(HTTPException):
    """Base exception class for fleet analytics errors."""

    status_code = HTTPStatus.INTERNAL_SERVER_ERROR
    message = "An error occurred while computing fleet analytics."

    def __init__(
        self,
        status_code: HTTPStatus = HTTPStatus.INTERNAL_SERVER_ERROR,
        message: str = "An error occurred while computing fleet analytics.",
    ):
        self.status_code = status_code
        self.message = message or self.message
        super().__init__(status_code=status_code, detail=self.message)
