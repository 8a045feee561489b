from typing import Optional


class RosterException(Exception):
    """Base exception class for roster data source errors."""

    message = "An error occurred while loading the vehicle roster."

    def __init__(self, source: str, details: Optional[str] = None):
        self.source = source
        self.details = details
        message = f"{self.message} Source: {source}"
        if details:
            message += f" Details: {details}"
        super().__init__(message)


class RosterUnavailableError(RosterException):
    """Raised when the roster source cannot be read at all."""

    message = "Vehicle roster is not available."


class RosterFormatError(RosterException):
    """Raised when the roster source holds data that is not a valid roster."""

    message = "Vehicle roster has an invalid format."
