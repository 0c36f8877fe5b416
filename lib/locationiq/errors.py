"""
LocationIQ Client Errors

This module contains the error kinds and exception classes raised by the
LocationIQ client. Every exception carries a code from the Errors enum and,
where available, the underlying cause in its origin field.
"""

import logging
from enum import IntEnum
from typing import Any, Optional

logger = logging.getLogger(__name__)


class Errors(IntEnum):
    """All possible error kinds, dood!

    Values:
        NOT_INITIATED: Client has no token. Call LocationIQClient.init()
        INVALID_PARAMETERS: Call arguments match none of the accepted shapes
        FETCHING: Transport error while reaching the server.
            origin holds the original httpx error
        PARSING: Response body is not valid JSON.
            origin holds the httpx.Response
        SERVER: Response parsed but is not a geocoding result.
            origin holds the parsed body
    """

    NOT_INITIATED = 0
    INVALID_PARAMETERS = 1
    FETCHING = 2
    PARSING = 3
    SERVER = 4


class LocationIQError(Exception):
    """Base exception class for all LocationIQ client errors, dood!

    Attributes:
        code: Error kind
        message: Human-readable error message
        origin: Underlying cause (transport error, raw response or parsed body)
    """

    def __init__(self, code: Errors, message: str, origin: Optional[Any] = None) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.origin = origin
        logger.debug(f"LocationIQError: {message} (code: {code.name})")

    def __str__(self) -> str:
        return f"{self.message} (code: {self.code.name})"


class NotInitiatedError(LocationIQError):
    """Raised when an operation is called before the client got a token."""

    def __init__(
        self,
        message: str = "LocationIQ client isn't initialized. Call init(), passing it your token as parameter.",
    ) -> None:
        super().__init__(Errors.NOT_INITIATED, message)


class InvalidParametersError(LocationIQError):
    """Raised when the call arguments match none of the accepted shapes."""

    def __init__(self, message: str) -> None:
        super().__init__(Errors.INVALID_PARAMETERS, message)


class FetchingError(LocationIQError):
    """Raised on transport failure: DNS, refused connection, timeout and so on.

    The origin attribute holds the httpx error.
    """

    def __init__(
        self,
        origin: Any,
        message: str = "Error while fetching. Check your network.",
    ) -> None:
        super().__init__(Errors.FETCHING, message, origin)


class ParsingError(LocationIQError):
    """Raised when the response body can't be parsed as JSON.

    The origin attribute holds the httpx.Response, so the body can be read again.
    """

    def __init__(
        self,
        origin: Any,
        message: str = (
            "Error while parsing response's body into JSON. "
            "The response is in the error's 'origin' field. Try to parse it yourself."
        ),
    ) -> None:
        super().__init__(Errors.PARSING, message, origin)


class ServerError(LocationIQError):
    """Raised when the parsed body carries no place_id, no first element and no osm_id.

    The origin attribute holds the parsed body.
    """

    def __init__(
        self,
        origin: Any,
        message: str = (
            "Error from the server while geocoding. "
            "The received data is in the error's 'origin' field. Check it for more information."
        ),
    ) -> None:
        super().__init__(Errors.SERVER, message, origin)
