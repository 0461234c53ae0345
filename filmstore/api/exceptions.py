from typing import Optional


class APIError(Exception):
    """Base class for every failure raised by the backend client."""

    default_message = "Unexpected backend error"

    @property
    def description(self) -> str:
        return str(self) or self.default_message


class InvalidResponse(APIError):
    """The backend answered with a status outside of 2xx."""

    default_message = "Invalid response from server"

    def __init__(self, status_code: Optional[int] = None):
        self.status_code = status_code
        message = self.default_message
        if status_code is not None:
            message = f"{message} (HTTP {status_code})"
        super().__init__(message)


class DecodingError(APIError):
    """The response body did not have the expected shape."""

    default_message = "Could not read the server response"


class ServerError(APIError):
    """Well-formed reply in which the backend reports a failure."""

    default_message = "Server reported an error"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class NetworkError(APIError):
    """Transport-level fault: DNS, connection, timeout."""

    default_message = "Network error"

    def __init__(self, cause: Exception):
        self.cause = cause
        super().__init__(f"{self.default_message}: {cause}")
