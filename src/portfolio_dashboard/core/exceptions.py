"""Application-level exceptions."""


class AppError(Exception):
    """Base exception for application errors."""

    status_code = 400

    def __init__(self, message: str, code: str = "APP_ERROR"):
        self.message = message
        self.code = code
        super().__init__(message)


class ValidationError(AppError):
    """Raised when request input validation fails."""

    def __init__(self, message: str):
        super().__init__(message, code="VALIDATION_ERROR")


class HoldingsFileError(AppError):
    """Raised when the holdings file is missing or cannot be parsed, even after repair."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message, code="HOLDINGS_FILE_ERROR")


class UpstreamError(AppError):
    """Raised by providers when an upstream data source fails or returns unusable data."""

    status_code = 502

    def __init__(self, source: str, detail: str):
        self.source = source
        super().__init__(f"{source} request failed: {detail}", code="UPSTREAM_ERROR")


class ServerError(AppError):
    """Raised for unexpected failures while building a response."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message, code="SERVER_ERROR")
