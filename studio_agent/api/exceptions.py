class PumpStudioError(Exception):
    pass


class PumpStudioApiError(PumpStudioError):
    """Non-2xx response, or a 2xx response missing its payload."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class PumpStudioRateLimitError(PumpStudioApiError):
    pass


class NonJsonResponseError(PumpStudioError):
    pass
