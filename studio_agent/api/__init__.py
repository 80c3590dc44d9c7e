from studio_agent.api.client import PumpStudioClient
from studio_agent.api.exceptions import (
    NonJsonResponseError,
    PumpStudioApiError,
    PumpStudioError,
    PumpStudioRateLimitError,
)
from studio_agent.api.models import SubmissionPayload, build_submission

__all__ = [
    "PumpStudioClient",
    "PumpStudioError",
    "PumpStudioApiError",
    "PumpStudioRateLimitError",
    "NonJsonResponseError",
    "SubmissionPayload",
    "build_submission",
]
