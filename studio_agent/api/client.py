"""Pump Studio API client: key registration, discovery, DataPoints, submission.

Base URL: https://api.pump.studio
Auth: Authorization: Bearer ps_xxx (registration works without a key)
"""

import asyncio
from typing import Any

import httpx
from loguru import logger

from studio_agent.api.exceptions import (
    NonJsonResponseError,
    PumpStudioApiError,
    PumpStudioRateLimitError,
)
from studio_agent.api.models import (
    ContextResponse,
    DataPointResponse,
    MarketResponse,
    MarketTab,
    MarketToken,
    ProfileResponse,
    RegisterResponse,
    SubmissionPayload,
    SubmitResult,
    TokenContext,
)
from studio_agent.api.rate_limiter import RateLimiter
from studio_agent.models.datapoint import DataPoint

DEFAULT_BASE_URL = "https://api.pump.studio"
MAX_RETRIES = 2
RETRY_DELAYS = [1.0, 3.0]
ERROR_BODY_PREVIEW = 200


class PumpStudioClient:
    """Async HTTP client for the Pump Studio agent API."""

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        api_key: str | None = None,
        *,
        timeout: float = 15.0,
        max_rps: float = 2.0,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._rate_limiter = RateLimiter(max_rps)
        headers = {"Accept": "application/json"}
        if api_key:
            headers["Authorization"] = f"Bearer {api_key}"
        self._client = httpx.AsyncClient(timeout=timeout, headers=headers)

    async def close(self) -> None:
        await self._client.aclose()

    async def _request(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        body: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Send a request and return the decoded JSON body.

        429 and transport timeouts are retried; anything else non-2xx raises.
        """
        url = f"{self._base_url}{path}"

        for attempt in range(MAX_RETRIES + 1):
            try:
                await self._rate_limiter.acquire()
                resp = await self._client.request(method, url, params=params, json=body)
            except (httpx.TimeoutException, httpx.ConnectError) as e:
                if attempt < MAX_RETRIES:
                    delay = RETRY_DELAYS[min(attempt, len(RETRY_DELAYS) - 1)]
                    logger.debug(f"[STUDIO] {type(e).__name__} on {path}, retry in {delay}s")
                    await asyncio.sleep(delay)
                    continue
                logger.warning(f"[STUDIO] {method} {path} failed: {e}")
                raise

            if resp.status_code == 429:
                if attempt < MAX_RETRIES:
                    delay = RETRY_DELAYS[min(attempt, len(RETRY_DELAYS) - 1)]
                    logger.debug(f"[STUDIO] Rate limited on {path}, waiting {delay}s")
                    await asyncio.sleep(delay)
                    continue
                raise PumpStudioRateLimitError(f"{method} {path}: rate limited", 429)

            try:
                data = resp.json()
            except ValueError as e:
                raise NonJsonResponseError(
                    f"{method} {path} returned non-JSON ({resp.status_code}): "
                    f"{resp.text[:ERROR_BODY_PREVIEW]}"
                ) from e

            if not 200 <= resp.status_code < 300:
                error = data.get("error") if isinstance(data, dict) else None
                raise PumpStudioApiError(
                    f"{method} {path}: {error or f'HTTP {resp.status_code}'}",
                    resp.status_code,
                )
            return data

        raise PumpStudioRateLimitError(f"{method} {path}: rate limited", 429)

    # ---- API key registration ----

    async def register(self, name: str, description: str | None = None) -> RegisterResponse:
        data = await self._request(
            "POST", "/api/v1/keys/register",
            body={"name": name, "description": description},
        )
        return RegisterResponse.model_validate(data)

    # ---- Agent profile ----

    async def get_profile(self) -> ProfileResponse:
        data = await self._request("GET", "/api/v1/agent/profile")
        return ProfileResponse.model_validate(data)

    async def set_profile(
        self,
        name: str,
        description: str,
        *,
        twitter_handle: str | None = None,
        website: str | None = None,
    ) -> bool:
        body: dict[str, Any] = {"name": name, "description": description}
        if twitter_handle:
            body["twitterHandle"] = twitter_handle
        if website:
            body["website"] = website
        data = await self._request("POST", "/api/v1/agent/profile", body=body)
        return bool(data.get("ok"))

    # ---- Market discovery ----

    async def get_market(self, tab: MarketTab = "new", limit: int = 5) -> list[MarketToken]:
        data = await self._request(
            "GET", "/api/v1/market",
            params={"tab": tab, "limit": limit, "format": "json"},
        )
        return MarketResponse.model_validate(data).data or []

    # ---- DataPoint snapshot ----

    async def get_datapoint(self, mint: str) -> DataPoint:
        data = await self._request("GET", "/api/v1/datapoint", params={"mint": mint})
        resp = DataPointResponse.model_validate(data)
        if resp.data is None:
            raise PumpStudioApiError(f"No DataPoint returned for {mint}")
        return resp.data

    # ---- Token context (bring your own LLM) ----

    async def get_context(self, mint: str) -> TokenContext:
        data = await self._request("GET", "/api/v1/chat/context", params={"mint": mint})
        resp = ContextResponse.model_validate(data)
        if resp.data is None:
            raise PumpStudioApiError(f"No context returned for {mint}")
        return resp.data

    # ---- Analysis submission ----

    async def submit_analysis(self, payload: SubmissionPayload) -> SubmitResult:
        data = await self._request(
            "POST", "/api/v1/analysis/submit", body=payload.model_dump()
        )
        return SubmitResult.model_validate(data)
