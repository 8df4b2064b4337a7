"""LLM client: HTTP connection to a chat-completion backend.

The engine is handed an LLM callable matching the protocol:

    async def __call__(self, stage, system, user, *, max_tokens, temperature) -> str: ...

`stage` identifies the caller ("chat", "thought") and is only used for
logging. Implementations raise LLMError for every failure.

Two implementations are provided:

    HttpLLM: real HTTP client for OpenAI-compatible /v1/chat/completions.
    OfflineLLM: fails every call immediately. Used when no API key is
        configured so the engine serves its local fallbacks.

The engine never calls an LLM directly; it goes through generate(), which
turns the call into a GenerationResult (Generated | GenerationFailed).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Protocol, Union

import httpx

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Protocol: every LLM implementation must match this signature
# ---------------------------------------------------------------------------

class LLM(Protocol):
    async def __call__(
        self,
        stage: str,
        system: str,
        user: str,
        *,
        max_tokens: int,
        temperature: float,
    ) -> str: ...


# ---------------------------------------------------------------------------
# HttpLLM: connects to a real backend
# ---------------------------------------------------------------------------

class HttpLLM:
    """Async HTTP client for OpenAI-compatible chat-completion backends.

      POST {provider_url}/v1/chat/completions
           {"model": ..., "messages": [...], "max_tokens": ..., "temperature": ...}
      Response: {"choices": [{"message": {"content": "..."}}]}

    A null or missing content is returned as "" and left for the caller to
    replace; a missing choices/message structure is a format error.

    Args:
        provider_url: Base URL of the backend, e.g. "https://api.openai.com".
        api_key:      Bearer token, or empty string if not required.
        model:        Model identifier sent with every request.
        timeout:      HTTP timeout in seconds. Must be finite.
    """

    def __init__(
        self,
        provider_url: str,
        api_key: str = "",
        model: str = "gpt-4o",
        timeout: float = 30.0,
    ) -> None:
        self._base_url = provider_url.rstrip("/")
        self._api_key = api_key
        self._model = model
        self._timeout = timeout

    def _headers(self) -> dict[str, str]:
        headers: dict[str, str] = {"Content-Type": "application/json"}
        if self._api_key:
            headers["Authorization"] = f"Bearer {self._api_key}"
        return headers

    def _build_request(
        self, system: str, user: str, max_tokens: int, temperature: float
    ) -> tuple[str, dict]:
        """Return (url, body) for a chat completion."""
        url = f"{self._base_url}/v1/chat/completions"
        body = {
            "model": self._model,
            "messages": [
                {"role": "system", "content": system},
                {"role": "user", "content": user},
            ],
            "max_tokens": max_tokens,
            "temperature": temperature,
        }
        return url, body

    def _parse_response(self, data: dict) -> str:
        """Extract the completion text from the response body."""
        choices = data.get("choices") if isinstance(data, dict) else None
        if not choices or not isinstance(choices[0], dict) or "message" not in choices[0]:
            raise LLMError("Unexpected response format from chat-completion backend")
        return choices[0]["message"].get("content") or ""

    async def __call__(
        self,
        stage: str,
        system: str,
        user: str,
        *,
        max_tokens: int,
        temperature: float,
    ) -> str:
        url, body = self._build_request(system, user, max_tokens, temperature)
        logger.debug("llm call stage=%s url=%s prompt_len=%d", stage, url, len(system) + len(user))

        try:
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                resp = await client.post(url, json=body, headers=self._headers())
                resp.raise_for_status()
        except httpx.ConnectError as e:
            raise LLMError(f"Cannot connect to LLM backend at {self._base_url}") from e
        except httpx.HTTPStatusError as e:
            raise LLMError(
                f"LLM backend returned HTTP {e.response.status_code}"
            ) from e
        except httpx.TimeoutException as e:
            raise LLMError(f"LLM backend timed out after {self._timeout}s") from e
        except httpx.HTTPError as e:
            raise LLMError(f"LLM request failed: {e}") from e

        try:
            data = resp.json()
        except ValueError as e:
            raise LLMError("LLM backend returned a non-JSON body") from e

        text = self._parse_response(data)
        logger.debug("llm response stage=%s len=%d", stage, len(text))
        return text


# ---------------------------------------------------------------------------
# OfflineLLM: no API key configured; every call fails without network I/O
# ---------------------------------------------------------------------------

class OfflineLLM:
    """Raises LLMError on every call. No network calls.

    Lets the app run without credentials: the engine sees a failure on each
    turn and answers from its fallback tables.
    """

    async def __call__(
        self,
        stage: str,
        system: str,
        user: str,
        *,
        max_tokens: int,
        temperature: float,
    ) -> str:
        logger.debug("OfflineLLM stage=%s", stage)
        raise LLMError("No API key configured; running in fallback mode")


# ---------------------------------------------------------------------------
# GenerationResult: what the engine receives from generate()
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Generated:
    text: str


@dataclass(frozen=True)
class GenerationFailed:
    reason: str


GenerationResult = Union[Generated, GenerationFailed]


async def generate(
    llm: LLM,
    stage: str,
    system: str,
    user: str,
    *,
    max_tokens: int,
    temperature: float,
) -> GenerationResult:
    """Call the LLM once. Never raises; failures come back as GenerationFailed."""
    try:
        text = await llm(stage, system, user, max_tokens=max_tokens, temperature=temperature)
    except LLMError as e:
        logger.warning("llm call failed stage=%s: %s", stage, e)
        return GenerationFailed(reason=str(e))
    except Exception as e:
        logger.exception("unexpected error from llm stage=%s", stage)
        return GenerationFailed(reason=f"{type(e).__name__}: {e}")
    return Generated(text=text)


# ---------------------------------------------------------------------------
# LLMError: raised by LLM implementations for all connection and protocol failures
# ---------------------------------------------------------------------------

class LLMError(RuntimeError):
    """Raised when the LLM backend cannot be reached or returns an error."""
