"""OpenAI chat-completions enhancer."""

from __future__ import annotations

import json
import logging
from typing import Any, Dict, Optional

import httpx

from .base import RemoteEnhancer
from .circuit import CircuitBreaker
from .errors import (
    EnhancerCircuitOpenError,
    EnhancerDisabledError,
    EnhancerMisconfiguredError,
    EnhancerTimeoutError,
    EnhancerUpstreamError,
)
from .prompt import build_messages, clean_output

logger = logging.getLogger(__name__)

DEFAULT_OPENAI_URL = "https://api.openai.com/v1/chat/completions"


class OpenAIEnhancer(RemoteEnhancer):
    """Enhances text through an OpenAI-style ``/chat/completions`` endpoint."""

    provider_key = "openai"
    requires_api_key = True

    def __init__(
        self,
        api_key: Optional[str],
        model: str,
        base_url: str = DEFAULT_OPENAI_URL,
        *,
        language: str = "en",
        temperature: float = 0.7,
        max_tokens: int = 256,
        timeout_seconds: float = 30.0,
        connect_timeout_seconds: float = 10.0,
        enabled: bool = True,
        breaker: Optional[CircuitBreaker] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.api_key = api_key
        self.model = model
        self.base_url = base_url
        self.language = language
        self.temperature = temperature
        self.max_tokens = max_tokens
        self.timeout_seconds = timeout_seconds
        self.connect_timeout_seconds = connect_timeout_seconds
        self.enabled = enabled
        self.breaker = breaker
        self._transport = transport

    @property
    def name(self) -> str:
        return f"{self.provider_key}:{self.model}"

    def is_available(self) -> bool:
        if not self.enabled or not self._configured():
            return False
        if self.breaker is not None:
            open_now, _ = self.breaker.is_open()
            return not open_now
        return True

    def enhance(self, text: str) -> str:
        if not self.enabled:
            raise EnhancerDisabledError("enhancer calls disabled", provider=self.provider_key)
        if not self._configured():
            raise EnhancerMisconfiguredError("enhancer api key or url missing", provider=self.provider_key)

        if self.breaker is not None:
            open_now, retry_after = self.breaker.is_open()
            if open_now:
                raise EnhancerCircuitOpenError(retry_after, provider=self.provider_key)

        try:
            data = self._post(self._payload(text))
            enhanced = self._extract_text(data)
        except (EnhancerTimeoutError, EnhancerUpstreamError):
            if self.breaker is not None:
                self.breaker.record_failure()
            raise

        if self.breaker is not None:
            self.breaker.record_success()
        return enhanced

    def _configured(self) -> bool:
        if self.requires_api_key and not self.api_key:
            return False
        return bool(self.base_url)

    def _payload(self, text: str) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "model": self.model,
            "messages": build_messages(text, self.language),
            "temperature": self.temperature,
        }
        if self.max_tokens:
            payload["max_tokens"] = self.max_tokens
        return payload

    def _post(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        headers = {"Content-Type": "application/json"}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"
        timeout = httpx.Timeout(self.timeout_seconds, connect=self.connect_timeout_seconds)

        try:
            with httpx.Client(timeout=timeout, transport=self._transport) as client:
                resp = client.post(self.base_url, headers=headers, json=payload)
                resp.raise_for_status()
                return resp.json()
        except httpx.TimeoutException as exc:
            raise EnhancerTimeoutError(
                "enhancer request timeout",
                provider=self.provider_key,
                original_error=exc,
            ) from exc
        except httpx.HTTPError as exc:
            raise EnhancerUpstreamError(
                f"enhancer HTTP error: {exc}",
                provider=self.provider_key,
                original_error=exc,
            ) from exc
        except json.JSONDecodeError as exc:
            raise EnhancerUpstreamError(
                "enhancer returned invalid JSON",
                provider=self.provider_key,
                original_error=exc,
            ) from exc

    def _extract_text(self, data: Dict[str, Any]) -> str:
        try:
            content = data["choices"][0]["message"]["content"]
        except (KeyError, IndexError, TypeError) as exc:
            raise EnhancerUpstreamError(
                f"enhancer response missing expected fields: {exc}",
                provider=self.provider_key,
                original_error=exc,
            ) from exc

        enhanced = clean_output(content)
        if not enhanced:
            raise EnhancerUpstreamError("enhancer returned empty text", provider=self.provider_key)
        logger.debug("[ENHANCER] response received", extra={"provider": self.provider_key, "chars": len(enhanced)})
        return enhanced


__all__ = ["DEFAULT_OPENAI_URL", "OpenAIEnhancer"]
