"""Remote enhancer factory driven by application settings."""

from __future__ import annotations

import logging
from typing import Optional

from clearspeak.config import Settings

from .base import RemoteEnhancer
from .circuit import CircuitBreaker
from .errors import EnhancerMisconfiguredError
from .openai_compatible_provider import OpenAICompatibleEnhancer
from .openai_provider import OpenAIEnhancer

logger = logging.getLogger(__name__)


def create_enhancer(settings: Settings) -> Optional[RemoteEnhancer]:
    """
    Create the remote enhancer described by ``settings``.

    Settings used:
        ENHANCER_PROVIDER: "none", "openai" or "openai_compat" (default: "none")
        ENHANCER_API_KEY: required for "openai"
        ENHANCER_BASE_URL: optional for "openai", required for "openai_compat"
        ENHANCER_CALLS_ENABLED: kill switch, 0 builds the enhancer disabled

    Returns:
        Configured enhancer, or None when ENHANCER_PROVIDER is "none"

    Raises:
        EnhancerMisconfiguredError: If the provider is unknown or required values are missing
    """
    provider = settings.enhancer_provider
    if provider == "none":
        logger.info("[ENHANCER] no remote enhancer configured")
        return None
    if not settings.enhancer_enabled:
        logger.info("[ENHANCER] remote enhancer calls disabled", extra={"provider": provider})

    breaker = CircuitBreaker(
        failure_threshold=settings.enhancer_circuit_breaker_failures,
        window_seconds=settings.enhancer_circuit_breaker_window_seconds,
        open_seconds=settings.enhancer_circuit_breaker_open_seconds,
    )
    common = dict(
        language=settings.enhancer_language,
        temperature=settings.enhancer_temperature,
        max_tokens=settings.enhancer_max_tokens,
        timeout_seconds=float(settings.enhancer_timeout_seconds),
        connect_timeout_seconds=float(settings.enhancer_connect_timeout_seconds),
        breaker=breaker,
        enabled=settings.enhancer_calls_enabled != 0,
    )

    if provider == "openai":
        if not settings.enhancer_api_key:
            raise EnhancerMisconfiguredError("ENHANCER_API_KEY is required for openai", provider=provider)
        if settings.enhancer_base_url:
            return OpenAIEnhancer(
                api_key=settings.enhancer_api_key,
                model=settings.enhancer_model,
                base_url=settings.enhancer_base_url,
                **common,
            )
        return OpenAIEnhancer(api_key=settings.enhancer_api_key, model=settings.enhancer_model, **common)

    if provider == "openai_compat":
        if not settings.enhancer_base_url:
            raise EnhancerMisconfiguredError("ENHANCER_BASE_URL is required for openai_compat", provider=provider)
        return OpenAICompatibleEnhancer(
            api_key=settings.enhancer_api_key,
            model=settings.enhancer_model,
            base_url=settings.enhancer_base_url,
            **common,
        )

    raise EnhancerMisconfiguredError(
        f"Unknown ENHANCER_PROVIDER: {provider}. Must be 'none', 'openai' or 'openai_compat'",
        provider=provider,
    )


__all__ = ["create_enhancer"]
