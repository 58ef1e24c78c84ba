"""OpenAI-compatible enhancer for Llama, Groq, Mistral, vLLM, Ollama, etc."""

from __future__ import annotations

from typing import Any

from .errors import EnhancerMisconfiguredError
from .openai_provider import OpenAIEnhancer


class OpenAICompatibleEnhancer(OpenAIEnhancer):
    """
    Enhancer for any service that implements the OpenAI chat-completions format.

    Usage:
        enhancer = OpenAICompatibleEnhancer(
            api_key="your-key",
            model="mistral-small",
            base_url="http://localhost:11434/v1/chat/completions",
        )
    """

    provider_key = "openai_compat"
    # self-hosted servers often run without auth
    requires_api_key = False

    def __init__(self, api_key: str | None, model: str, base_url: str, **kwargs: Any):
        if not base_url:
            raise EnhancerMisconfiguredError("base_url is required for openai_compat", provider=self.provider_key)
        super().__init__(api_key=api_key, model=model, base_url=base_url, **kwargs)


__all__ = ["OpenAICompatibleEnhancer"]
