from .base import RemoteEnhancer
from .circuit import CircuitBreaker
from .errors import (
    EnhancerCircuitOpenError,
    EnhancerDisabledError,
    EnhancerMisconfiguredError,
    EnhancerTimeoutError,
    EnhancerUpstreamError,
    RemoteEnhancerError,
)
from .factory import create_enhancer
from .openai_compatible_provider import OpenAICompatibleEnhancer
from .openai_provider import OpenAIEnhancer

__all__ = [
    "RemoteEnhancer",
    "CircuitBreaker",
    "EnhancerCircuitOpenError",
    "EnhancerDisabledError",
    "EnhancerMisconfiguredError",
    "EnhancerTimeoutError",
    "EnhancerUpstreamError",
    "RemoteEnhancerError",
    "create_enhancer",
    "OpenAICompatibleEnhancer",
    "OpenAIEnhancer",
]
