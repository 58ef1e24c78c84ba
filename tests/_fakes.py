from __future__ import annotations

from typing import Callable, List, Optional

from clearspeak.providers import EnhancerUpstreamError, RemoteEnhancer


class FakeEnhancer(RemoteEnhancer):
    """Deterministic, side-effect-free remote enhancer that records its calls."""

    def __init__(self, rewrite: Optional[Callable[[str], str]] = None, available: bool = True):
        self._rewrite = rewrite or (lambda text: f"Enhanced: {text}")
        self.available = available
        self.calls: List[str] = []

    @property
    def name(self) -> str:
        return "fake"

    def is_available(self) -> bool:
        return self.available

    def enhance(self, text: str) -> str:
        self.calls.append(text)
        return self._rewrite(text)


class FailingEnhancer(FakeEnhancer):
    def __init__(self, error: Optional[Exception] = None):
        super().__init__()
        self.error = error or EnhancerUpstreamError("upstream down", provider="fake")

    def enhance(self, text: str) -> str:
        self.calls.append(text)
        raise self.error
