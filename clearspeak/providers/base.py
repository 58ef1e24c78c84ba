"""Remote enhancer abstraction: the collaborator the resolver calls for tier 2."""

from __future__ import annotations

from abc import ABC, abstractmethod


class RemoteEnhancer(ABC):
    """Abstract base class for remote text enhancers."""

    @abstractmethod
    def enhance(self, text: str) -> str:
        """
        Rewrite text to be clearer and more polite while keeping its intent.

        Args:
            text: Raw user text (non-empty)

        Returns:
            The enhanced text

        Raises:
            RemoteEnhancerError: On any provider failure
        """

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable provider name"""

    def is_available(self) -> bool:
        """Check if the enhancer can be called right now. Override if needed."""
        return True


__all__ = ["RemoteEnhancer"]
