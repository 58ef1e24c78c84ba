"""Local, rule-based rewrite used when nothing better is available."""

from __future__ import annotations

POLITE_PREFIX = "Could you please help me with this: "
PREFIX_MIN_LENGTH = 10
TERMINAL_PUNCTUATION = (".", "?", "!")
QUESTION_CUES = ("where", "how", "what")


def _is_question(text: str) -> bool:
    lowered = text.lower()
    return "?" in text or any(cue in lowered for cue in QUESTION_CUES)


def rewrite(text: str) -> str:
    """Capitalize, add a politeness prefix to longer requests, and close the sentence.

    Whitespace-only input is returned as given.
    """
    if not text or not text.strip():
        return text

    enhanced = text.strip()
    enhanced = enhanced[0].upper() + enhanced[1:]

    lowered = enhanced.lower()
    if "please" not in lowered and "thank" not in lowered and len(enhanced) > PREFIX_MIN_LENGTH:
        enhanced = POLITE_PREFIX + enhanced

    # checked after the prefix; the cue scan sees the full sentence
    if not enhanced.endswith(TERMINAL_PUNCTUATION):
        enhanced += "?" if _is_question(enhanced) else "."

    return enhanced


__all__ = ["POLITE_PREFIX", "rewrite"]
