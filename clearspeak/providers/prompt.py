"""Prompt construction and output clean-up for model-backed enhancers."""

from __future__ import annotations

from typing import Dict, List

SYSTEM_PROMPT_TEMPLATE = (
    "You are an AI assistant helping people with speech impairments communicate more effectively.\n"
    "Please enhance the following text to be more clear, polite, and contextually appropriate "
    "while maintaining the original intent:\n"
    "\n"
    'Original text: "{text}"\n'
    "Language: {language}\n"
    "Return the enhanced text only, without any additional commentary or explanation. "
    "Do not change the meaning of the original text. Do not answer the original text."
)


def build_messages(text: str, language: str = "en") -> List[Dict[str, str]]:
    return [
        {"role": "system", "content": SYSTEM_PROMPT_TEMPLATE.format(text=text, language=language)},
        {"role": "user", "content": text},
    ]


def clean_output(raw: str | None) -> str:
    """Trim model output and drop one pair of wrapping double quotes."""
    if not raw:
        return ""
    cleaned = raw.strip()
    if cleaned.startswith('"'):
        cleaned = cleaned[1:]
    if cleaned.endswith('"'):
        cleaned = cleaned[:-1]
    return cleaned.strip()


__all__ = ["SYSTEM_PROMPT_TEMPLATE", "build_messages", "clean_output"]
