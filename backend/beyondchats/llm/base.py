"""
LLM service interface: one chat completion for the assistant, one completion for quiz generation.
Implementations return the raw model text; callers own prompt assembly and parsing.
"""
from typing import Protocol


class LLMError(RuntimeError):
    """Provider failed or returned no usable text."""


class LLMService(Protocol):
    """Abstract interface for chat replies and quiz generation."""

    def complete_chat(self, messages: list[dict]) -> str:
        """
        Send [{"role": "system"|"user"|"assistant", "content": str}, ...] and return the reply text.
        Raises LLMError when the provider returns nothing.
        """
        ...

    def generate_quiz(self, system_prompt: str, user_content: str, quiz_type: str) -> str:
        """Return the raw quiz text (expected to be JSON with a "questions" list)."""
        ...
