"""
LLM abstraction: complete_chat(messages), generate_quiz(system_prompt, user_content, quiz_type).
Provider from LLM_PROVIDER (openai | gemini); mock when the provider's API key is missing.
"""
import logging

from beyondchats.config import settings
from beyondchats.llm.base import LLMError, LLMService

logger = logging.getLogger(__name__)


def _api_key_for(provider: str) -> str:
    key = settings.gemini_api_key if provider == "gemini" else settings.openai_api_key
    return (key or "").strip()


def get_llm_service() -> LLMService:
    """Return the configured provider; mock only if its API key is missing."""
    provider = (settings.llm_provider or "openai").strip().lower()
    if provider not in ("openai", "gemini"):
        raise ValueError(f"Unsupported LLM_PROVIDER: {settings.llm_provider}")
    if not _api_key_for(provider):
        logger.warning("%s API key not set; using mock LLM.", provider)
        from beyondchats.llm.mock_impl import get_mock_llm_service
        return get_mock_llm_service()
    if provider == "gemini":
        from beyondchats.llm.gemini_impl import get_llm_service as _get
    else:
        from beyondchats.llm.openai_impl import get_llm_service as _get
    return _get()


__all__ = ["LLMError", "LLMService", "get_llm_service"]
