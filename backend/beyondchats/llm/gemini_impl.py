"""
Gemini (Google) implementation of LLMService via the google.genai SDK.
System messages become system_instruction; assistant turns are sent with role "model".
"""
import logging

from beyondchats.config import settings, normalize_gemini_model
from beyondchats.llm.base import LLMError

logger = logging.getLogger(__name__)


def to_gemini_contents(messages: list[dict]) -> tuple[str | None, list[dict]]:
    """Split OpenAI-style messages into (system_instruction, contents) for generate_content."""
    system_parts: list[str] = []
    contents: list[dict] = []
    for m in messages:
        role = (m.get("role") or "user").lower()
        text = m.get("content") or ""
        if role == "system":
            system_parts.append(text)
            continue
        contents.append({
            "role": "model" if role == "assistant" else "user",
            "parts": [{"text": text}],
        })
    return ("\n\n".join(system_parts) or None), contents


class GeminiService:
    """Google Gemini implementation (generate_content)."""

    def __init__(self, model_name: str | None = None, api_key: str | None = None) -> None:
        from google import genai
        self._client = genai.Client(api_key=api_key or settings.gemini_api_key)
        self._model_name = normalize_gemini_model(model_name or settings.gemini_model)

    def _generate(self, messages: list[dict], temperature: float, max_tokens: int, json_output: bool = False) -> str:
        from google.genai import types
        system_instruction, contents = to_gemini_contents(messages)
        config = types.GenerateContentConfig(
            system_instruction=system_instruction,
            temperature=temperature,
            max_output_tokens=max_tokens,
            response_mime_type="application/json" if json_output else None,
        )
        response = self._client.models.generate_content(
            model=self._model_name,
            contents=contents,
            config=config,
        )
        um = getattr(response, "usage_metadata", None)
        if um:
            logger.info(
                "Gemini %s: input_tokens=%s output_tokens=%s",
                self._model_name,
                getattr(um, "prompt_token_count", 0) or 0,
                getattr(um, "candidates_token_count", 0) or 0,
            )
        text = (getattr(response, "text", None) or "").strip()
        if not text:
            raise LLMError("No response from Gemini")
        return text

    def complete_chat(self, messages: list[dict]) -> str:
        return self._generate(messages, settings.chat_temperature, settings.chat_max_tokens)

    def generate_quiz(self, system_prompt: str, user_content: str, quiz_type: str) -> str:
        messages = [
            {"role": "system", "content": system_prompt},
            {"role": "user", "content": user_content},
        ]
        return self._generate(messages, settings.quiz_temperature, settings.quiz_max_tokens, json_output=True)


def get_llm_service() -> GeminiService:
    logger.info("Using LLM: %s (Gemini)", normalize_gemini_model(settings.gemini_model))
    return GeminiService()
