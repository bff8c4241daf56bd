"""
OpenAI implementation of LLMService via chat completions.
One call per request; no retries or timeouts are configured here.
"""
import logging

from openai import OpenAI

from beyondchats.config import settings
from beyondchats.llm.base import LLMError

logger = logging.getLogger(__name__)


class OpenAILLMService:
    def __init__(self, api_key: str | None = None, model: str | None = None):
        self.client = OpenAI(api_key=api_key or settings.openai_api_key)
        self.model = model or settings.openai_model

    def _create(self, messages: list[dict], temperature: float, max_tokens: int) -> str:
        response = self.client.chat.completions.create(
            model=self.model,
            messages=messages,
            temperature=temperature,
            max_tokens=max_tokens,
        )
        content = response.choices[0].message.content if response.choices else None
        usage = response.usage
        if usage:
            logger.info(
                "OpenAI %s: prompt_tokens=%s completion_tokens=%s",
                self.model,
                usage.prompt_tokens,
                usage.completion_tokens,
            )
        if not (content or "").strip():
            raise LLMError("No response from OpenAI")
        return content

    def complete_chat(self, messages: list[dict]) -> str:
        return self._create(messages, settings.chat_temperature, settings.chat_max_tokens)

    def generate_quiz(self, system_prompt: str, user_content: str, quiz_type: str) -> str:
        messages = [
            {"role": "system", "content": system_prompt},
            {"role": "user", "content": user_content},
        ]
        return self._create(messages, settings.quiz_temperature, settings.quiz_max_tokens)


def get_llm_service() -> OpenAILLMService:
    return OpenAILLMService()
