"""
Mock LLM: deterministic placeholder replies and quizzes when no API key is configured.
Lets the app run end to end offline.
"""
import hashlib
import json
import logging

logger = logging.getLogger(__name__)

# Question mix per quiz type, matching the counts the real prompts ask for
_TYPE_MIX = {
    "MCQ": ["MCQ"] * 5,
    "SAQ": ["SAQ"] * 3,
    "LAQ": ["LAQ"] * 2,
    "MIXED": ["MCQ"] * 3 + ["SAQ"] * 2 + ["LAQ"],
}


def _seed(text: str) -> str:
    return hashlib.sha256(text[:200].encode()).hexdigest()[:8]


def _make_mock_questions(user_content: str, quiz_type: str) -> list[dict]:
    seed = _seed(user_content)
    mix = _TYPE_MIX.get(quiz_type, _TYPE_MIX["MCQ"])
    questions = []
    for i, kind in enumerate(mix):
        q = {
            "id": f"q{i + 1}",
            "question": f"[Mock] Question {i + 1} (seed {seed}): What is the main idea of the given content?",
            "explanation": f"Mock explanation for question {i + 1}. Set an API key in .env for real generation.",
            "difficulty": ["Easy", "Medium", "Hard"][i % 3],
        }
        if quiz_type == "MIXED":
            q["type"] = kind
        if kind == "MCQ":
            q["options"] = {
                "A": "Option A (mock)",
                "B": "Option B (mock)",
                "C": "Option C (mock)",
                "D": "Option D (mock)",
            }
            q["correctAnswer"] = ["A", "B", "C", "D"][i % 4]
        else:
            q["correctAnswer"] = f"Sample answer {i + 1} (mock)"
        questions.append(q)
    return questions


class MockLLMService:
    """Returns placeholder text so chat and quiz flows work without a provider."""

    def complete_chat(self, messages: list[dict]) -> str:
        question = ""
        for m in reversed(messages):
            if m.get("role") == "user":
                question = m.get("content") or ""
                break
        return (
            f"[Mock] I received your question (seed {_seed(question)}). "
            "Set OPENAI_API_KEY or GEMINI_API_KEY in .env for real answers."
        )

    def generate_quiz(self, system_prompt: str, user_content: str, quiz_type: str) -> str:
        return json.dumps({"questions": _make_mock_questions(user_content, quiz_type)})


def get_mock_llm_service() -> MockLLMService:
    return MockLLMService()
