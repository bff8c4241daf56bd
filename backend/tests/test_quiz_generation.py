"""Quiz output parsing, answer key and prompt assembly."""
import json

import pytest

from beyondchats.models.quiz import Quiz
from beyondchats.services.prompts import QUIZ_PROMPTS, format_chat_question, format_pdf_context
from beyondchats.services.quiz_generation import (
    QuizGenerationError,
    build_answer_key,
    generate_quiz,
    is_valid_quiz_type,
    parse_quiz_response,
)


def test_parse_plain_json():
    raw = json.dumps({"questions": [{"id": "q1", "question": "?", "correctAnswer": "A"}]})
    assert parse_quiz_response(raw) == [{"id": "q1", "question": "?", "correctAnswer": "A"}]


def test_parse_strips_markdown_fence():
    raw = '```json\n{"questions": [{"id": "a", "question": "?"}]}\n```'
    assert parse_quiz_response(raw)[0]["id"] == "a"


def test_parse_fills_missing_ids_by_position():
    raw = json.dumps({"questions": [{"question": "one"}, {"id": "x", "question": "two"}, {"question": "three"}]})
    assert [q["id"] for q in parse_quiz_response(raw)] == ["q1", "x", "q3"]



def test_parse_stores_numeric_ids_as_strings():
    raw = json.dumps({"questions": [{"id": 1, "question": "one"}, {"id": 2, "question": "two"}]})
    assert [q["id"] for q in parse_quiz_response(raw)] == ["1", "2"]

@pytest.mark.parametrize("raw", ["not json", "", '{"items": []}', '["a"]', '{"questions": ["text"]}'])
def test_parse_rejects_bad_output(raw):
    with pytest.raises(QuizGenerationError):
        parse_quiz_response(raw)


def test_answer_key():
    questions = [{"id": "q1", "question": "?", "correctAnswer": "B", "explanation": "why", "options": {}}]
    assert build_answer_key(questions) == [{"id": "q1", "correctAnswer": "B", "explanation": "why"}]


def test_quiz_types():
    for t in ("MCQ", "SAQ", "LAQ", "MIXED"):
        assert is_valid_quiz_type(t)
        assert t in QUIZ_PROMPTS
    assert not is_valid_quiz_type("TRUE_FALSE")
    assert not is_valid_quiz_type(None)


def test_pdf_context_and_question_template():
    class C:
        def __init__(self, n, c):
            self.page_number, self.content = n, c

    context = format_pdf_context([C(1, "alpha"), C(2, "beta")])
    assert context == "Page 1: alpha\n\nPage 2: beta"
    prompt = format_chat_question(context, "What is {x}?")
    assert "Page 1: alpha" in prompt
    assert "Student Question: What is {x}?" in prompt
    assert "No PDF content available" in format_chat_question("", "q")


def test_generate_quiz_persists(db, make_pdf_row, fake_llm):
    pdf = make_pdf_row(title="Optics", chunks=[(1, "Light travels in straight lines.")])
    quiz, questions = generate_quiz(db, pdf, "MCQ", pdf.user_id, "Page 1: Light travels in straight lines.")

    assert quiz.title == "MCQ Quiz - Optics"
    assert len(questions) == 2
    system_prompt, user_content, quiz_type = fake_llm.quiz_calls[0]
    assert system_prompt == QUIZ_PROMPTS["MCQ"]
    assert user_content.startswith("Please generate a MCQ quiz from the following PDF content:\n\n")
    assert quiz_type == "MCQ"

    stored = db.query(Quiz).filter(Quiz.id == quiz.id).one()
    assert json.loads(stored.answers) == [
        {"id": "q1", "correctAnswer": "C", "explanation": "Because C."},
        {"id": "q2", "correctAnswer": "C", "explanation": "Also C."},
    ]
