"""Unit tests for word-window chunking."""
from beyondchats.services.chunking import CHARS_PER_WORD, chunk_page_text


def test_chunk_empty():
    assert chunk_page_text("") == []
    assert chunk_page_text("   ") == []


def test_short_page_is_dropped():
    # 50 characters or fewer never becomes a chunk
    assert chunk_page_text("x" * 50) == []
    assert chunk_page_text("x" * 51) == ["x" * 51]


def test_window_is_chunk_chars_over_six_words():
    words = [f"word{i:03d}" for i in range(400)]
    chunks = chunk_page_text(" ".join(words), chunk_chars=1000, min_chars=50)
    window = 1000 // CHARS_PER_WORD
    assert window == 166
    assert [len(c.split(" ")) for c in chunks] == [166, 166, 68]
    assert chunks[0].split(" ")[0] == "word000"
    assert chunks[1].split(" ")[0] == "word166"


def test_no_overlap_and_nothing_lost():
    words = [f"w{i}" for i in range(1000)]
    chunks = chunk_page_text(" ".join(words), chunk_chars=120, min_chars=0)
    assert " ".join(chunks).split(" ") == words


def test_short_trailing_window_dropped():
    text = " ".join(["alpha"] * 20) + " " + " ".join(["z"] * 3)
    chunks = chunk_page_text(text, chunk_chars=120, min_chars=50)
    # window of 20 words: one full window, then a 3-word remainder ("z z z") that is too short
    assert len(chunks) == 1
    assert chunks[0].startswith("alpha")


def test_defaults_come_from_settings(monkeypatch):
    from beyondchats.services import chunking
    monkeypatch.setattr(chunking.settings, "chunk_chars", 60)
    monkeypatch.setattr(chunking.settings, "min_chunk_chars", 5)
    chunks = chunk_page_text(" ".join(["abcdef"] * 25))
    assert [len(c.split(" ")) for c in chunks] == [10, 10, 5]
