"""
Fixed-size word-window chunking of page text for prompt context.
No overlap: window size is chunk_chars // 6 words (~6 chars per word); short fragments are dropped.
"""
from beyondchats.config import settings

# Average characters per word used to turn a character budget into a word count
CHARS_PER_WORD = 6


def chunk_page_text(
    text: str,
    chunk_chars: int | None = None,
    min_chars: int | None = None,
) -> list[str]:
    """
    Split one page's text into consecutive word windows.
    Keeps a window only if its stripped length is greater than min_chars.
    """
    chunk_chars = chunk_chars if chunk_chars is not None else settings.chunk_chars
    min_chars = min_chars if min_chars is not None else settings.min_chunk_chars
    if not text or not text.strip():
        return []
    words = text.strip().split(" ")
    # Whole-word windows (166 for 1000 chars); fractional steps would alternate 166/167 words
    window = max(1, chunk_chars // CHARS_PER_WORD)
    chunks = []
    for start in range(0, len(words), window):
        chunk = " ".join(words[start:start + window])
        if len(chunk.strip()) > min_chars:
            chunks.append(chunk)
    return chunks
