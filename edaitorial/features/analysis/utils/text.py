import re

_TAG_RE = re.compile(r"<[^>]*>")
# Block-level tags separate words even when written back to back
_BLOCK_TAG_RE = re.compile(
    r"</?(?:p|div|br|hr|h[1-6]|li|ul|ol|dl|dt|dd|tr|td|th|table|section|article|header|footer|blockquote|pre)\b[^>]*>",
    re.IGNORECASE,
)
_WORD_RE = re.compile(r"[^\W\d_]+(?:['-][^\W\d_]+)*")
_FENCE_OPEN_RE = re.compile(r"^```[a-zA-Z]*\s*")
_FENCE_CLOSE_RE = re.compile(r"\s*```$")


def strip_tags(html: str) -> str:
    """Remove markup, keeping the text between tags with whitespace collapsed."""
    if not html:
        return ""
    text = _BLOCK_TAG_RE.sub(" ", html)
    text = _TAG_RE.sub("", text)
    return " ".join(text.split())


def count_words(text: str) -> int:
    """Count alphabetic words, digits are not words."""
    if not text:
        return 0
    return len(_WORD_RE.findall(text))


def strip_code_fences(text: str) -> str:
    """Drop a leading ```json / ``` fence and a trailing ``` fence."""
    cleaned = text.strip()
    cleaned = _FENCE_OPEN_RE.sub("", cleaned)
    cleaned = _FENCE_CLOSE_RE.sub("", cleaned)
    return cleaned.strip()


def truncate(text: str, limit: int = 200) -> str:
    if len(text) <= limit:
        return text
    return text[:limit] + "..."
