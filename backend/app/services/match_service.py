"""
Keyword-coverage resume-to-job match scoring.
Fully offline; the result depends only on the two texts.
"""
import io
import logging
import re
from pathlib import PurePath

from pydantic import BaseModel, ConfigDict, Field
from pypdf import PdfReader
from pypdf.errors import PyPdfError

logger = logging.getLogger("app.services.match")

DEFAULT_STOP_WORDS = frozenset({
    "the", "and", "or", "but", "with", "a", "an", "to", "of", "in", "on",
    "for", "at", "by", "is", "this", "that", "these", "those", "are", "be",
    "as", "it", "from", "you", "your", "yours",
})

_NON_WORD = re.compile(r"[^a-z0-9\s]")

PDF_MIME_TYPES = ("application/pdf", "application/x-pdf")


class TokenizerConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    stop_words: frozenset[str] = DEFAULT_STOP_WORDS
    min_token_length: int = Field(default=3, ge=1)


DEFAULT_TOKENIZER_CONFIG = TokenizerConfig()


class MatchResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    match_score: int = Field(ge=0, le=100)
    missing_keywords: list[str]
    matched_count: int
    target_count: int


def tokenize(text: str, config: TokenizerConfig | None = None) -> list[str]:
    """Split text into lowercase alphanumeric tokens, dropping stop words and short words.

    Order follows the input and duplicates are kept.
    """
    cfg = config or DEFAULT_TOKENIZER_CONFIG
    words = _NON_WORD.sub(" ", text.lower()).split()
    return [
        w for w in words
        if len(w) >= cfg.min_token_length and w not in cfg.stop_words
    ]


def _percent(matched: int, total: int) -> int:
    # round(100 * matched / total), ties away from zero, without float error
    return (200 * matched + total) // (2 * total)


def compare_documents(
    candidate_text: str,
    target_text: str,
    config: TokenizerConfig | None = None,
) -> MatchResult:
    """
    Score how much of the target's vocabulary the candidate covers.
    Returns the 0-100 score and the sorted target tokens the candidate lacks.
    """
    candidate_set = set(tokenize(candidate_text, config))
    # dict keeps first-occurrence order
    target_tokens = list(dict.fromkeys(tokenize(target_text, config)))

    matched = 0
    missing: list[str] = []
    for token in target_tokens:
        if token in candidate_set:
            matched += 1
        else:
            missing.append(token)

    score = _percent(matched, len(target_tokens)) if target_tokens else 0
    logger.debug(
        "Compared documents: %d/%d target tokens matched (score %d)",
        matched, len(target_tokens), score,
    )
    return MatchResult(
        match_score=score,
        missing_keywords=sorted(missing),
        matched_count=matched,
        target_count=len(target_tokens),
    )


def extract_text(content: bytes, filename: str | None = None, mime_type: str | None = None) -> str:
    """Extract readable text from an uploaded resume file."""
    is_pdf = (
        mime_type in PDF_MIME_TYPES
        or (filename is not None and PurePath(filename).suffix.lower() == ".pdf")
    )
    if is_pdf:
        try:
            reader = PdfReader(io.BytesIO(content))
            pages = [page.extract_text() or "" for page in reader.pages]
        except PyPdfError as exc:
            logger.warning("Could not read PDF %r: %s", filename, exc)
            return ""
        return "\n".join(pages)

    text = content.decode("utf-8", errors="ignore")
    # Reject if it looks like binary garbage (low printable ratio)
    printable = sum(1 for c in text if c.isprintable() or c.isspace())
    if not text or printable / len(text) < 0.85:
        return ""
    return text
