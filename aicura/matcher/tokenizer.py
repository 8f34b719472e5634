"""Free-text symptom tokenization and loose matching against catalog names."""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable

from aicura.errors import ParseError

logger = logging.getLogger(__name__)

MIN_TOKEN_LENGTH = 3

_SENTENCE_DELIMITERS = re.compile(r"[,.\n]")
_NON_TOKEN_CHARS = re.compile(r"[^a-zA-Z_]")


def _coerce_text(text: object) -> str:
    if text is None:
        return ""
    if isinstance(text, str):
        return text
    if isinstance(text, (bytes, bytearray)):
        try:
            return bytes(text).decode("utf-8")
        except UnicodeDecodeError as exc:
            raise ParseError("Symptom input is not valid UTF-8 text.") from exc
    raise ParseError(f"Symptom input must be text, got {type(text).__name__}.")


def tokenize(text: object) -> set[str]:
    """Split free text into lower-case symptom tokens.

    Sentences are split on commas, periods and newlines, then on whitespace.
    Characters outside ``[a-zA-Z_]`` are stripped and tokens shorter than
    three characters are dropped. Input that cannot be read as text yields an
    empty set.
    """
    try:
        raw = _coerce_text(text)
    except ParseError as e:
        logger.debug("Treating unreadable symptom input as empty: %s", e)
        return set()

    tokens: set[str] = set()
    for sentence in _SENTENCE_DELIMITERS.split(raw.lower()):
        for word in sentence.split():
            token = _NON_TOKEN_CHARS.sub("", word)
            if len(token) >= MIN_TOKEN_LENGTH:
                tokens.add(token)
    return tokens


def match_known_symptoms(
    tokens: Iterable[str],
    catalog_symptom_names: Iterable[str],
) -> set[str]:
    """Return catalog symptom names that contain, or are contained in, any token."""
    normalized = [t.lower() for t in tokens if t]
    if not normalized:
        return set()

    matched: set[str] = set()
    for name in catalog_symptom_names:
        known = name.lower()
        if any(known in token or token in known for token in normalized):
            matched.add(name)
    return matched
