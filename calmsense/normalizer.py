"""
Text Normalizer — Shared Preprocessing

Every detector matches against the same canonical form of a message:
lowercased, diacritics removed, punctuation replaced by spaces,
whitespace collapsed. This lets "ansiedad" and "está" match ASCII
patterns, and "attack—my" split cleanly into two words.
"""

from __future__ import annotations

import re
import unicodedata

_COMBINING_MARKS = re.compile(r"[\u0300-\u036f]")
_DISALLOWED = re.compile(r"[^a-z0-9\s']")
_WHITESPACE = re.compile(r"\s+")


def normalize(text: str) -> str:
    """Return the canonical matching form of ``text``. Total and idempotent."""
    lowered = unicodedata.normalize("NFD", text.lower())
    stripped = _COMBINING_MARKS.sub("", lowered)
    cleaned = _DISALLOWED.sub(" ", stripped)
    return _WHITESPACE.sub(" ", cleaned).strip()


def tokenize(text: str) -> list[str]:
    """Split already-normalized text into word tokens."""
    if not text:
        return []
    return [token for token in text.split(" ") if token]
