"""
Windowed Co-occurrence Matching

Two concepts count together only when they sit close to each other.
Two window strategies are used, with different tradeoffs:

  - Character window: a pair of regexes joined by ``.{0,N}``, built
    in both orders. Used for OCD compulsion language.
  - Token window: locate anchor tokens, then look for a phrase within
    N tokens on either side. Used for agency + surveillance language,
    where an anchor like "cia" must be a whole word after
    normalization (so "policía" or "desahucio" never anchor).
"""

from __future__ import annotations

import re
from typing import Iterable

from calmsense.normalizer import normalize, tokenize
from calmsense.scorer import PatternDefinition

DEFAULT_CHAR_WINDOW = 80
DEFAULT_TOKEN_WINDOW = 4


def bidirectional_patterns(
    first: str,
    second: str,
    description: str,
    weight: int = 3,
    window: int = DEFAULT_CHAR_WINDOW,
) -> tuple[PatternDefinition, PatternDefinition]:
    """
    Build the two orderings of a character-window pair.

    Both entries carry the same weight and description and are scored
    independently, so text containing both orders fires both.
    """
    forward = re.compile(f"{first}.{{0,{window}}}{second}", re.IGNORECASE)
    backward = re.compile(f"{second}.{{0,{window}}}{first}", re.IGNORECASE)
    return (
        PatternDefinition(forward, weight, description),
        PatternDefinition(backward, weight, description),
    )


def anchor_indices(tokens: list[str], anchor: re.Pattern) -> list[int]:
    """Indices of tokens that match the anchor as a whole token."""
    return [i for i, token in enumerate(tokens) if anchor.fullmatch(token)]


def has_nearby_match(
    text: str,
    anchor: re.Pattern,
    nearby_phrases: Iterable[str],
    window: int = DEFAULT_TOKEN_WINDOW,
) -> bool:
    """
    True if any phrase occurs within ``window`` tokens of an anchor token.

    The text is normalized and tokenized here. For each anchor occurrence
    the slice ``tokens[i - window : i + window + 1]`` (clipped to the
    message) is re-joined with single spaces and searched for each
    phrase as a plain substring.
    """
    tokens = tokenize(normalize(text))
    indices = anchor_indices(tokens, anchor)
    if not indices:
        return False

    phrases = list(nearby_phrases)
    for index in indices:
        start = max(0, index - window)
        end = min(len(tokens), index + window + 1)
        window_text = " ".join(tokens[start:end])
        if any(phrase in window_text for phrase in phrases):
            return True

    return False
