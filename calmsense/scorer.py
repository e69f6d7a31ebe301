"""
Condition Scorer

Applies a table of weighted patterns to normalized text and reduces
the hits to a ConditionSummary.

Scoring:
  Each pattern is tested once, as a boolean. A pattern that matches
  several times in the text still contributes its weight once.
  threshold_met  = score >= threshold
  confidence     = high   if score >= threshold + 3
                   medium if score >= threshold + 1
                   low    otherwise (also below threshold)

Confidence is relative to the category's own threshold, so tiers are
not comparable across categories.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Literal, Sequence

Confidence = Literal["low", "medium", "high"]


# ============================================================
# DATA STRUCTURES
# ============================================================

@dataclass(frozen=True)
class PatternDefinition:
    """A weighted text-matching rule with a human-readable label."""
    regex: re.Pattern
    weight: int
    description: str

    def matches(self, text: str) -> bool:
        return self.regex.search(text) is not None


@dataclass(frozen=True)
class ConditionSummary:
    """Score and matched rules for a single clinical category."""
    score: int
    matches: list[str] = field(default_factory=list)
    threshold_met: bool = False
    confidence: Confidence = "low"

    def to_dict(self) -> dict:
        return {
            "score": self.score,
            "matches": list(self.matches),
            "thresholdMet": self.threshold_met,
            "confidence": self.confidence,
        }


def pattern(regex: str, weight: int, description: str) -> PatternDefinition:
    """Compile a case-insensitive PatternDefinition."""
    return PatternDefinition(re.compile(regex, re.IGNORECASE), weight, description)


# ============================================================
# SCORING
# ============================================================

def compute_confidence(score: int, threshold: int) -> Confidence:
    if score >= threshold + 3:
        return "high"
    if score >= threshold + 1:
        return "medium"
    return "low"


def evaluate(
    text: str,
    patterns: Sequence[PatternDefinition],
    threshold: int,
) -> ConditionSummary:
    """
    Score normalized text against a pattern table.

    Args:
        text: Text already passed through normalize().
        patterns: The category's pattern table.
        threshold: Minimum cumulative weight for the category to be met.

    Returns:
        ConditionSummary. Matches are kept even when the threshold is missed.
    """
    matches: list[str] = []
    score = 0

    for definition in patterns:
        if definition.matches(text):
            score += definition.weight
            matches.append(definition.description)

    return ConditionSummary(
        score=score,
        matches=matches,
        threshold_met=score >= threshold,
        confidence=compute_confidence(score, threshold),
    )
