"""
Psychosis Indicator Detector

Combines three signal groups into one score:
  - direct clinical keywords (hallucination, delusion, paranoia, ...)  weight 3
  - contextual phrases (hearing voices, being followed, ...)           weight 2
  - an agency mention within 4 tokens of a surveillance phrase          weight 3

Indicators are present at score >= 3. A message below that returns no
matches at all, unlike the anxiety context summaries, which always
report what fired.

Match labels are the patterns' human-readable descriptions (plus
"agency+surveillance"), not regex source strings.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from calmsense.logging import get_logger
from calmsense.patterns import (
    AGENCY_MENTION,
    AGENCY_SURVEILLANCE_LABEL,
    AGENCY_SURVEILLANCE_WEIGHT,
    AGENCY_TOKEN,
    PSYCHOSIS_CONTEXT_PATTERNS,
    PSYCHOSIS_DIRECT_PATTERNS,
    PSYCHOSIS_THRESHOLD,
    SURVEILLANCE_PHRASES,
)
from calmsense.scorer import Confidence
from calmsense.window import DEFAULT_TOKEN_WINDOW, has_nearby_match

logger = get_logger("psychosis")


@dataclass(frozen=True)
class PsychosisDetectionResult:
    has_indicators: bool
    matches: list[str] = field(default_factory=list)
    confidence: Confidence = "low"

    def to_dict(self) -> dict:
        return {
            "hasIndicators": self.has_indicators,
            "matches": list(self.matches),
            "confidence": self.confidence,
        }


def has_agency_surveillance_context(message: str) -> bool:
    """Agency named within the token window of a surveillance phrase."""
    if not AGENCY_MENTION.search(message):
        return False
    return has_nearby_match(
        message, AGENCY_TOKEN, SURVEILLANCE_PHRASES, window=DEFAULT_TOKEN_WINDOW,
    )


def detect_psychosis_indicators(message: str) -> PsychosisDetectionResult:
    matches: list[str] = []
    score = 0

    for definition in PSYCHOSIS_DIRECT_PATTERNS + PSYCHOSIS_CONTEXT_PATTERNS:
        if definition.matches(message):
            matches.append(definition.description)
            score += definition.weight

    if has_agency_surveillance_context(message):
        matches.append(AGENCY_SURVEILLANCE_LABEL)
        score += AGENCY_SURVEILLANCE_WEIGHT

    if score < PSYCHOSIS_THRESHOLD:
        return PsychosisDetectionResult(has_indicators=False, matches=[], confidence="low")

    confidence: Confidence = "low"
    if score >= 7:
        confidence = "high"
    elif score >= 4:
        confidence = "medium"

    logger.debug(
        "Psychosis indicators present",
        extra={"score": score, "matches_count": len(matches)},
    )
    return PsychosisDetectionResult(has_indicators=True, matches=matches, confidence=confidence)
