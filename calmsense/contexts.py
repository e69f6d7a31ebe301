"""
Anxiety Context Analyzer

Scores a chat message against every clinical category table and
returns one summary per category. Also hosts the two keyword
classifiers that run beside it: anxiety triggers and cognitive
distortions.

All three functions normalize the message themselves and never raise
for string input. Deciding what a met threshold means (crisis
resources, analytics tags) is left to the caller.
"""

from __future__ import annotations

from dataclasses import dataclass

from calmsense.logging import get_logger
from calmsense.normalizer import normalize
from calmsense.patterns import CONDITION_TABLES, DISTORTION_PATTERNS, TRIGGER_PATTERNS
from calmsense.scorer import ConditionSummary, evaluate

logger = get_logger("contexts")


@dataclass(frozen=True)
class AnxietyContextSummary:
    """One ConditionSummary per clinical category."""
    general_anxiety: ConditionSummary
    panic: ConditionSummary
    ptsd: ConditionSummary
    ocd: ConditionSummary
    depression: ConditionSummary
    crisis: ConditionSummary
    positive: ConditionSummary

    def met_categories(self) -> list[str]:
        """Category keys whose threshold was met, in table order."""
        return [key for key in CONDITION_TABLES if getattr(self, key).threshold_met]

    def to_dict(self) -> dict:
        """camelCase wire shape consumed by the chat pipeline."""
        return {
            "generalAnxiety": self.general_anxiety.to_dict(),
            "panic": self.panic.to_dict(),
            "ptsd": self.ptsd.to_dict(),
            "ocd": self.ocd.to_dict(),
            "depression": self.depression.to_dict(),
            "crisis": self.crisis.to_dict(),
            "positive": self.positive.to_dict(),
        }


def analyze_anxiety_context(message: str) -> AnxietyContextSummary:
    """Score ``message`` against all seven category tables."""
    normalized = normalize(message)
    summaries = {
        key: evaluate(normalized, patterns, threshold)
        for key, (patterns, threshold) in CONDITION_TABLES.items()
    }
    result = AnxietyContextSummary(**summaries)
    logger.debug("Context analysis complete", extra={"categories_met": result.met_categories()})
    return result


def detect_anxiety_triggers(message: str) -> list[str]:
    """Trigger tags whose cues appear in ``message``, in declaration order."""
    normalized = normalize(message)
    return [
        tag for tag, cues in TRIGGER_PATTERNS.items()
        if any(cue.search(normalized) for cue in cues)
    ]


def detect_cognitive_patterns(message: str) -> list[str]:
    """Cognitive distortion labels whose cues appear in ``message``."""
    normalized = normalize(message)
    return [
        label for label, cue in DISTORTION_PATTERNS.items()
        if cue.search(normalized)
    ]
