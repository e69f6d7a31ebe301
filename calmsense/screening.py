"""
Crisis Triage and C-SSRS Screening

Rule-based crisis risk triage plus the Columbia Suicide Severity Rating
Scale (C-SSRS) screening flow the chat pipeline runs when triage says a
user needs screening.

Triage tiers (first tier with any hit wins):
  imminent — stated intent with a time or farewell
  high     — active ideation
  moderate — passive ideation or hopelessness
  none     — nothing found

Screening outcome (any "yes" answer, most severe question wins):
  Q5 means / Q6 intent  -> imminent
  Q3 method / Q4 plan   -> high
  Q1 / Q2 ideation      -> moderate
  otherwise             -> low
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal, Optional, Sequence

from calmsense.logging import get_logger

logger = get_logger("screening")

RiskLevel = Literal["none", "low", "moderate", "high", "imminent"]
ScreeningRisk = Literal["low", "moderate", "high", "imminent"]


# ============================================================
# DATA STRUCTURES
# ============================================================

@dataclass(frozen=True)
class CrisisAssessment:
    risk_level: RiskLevel
    requires_screening: bool
    reasoning: str
    detected_indicators: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "riskLevel": self.risk_level,
            "requiresScreening": self.requires_screening,
            "reasoning": self.reasoning,
            "detectedIndicators": list(self.detected_indicators),
        }


@dataclass(frozen=True)
class ScreeningQuestion:
    id: int
    question: str
    category: str   # "ideation", "method", "plan", "means", "intent"
    weight: str     # risk tier a "yes" implies


@dataclass(frozen=True)
class ScreeningResponse:
    question_number: int
    answer: Optional[str] = None  # "yes" | "no" | None (unanswered)


@dataclass(frozen=True)
class ScreeningOutcome:
    final_risk_level: ScreeningRisk
    recommendation: str
    should_alert: bool

    def to_dict(self) -> dict:
        return {
            "finalRiskLevel": self.final_risk_level,
            "recommendation": self.recommendation,
            "shouldAlert": self.should_alert,
        }


# ============================================================
# KEYWORD TRIAGE
# ============================================================

# (risk level, keywords, reasoning), most severe first
_TRIAGE_TIERS: tuple[tuple[RiskLevel, tuple[str, ...], str], ...] = (
    (
        "imminent",
        ("going to kill myself", "going to end my life", "tonight", "goodbye forever", "final message"),
        "Imminent risk keywords detected - immediate intervention needed",
    ),
    (
        "high",
        ("suicide", "kill myself", "end my life", "want to die", "take my life", "have a plan"),
        "Active suicidal ideation keywords detected",
    ),
    (
        "moderate",
        ("wish i was dead", "better off dead", "no reason to live", "can't go on", "ending it",
         "not worth living"),
        "Passive ideation or hopelessness detected",
    ),
)


def assess_crisis_keywords(message: str) -> CrisisAssessment:
    """Keyword triage of a single message. Substring match on lowercased text."""
    lowered = message.lower()

    for risk_level, keywords, reasoning in _TRIAGE_TIERS:
        found = [kw for kw in keywords if kw in lowered]
        if found:
            logger.debug("Crisis keywords matched", extra={"risk_level": risk_level})
            return CrisisAssessment(
                risk_level=risk_level,
                requires_screening=True,
                reasoning=reasoning,
                detected_indicators=found,
            )

    return CrisisAssessment(
        risk_level="none",
        requires_screening=False,
        reasoning="No crisis indicators detected",
        detected_indicators=[],
    )


# ============================================================
# C-SSRS SCREENING
# ============================================================

CSSRS_QUESTIONS: tuple[ScreeningQuestion, ...] = (
    ScreeningQuestion(1, "Have you had thoughts of killing yourself?", "ideation", "moderate"),
    ScreeningQuestion(2, "Do you feel the world would be better without you?", "ideation", "moderate"),
    ScreeningQuestion(3, "Have you thought about how you might end your life?", "method", "high"),
    ScreeningQuestion(4, "Do you have a specific plan to end your life?", "plan", "high"),
    ScreeningQuestion(
        5, "Do you have access to means to harm yourself (e.g., pills, weapons)?", "means", "imminent",
    ),
    ScreeningQuestion(6, "Do you intend to act on these thoughts?", "intent", "imminent"),
)

_SCREENING_OUTCOMES: tuple[tuple[frozenset[int], ScreeningOutcome], ...] = (
    (frozenset({5, 6}), ScreeningOutcome(
        "imminent",
        "IMMEDIATE CRISIS INTERVENTION REQUIRED. Call 911 or go to nearest emergency room.",
        True,
    )),
    (frozenset({3, 4}), ScreeningOutcome(
        "high",
        "HIGH RISK. Call 988 Suicide & Crisis Lifeline immediately. Do not wait.",
        True,
    )),
    (frozenset({1, 2}), ScreeningOutcome(
        "moderate",
        "MODERATE RISK. Please call 988 or text HOME to 741741 to speak with a trained counselor.",
        True,
    )),
)

_LOW_RISK_OUTCOME = ScreeningOutcome(
    "low",
    "Continue monitoring. Reach out to a mental health professional if feelings worsen.",
    False,
)


def next_screening_question(responses: Sequence[ScreeningResponse]) -> Optional[str]:
    """Prompt for the next unanswered question, or None once all six are answered."""
    next_number = len(responses) + 1
    if next_number > len(CSSRS_QUESTIONS):
        return None
    question = CSSRS_QUESTIONS[next_number - 1]
    return f"{question.question} (Please answer yes or no)"


def assess_screening_responses(responses: Sequence[ScreeningResponse]) -> ScreeningOutcome:
    """Final risk level from C-SSRS answers."""
    yes_numbers = {r.question_number for r in responses if r.answer == "yes"}

    for questions, outcome in _SCREENING_OUTCOMES:
        if yes_numbers & questions:
            logger.info("Screening completed", extra={"risk_level": outcome.final_risk_level})
            return outcome

    return _LOW_RISK_OUTCOME


# ============================================================
# RESOURCE MESSAGES
# ============================================================

_SCREENING_RESULT_TEMPLATE = """I'm very concerned about your safety based on your responses.

{recommendation}

**IMMEDIATE RESOURCES:**
🆘 **Call 988** - Suicide & Crisis Lifeline (24/7, free, confidential)
📱 **Text HOME to 741741** - Crisis Text Line
🚨 **Call 911** - For immediate emergency

You don't have to face this alone. Professional help is available right now.

**Note:** I'm an AI wellness companion, not equipped for crisis situations. Please reach out to one of these services immediately."""

_IMMINENT_MESSAGE = """I'm extremely concerned about what you're sharing. This is a crisis situation.

**CALL 911 NOW** or go to your nearest emergency room.

🆘 **Call 988** - Suicide & Crisis Lifeline
📱 **Text HOME to 741741** - Crisis Text Line

If you're not safe right now, please call one of these numbers immediately. They have trained counselors available 24/7.

You don't have to face this alone. Help is available right now."""

_SCREENING_PROMPT = (
    "I'm concerned about your safety. Before we continue, I need to ask you a few quick "
    "questions to make sure you're okay. Please answer honestly - this helps me understand "
    "how best to support you."
)

_LOW_RISK_MESSAGE = """I hear that you're going through a difficult time. While I'm here to support you, if you're having thoughts of harming yourself, please reach out to:

🆘 **988 - Suicide & Crisis Lifeline**
📱 **Text HOME to 741741 - Crisis Text Line**

Would you like to talk about what's troubling you?"""


def crisis_response_message(
    assessment: CrisisAssessment,
    outcome: Optional[ScreeningOutcome] = None,
) -> str:
    """Resource text for a triage result, or for a completed screening when given."""
    if outcome is not None:
        return _SCREENING_RESULT_TEMPLATE.format(recommendation=outcome.recommendation)

    if assessment.risk_level == "imminent":
        return _IMMINENT_MESSAGE
    if assessment.risk_level in ("high", "moderate"):
        return _SCREENING_PROMPT
    if assessment.risk_level == "low":
        return _LOW_RISK_MESSAGE
    return ""
