"""
Detector — Message Scan Orchestrator

Runs every rule-based detector over one chat message and merges the
results into a single dict for the HTTP layer:

  - anxiety context summary (seven categories)
  - psychosis indicators
  - trigger tags and cognitive distortions
  - keyword crisis triage
  - derived anxiety level (1-10) and a language hint

The detectors are independent; this module only combines them. It
makes one decision of its own, ``requires_crisis_response``, which tells
the caller to surface crisis resources before anything else.
"""

from __future__ import annotations

import math
import re
import time

from calmsense.contexts import (
    AnxietyContextSummary,
    analyze_anxiety_context,
    detect_anxiety_triggers,
    detect_cognitive_patterns,
)
from calmsense.logging import get_logger
from calmsense.patterns import CORE_VERSION
from calmsense.psychosis import PsychosisDetectionResult, detect_psychosis_indicators
from calmsense.screening import assess_crisis_keywords

logger = get_logger("detector")


# ============================================================
# ANXIETY LEVEL
# ============================================================

# Minimum level implied by a met category, applied in this order
_LEVEL_FLOORS: tuple[tuple[str, int], ...] = (
    ("panic", 8),
    ("ptsd", 7),
    ("ocd", 6),
    ("depression", 5),
)
_CRISIS_FLOOR = 9
_PSYCHOSIS_LEVEL = 10

# Plain substring cues, checked on the lowercased message
_HARM_WORDS = ("hurt", "kill", "die")
_HARM_FLOOR = 8
_LOW_MOOD_WORDS = ("depressed", "sad", "hopeless")
_LOW_MOOD_FLOOR = 6


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def estimate_anxiety_level(
    summary: AnxietyContextSummary,
    psychosis: PsychosisDetectionResult,
    message: str = "",
) -> int:
    """
    Rule-based anxiety level on a 1-10 scale.

    Starts from the general anxiety score (2 + 1.5 per point, clamped to
    1..10) and raises it to the floor of every met category. Crisis
    context or psychosis indicators raise it to at least 9.

    A final override then applies only the first rule that fires:
    psychosis indicators set the level to 10, harm words (hurt, kill,
    die) raise it to 8, low-mood words (depressed, sad, hopeless) raise
    it to 6. The word checks are substring matches on ``message``.
    """
    level = min(10, max(1, _round_half_up(2 + summary.general_anxiety.score * 1.5)))

    for key, floor in _LEVEL_FLOORS:
        if getattr(summary, key).threshold_met:
            level = max(level, floor)

    if psychosis.has_indicators or summary.crisis.threshold_met:
        level = max(level, _CRISIS_FLOOR)

    lowered = message.lower()
    if psychosis.has_indicators:
        level = _PSYCHOSIS_LEVEL
    elif any(word in lowered for word in _HARM_WORDS):
        level = max(level, _HARM_FLOOR)
    elif any(word in lowered for word in _LOW_MOOD_WORDS):
        level = max(level, _LOW_MOOD_FLOOR)

    return level


# ============================================================
# LANGUAGE HINT
# ============================================================

# Word cues are \b-bounded so "support" does not hit "por"; accents on
# cómo/está/aquí are optional.
_SPANISH_CUES = re.compile(
    r"[¡¿ñáéíóúü]|\b(?:hola|ayuda|gracias|c[oó]mo|est[aá]|soy|tengo|estoy|muy|todo|nada|"
    r"aqu[ií]|por|favor|ansiedad|triste|miedo|dolor)\b",
    re.IGNORECASE,
)


def detect_language(message: str) -> str:
    """'es' when the message carries Spanish cues, otherwise 'en'."""
    return "es" if _SPANISH_CUES.search(message) else "en"


# ============================================================
# SCAN
# ============================================================

async def scan_message(message: str) -> dict:
    """
    Full rule-based scan of one message. Deterministic, no I/O.

    Returns a JSON-ready dict; see calmsense.schemas.scan.AnalyzeResponse.
    """
    start = time.perf_counter()

    context = analyze_anxiety_context(message)
    psychosis = detect_psychosis_indicators(message)
    triggers = detect_anxiety_triggers(message)
    distortions = detect_cognitive_patterns(message)
    crisis = assess_crisis_keywords(message)
    anxiety_level = estimate_anxiety_level(context, psychosis, message)
    language = detect_language(message)

    requires_crisis_response = (
        context.crisis.threshold_met
        or psychosis.has_indicators
        or crisis.requires_screening
    )

    duration_ms = round((time.perf_counter() - start) * 1000, 3)
    logger.info(
        "Scan complete",
        extra={
            "anxiety_level": anxiety_level,
            "categories_met": context.met_categories(),
            "risk_level": crisis.risk_level,
            "triggers_count": len(triggers),
            "language": language,
            "duration_ms": duration_ms,
        },
    )

    return {
        "text": message,
        "context": context.to_dict(),
        "psychosis": psychosis.to_dict(),
        "triggers": triggers,
        "cognitive_distortions": distortions,
        "crisis": crisis.to_dict(),
        "anxiety_level": anxiety_level,
        "language": language,
        "requires_crisis_response": requires_crisis_response,
        "core_version": CORE_VERSION,
    }
