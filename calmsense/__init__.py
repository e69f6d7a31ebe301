"""
calmsense — Rule-Based Anxiety and Crisis Context Classifier

Deterministic text scoring for a wellness chat companion. Every
detector is a pure function of the message text and the static
pattern tables in calmsense.patterns.

Public API:
  - analyze_anxiety_context:     Seven clinical category summaries
  - detect_anxiety_triggers:     Trigger tags (work, financial, ...)
  - detect_cognitive_patterns:   Cognitive distortion labels
  - detect_psychosis_indicators: Psychosis indicator score + confidence
  - assess_crisis_keywords:      Keyword crisis triage
  - assess_screening_responses:  C-SSRS screening outcome
  - scan_message:                All of the above, merged
  - normalize:                   The shared text normalizer

Usage:
    from calmsense import analyze_anxiety_context
    summary = analyze_anxiety_context("My heart is racing and I can't breathe")
    if summary.panic.threshold_met:
        ...
"""

__version__ = "1.0.0"

from calmsense.normalizer import normalize, tokenize
from calmsense.scorer import ConditionSummary, PatternDefinition, compute_confidence, evaluate
from calmsense.window import bidirectional_patterns, has_nearby_match
from calmsense.patterns import CORE_VERSION, TRIGGER_TAGS, DISTORTION_LABELS
from calmsense.contexts import (
    AnxietyContextSummary,
    analyze_anxiety_context,
    detect_anxiety_triggers,
    detect_cognitive_patterns,
)
from calmsense.psychosis import PsychosisDetectionResult, detect_psychosis_indicators
from calmsense.screening import (
    CSSRS_QUESTIONS,
    CrisisAssessment,
    ScreeningOutcome,
    ScreeningResponse,
    assess_crisis_keywords,
    assess_screening_responses,
    crisis_response_message,
    next_screening_question,
)
from calmsense.detector import detect_language, estimate_anxiety_level, scan_message

__all__ = [
    "normalize",
    "tokenize",
    "ConditionSummary",
    "PatternDefinition",
    "compute_confidence",
    "evaluate",
    "bidirectional_patterns",
    "has_nearby_match",
    "CORE_VERSION",
    "TRIGGER_TAGS",
    "DISTORTION_LABELS",
    "AnxietyContextSummary",
    "analyze_anxiety_context",
    "detect_anxiety_triggers",
    "detect_cognitive_patterns",
    "PsychosisDetectionResult",
    "detect_psychosis_indicators",
    "CSSRS_QUESTIONS",
    "CrisisAssessment",
    "ScreeningOutcome",
    "ScreeningResponse",
    "assess_crisis_keywords",
    "assess_screening_responses",
    "crisis_response_message",
    "next_screening_question",
    "detect_language",
    "estimate_anxiety_level",
    "scan_message",
]
