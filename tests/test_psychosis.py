"""
Tests for the Psychosis Indicator Detector.

False positives here put a user into a crisis flow, so the negative
cases matter as much as the positive ones.
"""

import pytest

from calmsense.psychosis import detect_psychosis_indicators, has_agency_surveillance_context


class TestNoIndicators:

    @pytest.mark.parametrize("message", [
        "Tanto a mi madre como a mí nos estafaron, el piso está pendiente de desahucio.",
        "La policía vino a preguntar por mis vecinos.",
        "My cousin works for the FBI and loves it.",
        "I had a stressful day at work.",
        "",
    ])
    def test_no_false_positive(self, message):
        result = detect_psychosis_indicators(message)
        assert result.has_indicators is False
        assert result.matches == []
        assert result.confidence == "low"


class TestIndicators:

    def test_hearing_voices(self):
        result = detect_psychosis_indicators("I keep hearing voices in my head telling me secrets.")
        assert result.has_indicators is True
        assert len(result.matches) == 2
        assert result.confidence == "medium"

    def test_agency_surveillance(self):
        result = detect_psychosis_indicators("The CIA is following me everywhere I go.")
        assert result.has_indicators is True
        assert "agency+surveillance" in result.matches
        assert result.confidence == "low"

    def test_multiple_cues_high_confidence(self):
        result = detect_psychosis_indicators(
            "I am hallucinating shadows, hearing voices, and I feel like people are after me."
        )
        assert result.has_indicators is True
        assert result.confidence == "high"
        assert len(result.matches) == 3

    def test_single_direct_keyword(self):
        result = detect_psychosis_indicators("My doctor says it is paranoia")
        assert result.has_indicators is True
        assert result.matches == ["Paranoia mentioned"]
        assert result.confidence == "low"

    def test_single_context_phrase_is_not_enough(self):
        result = detect_psychosis_indicators("Sometimes I think someone watching me")
        assert result.has_indicators is False
        assert result.matches == []

    def test_case_insensitive_raw_text(self):
        result = detect_psychosis_indicators("SCHIZOPHRENIA runs in my family")
        assert result.has_indicators is True

    def test_wire_shape(self):
        data = detect_psychosis_indicators("I think I'm psychotic").to_dict()
        assert data == {
            "hasIndicators": True,
            "matches": ["Psychotic episode mentioned"],
            "confidence": "low",
        }


class TestAgencySurveillance:

    def test_intelligence_agency(self):
        assert has_agency_surveillance_context("An intelligence agency is watching me")

    def test_spies_tracking(self):
        assert has_agency_surveillance_context("Spies are tracking us")

    def test_bare_agency_word_is_not_gated_in(self):
        assert not has_agency_surveillance_context("The agency is watching me")

    def test_agency_without_surveillance(self):
        assert not has_agency_surveillance_context("The NSA published a report")
