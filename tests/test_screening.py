"""
Tests for keyword crisis triage and the C-SSRS screening flow.
"""

from calmsense.screening import (
    CSSRS_QUESTIONS,
    CrisisAssessment,
    ScreeningResponse,
    assess_crisis_keywords,
    assess_screening_responses,
    crisis_response_message,
    next_screening_question,
)


def _answers(*yes_numbers: int) -> list[ScreeningResponse]:
    return [
        ScreeningResponse(n, "yes" if n in yes_numbers else "no")
        for n in range(1, 7)
    ]


class TestCrisisKeywords:

    def test_imminent(self):
        result = assess_crisis_keywords("I'm going to kill myself tonight")
        assert result.risk_level == "imminent"
        assert result.requires_screening is True
        assert result.detected_indicators == ["going to kill myself", "tonight"]

    def test_high(self):
        result = assess_crisis_keywords("Thinking about suicide and I want to die")
        assert result.risk_level == "high"
        assert result.detected_indicators == ["suicide", "want to die"]

    def test_moderate(self):
        result = assess_crisis_keywords("I can't go on like this")
        assert result.risk_level == "moderate"
        assert result.requires_screening is True

    def test_case_insensitive(self):
        assert assess_crisis_keywords("Better Off Dead").risk_level == "moderate"

    def test_none(self):
        result = assess_crisis_keywords("Had a good day at the park")
        assert result.risk_level == "none"
        assert result.requires_screening is False
        assert result.detected_indicators == []

    def test_wire_shape(self):
        data = assess_crisis_keywords("").to_dict()
        assert data == {
            "riskLevel": "none",
            "requiresScreening": False,
            "reasoning": "No crisis indicators detected",
            "detectedIndicators": [],
        }


class TestScreeningQuestions:

    def test_six_questions_in_order(self):
        assert [q.id for q in CSSRS_QUESTIONS] == [1, 2, 3, 4, 5, 6]

    def test_first_question(self):
        assert next_screening_question([]) == (
            "Have you had thoughts of killing yourself? (Please answer yes or no)"
        )

    def test_follows_response_count(self):
        answered = [ScreeningResponse(1, "no"), ScreeningResponse(2, "no")]
        assert next_screening_question(answered).startswith(CSSRS_QUESTIONS[2].question)

    def test_complete(self):
        assert next_screening_question(_answers()) is None


class TestScreeningOutcome:

    def test_all_no_is_low(self):
        outcome = assess_screening_responses(_answers())
        assert outcome.final_risk_level == "low"
        assert outcome.should_alert is False

    def test_no_responses_is_low(self):
        assert assess_screening_responses([]).final_risk_level == "low"

    def test_ideation_is_moderate(self):
        outcome = assess_screening_responses(_answers(2))
        assert outcome.final_risk_level == "moderate"
        assert outcome.should_alert is True

    def test_plan_is_high(self):
        assert assess_screening_responses(_answers(1, 4)).final_risk_level == "high"

    def test_intent_is_imminent(self):
        outcome = assess_screening_responses(_answers(1, 3, 6))
        assert outcome.final_risk_level == "imminent"
        assert "911" in outcome.recommendation

    def test_unanswered_does_not_count(self):
        responses = [ScreeningResponse(5, None), ScreeningResponse(1, "yes")]
        assert assess_screening_responses(responses).final_risk_level == "moderate"


class TestCrisisResponseMessage:

    def _assessment(self, level):
        return CrisisAssessment(risk_level=level, requires_screening=False, reasoning="")

    def test_none_is_empty(self):
        assert crisis_response_message(self._assessment("none")) == ""

    def test_imminent(self):
        assert "CALL 911 NOW" in crisis_response_message(self._assessment("imminent"))

    def test_high_and_moderate_prompt_screening(self):
        for level in ("high", "moderate"):
            assert crisis_response_message(self._assessment(level)).startswith(
                "I'm concerned about your safety"
            )

    def test_low_lists_resources(self):
        assert "988" in crisis_response_message(self._assessment("low"))

    def test_screening_outcome_wins(self):
        outcome = assess_screening_responses(_answers(3))
        message = crisis_response_message(self._assessment("none"), outcome)
        assert outcome.recommendation in message
        assert "741741" in message
