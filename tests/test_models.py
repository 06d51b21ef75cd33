"""
Tests for the survey data model.
"""

import pytest
from pydantic import ValidationError

from engagement_survey.models import (
    LIKERT_OPTIONS,
    GeneratorConfig,
    OrganizationSize,
    Question,
    QuestionType,
    Survey,
    SurveyLength,
    Tone,
    new_question_id,
)


class TestQuestion:
    def test_create_likert(self):
        q = Question.create("Texte", QuestionType.LIKERT, theme="Engagement")
        assert q.options == ["1", "2", "3", "4", "5"]
        assert q.theme == "Engagement"
        assert q.id.startswith("q_")

    def test_create_open(self):
        q = Question.create("Texte", QuestionType.OPEN)
        assert q.options == []
        assert q.display_theme == "Général"

    def test_frozen(self):
        q = Question.create("Texte", QuestionType.OPEN)
        with pytest.raises(ValidationError):
            q.text = "Autre"

    def test_ids_are_unique(self):
        assert len({new_question_id() for _ in range(1000)}) == 1000

    def test_scale_is_fixed(self):
        assert LIKERT_OPTIONS == ("1", "2", "3", "4", "5")


class TestEnums:
    def test_tone_aliases(self):
        assert Tone("neutre") is Tone.NEUTRAL
        assert Tone("bienveillance") is Tone.SUPPORTIVE
        assert Tone("direct") is Tone.DIRECT

    def test_length_aliases(self):
        assert SurveyLength("courte") is SurveyLength.SHORT
        assert SurveyLength("longue") is SurveyLength.LONG

    def test_unknown_value(self):
        with pytest.raises(ValueError):
            Tone("angry")


class TestSurvey:
    def test_defaults(self):
        survey = Survey()
        assert survey.org_name == "Entreprise Demo"
        assert survey.size == OrganizationSize.MEDIUM
        assert survey.anonymous is True
        assert survey.themes == ["Engagement", "Communication", "Reconnaissance", "BienÊtre"]
        assert survey.questions == []

    def test_generator_config(self):
        survey = Survey(objective="Onboarding", themes=["Burnout"], tone="supportive", length="long")
        assert survey.generator_config == GeneratorConfig(
            objective="Onboarding",
            themes=["Burnout"],
            tone=Tone.SUPPORTIVE,
            length=SurveyLength.LONG,
        )

    def test_question_helpers(self):
        likert = Question.create("L", QuestionType.LIKERT)
        open_q = Question.create("O", QuestionType.OPEN)
        survey = Survey(questions=[likert, open_q])

        assert survey.question_count == 2
        assert survey.likert_questions == [likert]
        assert survey.open_questions == [open_q]
        assert survey.get_question_by_id(open_q.id) == open_q
        assert survey.get_question_by_id("missing") is None
