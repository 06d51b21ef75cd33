"""
Tests for rule-based question generation.

These tests verify:
    - Theme order and bank order of generated questions
    - Length targets and truncation
    - Tone rewriting
    - Onboarding injection and the open-question fallback
"""

from engagement_survey.generator import QuestionGenerator, generate_questions
from engagement_survey.models import (
    LIKERT_OPTIONS,
    GeneratorConfig,
    Question,
    QuestionType,
    SurveyLength,
    Tone,
)
from engagement_survey.question_bank import (
    FALLBACK_OPEN_QUESTION,
    ONBOARDING_QUESTION,
    QUESTION_BANK,
    SUPPORTIVE_SUFFIX,
    ThemeTemplates,
)

DEFAULT_THEMES = ["Engagement", "Communication", "Reconnaissance", "BienÊtre"]
ALL_THEMES = list(QUESTION_BANK)


class TestThemeOrdering:
    """Generated questions follow theme order, likert before open."""

    def test_engagement_short(self):
        """Engagement yields its three likert templates then its open template."""
        questions = generate_questions(
            {"themes": ["Engagement"], "tone": "neutral", "length": "short"}
        )
        bank = QUESTION_BANK["Engagement"]

        assert len(questions) <= 8
        assert [q.text for q in questions[:3]] == list(bank.likert)
        assert all(q.type == QuestionType.LIKERT for q in questions[:3])
        assert questions[3].type == QuestionType.OPEN
        assert questions[3].text == bank.open[0]

    def test_caller_order_is_kept(self):
        """Theme order is the caller's, not the bank's."""
        questions = generate_questions(
            GeneratorConfig(themes=["Leadership", "Engagement"], length=SurveyLength.LONG)
        )
        assert [q.theme for q in questions] == ["Leadership"] * 3 + ["Engagement"] * 4

    def test_theme_tag_and_options(self):
        """Each question carries its theme and the options its type implies."""
        questions = generate_questions(GeneratorConfig(themes=["Burnout"]))
        for q in questions:
            assert q.theme == "Burnout"
            if q.type == QuestionType.LIKERT:
                assert q.options == list(LIKERT_OPTIONS)
            else:
                assert q.options == []

    def test_unknown_themes_are_skipped(self):
        """Unrecognized theme tags are ignored silently."""
        questions = generate_questions(GeneratorConfig(themes=["Nope", "Leadership", "???"]))
        assert len(questions) == 3
        assert {q.theme for q in questions} == {"Leadership"}

    def test_fresh_unique_identifiers(self):
        """Every generated question gets its own identifier."""
        config = GeneratorConfig(themes=ALL_THEMES, length=SurveyLength.LONG)
        first = generate_questions(config)
        second = generate_questions(config)

        ids = [q.id for q in first]
        assert len(ids) == len(set(ids))
        assert not set(ids) & {q.id for q in second}


class TestLengthTargets:
    """Generated lists never exceed the length target."""

    def test_targets(self):
        assert SurveyLength.SHORT.target_count == 8
        assert SurveyLength.STANDARD.target_count == 10
        assert SurveyLength.LONG.target_count == 18

    def test_standard_default_themes(self):
        """Default themes give 13 candidates, truncated to 10."""
        questions = generate_questions(GeneratorConfig(themes=DEFAULT_THEMES))
        assert len(questions) == 10
        assert questions[-1].text == QUESTION_BANK["Reconnaissance"].open[0]

    def test_long_all_themes(self):
        questions = generate_questions(
            GeneratorConfig(themes=ALL_THEMES, length=SurveyLength.LONG)
        )
        assert len(questions) == 18

    def test_every_config_within_target(self):
        """No combination of tone, length and objective exceeds the target."""
        for length in SurveyLength:
            for tone in Tone:
                for objective in ("", "Réussir l'onboarding"):
                    questions = generate_questions(
                        GeneratorConfig(
                            objective=objective,
                            themes=ALL_THEMES,
                            tone=tone,
                            length=length,
                        )
                    )
                    assert len(questions) <= length.target_count
                    assert any(q.type == QuestionType.OPEN for q in questions)


class TestTone:
    """Tone rewrites question text."""

    def test_supportive_rewrites_self_reference(self):
        questions = generate_questions(
            GeneratorConfig(themes=["Engagement"], tone=Tone.SUPPORTIVE)
        )
        assert questions[0].text == (
            "Dans l'ensemble, je recommanderais mon entreprise comme un bon endroit "
            "où travailler." + SUPPORTIVE_SUFFIX
        )

    def test_supportive_suffix_without_self_reference(self):
        questions = generate_questions(
            GeneratorConfig(themes=["Leadership"], tone=Tone.SUPPORTIVE)
        )
        assert questions[0].text == (
            "Mon manager favorise la confiance et l'autonomie." + SUPPORTIVE_SUFFIX
        )

    def test_supportive_applied_once(self):
        questions = generate_questions(
            GeneratorConfig(themes=ALL_THEMES, tone=Tone.SUPPORTIVE, length=SurveyLength.LONG)
        )
        for q in questions:
            assert q.text.count(SUPPORTIVE_SUFFIX) == 1
            assert "Dans l'ensemble, dans l'ensemble" not in q.text

    def test_rewritten_question_owns_its_options(self):
        original = Question.create("Je participe.", QuestionType.LIKERT)
        rewritten = QuestionGenerator(GeneratorConfig(tone=Tone.SUPPORTIVE))._apply_tone(original)

        assert rewritten.options == original.options
        assert rewritten.options is not original.options

    def test_neutral_and_direct_leave_text(self):
        for tone in (Tone.NEUTRAL, Tone.DIRECT):
            questions = generate_questions(GeneratorConfig(themes=["Engagement"], tone=tone))
            assert [q.text for q in questions] == (
                list(QUESTION_BANK["Engagement"].likert) + list(QUESTION_BANK["Engagement"].open)
            )

    def test_injected_questions_are_not_rewritten(self):
        """The onboarding question is added after the tone transform."""
        questions = generate_questions(
            GeneratorConfig(
                objective="Onboarding",
                themes=["Engagement"],
                tone=Tone.SUPPORTIVE,
            )
        )
        assert questions[-1].text == ONBOARDING_QUESTION


class TestInjection:
    """Onboarding injection and the open-question guarantee."""

    def test_onboarding_case_insensitive(self):
        questions = generate_questions(
            GeneratorConfig(
                objective="Améliorer notre ONBOARDING",
                themes=["Engagement"],
                length=SurveyLength.SHORT,
            )
        )
        assert len(questions) == 5
        assert questions[-1].text == ONBOARDING_QUESTION
        assert questions[-1].type == QuestionType.OPEN
        assert questions[-1].theme == "Onboarding"

    def test_onboarding_dropped_when_list_is_full(self):
        """Injection past the target is removed by the final truncation."""
        questions = generate_questions(
            GeneratorConfig(objective="onboarding", themes=DEFAULT_THEMES)
        )
        assert len(questions) == 10
        assert ONBOARDING_QUESTION not in [q.text for q in questions]

    def test_no_themes_gives_fallback(self):
        questions = generate_questions(GeneratorConfig(themes=[]))
        assert len(questions) == 1
        assert questions[0].text == FALLBACK_OPEN_QUESTION
        assert questions[0].type == QuestionType.OPEN

    def test_no_themes_with_onboarding(self):
        """The onboarding question already satisfies the open guarantee."""
        questions = generate_questions(GeneratorConfig(objective="onboarding"))
        assert [q.text for q in questions] == [ONBOARDING_QUESTION]

    def test_fallback_appended_after_likert_only_theme(self):
        bank = {"Scale": ThemeTemplates(likert=("Je note A.", "Je note B."), open=())}
        questions = QuestionGenerator(
            GeneratorConfig(themes=["Scale"], length=SurveyLength.SHORT), bank=bank
        ).generate()
        assert [q.type for q in questions] == [
            QuestionType.LIKERT,
            QuestionType.LIKERT,
            QuestionType.OPEN,
        ]
        assert questions[-1].text == FALLBACK_OPEN_QUESTION

    def test_fallback_dropped_by_final_truncation(self):
        """A full likert-only list loses the fallback open question."""
        bank = {
            "Scale": ThemeTemplates(
                likert=tuple(f"Je note {i}." for i in range(10)),
                open=(),
            )
        }
        questions = generate_questions(
            GeneratorConfig(themes=["Scale"], length=SurveyLength.SHORT), bank=bank
        )
        assert len(questions) == 8
        assert not any(q.type == QuestionType.OPEN for q in questions)
