"""Rule-based question generation from the thematic question bank."""

import logging
from collections.abc import Mapping

from .models import GeneratorConfig, Question, QuestionType, Tone
from .question_bank import (
    FALLBACK_OPEN_QUESTION,
    FALLBACK_THEME,
    ONBOARDING_KEYWORD,
    ONBOARDING_QUESTION,
    ONBOARDING_THEME,
    QUESTION_BANK,
    SUPPORTIVE_PREFIX,
    SUPPORTIVE_SUFFIX,
    ThemeTemplates,
)

logger = logging.getLogger(__name__)


class QuestionGenerator:
    """Build an ordered question list from the bank and a configuration."""

    def __init__(
        self,
        config: dict | GeneratorConfig,
        bank: Mapping[str, ThemeTemplates] = QUESTION_BANK,
    ):
        """Initialize generator with its configuration.

        Args:
            config: Configuration dict or GeneratorConfig object.
            bank: Theme library to draw templates from.
        """
        if isinstance(config, dict):
            self.config = GeneratorConfig(**config)
        else:
            self.config = config
        self.bank = bank

    @property
    def target_count(self) -> int:
        return self.config.length.target_count

    def generate(self) -> list[Question]:
        """Generate the question list.

        Returns:
            At most ``target_count`` questions, in theme order.
        """
        target = self.target_count
        pool = self._build_pool()
        picked = [self._apply_tone(q) for q in pool[:target]]

        if ONBOARDING_KEYWORD in self.config.objective.lower():
            picked.append(
                Question.create(ONBOARDING_QUESTION, QuestionType.OPEN, theme=ONBOARDING_THEME)
            )

        if not any(q.type == QuestionType.OPEN for q in picked):
            picked.append(
                Question.create(FALLBACK_OPEN_QUESTION, QuestionType.OPEN, theme=FALLBACK_THEME)
            )

        result = picked[:target]
        if len(picked) > target and not any(q.type == QuestionType.OPEN for q in result):
            logger.warning(
                f"Open question dropped by truncation to {target} questions"
            )

        logger.info(f"Generated {len(result)} questions (pool of {len(pool)}, target {target})")
        return result

    def _build_pool(self) -> list[Question]:
        """Instantiate every template of the selected themes, in caller order."""
        pool: list[Question] = []
        for theme in self.config.themes:
            templates = self.bank.get(theme)
            if templates is None:
                logger.debug(f"Skipping unknown theme: '{theme}'")
                continue
            for question_type, text in templates.templates():
                pool.append(Question.create(text, question_type, theme=theme))
        return pool

    def _apply_tone(self, question: Question) -> Question:
        """Rewrite question text for the configured tone."""
        if self.config.tone != Tone.SUPPORTIVE:
            return question
        old, new = SUPPORTIVE_PREFIX
        text = question.text.replace(old, new, 1) + SUPPORTIVE_SUFFIX
        return question.model_copy(update={"text": text, "options": list(question.options)})


def generate_questions(
    config: dict | GeneratorConfig,
    bank: Mapping[str, ThemeTemplates] = QUESTION_BANK,
) -> list[Question]:
    """Convenience function to generate a question list.

    Args:
        config: Generator configuration (dict or GeneratorConfig).
        bank: Theme library (defaults to the built-in bank).

    Returns:
        Ordered list of freshly identified questions.
    """
    return QuestionGenerator(config, bank=bank).generate()
