"""Caller-owned working state for one survey-building session.

The session only sequences calls into the pure core functions and keeps
their latest results; it is not synchronized, so concurrent callers
must serialize their updates.
"""

import logging
from dataclasses import dataclass, field

from . import editor
from .analyzer import SurveyAnalysis, SurveyAnalyzer
from .exporter import template_table, to_share_payload, to_table
from .generator import generate_questions
from .models import Question, QuestionType, ResponseRow, ResponseSet, Survey

logger = logging.getLogger(__name__)


@dataclass
class SurveySession:
    """Survey under construction plus the responses collected for it."""

    survey: Survey = field(default_factory=Survey)
    responses: ResponseSet = field(default_factory=list)
    draft: ResponseRow = field(default_factory=dict)

    @property
    def questions(self) -> list[Question]:
        return self.survey.questions

    def _replace_questions(self, questions: list[Question]) -> None:
        self.survey = self.survey.model_copy(update={"questions": questions})

    # -- design -----------------------------------------------------------

    def toggle_theme(self, theme: str) -> None:
        """Select a theme, or deselect it when already selected."""
        themes = list(self.survey.themes)
        if theme in themes:
            themes.remove(theme)
        else:
            themes.append(theme)
        self.survey = self.survey.model_copy(update={"themes": themes})

    def generate(self) -> list[Question]:
        """Replace the question list with a freshly generated one."""
        self._replace_questions(generate_questions(self.survey.generator_config))
        return self.questions

    def add_question(self, question_type: QuestionType = QuestionType.LIKERT) -> None:
        self._replace_questions(editor.add_question(self.questions, question_type))

    def update_question(self, index: int, **patch) -> None:
        self._replace_questions(editor.update_question(self.questions, index, **patch))

    def transition_question(self, index: int, new_type: QuestionType) -> None:
        self._replace_questions(editor.transition_question(self.questions, index, new_type))

    def move_question(self, index: int, direction: int) -> None:
        self._replace_questions(editor.move_question(self.questions, index, direction))

    def remove_question(self, index: int) -> None:
        self._replace_questions(editor.remove_question(self.questions, index))

    # -- collection -------------------------------------------------------

    def set_answer(self, question_id: str, answer: str) -> None:
        """Record an answer in the current draft response."""
        self.draft = {**self.draft, question_id: answer}

    def reset_draft(self) -> None:
        self.draft = {}

    def record_response(self) -> ResponseRow:
        """Append the draft as a new respondent row and start a fresh draft."""
        row = dict(self.draft)
        self.responses = [*self.responses, row]
        self.draft = {}
        logger.debug(f"Recorded response R{len(self.responses)}")
        return row

    # -- analysis and export ----------------------------------------------

    def analyze(self) -> SurveyAnalysis:
        return SurveyAnalyzer(self.questions, self.responses).analyze()

    def responses_table(self) -> str:
        return to_table(self.questions, self.responses)

    def template_table(self) -> str:
        return template_table(self.questions)

    def share_payload(self) -> str:
        return to_share_payload(self.survey)
