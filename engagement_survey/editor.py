"""Editing operations over an ordered question list.

Every function returns a new list and leaves its input untouched.
Invalid indices are ignored: the list comes back unchanged.
"""

import logging
from typing import Any

from .models import Question, QuestionType, default_options
from .question_bank import CUSTOM_THEME, PLACEHOLDER_TEXT

logger = logging.getLogger(__name__)

EDITABLE_FIELDS = ("text", "type", "options", "theme")


def _valid_index(questions: list[Question], index: int) -> bool:
    return 0 <= index < len(questions)


def add_question(
    questions: list[Question], question_type: QuestionType = QuestionType.LIKERT
) -> list[Question]:
    """Append a placeholder question of the given type."""
    question = Question.create(PLACEHOLDER_TEXT, QuestionType(question_type), theme=CUSTOM_THEME)
    return [*questions, question]


def update_question(questions: list[Question], index: int, **patch: Any) -> list[Question]:
    """Replace text, type, options or theme of the question at ``index``.

    The identifier is preserved. Changing ``type`` here does not touch
    ``options``; use :func:`transition_question` for a consistent flip.
    """
    if not _valid_index(questions, index):
        logger.debug(f"Ignoring update at invalid index {index}")
        return list(questions)

    update = {key: value for key, value in patch.items() if key in EDITABLE_FIELDS}
    if "type" in update:
        update["type"] = QuestionType(update["type"])
    update["options"] = list(update.get("options", questions[index].options))

    result = list(questions)
    result[index] = questions[index].model_copy(update=update)
    return result


def transition_question(
    questions: list[Question], index: int, new_type: QuestionType
) -> list[Question]:
    """Change a question's type and reset its options to match.

    likert gets the five-point scale, open gets no options, mcq keeps
    whatever options it already had.
    """
    if not _valid_index(questions, index):
        logger.debug(f"Ignoring transition at invalid index {index}")
        return list(questions)

    new_type = QuestionType(new_type)
    current = questions[index]
    options = current.options if new_type == QuestionType.MCQ else default_options(new_type)

    result = list(questions)
    result[index] = current.model_copy(update={"type": new_type, "options": list(options)})
    return result


def move_question(questions: list[Question], index: int, direction: int) -> list[Question]:
    """Swap the question at ``index`` with its neighbour at ``index + direction``."""
    target = index + direction
    if direction not in (-1, 1) or not _valid_index(questions, index) or not _valid_index(
        questions, target
    ):
        return list(questions)

    result = list(questions)
    result[index], result[target] = result[target], result[index]
    return result


def remove_question(questions: list[Question], index: int) -> list[Question]:
    """Delete the question at ``index``."""
    if not _valid_index(questions, index):
        logger.debug(f"Ignoring removal at invalid index {index}")
        return list(questions)
    return [q for i, q in enumerate(questions) if i != index]
