"""Engagement Survey - compose, collect and analyze engagement surveys."""

__version__ = "0.1.0"

from .analyzer import SurveyAnalyzer, analyze_responses, mean_for
from .editor import (
    add_question,
    move_question,
    remove_question,
    transition_question,
    update_question,
)
from .exporter import template_table, to_share_payload, to_table
from .generator import QuestionGenerator, generate_questions
from .models import GeneratorConfig, Question, QuestionType, Survey, SurveyLength, Tone
from .reporter import ReportGenerator, generate_report
from .sentiment import aggregate_score, score_text
from .session import SurveySession

__all__ = [
    "generate_questions",
    "add_question",
    "update_question",
    "transition_question",
    "move_question",
    "remove_question",
    "mean_for",
    "score_text",
    "aggregate_score",
    "to_table",
    "template_table",
    "to_share_payload",
    "analyze_responses",
    "generate_report",
    "QuestionGenerator",
    "SurveyAnalyzer",
    "ReportGenerator",
    "SurveySession",
    "GeneratorConfig",
    "Question",
    "QuestionType",
    "Survey",
    "SurveyLength",
    "Tone",
]
