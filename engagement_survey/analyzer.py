"""Statistical aggregation of collected survey responses."""

import math
from collections import Counter
from dataclasses import dataclass

import pandas as pd

from .models import Question, QuestionType, ResponseSet
from .sentiment import aggregate_score

CHART_LABEL_LENGTH = 32


def parse_numeric(value: object) -> float | None:
    """Parse an answer as a finite number; anything else yields None."""
    if value is None:
        return None
    text = str(value).strip()
    # float() accepts digit grouping such as "1_0"
    if not text or "_" in text:
        return None
    try:
        number = float(text)
    except ValueError:
        return None
    return number if math.isfinite(number) else None


def mean_for(question: Question, responses: ResponseSet) -> float:
    """Arithmetic mean of the numeric answers to ``question``.

    Missing and non-numeric answers are discarded. Returns exactly 0.0
    when nothing survives.
    """
    values = [parse_numeric(row.get(question.id)) for row in responses]
    numbers = [v for v in values if v is not None]
    if not numbers:
        return 0.0
    return sum(numbers) / len(numbers)


@dataclass
class QuestionStats:
    """Statistics for a single question."""

    question_id: str
    question_text: str
    question_type: QuestionType
    theme: str | None
    total_responses: int
    response_count: int  # Non-empty answers
    response_rate: float
    option_counts: dict[str, int]
    option_percentages: dict[str, float]
    mean: float = 0.0
    median: float | None = None
    std_dev: float | None = None
    text_responses: list[str] | None = None


@dataclass
class LikertStat:
    """One bar of the likert means chart."""

    question_id: str
    name: str
    avg: float


@dataclass
class SurveyAnalysis:
    """Complete analysis results for a question list and its responses."""

    total_responses: int
    question_stats: list[QuestionStats]
    likert_stats: list[LikertStat]
    completion_rate: float
    sentiment_score: float
    theme_means: dict[str, float]


class SurveyAnalyzer:
    """Analyzer for collected responses."""

    def __init__(self, questions: list[Question], responses: ResponseSet):
        """Initialize analyzer with a question snapshot and its responses.

        Args:
            questions: Current ordered question list.
            responses: Respondent rows in arrival order.
        """
        self.questions = list(questions)
        self.responses = list(responses)

    def analyze(self) -> SurveyAnalysis:
        """Perform complete analysis.

        Returns:
            SurveyAnalysis with all statistics.
        """
        return SurveyAnalysis(
            total_responses=len(self.responses),
            question_stats=[self.analyze_question(q) for q in self.questions],
            likert_stats=self.likert_stats(),
            completion_rate=self._calculate_completion_rate(),
            sentiment_score=aggregate_score(self.responses, self.questions),
            theme_means=self.theme_means(),
        )

    def analyze_question(self, question: Question) -> QuestionStats:
        """Analyze a single question.

        Args:
            question: Question to analyze.

        Returns:
            QuestionStats with counts, percentages and numeric summary.
        """
        total = len(self.responses)
        option_counts: Counter[str] = Counter()
        numeric_values: list[float] = []
        text_responses: list[str] = []

        for row in self.responses:
            answer = (row.get(question.id) or "").strip()
            if not answer:
                continue

            if question.type == QuestionType.OPEN:
                text_responses.append(answer)
            else:
                option_counts[answer] += 1

            number = parse_numeric(answer)
            if number is not None:
                numeric_values.append(number)

        answered = len(text_responses) + sum(option_counts.values())

        # Keep declared option order, then any unexpected answers
        ordered_counts = {opt: option_counts[opt] for opt in question.options if opt in option_counts}
        for opt, count in option_counts.items():
            ordered_counts.setdefault(opt, count)

        option_percentages = {
            opt: (count / total * 100) if total > 0 else 0
            for opt, count in ordered_counts.items()
        }

        median = None
        std_dev = None
        if numeric_values:
            series = pd.Series(numeric_values)
            median = float(series.median())
            std_dev = float(series.std()) if len(numeric_values) > 1 else 0.0

        return QuestionStats(
            question_id=question.id,
            question_text=question.text,
            question_type=question.type,
            theme=question.theme,
            total_responses=total,
            response_count=answered,
            response_rate=(answered / total * 100) if total > 0 else 0,
            option_counts=ordered_counts,
            option_percentages=option_percentages,
            mean=mean_for(question, self.responses),
            median=median,
            std_dev=std_dev,
            text_responses=text_responses if text_responses else None,
        )

    def likert_stats(self) -> list[LikertStat]:
        """Mean score of every likert question, labelled for charting."""
        return [
            LikertStat(
                question_id=q.id,
                name=truncate_label(q.text),
                avg=mean_for(q, self.responses),
            )
            for q in self.questions
            if q.type == QuestionType.LIKERT
        ]

    def theme_means(self) -> dict[str, float]:
        """Mean of the likert question means, grouped by question theme.

        Questions without any numeric answer are left out, so a theme whose
        likert questions were all unanswered does not appear.
        """
        rows = [
            {"theme": q.display_theme, "mean": mean_for(q, self.responses)}
            for q in self.questions
            if q.type == QuestionType.LIKERT and self._has_numeric_answer(q)
        ]

        if not rows:
            return {}

        df = pd.DataFrame(rows)
        grouped = df.groupby("theme", sort=False)["mean"].mean()
        return {str(theme): float(value) for theme, value in grouped.items()}

    def _has_numeric_answer(self, question: Question) -> bool:
        return any(parse_numeric(row.get(question.id)) is not None for row in self.responses)

    def _calculate_completion_rate(self) -> float:
        """Average share of questions answered per respondent."""
        if not self.responses:
            return 0.0

        total_questions = len(self.questions)
        if total_questions == 0:
            return 100.0

        completed = []
        for row in self.responses:
            answered = sum(1 for q in self.questions if (row.get(q.id) or "").strip())
            completed.append(answered / total_questions * 100)

        return sum(completed) / len(completed)


def truncate_label(text: str, max_length: int = CHART_LABEL_LENGTH) -> str:
    """Shorten text to ``max_length`` characters, marking the cut with an ellipsis."""
    if len(text) <= max_length:
        return text
    return text[:max_length] + "…"


def analyze_responses(questions: list[Question], responses: ResponseSet) -> SurveyAnalysis:
    """Convenience function to analyze collected responses.

    Args:
        questions: Ordered question list.
        responses: Respondent rows.

    Returns:
        SurveyAnalysis with complete statistics.
    """
    return SurveyAnalyzer(questions, responses).analyze()
