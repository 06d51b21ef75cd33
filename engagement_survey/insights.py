"""Key findings and action recommendations derived from collected responses."""

import logging
from dataclasses import dataclass, field

from .analyzer import QuestionStats, SurveyAnalysis, SurveyAnalyzer
from .models import Question, QuestionType, ResponseSet
from .sentiment import format_percent, sentiment_label

logger = logging.getLogger(__name__)

PRIORITY_COUNT = 3
LOW_SCORE_THRESHOLD = 3.0
HIGH_SCORE_THRESHOLD = 4.0

RECOMMENDATIONS = (
    "Partager 3 priorités claires issues de l'enquête et nommer un sponsor par priorité.",
    "Planifier un check-in d'équipe de 30 minutes pour passer en revue les résultats "
    "et co-créer 1 action par thème.",
    "Mettre en place un rituel de reconnaissance hebdomadaire (simple, pair-à-pair).",
    "Balancer la charge : limiter le WIP, clarifier les priorités, points rapides de désescalade.",
)


@dataclass
class Insight:
    """A single insight or finding from the data."""

    title: str
    description: str
    metric: str
    severity: str = "info"  # info, warning, success
    category: str = "general"


@dataclass
class SurveyInsights:
    """Collection of insights from survey analysis."""

    key_insights: list[Insight] = field(default_factory=list)
    priorities: list[QuestionStats] = field(default_factory=list)
    strengths: list[QuestionStats] = field(default_factory=list)
    recommendations: list[str] = field(default_factory=lambda: list(RECOMMENDATIONS))


class InsightsGenerator:
    """Generate engagement insights from a question list and its responses."""

    def __init__(
        self,
        questions: list[Question],
        responses: ResponseSet,
        analysis: SurveyAnalysis | None = None,
    ):
        self.questions = list(questions)
        self.responses = list(responses)
        self.analysis = analysis or SurveyAnalyzer(self.questions, self.responses).analyze()

    def generate(self) -> SurveyInsights:
        """Generate all insights."""
        scored = self._scored_likert_stats()
        ranked = sorted(scored, key=lambda s: s.mean)

        insights = SurveyInsights(
            priorities=[s for s in ranked if s.mean < LOW_SCORE_THRESHOLD][:PRIORITY_COUNT],
            strengths=[s for s in reversed(ranked) if s.mean >= HIGH_SCORE_THRESHOLD][:PRIORITY_COUNT],
        )
        insights.key_insights = self._generate_key_insights(insights)
        return insights

    def _scored_likert_stats(self) -> list[QuestionStats]:
        """Likert questions that received at least one numeric answer."""
        return [
            s
            for s in self.analysis.question_stats
            if s.question_type == QuestionType.LIKERT and s.median is not None
        ]

    def _generate_key_insights(self, insights: SurveyInsights) -> list[Insight]:
        key_insights = []
        analysis = self.analysis

        # 1. Participation
        if analysis.total_responses > 0:
            rate = analysis.completion_rate
            severity = "success" if rate >= 80 else "warning" if rate >= 50 else "info"
            key_insights.append(
                Insight(
                    title="Participation",
                    description=f"{analysis.total_responses} response(s) recorded, {rate:.0f}% of questions answered on average.",
                    metric=str(analysis.total_responses),
                    severity=severity,
                    category="completion",
                )
            )

        # 2. Open-answer sentiment
        has_text = any(s.text_responses for s in analysis.question_stats)
        if has_text:
            label = sentiment_label(analysis.sentiment_score)
            severity = {"positive": "success", "negative": "warning"}.get(label, "info")
            key_insights.append(
                Insight(
                    title="Global Sentiment",
                    description=f"Open answers read as {label} overall.",
                    metric=format_percent(analysis.sentiment_score),
                    severity=severity,
                    category="sentiment",
                )
            )

        # 3. Lowest scores
        for stats in insights.priorities:
            key_insights.append(
                Insight(
                    title=f"Priority: {stats.theme or 'Général'}",
                    description=f'"{stats.question_text[:60]}" averages {stats.mean:.1f} / 5.',
                    metric=f"{stats.mean:.1f}",
                    severity="warning",
                    category="priority",
                )
            )

        # 4. Best score
        if insights.strengths:
            best = insights.strengths[0]
            key_insights.append(
                Insight(
                    title=f"Strength: {best.theme or 'Général'}",
                    description=f'"{best.question_text[:60]}" averages {best.mean:.1f} / 5.',
                    metric=f"{best.mean:.1f}",
                    severity="success",
                    category="strength",
                )
            )

        # 5. Structure
        if self.questions:
            likert = sum(1 for q in self.questions if q.type == QuestionType.LIKERT)
            open_text = sum(1 for q in self.questions if q.type == QuestionType.OPEN)
            mcq = len(self.questions) - likert - open_text
            key_insights.append(
                Insight(
                    title="Survey Structure",
                    description=f"Survey has {len(self.questions)} questions: {likert} likert, {open_text} open, {mcq} multiple-choice.",
                    metric=f"{len(self.questions)} Q's",
                    severity="info",
                    category="structure",
                )
            )

        logger.debug(f"Generated {len(key_insights)} key insights")
        return key_insights
