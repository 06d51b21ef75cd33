"""Lexicon-based sentiment scoring for open answers.

A deliberately naive scorer: each lexicon word found as a substring of the
lower-cased text counts once, the sum is clamped to [-3, 3] and scaled to
[-1, 1].
"""

from .models import Question, QuestionType, ResponseSet

POSITIVE_WORDS = (
    "merci",
    "bien",
    "satisfait",
    "excellent",
    "positif",
    "fiers",
    "écouté",
    "claire",
    "utile",
    "motivé",
    "reconnu",
)

NEGATIVE_WORDS = (
    "stress",
    "charge",
    "mauvais",
    "négatif",
    "fatigue",
    "burnout",
    "épuisé",
    "confus",
    "injuste",
    "toxique",
    "trop",
)

MAX_RAW_SCORE = 3

# Display thresholds for the global score
POSITIVE_THRESHOLD = 0.15
NEGATIVE_THRESHOLD = -0.15


def score_text(text: str | None) -> float:
    """Score one free-text answer in [-1, 1]."""
    if not text:
        return 0.0
    lowered = text.lower()
    raw = sum(1 for word in POSITIVE_WORDS if word in lowered)
    raw -= sum(1 for word in NEGATIVE_WORDS if word in lowered)
    return max(-MAX_RAW_SCORE, min(MAX_RAW_SCORE, raw)) / MAX_RAW_SCORE


def aggregate_score(responses: ResponseSet, questions: list[Question]) -> float:
    """Mean score over every non-empty answer to an open question."""
    open_ids = [q.id for q in questions if q.type == QuestionType.OPEN]
    texts = [row.get(qid) for row in responses for qid in open_ids]
    scores = [score_text(t) for t in texts if t]
    if not scores:
        return 0.0
    return sum(scores) / len(scores)


def sentiment_label(score: float) -> str:
    """Bucket a score as positive, negative or neutral."""
    if score > POSITIVE_THRESHOLD:
        return "positive"
    if score < NEGATIVE_THRESHOLD:
        return "negative"
    return "neutral"


def format_percent(score: float) -> str:
    """Render a score as a whole percentage, e.g. ``67%``."""
    return f"{score * 100:.0f}%"
