"""Pydantic data models for engagement survey structures."""

import uuid
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

# 1: Pas du tout d'accord -> 5: Tout à fait d'accord
LIKERT_OPTIONS: tuple[str, ...] = ("1", "2", "3", "4", "5")

DEFAULT_THEME_LABEL = "Général"


class QuestionType(str, Enum):
    """Types of survey questions."""

    LIKERT = "likert"  # Five-point agreement scale
    OPEN = "open"  # Free text response
    MCQ = "mcq"  # Multiple choice with caller-supplied options


class Tone(str, Enum):
    """Phrasing style applied to generated question text."""

    NEUTRAL = "neutral"
    SUPPORTIVE = "supportive"
    DIRECT = "direct"

    @classmethod
    def _missing_(cls, value):
        return _TONE_ALIASES.get(str(value).lower())


class SurveyLength(str, Enum):
    """Requested survey length."""

    SHORT = "short"
    STANDARD = "standard"
    LONG = "long"

    @property
    def target_count(self) -> int:
        """Maximum number of generated questions for this length."""
        return _LENGTH_TARGETS[self]

    @classmethod
    def _missing_(cls, value):
        return _LENGTH_ALIASES.get(str(value).lower())


class OrganizationSize(str, Enum):
    """Organization headcount bucket (informational)."""

    SMALL = "1-49"
    MEDIUM = "50-199"
    LARGE = "200-999"
    ENTERPRISE = ">=1000"


_TONE_ALIASES = {
    "neutre": Tone.NEUTRAL,
    "bienveillance": Tone.SUPPORTIVE,
}

_LENGTH_ALIASES = {
    "courte": SurveyLength.SHORT,
    "longue": SurveyLength.LONG,
}

_LENGTH_TARGETS = {
    SurveyLength.SHORT: 8,
    SurveyLength.STANDARD: 10,
    SurveyLength.LONG: 18,
}


def new_question_id(prefix: str = "q") -> str:
    """Allocate a fresh, never reused question identifier."""
    return f"{prefix}_{uuid.uuid4().hex}"


def default_options(question_type: QuestionType) -> list[str]:
    """Options implied by a question type."""
    if question_type == QuestionType.LIKERT:
        return list(LIKERT_OPTIONS)
    return []


class Question(BaseModel):
    """A survey question.

    Questions are immutable snapshots: editing produces a new instance
    through ``model_copy`` and keeps the identifier.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    text: str
    type: QuestionType
    options: list[str] = Field(default_factory=list)  # Only meaningful for likert/mcq
    theme: str | None = None  # Informational tag

    @classmethod
    def create(
        cls,
        text: str,
        question_type: QuestionType,
        theme: str | None = None,
    ) -> "Question":
        """Build a question with a fresh id and the options its type implies."""
        return cls(
            id=new_question_id(),
            text=text,
            type=question_type,
            options=default_options(question_type),
            theme=theme,
        )

    @property
    def display_theme(self) -> str:
        return self.theme or DEFAULT_THEME_LABEL


# One respondent: question id -> answer string
ResponseRow = dict[str, str]

# Arrival-ordered respondent rows
ResponseSet = list[ResponseRow]


class GeneratorConfig(BaseModel):
    """Configuration accepted by the question generator."""

    objective: str = ""
    themes: list[str] = Field(default_factory=list)  # Caller order is kept
    tone: Tone = Tone.NEUTRAL
    length: SurveyLength = SurveyLength.STANDARD


class Survey(BaseModel):
    """Container for a survey definition and its ordered questions."""

    org_name: str = "Entreprise Demo"
    objective: str = "Mesurer l'engagement global et identifier 3 priorités d'action."
    size: OrganizationSize = OrganizationSize.MEDIUM
    anonymous: bool = True
    themes: list[str] = Field(
        default_factory=lambda: ["Engagement", "Communication", "Reconnaissance", "BienÊtre"]
    )
    tone: Tone = Tone.NEUTRAL
    length: SurveyLength = SurveyLength.STANDARD
    questions: list[Question] = Field(default_factory=list)

    @property
    def generator_config(self) -> GeneratorConfig:
        """Generator configuration derived from the survey settings."""
        return GeneratorConfig(
            objective=self.objective,
            themes=list(self.themes),
            tone=self.tone,
            length=self.length,
        )

    @property
    def question_count(self) -> int:
        """Total number of questions."""
        return len(self.questions)

    @property
    def likert_questions(self) -> list[Question]:
        return [q for q in self.questions if q.type == QuestionType.LIKERT]

    @property
    def open_questions(self) -> list[Question]:
        return [q for q in self.questions if q.type == QuestionType.OPEN]

    def get_question_by_id(self, question_id: str) -> Question | None:
        """Get a question by its ID."""
        for q in self.questions:
            if q.id == question_id:
                return q
        return None
