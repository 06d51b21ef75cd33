"""Thematic library of candidate engagement questions.

The bank is read-only process-wide configuration: every theme maps to
its likert templates and its open templates, both kept in bank order.
"""

from dataclasses import dataclass
from types import MappingProxyType

from .models import QuestionType


@dataclass(frozen=True)
class ThemeTemplates:
    """Question templates for a single theme."""

    likert: tuple[str, ...]
    open: tuple[str, ...]

    def templates(self) -> list[tuple[QuestionType, str]]:
        """All templates, likert first then open."""
        return [(QuestionType.LIKERT, t) for t in self.likert] + [
            (QuestionType.OPEN, t) for t in self.open
        ]


QUESTION_BANK = MappingProxyType(
    {
        "Engagement": ThemeTemplates(
            likert=(
                "Je recommanderais mon entreprise comme un bon endroit où travailler.",
                "Je me sens impliqué(e) et motivé(e) par mon travail au quotidien.",
                "Je comprends comment mon travail contribue aux objectifs de l'entreprise.",
            ),
            open=(
                "Qu'est-ce qui renforcerait le plus votre engagement dans les 3 prochains mois ?",
            ),
        ),
        "Communication": ThemeTemplates(
            likert=(
                "L'information circule de manière claire et en temps utile dans mon équipe.",
                "Je reçois du feedback régulier et utile de la part de mon manager.",
            ),
            open=("Quel message clé manque aujourd'hui pour mieux avancer ?",),
        ),
        "Leadership": ThemeTemplates(
            likert=(
                "Mon manager favorise la confiance et l'autonomie.",
                "Les décisions de leadership sont transparentes et cohérentes.",
            ),
            open=("Quelle attitude de leadership serait la plus utile à développer ?",),
        ),
        "BienÊtre": ThemeTemplates(
            likert=(
                "Je peux préserver un équilibre sain entre vie professionnelle et personnelle.",
                "Ma charge de travail est soutenable sur la durée.",
            ),
            open=("Quelles actions simples pourraient améliorer votre bien-être ?",),
        ),
        "Burnout": ThemeTemplates(
            likert=(
                "Je me sens fréquemment épuisé(e) émotionnellement par mon travail.",
                "Je dispose de ressources suffisantes pour faire face au stress professionnel.",
            ),
            open=("Quels signaux de surcharge observez-vous dans votre quotidien ?",),
        ),
        "Reconnaissance": ThemeTemplates(
            likert=(
                "Je me sens reconnu(e) pour mes contributions.",
                "La reconnaissance est équitable et cohérente dans l'équipe.",
            ),
            open=("Quel type de reconnaissance a le plus d'impact pour vous ?",),
        ),
    }
)

# Order in which themes are offered for selection
THEME_DISPLAY_ORDER = (
    "Engagement",
    "Communication",
    "Leadership",
    "Reconnaissance",
    "BienÊtre",
    "Burnout",
)

# Appended when the objective mentions onboarding
ONBOARDING_QUESTION = "Qu'auriez-vous aimé recevoir/clarifier lors de votre arrivée ?"
ONBOARDING_THEME = "Onboarding"
ONBOARDING_KEYWORD = "onboarding"

# Appended when no open question survives
FALLBACK_OPEN_QUESTION = "Quel est l'unique changement le plus utile ?"
FALLBACK_THEME = "Général"

# Supportive tone rewrite
SUPPORTIVE_PREFIX = ("Je ", "Dans l'ensemble, je ")
SUPPORTIVE_SUFFIX = " (réponse honnête et sans conséquence)"

# Editor placeholder for manually added questions
PLACEHOLDER_TEXT = "Nouvelle question…"
CUSTOM_THEME = "Custom"


def available_themes() -> list[str]:
    """Theme tags known to the bank, in display order."""
    return list(THEME_DISPLAY_ORDER)


def get_theme(theme: str) -> ThemeTemplates | None:
    """Look up a theme's templates; unknown tags yield None."""
    return QUESTION_BANK.get(theme)
