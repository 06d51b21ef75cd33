"""Serialization of questions and responses for download and sharing.

The tabular format is a simplified CSV: commas inside answers become
semicolons and nothing is quoted. Question texts in the header keep
their commas.
"""

import json
import logging
from pathlib import Path

from .models import Question, ResponseSet, Survey

logger = logging.getLogger(__name__)

RESPONDENT_COLUMN = "respondent_id"


def to_table(questions: list[Question], responses: ResponseSet) -> str:
    """Serialize the question/response matrix as comma-separated text.

    Args:
        questions: Column order.
        responses: One row per respondent, labelled ``R1``, ``R2``, ...

    Returns:
        Header and rows joined by newlines, without a trailing newline.
    """
    header = [RESPONDENT_COLUMN, *(q.text.replace("\n", " ") for q in questions)]
    lines = [",".join(header)]
    for position, row in enumerate(responses, start=1):
        values = [str(row.get(q.id) or "").replace(",", ";") for q in questions]
        lines.append(",".join([f"R{position}", *values]))
    return "\n".join(lines)


def template_table(questions: list[Question]) -> str:
    """Empty response template: the header line only."""
    return to_table(questions, [])


def share_payload_dict(survey: Survey) -> dict:
    return {
        "orgName": survey.org_name,
        "objectif": survey.objective,
        "anonymous": survey.anonymous,
        "questions": [q.model_dump(mode="json") for q in survey.questions],
    }


def to_share_payload(survey: Survey) -> str:
    """JSON payload describing the survey for out-of-band sharing."""
    return json.dumps(share_payload_dict(survey), indent=2, ensure_ascii=False)


def template_filename(org_name: str) -> str:
    return f"modele_enquete_{org_name}.csv"


def responses_filename(org_name: str) -> str:
    return f"reponses_{org_name}.csv"


def write_text(path: str | Path, text: str) -> Path:
    """Write an export to disk as UTF-8, creating parent directories.

    Args:
        path: Destination file.
        text: Serialized content.

    Returns:
        The resolved output path.
    """
    output_path = Path(path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(text, encoding="utf-8")
    logger.info(f"Export saved to {output_path}")
    return output_path
