"""Command-line interface for the engagement survey builder."""

import logging
import sys
from pathlib import Path

import click

from . import __version__
from .exporter import responses_filename, template_filename, write_text
from .models import LIKERT_OPTIONS, OrganizationSize, QuestionType, Survey, SurveyLength, Tone
from .question_bank import available_themes, get_theme
from .reporter import ReportGenerator
from .sentiment import format_percent, score_text, sentiment_label
from .session import SurveySession

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(levelname)s - %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger(__name__)

TONE_CHOICES = [t.value for t in Tone] + ["neutre", "bienveillance"]
LENGTH_CHOICES = [length.value for length in SurveyLength] + ["courte", "longue"]


SURVEY_OPTIONS = [
    click.option("--org", default="Entreprise Demo", show_default=True, help="Organization name."),
    click.option(
        "--objective",
        default="Mesurer l'engagement global et identifier 3 priorités d'action.",
        help="Survey objective. Mentioning 'onboarding' adds an onboarding question.",
    ),
    click.option(
        "--theme",
        "-t",
        "themes",
        multiple=True,
        help="Theme to include, in order. Can be used multiple times.",
    ),
    click.option(
        "--tone",
        type=click.Choice(TONE_CHOICES, case_sensitive=False),
        default="neutral",
        show_default=True,
    ),
    click.option(
        "--length",
        type=click.Choice(LENGTH_CHOICES, case_sensitive=False),
        default="standard",
        show_default=True,
    ),
    click.option(
        "--size",
        type=click.Choice([s.value for s in OrganizationSize]),
        default=OrganizationSize.MEDIUM.value,
        show_default=True,
        help="Organization size bucket.",
    ),
    click.option("--anonymous/--named", default=True, help="Whether responses are anonymous."),
    click.option("--verbose", "-v", is_flag=True, help="Enable verbose output."),
]


def survey_options(func):
    """Options shared by every command that generates a survey."""
    for option in reversed(SURVEY_OPTIONS):
        func = option(func)
    return func


def _build_session(
    org: str,
    objective: str,
    themes: tuple,
    tone: str,
    length: str,
    size: str,
    anonymous: bool,
    verbose: bool,
) -> SurveySession:
    """Create a session and generate its questions from command options."""
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    survey = Survey(
        org_name=org,
        objective=objective,
        size=OrganizationSize(size),
        anonymous=anonymous,
        tone=Tone(tone.lower()),
        length=SurveyLength(length.lower()),
    )
    if themes:
        survey = survey.model_copy(update={"themes": list(themes)})

    session = SurveySession(survey=survey)
    session.generate()
    return session


@click.group()
@click.version_option(version=__version__)
def cli():
    """Engagement Survey - Compose, collect and analyze engagement surveys."""
    pass


@cli.command()
def themes():
    """List the themes available in the question bank."""
    for theme in available_themes():
        templates = get_theme(theme)
        click.echo(
            f"{theme}: {len(templates.likert)} likert, {len(templates.open)} open"
        )


@cli.command()
@survey_options
@click.option("--share", type=click.Path(path_type=Path), help="Write the JSON share payload to this file.")
@click.option("--template", is_flag=True, help="Write an empty CSV response template to the output directory.")
@click.option(
    "--output-dir",
    "-d",
    type=click.Path(path_type=Path),
    default=Path("output"),
    help="Output directory for the CSV template. Defaults to 'output/'",
)
@click.option("--report", type=click.Path(path_type=Path), help="Write an HTML preview report.")
def generate(
    org: str,
    objective: str,
    themes: tuple,
    tone: str,
    length: str,
    size: str,
    anonymous: bool,
    verbose: bool,
    share: Path | None,
    template: bool,
    output_dir: Path,
    report: Path | None,
):
    """Generate a question list from the question bank."""
    try:
        session = _build_session(org, objective, themes, tone, length, size, anonymous, verbose)

        click.echo(click.style(f"\nSurvey: {session.survey.org_name}", bold=True))
        click.echo(f"Total Questions: {session.survey.question_count}\n")
        for i, q in enumerate(session.questions, 1):
            click.echo(f"{i}. [{q.display_theme}] ({q.type.value})")
            click.echo(f"    {q.text}")

        if share:
            write_text(share, session.share_payload())
            click.echo(f"Share payload saved to: {share}")
        if template:
            template_path = write_text(
                output_dir / template_filename(session.survey.org_name),
                session.template_table(),
            )
            click.echo(f"Template saved to: {template_path}")
        if report:
            ReportGenerator(session.survey).generate_report(output_path=report)
            click.echo(f"Report saved to: {report}")

    except Exception as e:
        logger.exception("Error generating survey")
        click.echo(click.style(f"Error: {e}", fg="red"), err=True)
        sys.exit(1)


@cli.command()
@click.argument("text")
def score(text: str):
    """Score the sentiment of a free-text answer.

    TEXT: Answer to score.
    """
    value = score_text(text)
    click.echo(f"Score: {value:.3f} ({format_percent(value)}, {sentiment_label(value)})")


@cli.command()
@survey_options
@click.option(
    "--respondents",
    "-n",
    type=click.IntRange(min=1),
    default=1,
    show_default=True,
    help="Number of respondents to collect.",
)
@click.option(
    "--output-dir",
    "-d",
    type=click.Path(path_type=Path),
    default=Path("output"),
    help="Output directory for the responses CSV. Defaults to 'output/'",
)
@click.option("--report", type=click.Path(path_type=Path), help="Write an HTML analysis report.")
def collect(
    org: str,
    objective: str,
    themes: tuple,
    tone: str,
    length: str,
    size: str,
    anonymous: bool,
    verbose: bool,
    respondents: int,
    output_dir: Path,
    report: Path | None,
):
    """Generate a survey, collect answers interactively and export them."""
    try:
        session = _build_session(org, objective, themes, tone, length, size, anonymous, verbose)

        for n in range(1, respondents + 1):
            click.echo(click.style(f"\nRespondent R{n}", bold=True))
            for q in session.questions:
                answer = _prompt_answer(q)
                if answer:
                    session.set_answer(q.id, answer)
            session.record_response()

        output_path = write_text(
            output_dir / responses_filename(session.survey.org_name),
            session.responses_table(),
        )
        click.echo(f"\nResponses saved to: {output_path}")

        analysis = session.analyze()
        click.echo(click.style("\nLikert means:", bold=True))
        for stat in analysis.likert_stats:
            click.echo(f"  {stat.avg:4.2f}  {stat.name}")
        click.echo(
            f"Global sentiment: {format_percent(analysis.sentiment_score)} "
            f"({sentiment_label(analysis.sentiment_score)})"
        )

        if report:
            ReportGenerator(
                session.survey, responses=session.responses, analysis=analysis
            ).generate_report(output_path=report)
            click.echo(f"Report saved to: {report}")

        click.echo(click.style("Done!", fg="green", bold=True))

    except Exception as e:
        logger.exception("Error collecting responses")
        click.echo(click.style(f"Error: {e}", fg="red"), err=True)
        sys.exit(1)


def _prompt_answer(question) -> str:
    """Prompt for one answer; an empty answer leaves the question unanswered."""
    if question.type == QuestionType.LIKERT:
        return click.prompt(
            question.text,
            type=click.Choice(list(LIKERT_OPTIONS) + [""]),
            default="",
            show_choices=True,
            show_default=False,
        )
    if question.type == QuestionType.MCQ and question.options:
        return click.prompt(
            question.text,
            type=click.Choice(list(question.options) + [""]),
            default="",
            show_default=False,
        )
    return click.prompt(question.text, default="", show_default=False)


def main():
    """Entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
