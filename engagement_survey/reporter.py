"""HTML report generator for engagement surveys."""

import logging
from datetime import datetime
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, PackageLoader, select_autoescape

from .analyzer import SurveyAnalysis, SurveyAnalyzer
from .insights import InsightsGenerator
from .models import LIKERT_OPTIONS, ResponseSet, Survey
from .sentiment import format_percent, sentiment_label
from .visualizer import SurveyVisualizer

logger = logging.getLogger(__name__)

REPORT_TEMPLATE = "report.html"


class ReportGenerator:
    """Generate HTML reports previewing a survey and analyzing its responses."""

    def __init__(
        self,
        survey: Survey,
        responses: ResponseSet | None = None,
        analysis: SurveyAnalysis | None = None,
        template_dir: str | Path | None = None,
    ):
        """Initialize report generator.

        Args:
            survey: Survey definition with its questions.
            responses: Collected respondent rows (optional).
            analysis: Pre-computed analysis (optional, will compute if not provided).
            template_dir: Custom template directory (optional).
        """
        self.survey = survey
        self.responses = list(responses or [])
        self.analysis = analysis or SurveyAnalyzer(survey.questions, self.responses).analyze()
        self.visualizer = SurveyVisualizer(self.analysis)

        if template_dir:
            loader = FileSystemLoader(template_dir)
        else:
            loader = PackageLoader("engagement_survey", "templates")
        self.env = Environment(loader=loader, autoescape=select_autoescape(["html", "xml"]))

    def generate_report(
        self,
        output_path: str | Path | None = None,
        include_charts: bool = True,
        include_insights: bool = True,
    ) -> str:
        """Generate HTML report.

        Args:
            output_path: Path to save the report (optional).
            include_charts: Whether to include interactive charts.
            include_insights: Whether to include the insights section.

        Returns:
            HTML string of the report.
        """
        insights = None
        if include_insights:
            insights = InsightsGenerator(
                self.survey.questions, self.responses, analysis=self.analysis
            ).generate()

        charts = {}
        if include_charts:
            charts = {
                "likert": self.visualizer.fig_to_html(self.visualizer.create_likert_chart()),
                "themes": self.visualizer.fig_to_html(self.visualizer.create_theme_chart()),
                "sentiment": self.visualizer.fig_to_html(self.visualizer.create_sentiment_gauge()),
            }

        template = self.env.get_template(REPORT_TEMPLATE)
        html = template.render(
            survey=self.survey,
            generated_at=datetime.now().strftime("%Y-%m-%d %H:%M"),
            likert_options=LIKERT_OPTIONS,
            analysis=self.analysis,
            sentiment_percent=format_percent(self.analysis.sentiment_score),
            sentiment_label=sentiment_label(self.analysis.sentiment_score),
            insights=insights,
            charts=charts,
        )

        if output_path:
            output_path = Path(output_path)
            output_path.parent.mkdir(parents=True, exist_ok=True)
            output_path.write_text(html, encoding="utf-8")
            logger.info(f"Report saved to {output_path}")

        return html


def generate_report(
    survey: Survey,
    responses: ResponseSet | None = None,
    output_path: str | Path | None = None,
    **kwargs,
) -> str:
    """Convenience function to generate a report.

    Args:
        survey: Survey definition.
        responses: Collected respondent rows.
        output_path: Path to save the report.
        **kwargs: Additional arguments for ReportGenerator.generate_report.

    Returns:
        HTML string of the report.
    """
    generator = ReportGenerator(survey, responses=responses)
    return generator.generate_report(output_path=output_path, **kwargs)
