"""Plotly-based visualization for engagement survey results."""

import plotly.graph_objects as go

from .analyzer import SurveyAnalysis
from .sentiment import sentiment_label

PALETTE = {
    "blue": "#225AA8",
    "navy": "#232C40",
    "green": "#16A34A",
    "red": "#DC2626",
    "yellow": "#CA8A04",
}

COLORS = [
    PALETTE["blue"],
    PALETTE["navy"],
    "#4A7DC4",
    "#3D4A5C",
    "#6B8FD4",
    "#5C6B7A",
]

SENTIMENT_COLORS = {
    "positive": PALETTE["green"],
    "negative": PALETTE["red"],
    "neutral": PALETTE["yellow"],
}

CHART_TEMPLATE = "plotly_white"
LIKERT_MAX = 5


class SurveyVisualizer:
    """Generate visualizations for analysis results."""

    def __init__(self, analysis: SurveyAnalysis):
        """Initialize visualizer with analysis results.

        Args:
            analysis: SurveyAnalysis from the analyzer.
        """
        self.analysis = analysis

    def create_likert_chart(self) -> go.Figure:
        """Bar chart of the mean score of every likert question.

        Returns:
            Plotly Figure object.
        """
        stats = self.analysis.likert_stats
        if not stats or self.analysis.total_responses == 0:
            return self._create_empty_chart("Moyennes par question (Likert)")

        fig = go.Figure(
            go.Bar(
                x=[s.name for s in stats],
                y=[s.avg for s in stats],
                marker_color=COLORS[0],
                text=[f"{s.avg:.2f}" for s in stats],
                textposition="auto",
            )
        )

        fig.update_layout(
            title=dict(text="Moyennes par question (Likert)", font=dict(size=16)),
            yaxis=dict(range=[0, LIKERT_MAX]),
            xaxis=dict(tickangle=-10, tickfont=dict(size=12)),
            template=CHART_TEMPLATE,
            showlegend=False,
            margin=dict(l=20, r=20, t=60, b=80),
            height=400,
        )

        return fig

    def create_theme_chart(self) -> go.Figure:
        """Horizontal bar chart of likert means grouped by theme."""
        theme_means = self.analysis.theme_means
        if not theme_means:
            return self._create_empty_chart("Moyennes par thème")

        themes = list(theme_means)
        values = [theme_means[t] for t in themes]

        fig = go.Figure(
            go.Bar(
                y=themes[::-1],
                x=values[::-1],
                orientation="h",
                marker_color=[COLORS[i % len(COLORS)] for i in range(len(themes))][::-1],
                text=[f"{v:.2f}" for v in values[::-1]],
                textposition="auto",
            )
        )

        fig.update_layout(
            title=dict(text="Moyennes par thème", font=dict(size=16)),
            xaxis=dict(range=[0, LIKERT_MAX]),
            template=CHART_TEMPLATE,
            height=max(300, len(themes) * 40),
            margin=dict(l=20, r=20, t=60, b=40),
        )

        return fig

    def create_sentiment_gauge(self) -> go.Figure:
        """Gauge of the global open-answer sentiment, from -100% to +100%."""
        score = self.analysis.sentiment_score
        color = SENTIMENT_COLORS[sentiment_label(score)]

        fig = go.Figure(
            go.Indicator(
                mode="gauge+number",
                value=round(score * 100),
                number=dict(suffix="%", font=dict(size=36, color=color)),
                gauge=dict(
                    axis=dict(range=[-100, 100]),
                    bar=dict(color=color),
                    bgcolor="lightgray",
                ),
            )
        )

        fig.update_layout(
            title=dict(text="Sentiment global (réponses ouvertes)", font=dict(size=16)),
            template=CHART_TEMPLATE,
            height=300,
            margin=dict(l=20, r=20, t=60, b=20),
        )

        return fig

    def _create_empty_chart(self, title: str) -> go.Figure:
        """Create an empty chart with a message."""
        fig = go.Figure()
        fig.add_annotation(
            text="Pas de données encore",
            xref="paper",
            yref="paper",
            x=0.5,
            y=0.5,
            showarrow=False,
            font=dict(size=16, color="gray"),
        )
        fig.update_layout(
            title=dict(text=title, font=dict(size=14)),
            template=CHART_TEMPLATE,
            height=300,
        )
        return fig

    @staticmethod
    def fig_to_html(fig: go.Figure, full_html: bool = False) -> str:
        """Convert figure to HTML string.

        Args:
            fig: Plotly Figure.
            full_html: If True, include full HTML document structure.

        Returns:
            HTML string.
        """
        return fig.to_html(full_html=full_html, include_plotlyjs="cdn")
