import math

import altair as alt
import pandas as pd

GAUGE_TRACK = "#334155"  # slate-700

RISK_LEVEL_COLORS = {
    "Low": "#4ade80",
    "Medium": "#facc15",
    "High": "#fb923c",
    "Critical": "#f87171",
}
SEVERITY_COLORS = {
    "Critical": "#ef4444",
    "High": "#f97316",
    "Medium": "#eab308",
    "Low": "#22c55e",
}
CONFIDENCE_COLORS = {
    "High": "#4ade80",
    "Medium": "#facc15",
    "Low": "#f87171",
}
_NEUTRAL = "#94a3b8"


def gauge_color(score):
    if score <= 33:
        return "#4ade80"
    if score <= 66:
        return "#facc15"
    return "#f87171"


def badge_html(label, color):
    return (f'<span style="color: {color}; border: 1px solid {color}; border-radius: 6px; '
            f'padding: 2px 10px; font-weight: bold; box-shadow: 0 0 12px {color}80;">{label}</span>')


def risk_level_badge(level):
    return badge_html(level, RISK_LEVEL_COLORS.get(level, _NEUTRAL))


def severity_badge(severity):
    return badge_html(severity, SEVERITY_COLORS.get(severity, _NEUTRAL))


def confidence_badge(confidence):
    return badge_html(confidence, CONFIDENCE_COLORS.get(confidence, _NEUTRAL))


def risk_gauge(score, size=260):
    """Half-donut gauge for a 0-100 score."""
    score = max(0, min(100, score))
    df = pd.DataFrame({
        "part": ["score", "rest"],
        "value": [score, 100 - score],
        "order": [0, 1],
    })
    arc = alt.Chart(df).mark_arc(innerRadius=size * 0.28, outerRadius=size * 0.4).encode(
        theta=alt.Theta("value:Q", stack=True, scale=alt.Scale(domain=[0, 100], range=[-math.pi / 2, math.pi / 2])),
        color=alt.Color("part:N", scale=alt.Scale(domain=["score", "rest"],
                                                  range=[gauge_color(score), GAUGE_TRACK]), legend=None),
        order=alt.Order("order:Q"),
        tooltip=[alt.Tooltip("value:Q", title="Score")],
    )
    label = alt.Chart(pd.DataFrame({"text": [f"{round(score)} / 100"]})).mark_text(
        fontSize=28, fontWeight="bold", color="#f1f5f9", dy=-10
    ).encode(text="text:N")
    return (arc + label).properties(width=size, height=size * 0.6)


def likelihood_chart(outcomes):
    df = pd.DataFrame([
        {"Outcome": o.outcome, "Likelihood": o.likelihoodPercentage, "Confidence": o.confidenceScore}
        for o in outcomes
    ])
    if df.empty:
        return None
    return alt.Chart(df).mark_bar().encode(
        x=alt.X("Likelihood:Q", title="Likelihood (%)", scale=alt.Scale(domain=[0, 100])),
        y=alt.Y("Outcome:N", sort="-x", title=None),
        color=alt.Color("Confidence:N",
                        scale=alt.Scale(domain=list(CONFIDENCE_COLORS), range=list(CONFIDENCE_COLORS.values()))),
        tooltip=["Outcome", "Likelihood", "Confidence"],
    ).properties(title="Predicted Outcome Likelihood")
