"""
Plotly figures for the MMM Data Explorer
"""
import pandas as pd
import plotly.graph_objects as go


# Chart colors
PLOT_BG = "rgba(0,0,0,0)"
GRID = "#373a40"
AXIS = "#9ca3af"
REVENUE_COLOR = "#10b981"
SPEND_COLOR = "#ef4444"

CHANNEL_COLORS = {
    "google": ("Google", "#4285F4"),
    "meta": ("Meta", "#1877F2"),
    "tiktok": ("TikTok", "#000000"),
}

CHART_HEIGHT = 400


def _base_layout(fig: go.Figure) -> go.Figure:
    fig.update_layout(
        height=CHART_HEIGHT,
        margin=dict(l=10, r=10, t=10, b=40),
        paper_bgcolor=PLOT_BG,
        plot_bgcolor=PLOT_BG,
        xaxis=dict(gridcolor=GRID, color=AXIS, title=""),
        yaxis=dict(gridcolor=GRID, color=AXIS, type="log", title=""),
        legend=dict(orientation="h", yanchor="bottom", y=1.02),
        hovermode="x unified",
    )
    return fig


def fig_spend_revenue_trend(daily: pd.DataFrame) -> go.Figure:
    """Filled area chart of daily revenue and spend."""
    fig = go.Figure()

    fig.add_trace(go.Scatter(
        x=daily["date"],
        y=daily["revenue"],
        mode="lines",
        name="Revenue",
        fill="tozeroy",
        line=dict(color=REVENUE_COLOR, shape="spline"),
    ))
    fig.add_trace(go.Scatter(
        x=daily["date"],
        y=daily["spend"],
        mode="lines",
        name="Spend",
        fill="tozeroy",
        line=dict(color=SPEND_COLOR, shape="spline"),
    ))

    return _base_layout(fig)


def fig_channel_mix(daily: pd.DataFrame) -> go.Figure:
    """Stacked daily spend by channel."""
    fig = go.Figure()

    for channel, (label, color) in CHANNEL_COLORS.items():
        fig.add_trace(go.Bar(
            x=daily["date"],
            y=daily[channel],
            name=label,
            marker=dict(color=color, line=dict(color="#333", width=1 if channel == "tiktok" else 0)),
        ))

    fig.update_layout(barmode="stack")
    return _base_layout(fig)
