from __future__ import annotations

import streamlit as st

from mmm_explorer.aggregation import DashboardView, Metrics
from mmm_explorer.charts import fig_channel_mix, fig_spend_revenue_trend
from mmm_explorer.utils import fmt_currency, fmt_number, fmt_roas


STRETCH = "stretch"


def _kpi_row(items: list[tuple[str, str]]):
    st.markdown("<div class='kpi-row'>", unsafe_allow_html=True)
    for label, value in items:
        st.markdown(
            f"<div class='kpi'><div class='kpi-label'>{label}</div><div class='kpi-value'>{value}</div></div>",
            unsafe_allow_html=True
        )
    st.markdown("</div>", unsafe_allow_html=True)


def scorecard_items(metrics: Metrics) -> list[tuple[str, str]]:
    return [
        ("Total Spend", fmt_currency(metrics.total_spend)),
        ("Total Revenue", fmt_currency(metrics.total_revenue)),
        ("ROAS", fmt_roas(metrics.roas)),
    ]


def render_header(view: DashboardView):
    st.markdown('<p class="main-header">MMM Data Explorer</p>', unsafe_allow_html=True)
    st.markdown(
        f'<p class="sub-header">{fmt_number(view.row_count)} rows • {view.day_count} days</p>',
        unsafe_allow_html=True
    )


def _option_index(options: list, selected: str) -> int:
    return options.index(selected) if selected in options else 0


def render_filters(
    vertical_options: list,
    territory_options: list,
    vertical: str,
    territory: str,
) -> tuple[str, str]:
    """Sidebar select boxes; returns the (vertical, territory) chosen."""
    with st.sidebar:
        st.header("🔎 Filters")
        vertical = st.selectbox(
            "Vertical",
            vertical_options,
            index=_option_index(vertical_options, vertical),
            key="mmm_vertical",
        )
        territory = st.selectbox(
            "Territory",
            territory_options,
            index=_option_index(territory_options, territory),
            key="mmm_territory",
        )
    return vertical, territory


def render_scorecards(metrics: Metrics):
    cols = st.columns(3)
    for col, (label, value) in zip(cols, scorecard_items(metrics)):
        with col:
            _kpi_row([(label, value)])


def render_charts(view: DashboardView):
    if view.daily.empty:
        st.info("No dated rows match the current filters.")
        return

    st.subheader("Spend vs Revenue (Trend)")
    st.plotly_chart(fig_spend_revenue_trend(view.daily), width=STRETCH)

    st.subheader("Channel Spend Mix")
    st.plotly_chart(fig_channel_mix(view.daily), width=STRETCH)
