"""
View-model mapping for stat cards and list rows.
"""
from typing import Any, List, Optional

from fmcg_studio.app.schemas.dashboard import DashboardSummary, TopTrend
from fmcg_studio.app.schemas.forecast import ForecastSummary
from fmcg_studio.app.schemas.view import StatCard, TrendRow

PLACEHOLDER = "—"


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _change_type(change: str) -> str:
    return "negative" if change.strip().startswith("-") else "positive"


def stat_card(title: str, value: Optional[str], change: Optional[str], fallback_change: str) -> StatCard:
    change = change or fallback_change
    return StatCard(
        title=title,
        value=value or PLACEHOLDER,
        change=change,
        change_type=_change_type(change),
    )


def hot_sku_title(name: Optional[str]) -> str:
    return f"Hot SKU: {name}" if name else "Hot SKU"


def stat_cards_for_dashboard(summary: Optional[DashboardSummary]) -> List[StatCard]:
    s = summary or DashboardSummary()
    return [
        stat_card("Forecasted Revenue", s.forecasted_revenue_label, s.forecasted_revenue_change_label, "vs last month"),
        stat_card("Active Trends Tracked", s.active_trends_tracked_label, s.active_trends_change_label, "vs last month"),
        stat_card("New Products Ideated", s.new_products_ideated_label, s.new_products_change_label, "vs last cycle"),
        stat_card(hot_sku_title(s.hot_sku_name), s.hot_sku_volume_label, s.hot_sku_change_label, "vs last week"),
    ]


def stat_cards_for_forecast(summary: Optional[ForecastSummary]) -> List[StatCard]:
    s = summary or ForecastSummary()
    return [
        stat_card(
            "Total Forecasted Revenue",
            s.total_forecasted_revenue_label,
            s.total_forecasted_revenue_change_label,
            "vs previous period",
        ),
        stat_card(hot_sku_title(s.hot_sku_name), s.hot_sku_units_label, s.hot_sku_change_label, "vs last week"),
        stat_card("Emerging Trends", s.emerging_trends_count_label, s.emerging_trends_change_label, "vs last month"),
        stat_card("Overall Sentiment", s.overall_sentiment_label, s.overall_sentiment_change_label, "vs last period"),
    ]


def format_probability(value: Any) -> str:
    if _is_number(value):
        return f"{value:.1f}%"
    return str(value) if value else PLACEHOLDER


def format_score(value: Any) -> Optional[str]:
    return f"{value:.1f}" if _is_number(value) else None


def trend_rows(trends: List[TopTrend]) -> List[TrendRow]:
    return [TrendRow(name=t.name, probability_label=format_probability(t.probability)) for t in trends]
