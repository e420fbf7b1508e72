from fmcg_studio.app.schemas.dashboard import DashboardSummary, TopTrend
from fmcg_studio.app.schemas.forecast import ForecastSummary
from fmcg_studio.app.services.presentation import (
    PLACEHOLDER,
    format_probability,
    format_score,
    stat_cards_for_dashboard,
    stat_cards_for_forecast,
    trend_rows,
)


def test_dashboard_cards_use_placeholders_when_empty():
    cards = stat_cards_for_dashboard(None)

    assert [c.title for c in cards] == [
        "Forecasted Revenue",
        "Active Trends Tracked",
        "New Products Ideated",
        "Hot SKU",
    ]
    assert all(c.value == PLACEHOLDER for c in cards)
    assert cards[2].change == "vs last cycle"
    assert cards[3].change == "vs last week"


def test_hot_sku_card_title_and_negative_change():
    summary = DashboardSummary(hot_sku_name="Citrus Soda", hot_sku_change_label=" -3% vs last week")
    card = stat_cards_for_dashboard(summary)[3]

    assert card.title == "Hot SKU: Citrus Soda"
    assert card.change_type == "negative"


def test_forecast_cards():
    summary = ForecastSummary(
        total_forecasted_revenue_label="$4.2M",
        overall_sentiment_change_label="+1.5%",
    )
    cards = stat_cards_for_forecast(summary)

    assert cards[0].value == "$4.2M"
    assert cards[0].change == "vs previous period"
    assert cards[3].change_type == "positive"


def test_format_probability():
    assert format_probability(82.5) == "82.5%"
    assert format_probability(64) == "64.0%"
    assert format_probability("likely") == "likely"
    assert format_probability(None) == PLACEHOLDER


def test_format_score():
    assert format_score(8.5) == "8.5"
    assert format_score(9) == "9.0"
    assert format_score(None) is None


def test_trend_rows():
    rows = trend_rows([TopTrend(name="Zero sugar", probability=71.5), TopTrend(name="Kombucha")])
    assert [(r.name, r.probability_label) for r in rows] == [("Zero sugar", "71.5%"), ("Kombucha", PLACEHOLDER)]
