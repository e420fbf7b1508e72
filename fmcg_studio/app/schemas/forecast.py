from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from fmcg_studio.core.config import settings
from .common import CamelModel
from .dashboard import TopTrend
from .view import StatCard, TrendRow, ViewState

FORECAST_SKUS = ("Citrus Soda", "Berry Blast")


class ForecastRequest(CamelModel):
    category: str = settings.DEFAULT_CATEGORY
    region: str = settings.DEFAULT_REGION
    time_horizon: str = settings.DEFAULT_TIME_HORIZON


class ForecastSummary(CamelModel):
    total_forecasted_revenue_label: Optional[str] = None
    total_forecasted_revenue_change_label: Optional[str] = None
    hot_sku_name: Optional[str] = None
    hot_sku_units_label: Optional[str] = None
    hot_sku_change_label: Optional[str] = None
    emerging_trends_count_label: Optional[str] = None
    emerging_trends_change_label: Optional[str] = None
    overall_sentiment_label: Optional[str] = None
    overall_sentiment_change_label: Optional[str] = None


class ForecastPoint(CamelModel):
    """One period of the SKU forecast; SKU columns arrive as extra keys."""
    model_config = ConfigDict(extra="allow")

    name: str

    @property
    def sku_values(self) -> Dict[str, float]:
        return {k: v for k, v in (self.model_extra or {}).items() if isinstance(v, (int, float))}


class SentimentBucket(CamelModel):
    name: str
    value: float


class PricePromotionInsight(CamelModel):
    scenario: str
    expected_lift_percent: Optional[float] = None
    notes: Optional[str] = None


class CompetitorInsight(CamelModel):
    event: str
    impact: Optional[str] = None


class TrendForecast(CamelModel):
    summary: ForecastSummary = Field(default_factory=ForecastSummary)
    forecast_series: List[ForecastPoint] = Field(default_factory=list)
    sentiment_breakdown: List[SentimentBucket] = Field(default_factory=list)
    top_trends: List[TopTrend] = Field(default_factory=list)
    recommendations: List[str] = Field(default_factory=list)
    price_promotion_insights: List[PricePromotionInsight] = Field(default_factory=list)
    competitor_insights: List[CompetitorInsight] = Field(default_factory=list)
    alerts: List[str] = Field(default_factory=list)

    @property
    def has_data(self) -> bool:
        return bool(
            self.forecast_series
            or self.sentiment_breakdown
            or self.top_trends
            or self.recommendations
            or self.price_promotion_insights
            or self.competitor_insights
            or self.alerts
        )


class ForecastView(BaseModel):
    request: ForecastRequest
    state: ViewState
    stat_cards: List[StatCard] = []
    trends: List[TrendRow] = []
