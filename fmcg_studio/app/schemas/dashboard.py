"""
Dashboard overview payload returned by the model.
"""
from typing import List, Optional

from pydantic import BaseModel, Field

from .common import CamelModel
from .view import StatCard, TrendRow, ViewState


class DashboardSummary(CamelModel):
    forecasted_revenue_label: Optional[str] = None
    forecasted_revenue_change_label: Optional[str] = None
    active_trends_tracked_label: Optional[str] = None
    active_trends_change_label: Optional[str] = None
    new_products_ideated_label: Optional[str] = None
    new_products_change_label: Optional[str] = None
    hot_sku_name: Optional[str] = None
    hot_sku_volume_label: Optional[str] = None
    hot_sku_change_label: Optional[str] = None


class SalesPoint(CamelModel):
    name: str
    revenue: float


class TopTrend(CamelModel):
    name: str
    probability: Optional[float] = Field(default=None, ge=0, le=100)


class DashboardOverview(CamelModel):
    summary: DashboardSummary = Field(default_factory=DashboardSummary)
    sales_data: List[SalesPoint] = Field(default_factory=list)
    top_trends: List[TopTrend] = Field(default_factory=list)
    ai_summary_bullets: List[str] = Field(default_factory=list)
    alerts: List[str] = Field(default_factory=list)

    @property
    def has_data(self) -> bool:
        return bool(self.sales_data or self.top_trends or self.ai_summary_bullets or self.alerts)


class DashboardView(BaseModel):
    state: ViewState
    stat_cards: List[StatCard] = []
    trends: List[TrendRow] = []
