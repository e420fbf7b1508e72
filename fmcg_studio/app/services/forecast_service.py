import logging
from typing import Optional

from fmcg_studio.app.schemas.forecast import ForecastRequest, ForecastView, TrendForecast
from fmcg_studio.app.services.presentation import stat_cards_for_forecast, trend_rows
from fmcg_studio.app.services.view_controller import ViewController
from fmcg_studio.llm.decoder import decode
from fmcg_studio.llm.gateway import ModelGateway
from fmcg_studio.llm.prompts import build_trend_forecast_prompts

logger = logging.getLogger(__name__)


class TrendForecastController(ViewController[TrendForecast]):
    """
    Multimodal trend forecasting page.

    Auto-loads with the default scenario on mount; run_forecast() re-issues
    the request with new scenario filters.
    """

    feature_label = "trend forecast"
    error_message = "Failed to load AI trend forecast. Please try again."
    auto_load = True

    def __init__(self, gateway: ModelGateway, request: Optional[ForecastRequest] = None):
        super().__init__(gateway)
        self.request = request or ForecastRequest()

    async def fetch(self) -> TrendForecast:
        request = self.request
        prompts = build_trend_forecast_prompts(
            category=request.category,
            region=request.region,
            time_horizon=request.time_horizon,
        )
        raw = await self.gateway.invoke(prompts.system_prompt, prompts.user_prompt)
        return decode(raw, self.feature_label, TrendForecast)

    async def run_forecast(
        self,
        category: Optional[str] = None,
        region: Optional[str] = None,
        time_horizon: Optional[str] = None,
    ):
        updates = {
            k: v for k, v in
            {"category": category, "region": region, "time_horizon": time_horizon}.items()
            if v
        }
        if updates:
            self.request = self.request.model_copy(update=updates)
        logger.info("Running trend forecast for %s", self.request.model_dump())
        return await self.load()

    def to_view(self) -> ForecastView:
        forecast = self.data
        if forecast is None:
            return ForecastView(request=self.request, state=self.state)
        return ForecastView(
            request=self.request,
            state=self.state,
            stat_cards=stat_cards_for_forecast(forecast.summary),
            trends=trend_rows(forecast.top_trends),
        )
