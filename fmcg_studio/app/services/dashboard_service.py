import logging

from fmcg_studio.app.schemas.dashboard import DashboardOverview, DashboardView
from fmcg_studio.app.services.presentation import stat_cards_for_dashboard, trend_rows
from fmcg_studio.app.services.view_controller import ViewController
from fmcg_studio.llm.decoder import decode
from fmcg_studio.llm.gateway import ModelGateway
from fmcg_studio.llm.prompts import build_dashboard_prompts

logger = logging.getLogger(__name__)


class DashboardController(ViewController[DashboardOverview]):
    """Landing dashboard. Loads the AI overview as soon as it is mounted."""

    feature_label = "dashboard overview"
    error_message = "Failed to load AI dashboard overview. Please try again."
    auto_load = True

    def __init__(self, gateway: ModelGateway):
        super().__init__(gateway)

    async def fetch(self) -> DashboardOverview:
        prompts = build_dashboard_prompts()
        raw = await self.gateway.invoke(prompts.system_prompt, prompts.user_prompt)
        return decode(raw, self.feature_label, DashboardOverview)

    def to_view(self) -> DashboardView:
        overview = self.data
        if overview is None:
            return DashboardView(state=self.state)
        return DashboardView(
            state=self.state,
            stat_cards=stat_cards_for_dashboard(overview.summary),
            trends=trend_rows(overview.top_trends),
        )
