import logging
from typing import Optional

from fmcg_studio.app.schemas.idea import ProductIdea
from fmcg_studio.app.schemas.view import ViewState
from fmcg_studio.app.services.ideation_service import ProductIdeationController
from fmcg_studio.memory.models import ChatTranscript

logger = logging.getLogger(__name__)


class ProductIdeationChatController(ProductIdeationController):
    """
    Chat variant of the ideation page.

    Every brief and every reply is appended to the session transcript.
    """

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.transcript = ChatTranscript()

    async def submit(
        self,
        query: str,
        price: Optional[float] = None,
        eco_package: Optional[float] = None,
    ) -> Optional[ViewState]:
        if not self.can_submit(query) or not self.is_mounted:
            return None
        self.transcript.append("user", query)

        applied = await super().submit(query, price, eco_package)
        if applied is None:
            return None

        if applied.status == "success":
            self.transcript.append("assistant", self.summarize(applied.data))
        else:
            self.transcript.append("assistant", applied.error or self.error_message)
        return applied

    def summarize(self, idea: ProductIdea) -> str:
        lines = [f"{idea.name or 'New Product Concept'}"]
        if idea.short_description:
            lines.append(idea.short_description)
        lines.append(f"Estimated adoption: {self.adjusted_adoption:.1f}%")
        if idea.forecasted_sales_units_year1 is not None:
            lines.append(f"Year 1 forecast: {idea.forecasted_sales_units_year1:,} units")
        lines.extend(f"- {reason}" for reason in idea.reasoning[:3])
        return "\n".join(lines)
