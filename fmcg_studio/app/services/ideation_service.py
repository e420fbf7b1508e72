import asyncio
import logging
from typing import Optional, Set

from fmcg_studio.app.schemas.idea import IdeationView, MockupRequest, ProductIdea
from fmcg_studio.app.schemas.view import ViewState
from fmcg_studio.app.services.presentation import format_score
from fmcg_studio.app.services.view_controller import ViewController
from fmcg_studio.app.utils.helpers import (
    BASELINE_ECO_PACKAGE,
    BASELINE_PRICE,
    adjusted_adoption,
    is_blank,
)
from fmcg_studio.llm.decoder import decode
from fmcg_studio.llm.gateway import ImageGateway, ModelGateway
from fmcg_studio.llm.prompts import build_mockup_prompt, build_product_idea_prompts

logger = logging.getLogger(__name__)

# Pending mockup requests outlive their controller; the loop only holds weak references.
_background_tasks: Set[asyncio.Task] = set()


class ProductIdeationController(ViewController[ProductIdea]):
    """
    AI product ideation page.

    Nothing loads on mount; each submitted brief replaces the previous idea.
    A successful idea kicks off a mockup image request in the background.
    That request can fail or never finish without touching the page state.
    """

    feature_label = "product idea"
    error_message = "Something went wrong while generating the product idea. Please try again."

    def __init__(
        self,
        gateway: ModelGateway,
        image_gateway: Optional[ImageGateway] = None,
        price: float = BASELINE_PRICE,
        eco_package: float = BASELINE_ECO_PACKAGE,
    ):
        super().__init__(gateway)
        self.image_gateway = image_gateway
        self.price = price
        self.eco_package = eco_package
        self.query = ""
        self.mockup_url: Optional[str] = None
        self._mockup_task: Optional[asyncio.Task] = None

    @staticmethod
    def can_submit(query: Optional[str]) -> bool:
        return not is_blank(query)

    async def submit(
        self,
        query: str,
        price: Optional[float] = None,
        eco_package: Optional[float] = None,
    ) -> Optional[ViewState]:
        if not self.can_submit(query):
            return None
        self.query = query
        if price is not None:
            self.price = price
        if eco_package is not None:
            self.eco_package = eco_package
        self.mockup_url = None
        self._mockup_task = None
        return await self.load()

    async def fetch(self) -> ProductIdea:
        prompts = build_product_idea_prompts(self.query, self.price, self.eco_package)
        raw = await self.gateway.invoke(prompts.system_prompt, prompts.user_prompt)
        return decode(raw, self.feature_label, ProductIdea)

    def _on_success(self, data: ProductIdea, token: int) -> None:
        if self.image_gateway is None:
            return
        task = asyncio.create_task(self._load_mockup(data, token))
        _background_tasks.add(task)
        task.add_done_callback(_background_tasks.discard)
        self._mockup_task = task

    async def _load_mockup(self, idea: ProductIdea, token: int) -> None:
        request = MockupRequest.model_validate(
            idea.model_dump(include={"name", "short_description"}, exclude_none=True)
        )
        try:
            url = await self.image_gateway.generate(
                build_mockup_prompt(request.name, request.short_description)
            )
        except Exception as e:
            logger.warning("Mockup image generation failed for %r: %s", request.name, e)
            return
        if self._is_current(token):
            self.mockup_url = url

    async def wait_for_mockup(self, timeout: Optional[float] = None) -> Optional[str]:
        """Give the background mockup request up to `timeout` seconds to land."""
        task = self._mockup_task
        if task is None or task.done():
            return self.mockup_url
        try:
            await asyncio.wait_for(asyncio.shield(task), timeout=timeout)
        except asyncio.TimeoutError:
            logger.warning("Mockup image still pending after %ss", timeout)
        return self.mockup_url

    def set_price(self, price: float) -> float:
        self.price = float(price)
        return self.adjusted_adoption

    def set_eco_package(self, eco_package: float) -> float:
        self.eco_package = float(eco_package)
        return self.adjusted_adoption

    @property
    def adjusted_adoption(self) -> float:
        idea = self.data
        base = idea.adoption_probability if idea is not None else None
        return adjusted_adoption(base, self.price, self.eco_package)

    def to_view(self) -> IdeationView:
        idea = self.data
        return IdeationView(
            state=self.state,
            price=self.price,
            eco_package=self.eco_package,
            adjusted_adoption=self.adjusted_adoption,
            sentiment_match=format_score(idea.sentiment_match_score) if idea else None,
            trend_alignment=format_score(idea.trend_alignment_score) if idea else None,
            mockup_url=self.mockup_url,
        )
