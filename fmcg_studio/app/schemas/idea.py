from typing import List, Optional

from pydantic import BaseModel, Field

from fmcg_studio.app.utils.helpers import BASELINE_ECO_PACKAGE, BASELINE_PRICE
from .common import CamelModel
from .view import ViewState


class ProductIdeaRequest(CamelModel):
    query: str
    price: float = Field(default=BASELINE_PRICE, ge=0)
    eco_package: float = Field(default=BASELINE_ECO_PACKAGE, ge=0, le=100)


class IdeaVariant(CamelModel):
    name: str
    description: Optional[str] = None
    adoption_probability: Optional[float] = Field(default=None, ge=0, le=100)
    forecasted_revenue_label: Optional[str] = None


class ProductIdea(CamelModel):
    name: Optional[str] = None
    short_description: Optional[str] = None
    mockup_label: Optional[str] = None
    adoption_probability: Optional[float] = Field(default=None, ge=0, le=100)
    forecasted_sales_units_year1: Optional[int] = Field(default=None, ge=0)
    reasoning: List[str] = Field(default_factory=list)
    variants: List[IdeaVariant] = Field(default_factory=list)
    sentiment_match_score: Optional[float] = None
    trend_alignment_score: Optional[float] = None
    buzz_prediction_label: Optional[str] = None
    consumer_pain_points_covered: List[str] = Field(default_factory=list)
    competitive_differentiation: List[str] = Field(default_factory=list)
    strategic_recommendations: List[str] = Field(default_factory=list)
    proactive_alerts: List[str] = Field(default_factory=list)
    cannibalization_risk_label: Optional[str] = None
    sustainability_alignment_label: Optional[str] = None
    simulation_notes: List[str] = Field(default_factory=list)


class MockupRequest(CamelModel):
    """What the image prompt needs from an idea."""
    name: str = "New Product Concept"
    short_description: str = ""


class IdeationView(BaseModel):
    state: ViewState
    price: float
    eco_package: float
    adjusted_adoption: float
    sentiment_match: Optional[str] = None
    trend_alignment: Optional[str] = None
    mockup_url: Optional[str] = None
