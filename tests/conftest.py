"""
Test configuration and fixtures.
"""
import asyncio
import json
from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

from fmcg_studio.app.api.deps import get_chat_store, get_image_gateway, get_model_gateway
from fmcg_studio.app.main import app
from fmcg_studio.llm.gateway import ImageGateway, ModelGateway
from fmcg_studio.memory.store import SessionStore

DASHBOARD_PAYLOAD = {
    "summary": {
        "forecastedRevenueLabel": "$12M",
        "forecastedRevenueChangeLabel": "+8% vs last month",
        "activeTrendsTrackedLabel": "14",
        "hotSkuName": "Citrus Soda",
        "hotSkuVolumeLabel": "120k units",
        "hotSkuChangeLabel": "-3% vs last week",
    },
    "salesData": [
        {"name": "Jan", "revenue": 100},
        {"name": "Feb", "revenue": 120.5},
    ],
    "topTrends": [
        {"name": "Low-sugar citrus", "probability": 82.5},
        {"name": "Functional hydration", "probability": 64},
    ],
    "aiSummaryBullets": ["Demand is rising in tier-2 cities."],
    "alerts": ["Competitor launch expected next week."],
}

FORECAST_PAYLOAD = {
    "summary": {
        "totalForecastedRevenueLabel": "$4.2M",
        "hotSkuName": "Berry Blast",
        "hotSkuUnitsLabel": "48k units",
        "overallSentimentLabel": "Positive",
        "overallSentimentChangeLabel": "-2.1% vs last period",
    },
    "forecastSeries": [
        {"name": "Week 1", "Citrus Soda": 1200, "Berry Blast": 900},
        {"name": "Week 2", "Citrus Soda": 1350, "Berry Blast": 980},
    ],
    "sentimentBreakdown": [
        {"name": "Positive", "value": 62},
        {"name": "Neutral", "value": 25},
        {"name": "Negative", "value": 13},
    ],
    "topTrends": [{"name": "Zero sugar", "probability": 71.25}],
    "recommendations": ["Push Citrus Soda in modern trade."],
    "pricePromotionInsights": [
        {"scenario": "10% off 6-packs", "expectedLiftPercent": 12.5, "notes": "Best in week 3."}
    ],
    "competitorInsights": [{"event": "Rival cola price cut", "impact": "Short-term share loss."}],
    "alerts": ["Heatwave forecast in Mumbai."],
}

IDEA_PAYLOAD = {
    "name": "Yuzu Spark",
    "shortDescription": "Sparkling yuzu water with adaptogens.",
    "mockupLabel": "Slim can, matte green",
    "adoptionProbability": 70,
    "forecastedSalesUnitsYear1": 250000,
    "reasoning": ["Citrus flavors trend with Gen Z.", "Low sugar matches sentiment."],
    "variants": [
        {
            "name": "Yuzu Mint",
            "description": "Cooler finish.",
            "adoptionProbability": 61.5,
            "forecastedRevenueLabel": "$1.1M",
        }
    ],
    "sentimentMatchScore": 8.25,
    "trendAlignmentScore": 9,
    "buzzPredictionLabel": "High",
    "consumerPainPointsCovered": ["Too much sugar"],
    "competitiveDifferentiation": ["Only yuzu SKU in the aisle"],
    "strategicRecommendations": ["Launch in convenience stores first"],
    "proactiveAlerts": ["Yuzu supply is seasonal"],
    "cannibalizationRiskLabel": "Low",
    "sustainabilityAlignmentLabel": "Strong",
    "simulationNotes": ["Price above $7 cuts adoption sharply"],
}


@pytest.fixture
def dashboard_json():
    return json.dumps(DASHBOARD_PAYLOAD)


@pytest.fixture
def forecast_json():
    return json.dumps(FORECAST_PAYLOAD)


@pytest.fixture
def idea_json():
    return json.dumps(IDEA_PAYLOAD)


@pytest.fixture
def gateway():
    """Model gateway mock; set gateway.invoke.return_value per test."""
    return AsyncMock(spec=ModelGateway)


@pytest.fixture
def image_gateway():
    mock = AsyncMock(spec=ImageGateway)
    mock.generate.return_value = "https://images.example.com/yuzu-spark.png"
    return mock


class ControlledGateway:
    """Gateway whose responses are released by the test, one future per call."""

    def __init__(self):
        self.calls = []

    async def invoke(self, system_prompt: str, user_prompt: str) -> str:
        future = asyncio.get_running_loop().create_future()
        self.calls.append(future)
        return await future


async def wait_for_calls(gateway: ControlledGateway, count: int) -> None:
    for _ in range(100):
        if len(gateway.calls) >= count:
            return
        await asyncio.sleep(0)
    raise AssertionError(f"expected {count} gateway calls, saw {len(gateway.calls)}")


@pytest.fixture
def controlled_gateway():
    return ControlledGateway()


@pytest.fixture
def client(gateway, image_gateway):
    """
    Create a test client for the FastAPI app with mocked gateways.

    Returns:
        TestClient instance
    """
    store = SessionStore()
    app.dependency_overrides[get_model_gateway] = lambda: gateway
    app.dependency_overrides[get_image_gateway] = lambda: image_gateway
    app.dependency_overrides[get_chat_store] = lambda: store
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def wait_calls():
    return wait_for_calls
