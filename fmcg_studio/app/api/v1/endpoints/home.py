"""
Landing page content.
"""
from fastapi import APIRouter

from fmcg_studio.app.schemas.common import StandardResponse
from fmcg_studio.app.schemas.view import HomeContent, PageSection

router = APIRouter()

HOME_CONTENT = HomeContent(
    title="A Smarter Way to Innovate",
    steps=[
        PageSection(
            title="1. Ingest Data",
            description="Connect multimodal data: sales figures, product images, social media chatter, and competitor reports.",
        ),
        PageSection(
            title="2. Analyze & Predict",
            description="Our AI agents process and fuse this data to find hidden patterns, forecast trends, and run simulations.",
        ),
        PageSection(
            title="3. Generate Insights",
            description="Receive actionable insights, new product ideas, and visual mockups with clear success probabilities.",
        ),
    ],
    agents=[
        PageSection(
            title="Multimodal Trend Forecasting",
            description="Forecasts SKU demand from sales, sentiment and trend signals.",
            route="/trend-forecasting",
            capabilities=[
                "SKU demand forecast",
                "Social sentiment breakdown",
                "Emerging trend probabilities",
                "Price, promotion and competitor insights",
            ],
        ),
        PageSection(
            title="AI Product Ideation Agent",
            description="An AI R&D analyst that suggests new product ideas, generates mockups, and predicts market adoption.",
            route="/product-ideation",
            capabilities=[
                "Concept and variant generation",
                "Packaging mockups",
                "Adoption and sales simulation",
            ],
        ),
    ],
    stack=[
        PageSection(
            title="Multimodal Fusion",
            description="Combines signals from images (ViT), text (NLP), and sales data (Tabular) for a complete market view.",
        ),
        PageSection(
            title="RAG Pipeline",
            description="Uses Retrieval-Augmented Generation to pull real-time insights from industry reports and market news.",
        ),
        PageSection(
            title="Autonomous Reasoning",
            description="Simulates product scenarios and plans launch strategies, finding opportunities competitors miss.",
        ),
        PageSection(
            title="Real-time Analytics",
            description="Plugs directly into your data sources via API to ensure forecasts are always based on the latest data.",
        ),
    ],
)


@router.get("/home", response_model=StandardResponse)
async def get_home():
    return StandardResponse(data=HOME_CONTENT)
