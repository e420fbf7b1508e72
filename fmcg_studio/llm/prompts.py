# -*- coding: utf-8 -*-
"""
Prompt builders for the four model calls.

System prompts carry the literal JSON shape the model must return; user
prompts interpolate caller parameters verbatim.
"""
from typing import NamedTuple

from langchain_core.prompts import PromptTemplate

from fmcg_studio.app.utils.helpers import BASELINE_ECO_PACKAGE, BASELINE_PRICE
from fmcg_studio.core.config import settings


class PromptPair(NamedTuple):
    system_prompt: str
    user_prompt: str


DASHBOARD_SYSTEM_PROMPT = """
You are an AI assistant that prepares a daily overview dashboard
for an FMCG beverage product manager.

You MUST reply with STRICT VALID JSON only.

Use this JSON structure exactly:

{
  "summary": {
    "forecastedRevenueLabel": string,
    "forecastedRevenueChangeLabel": string,
    "activeTrendsTrackedLabel": string,
    "activeTrendsChangeLabel": string,
    "newProductsIdeatedLabel": string,
    "newProductsChangeLabel": string,
    "hotSkuName": string,
    "hotSkuVolumeLabel": string,
    "hotSkuChangeLabel": string
  },
  "salesData": [
    { "name": string, "revenue": number }
  ],
  "topTrends": [
    { "name": string, "probability": number }
  ],
  "aiSummaryBullets": [ string ],
  "alerts": [ string ]
}
"""

dashboard_user_prompt = PromptTemplate.from_template("""
Generate a 6-month forward-looking revenue forecast, top 3-5 consumer trends,
3-5 short AI summary bullets, and 3-5 alerts/notifications
for an FMCG beverage portfolio in India + Southeast Asia.
Return ONLY the JSON object.
""")

TREND_FORECAST_SYSTEM_PROMPT = """
You are an AI trend forecasting assistant for FMCG beverage companies.

You MUST reply with STRICT VALID JSON only, NO markdown and NO lists outside JSON.

Use this JSON structure exactly:

{
  "summary": {
    "totalForecastedRevenueLabel": string,
    "totalForecastedRevenueChangeLabel": string,
    "hotSkuName": string,
    "hotSkuUnitsLabel": string,
    "hotSkuChangeLabel": string,
    "emergingTrendsCountLabel": string,
    "emergingTrendsChangeLabel": string,
    "overallSentimentLabel": string,
    "overallSentimentChangeLabel": string
  },
  "forecastSeries": [
    {
      "name": string,
      "Citrus Soda": number,
      "Berry Blast": number
    }
  ],
  "sentimentBreakdown": [
    { "name": "Positive", "value": number },
    { "name": "Neutral", "value": number },
    { "name": "Negative", "value": number }
  ],
  "topTrends": [
    { "name": string, "probability": number }
  ],
  "recommendations": [ string ],
  "pricePromotionInsights": [
    {
      "scenario": string,
      "expectedLiftPercent": number,
      "notes": string
    }
  ],
  "competitorInsights": [
    {
      "event": string,
      "impact": string
    }
  ],
  "alerts": [ string ]
}
"""

trend_forecast_user_prompt = PromptTemplate.from_template("""
Prepare a realistic {time_horizon} SKU demand forecast for two SKUs:
"Citrus Soda" and "Berry Blast" in {region}, within the {category} category.

Include sentiment breakdown, top trends, price & promotion insights,
competitor insights, and alerts as described in the JSON schema.
Return ONLY the JSON object, nothing else.
""")

PRODUCT_IDEA_SYSTEM_PROMPT = """
You are an AI product ideation assistant for FMCG brands.

Your job is to:
- Propose new product variants and concepts (flavors, packs, packaging styles).
- Estimate adoption probability and expected sales impact.
- Align ideas with consumer sentiment and emerging trends.
- Highlight competitive differentiation and white-space gaps.
- Provide strategic recommendations and "what-if" simulation notes.

You MUST respond with STRICT VALID JSON only.
No markdown, no headings, no bullet markers, no hashes (#), no asterisks (*).

Use this JSON shape EXACTLY:

{
  "name": string,
  "shortDescription": string,
  "mockupLabel": string,
  "adoptionProbability": number,
  "forecastedSalesUnitsYear1": number,
  "reasoning": string[],

  "variants": [
    {
      "name": string,
      "description": string,
      "adoptionProbability": number,
      "forecastedRevenueLabel": string
    }
  ],

  "sentimentMatchScore": number,
  "trendAlignmentScore": number,
  "buzzPredictionLabel": string,

  "consumerPainPointsCovered": string[],
  "competitiveDifferentiation": string[],
  "strategicRecommendations": string[],
  "proactiveAlerts": string[],

  "cannibalizationRiskLabel": string,
  "sustainabilityAlignmentLabel": string,
  "simulationNotes": string[]
}
"""

product_idea_user_prompt = PromptTemplate.from_template("""
User brief: {query}

Target price: {price} USD
Eco-friendly packaging target: {eco_package}%

Assume you conceptually have access to:
- Product images (own + competitor packaging),
- Consumer reviews and social media trends,
- Historical sales and category performance,
- Industry reports, competitor launches and macro trends.

Do NOT describe any training process.
Use these only as background reasoning to support your outputs.

Return ONLY the JSON object. No explanation text.
""")

mockup_prompt = PromptTemplate.from_template("""
High-end 3D render of FMCG packaging for:
"{name}". {short_description}

Style: realistic product photo on dark gradient background,
neon green accent, premium sparkling water / beverage packaging,
front view, centered, no text other than brand elements.
""")


def build_dashboard_prompts() -> PromptPair:
    return PromptPair(DASHBOARD_SYSTEM_PROMPT, dashboard_user_prompt.format())


def build_trend_forecast_prompts(
    category: str = settings.DEFAULT_CATEGORY,
    region: str = settings.DEFAULT_REGION,
    time_horizon: str = settings.DEFAULT_TIME_HORIZON,
) -> PromptPair:
    user_prompt = trend_forecast_user_prompt.format(
        category=category,
        region=region,
        time_horizon=time_horizon,
    )
    return PromptPair(TREND_FORECAST_SYSTEM_PROMPT, user_prompt)


def _number(value: float) -> str:
    # 75.0 -> "75", 5.99 -> "5.99"
    return str(int(value)) if float(value).is_integer() else str(value)


def build_product_idea_prompts(
    query: str = "",
    price: float = BASELINE_PRICE,
    eco_package: float = BASELINE_ECO_PACKAGE,
) -> PromptPair:
    user_prompt = product_idea_user_prompt.format(
        query=query,
        price=_number(price),
        eco_package=_number(eco_package),
    )
    return PromptPair(PRODUCT_IDEA_SYSTEM_PROMPT, user_prompt)


def build_mockup_prompt(name: str, short_description: str) -> str:
    return mockup_prompt.format(name=name, short_description=short_description)
