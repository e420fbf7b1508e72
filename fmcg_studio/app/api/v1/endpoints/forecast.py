from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from fmcg_studio.app.api.deps import get_model_gateway
from fmcg_studio.app.schemas.common import StandardResponse
from fmcg_studio.app.schemas.forecast import ForecastRequest
from fmcg_studio.app.services.forecast_service import TrendForecastController
from fmcg_studio.llm.gateway import ModelGateway

router = APIRouter()


async def _render(request: ForecastRequest, gateway: ModelGateway) -> StandardResponse:
    controller = TrendForecastController(gateway, request)
    try:
        await controller.mount()
        return StandardResponse(data=controller.to_view(), message=controller.state.error)
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))
    finally:
        controller.unmount()


@router.get("", response_model=StandardResponse)
async def get_trend_forecast(
    category: Optional[str] = Query(None),
    region: Optional[str] = Query(None),
    time_horizon: Optional[str] = Query(None),
    gateway: ModelGateway = Depends(get_model_gateway),
):
    """
    Trend forecast for the given scenario; omitted filters use the defaults.
    """
    updates = {k: v for k, v in
               {"category": category, "region": region, "time_horizon": time_horizon}.items() if v}
    return await _render(ForecastRequest(**updates), gateway)


@router.post("", response_model=StandardResponse)
async def run_trend_forecast(
    request: ForecastRequest,
    gateway: ModelGateway = Depends(get_model_gateway),
):
    """
    Run Forecast action with scenario filters from the request body.
    """
    return await _render(request, gateway)
