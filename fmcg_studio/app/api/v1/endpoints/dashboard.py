from fastapi import APIRouter, Depends, HTTPException

from fmcg_studio.app.api.deps import get_model_gateway
from fmcg_studio.app.schemas.common import StandardResponse
from fmcg_studio.app.services.dashboard_service import DashboardController
from fmcg_studio.llm.gateway import ModelGateway

router = APIRouter()


@router.get("", response_model=StandardResponse)
async def get_dashboard(gateway: ModelGateway = Depends(get_model_gateway)):
    """
    AI overview for the landing dashboard.
    """
    controller = DashboardController(gateway)
    try:
        await controller.mount()
        return StandardResponse(data=controller.to_view(), message=controller.state.error)
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))
    finally:
        controller.unmount()
