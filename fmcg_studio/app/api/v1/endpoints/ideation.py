from fastapi import APIRouter, Depends, HTTPException

from fmcg_studio.app.api.deps import get_chat_store, get_image_gateway, get_model_gateway
from fmcg_studio.app.schemas.chat import ChatRequest, ChatResponse
from fmcg_studio.app.schemas.common import StandardResponse
from fmcg_studio.app.schemas.idea import ProductIdeaRequest
from fmcg_studio.app.services.chat_service import ProductIdeationChatController
from fmcg_studio.app.services.ideation_service import ProductIdeationController
from fmcg_studio.app.utils.exceptions import AppException, ValidationError
from fmcg_studio.core.config import settings
from fmcg_studio.llm.gateway import ImageGateway, ModelGateway
from fmcg_studio.memory.store import SessionStore

router = APIRouter()


@router.post("", response_model=StandardResponse)
async def generate_product_idea(
    request: ProductIdeaRequest,
    gateway: ModelGateway = Depends(get_model_gateway),
    image_gateway: ImageGateway = Depends(get_image_gateway),
):
    """
    Generate a product concept from a free-text brief, with a best-effort mockup.
    """
    if not ProductIdeationController.can_submit(request.query):
        raise ValidationError("Brief must not be empty")

    controller = ProductIdeationController(gateway, image_gateway)
    try:
        await controller.mount()
        await controller.submit(request.query, request.price, request.eco_package)
        await controller.wait_for_mockup(timeout=settings.LLM_TIMEOUT_SECONDS)
        return StandardResponse(data=controller.to_view(), message=controller.state.error)
    except AppException:
        raise
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))
    finally:
        controller.unmount()


@router.post("/chat", response_model=StandardResponse)
async def chat_product_idea(
    request: ChatRequest,
    gateway: ModelGateway = Depends(get_model_gateway),
    image_gateway: ImageGateway = Depends(get_image_gateway),
    store: SessionStore[ProductIdeationChatController] = Depends(get_chat_store),
):
    """
    Chat with the ideation agent. The transcript lives for the session only.
    """
    if not ProductIdeationChatController.can_submit(request.message):
        raise ValidationError("Message must not be empty")

    session_id, controller = store.get_or_create(
        request.session_id,
        lambda: ProductIdeationChatController(gateway, image_gateway),
    )
    try:
        if not controller.is_mounted:
            await controller.mount()
        await controller.submit(request.message, request.price, request.eco_package)
        await controller.wait_for_mockup(timeout=settings.LLM_TIMEOUT_SECONDS)
        return StandardResponse(
            data=ChatResponse(
                session_id=session_id,
                messages=list(controller.transcript.messages),
                view=controller.to_view(),
            ),
            message=controller.state.error,
        )
    except AppException:
        raise
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))
