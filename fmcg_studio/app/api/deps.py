"""
Common dependencies for API endpoints.
"""
from functools import lru_cache

from fmcg_studio.app.services.chat_service import ProductIdeationChatController
from fmcg_studio.llm.client import get_image_client, get_llm
from fmcg_studio.llm.gateway import ImageGateway, ModelGateway
from fmcg_studio.memory.store import SessionStore


@lru_cache
def get_model_gateway() -> ModelGateway:
    """
    Get or create the chat model gateway.

    Returns:
        ModelGateway wrapping the configured ChatGroq model
    """
    return ModelGateway(get_llm())


@lru_cache
def get_image_gateway() -> ImageGateway:
    """
    Get or create the mockup image gateway.

    Returns:
        ImageGateway wrapping the OpenAI images client
    """
    return ImageGateway(get_image_client())


@lru_cache
def get_chat_store() -> SessionStore[ProductIdeationChatController]:
    return SessionStore()
