import asyncio
import logging
from typing import Any, Optional

from langchain_core.language_models import BaseChatModel
from langchain_core.messages import HumanMessage, SystemMessage

from fmcg_studio.app.utils.exceptions import GatewayError, GatewayTimeoutError
from fmcg_studio.core.config import settings

logger = logging.getLogger(__name__)

JSON_RESPONSE_FORMAT = {"type": "json_object"}


class ModelGateway:
    """
    One chat-completion request per call, in JSON response mode.

    No retries and no caching: identical prompts always go back to the
    provider. The only guard is a deadline on the whole call.
    """

    def __init__(self, llm: BaseChatModel, timeout: Optional[float] = None):
        self.llm = llm
        self.timeout = settings.LLM_TIMEOUT_SECONDS if timeout is None else timeout

    async def invoke(self, system_prompt: str, user_prompt: str) -> str:
        messages = [
            SystemMessage(content=system_prompt),
            HumanMessage(content=user_prompt),
        ]
        try:
            response = await asyncio.wait_for(
                self.llm.ainvoke(messages, response_format=JSON_RESPONSE_FORMAT),
                timeout=self.timeout,
            )
        except asyncio.TimeoutError as e:
            raise GatewayTimeoutError(
                f"Model did not respond within {self.timeout:g}s"
            ) from e
        except Exception as e:
            raise GatewayError(f"Model request failed: {e}") from e

        # Empty content is not an error here; the decoder rejects it.
        content = getattr(response, "content", None)
        return content if isinstance(content, str) else ""


class ImageGateway:
    """Mockup image generation. Returns the URL of the first image."""

    def __init__(
        self,
        client: Any,
        model: Optional[str] = None,
        size: Optional[str] = None,
        timeout: Optional[float] = None,
    ):
        self.client = client
        self.model = model or settings.IMAGE_MODEL
        self.size = size or settings.IMAGE_SIZE
        self.timeout = settings.LLM_TIMEOUT_SECONDS if timeout is None else timeout

    async def generate(self, prompt: str) -> str:
        try:
            result = await asyncio.wait_for(
                self.client.images.generate(model=self.model, prompt=prompt, size=self.size),
                timeout=self.timeout,
            )
        except asyncio.TimeoutError as e:
            raise GatewayTimeoutError(
                f"Image model did not respond within {self.timeout:g}s"
            ) from e
        except Exception as e:
            raise GatewayError(f"Image request failed: {e}") from e

        data = getattr(result, "data", None) or []
        url = getattr(data[0], "url", None) if data else None
        if not url:
            raise GatewayError("No image URL returned for product mockup")
        return url
