import logging

from langchain_groq import ChatGroq
from openai import AsyncOpenAI

from fmcg_studio.core.config import settings

logger = logging.getLogger(__name__)


def get_llm() -> ChatGroq:
    logger.info("Initializing ChatGroq with model: %s", settings.GROQ_MODEL)
    return ChatGroq(
        model=settings.GROQ_MODEL,
        temperature=settings.LLM_TEMPERATURE,
        api_key=settings.GROQ_API_KEY,
    )


def get_image_client() -> AsyncOpenAI:
    logger.info("Initializing image client with model: %s", settings.IMAGE_MODEL)
    return AsyncOpenAI(api_key=settings.OPENAI_API_KEY)
