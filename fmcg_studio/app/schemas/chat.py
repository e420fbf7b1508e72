from typing import List, Optional

from pydantic import BaseModel, Field

from fmcg_studio.app.utils.helpers import BASELINE_ECO_PACKAGE, BASELINE_PRICE
from fmcg_studio.memory.models import ChatMessage
from .common import CamelModel
from .idea import IdeationView


class ChatRequest(CamelModel):
    message: str
    session_id: Optional[str] = None
    price: float = Field(default=BASELINE_PRICE, ge=0)
    eco_package: float = Field(default=BASELINE_ECO_PACKAGE, ge=0, le=100)


class ChatResponse(BaseModel):
    session_id: str
    messages: List[ChatMessage]
    view: IdeationView
