from typing import Any, List, Literal, Optional

from pydantic import BaseModel

ViewStatus = Literal["idle", "loading", "success", "error"]


class ViewState(BaseModel):
    """Snapshot of a view controller: what the page would render right now."""
    status: ViewStatus = "idle"
    data: Optional[Any] = None
    error: Optional[str] = None
    has_data: bool = False


class StatCard(BaseModel):
    title: str
    value: str
    change: str
    change_type: Literal["positive", "negative"] = "positive"


class TrendRow(BaseModel):
    name: str
    probability_label: str


class PageSection(BaseModel):
    title: str
    description: str
    route: Optional[str] = None
    capabilities: List[str] = []


class HomeContent(BaseModel):
    title: str
    steps: List[PageSection]
    agents: List[PageSection]
    stack: List[PageSection]
