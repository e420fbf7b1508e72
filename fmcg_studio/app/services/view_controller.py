"""
Per-page state owners.

A controller moves through idle -> loading -> success | error. Results are
applied only while the controller is mounted and only for the most recently
issued request; anything else that completes is dropped.
"""
import logging
from typing import Any, Awaitable, Callable, Generic, Optional, TypeVar

from fmcg_studio.app.schemas.view import ViewState

logger = logging.getLogger(__name__)

D = TypeVar("D")


class ViewController(Generic[D]):
    feature_label: str = "view"
    error_message: str = "Failed to load data. Please try again."
    auto_load: bool = False

    def __init__(self, gateway: Any):
        self.gateway = gateway
        self.state = ViewState()
        self._mounted = False
        self._token = 0

    @property
    def is_mounted(self) -> bool:
        return self._mounted

    @property
    def data(self) -> Optional[D]:
        return self.state.data if self.state.status == "success" else None

    async def mount(self) -> ViewState:
        self._mounted = True
        if self.auto_load:
            await self.load()
        return self.state

    def unmount(self) -> None:
        self._mounted = False

    async def load(self) -> Optional[ViewState]:
        return await self._run(self.fetch)

    async def fetch(self) -> D:
        raise NotImplementedError

    def has_data(self, data: D) -> bool:
        return bool(getattr(data, "has_data", data is not None))

    def _is_current(self, token: int) -> bool:
        return self._mounted and token == self._token

    async def _run(self, fetch: Callable[[], Awaitable[D]]) -> Optional[ViewState]:
        """
        Run one fetch and apply its outcome.

        Returns the state that was applied, or None when the outcome was
        dropped because the view unmounted or a newer request was issued.
        """
        if not self._mounted:
            logger.debug("%s: not mounted, request skipped", self.feature_label)
            return None

        self._token += 1
        token = self._token
        self.state = ViewState(status="loading")

        try:
            data = await fetch()
        except Exception:
            logger.exception("%s request failed", self.feature_label)
            if not self._is_current(token):
                logger.debug("%s: stale failure dropped (token %d)", self.feature_label, token)
                return None
            self.state = ViewState(status="error", error=self.error_message)
            return self.state

        if not self._is_current(token):
            logger.debug("%s: stale result dropped (token %d)", self.feature_label, token)
            return None

        self.state = ViewState(status="success", data=data, has_data=self.has_data(data))
        self._on_success(data, token)
        return self.state

    def _on_success(self, data: D, token: int) -> None:
        pass
