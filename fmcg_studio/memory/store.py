import logging
import time
import uuid
from typing import Callable, Dict, Generic, Optional, Tuple, TypeVar

from fmcg_studio.core.config import settings

logger = logging.getLogger(__name__)

S = TypeVar("S")


class SessionStore(Generic[S]):
    """
    Process-local session registry.

    Sessions live in memory only and expire after `ttl_seconds` without use;
    nothing is written to disk or shared between workers.
    """

    def __init__(self, ttl_seconds: Optional[float] = None, clock: Callable[[], float] = time.monotonic):
        self.ttl_seconds = settings.SESSION_TTL_SECONDS if ttl_seconds is None else ttl_seconds
        self._clock = clock
        self._mem: Dict[str, Tuple[S, float]] = {}

    def _evict_expired(self, now: float) -> None:
        expired = [sid for sid, (_, seen) in self._mem.items() if now - seen > self.ttl_seconds]
        for sid in expired:
            logger.debug("Session %s expired", sid)
            del self._mem[sid]

    def get_or_create(self, session_id: Optional[str], factory: Callable[[], S]) -> Tuple[str, S]:
        now = self._clock()
        self._evict_expired(now)
        if not session_id:
            session_id = str(uuid.uuid4())
        entry = self._mem.get(session_id)
        if entry is None:
            logger.debug("Opening session %s", session_id)
            session = factory()
        else:
            session = entry[0]
        self._mem[session_id] = (session, now)
        return session_id, session

    def get(self, session_id: str) -> Optional[S]:
        self._evict_expired(self._clock())
        entry = self._mem.get(session_id)
        return entry[0] if entry else None

    def __contains__(self, session_id: str) -> bool:
        return self.get(session_id) is not None

    def __len__(self) -> int:
        self._evict_expired(self._clock())
        return len(self._mem)
