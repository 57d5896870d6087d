# session_registry.py
import logging
import threading
import uuid
from collections import OrderedDict
from typing import Optional

from ..image_encoder import ImageEncoder
from .session_controller import AnalysisClient, SessionController

logger = logging.getLogger(__name__)

DEFAULT_MAX_SESSIONS = 200


class SessionRegistry:
    """
    In-memory map from browser session id to its SessionController.

    Holds at most max_sessions controllers; the least recently used one is
    evicted and its image released when a new session would exceed the cap.
    """

    def __init__(self, client: AnalysisClient,
                 encoder: Optional[ImageEncoder] = None,
                 max_sessions: int = DEFAULT_MAX_SESSIONS):
        if max_sessions < 1:
            raise ValueError("max_sessions must be at least 1")
        self.client = client
        self.encoder = encoder or ImageEncoder()
        self.max_sessions = max_sessions
        self._controllers: "OrderedDict[str, SessionController]" = OrderedDict()
        self._lock = threading.Lock()

    @staticmethod
    def new_session_id() -> str:
        return uuid.uuid4().hex

    def get(self, session_id: str) -> SessionController:
        """Return the controller for session_id, creating it on first use"""
        with self._lock:
            controller = self._controllers.get(session_id)
            if controller is not None:
                self._controllers.move_to_end(session_id)
                return controller

            controller = SessionController(self.client, self.encoder)
            self._controllers[session_id] = controller
            while len(self._controllers) > self.max_sessions:
                old_id, old = self._controllers.popitem(last=False)
                old.release()
                logger.info(f"Evicted idle session {old_id[:8]}")
            return controller

    def __contains__(self, session_id: str) -> bool:
        with self._lock:
            return session_id in self._controllers

    def __len__(self) -> int:
        with self._lock:
            return len(self._controllers)
