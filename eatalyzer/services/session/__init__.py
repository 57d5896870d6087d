from .session_controller import (
    ANALYSIS_FAILED_MESSAGE,
    INVALID_TYPE_MESSAGE,
    NO_FILE_MESSAGE,
    READ_ERROR_MESSAGE,
    SessionController,
)
from .session_registry import SessionRegistry

__all__ = [
    "ANALYSIS_FAILED_MESSAGE",
    "INVALID_TYPE_MESSAGE",
    "NO_FILE_MESSAGE",
    "READ_ERROR_MESSAGE",
    "SessionController",
    "SessionRegistry",
]
