"""Turns unexpected simulator failures into a terminal error response body."""
from http import HTTPStatus
from typing import Any, Dict
import logging

logger = logging.getLogger(__name__)


class ErrorHandler:
    def __init__(self, status: int = HTTPStatus.INTERNAL_SERVER_ERROR) -> None:
        self.status = int(status)

    def handle_exception(self, exc: Exception, context: Dict[str, Any] = None) -> Dict[str, Any]:
        """Same {message} shape as the 404 body, plus what went wrong and where."""
        logger.error("Mock API request failed (%s): %s", (context or {}).get("operation", "unknown"), exc, exc_info=exc)
        return {
            "message": HTTPStatus(self.status).phrase,
            "status": self.status,
            "fallback": True,
            "metadata": {
                "error": str(exc),
                "error_type": type(exc).__name__,
                "context": context or {},
            },
        }
