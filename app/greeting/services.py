import logging
from functools import lru_cache
from typing import Optional

from config import settings

logger = logging.getLogger(__name__)


class GreetingService:
    """Supplies the greeting served by the /greeting endpoint"""

    def __init__(self, message: Optional[str] = None):
        # Captured once so every call returns the same text
        self._message = message if message is not None else settings.GREETING_MESSAGE
        logger.debug(f"GreetingService initialized with message: {self._message!r}")

    def greet(self) -> str:
        return self._message


@lru_cache()
def get_greeting_service() -> GreetingService:
    """
    Shared GreetingService instance for route dependencies
    """
    return GreetingService()
