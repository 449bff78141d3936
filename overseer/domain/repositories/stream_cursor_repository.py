"""
Domain Repository Interface - Stream Cursor

Remembers how far an event subscription has been consumed so a restarted
subscription can resume instead of skipping to the live head.
"""

from abc import ABC, abstractmethod
from typing import Optional


class IStreamCursorRepository(ABC):
    """Interface for event stream cursor persistence."""

    @abstractmethod
    async def get(self, subscription: str) -> Optional[int]:
        """Return the last consumed index for a subscription."""
        pass

    @abstractmethod
    async def save(self, subscription: str, index: int) -> None:
        """Store the last consumed index for a subscription."""
        pass
