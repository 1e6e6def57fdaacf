"""Lead lock port."""

from abc import ABC, abstractmethod
from typing import AsyncContextManager


class LeadLock(ABC):
    """Port interface serializing writes to the same lead."""

    @abstractmethod
    def hold(self, link_id: int) -> AsyncContextManager[None]:
        """
        Hold the lock of a lead for the duration of an ``async with`` block.

        Args:
            link_id: Numeric lead identifier

        Raises:
            ServiceUnavailableError: If the lock backend fails or times out
        """
        pass

    async def close(self) -> None:
        """Release backend connections. Locks held in process have none."""
        return None
