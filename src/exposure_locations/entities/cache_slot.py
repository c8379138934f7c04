"""Cache slot domain entity."""

from dataclasses import dataclass
from enum import Enum
from typing import Any


class SlotState(str, Enum):
    EMPTY = "empty"
    POPULATED = "populated"


@dataclass(frozen=True)
class CacheSlot:
    """Memoized upstream dataset for one country.

    A slot starts EMPTY and becomes POPULATED after the first successful
    fetch. It is never expired or refreshed for the life of the process.

    Attributes:
        state: EMPTY or POPULATED
        data: The raw dataset, None while empty
        populated_at: Unix timestamp of population, None while empty
    """

    state: SlotState = SlotState.EMPTY
    data: Any = None
    populated_at: float | None = None

    @classmethod
    def populated(cls, data: Any, populated_at: float) -> "CacheSlot":
        return cls(state=SlotState.POPULATED, data=data, populated_at=populated_at)

    @property
    def is_populated(self) -> bool:
        return self.state is SlotState.POPULATED
