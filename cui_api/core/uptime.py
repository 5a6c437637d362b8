import logging
import time
from dataclasses import dataclass
from typing import Optional


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProcessClock:
    """Wall-clock timestamp captured once at startup, read-only afterwards."""

    started_at: float

    @classmethod
    def start(cls) -> "ProcessClock":
        return cls(started_at=time.time())

    def uptime_seconds(self, now: Optional[float] = None) -> int:
        """Whole seconds since start. A clock that went backwards reports 0."""
        current = time.time() if now is None else now
        elapsed = current - self.started_at
        if elapsed < 0:
            logger.warning(f"System clock is {-elapsed:.1f}s behind process start time, reporting zero uptime")
            return 0
        return int(elapsed)
