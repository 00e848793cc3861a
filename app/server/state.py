"""Process-wide state shared read-only by every request."""

import time
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Annotated

from fastapi import Depends, Request


@dataclass(frozen=True)
class ProcessState:
    """Immutable record of when the process started.

    Built once in the application lifespan and never mutated, so requests
    read it concurrently without locking.

    Attributes:
        started_at: Wall-clock start time (UTC), for display
        started_monotonic: Monotonic clock reading at start, for uptime
    """

    started_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    started_monotonic: float = field(default_factory=time.monotonic)

    def uptime_seconds(self) -> int:
        """Whole seconds elapsed since startup, never negative."""
        return max(0, int(time.monotonic() - self.started_monotonic))


def get_process_state(request: Request) -> ProcessState:
    """Dependency returning the ProcessState stored on the running app."""
    return request.app.state.process


ProcessStateDep = Annotated[ProcessState, Depends(get_process_state)]
