"""Liveness reporting."""

import logging
import time
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from typing import Protocol

_logger = logging.getLogger(__name__)


class Pingable(Protocol):
    """A store that can report connectivity."""

    def ping(self) -> bool:
        """Return true when the store is reachable."""


@dataclass
class HealthService:
    """Reports process uptime and store connectivity."""

    stores: Sequence[Pingable]
    clock: Callable[[], float] = time.monotonic
    started_at: float = field(default=0.0)

    def __post_init__(self) -> None:
        if not self.started_at:
            self.started_at = self.clock()

    def uptime_seconds(self) -> float:
        return round(self.clock() - self.started_at, 3)

    def database_status(self) -> str:
        """Return "connected" only when every store answers."""
        reachable = all([self._ping(store) for store in self.stores])
        return "connected" if reachable else "disconnected"

    def _ping(self, store: Pingable) -> bool:
        try:
            reachable = store.ping()
        except Exception:
            _logger.exception("Store ping failed")
            return False
        if not reachable:
            _logger.warning("Store %s is unreachable", type(store).__name__)
        return reachable
