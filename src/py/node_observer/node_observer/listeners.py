"""Ready-made listeners for common traversal bookkeeping."""

from typing import Optional
from typing_extensions import override
import logging

from .core import INavigationListener

logger = logging.getLogger(__name__)


class RecordingListener(INavigationListener):
    """Records every visited value, in order, under a display name."""

    def __init__(self, name: str) -> None:
        self.name = name
        self._visited: list[int] = []
        self._notification_count = 0

    @override
    def on_visit(self, value: int) -> None:
        self._visited.append(value)
        self._notification_count += 1
        logger.debug("%s visited node: %d", self.name, value)

    def visited(self) -> list[int]:
        return list(self._visited)

    def notification_count(self) -> int:
        return self._notification_count

    def __repr__(self) -> str:
        return f"RecordingListener({self.name!r})"


class SumListener(INavigationListener):
    def __init__(self) -> None:
        self._sum = 0

    @override
    def on_visit(self, value: int) -> None:
        self._sum += value
        logger.debug("Running sum after %d: %d", value, self._sum)

    def sum(self) -> int:
        return self._sum


class StatisticsListener(INavigationListener):
    """Collects count, sum, minimum, maximum and average of visited values."""

    def __init__(self) -> None:
        self._count = 0
        self._sum = 0
        self._min: Optional[int] = None
        self._max: Optional[int] = None

    @override
    def on_visit(self, value: int) -> None:
        self._count += 1
        self._sum += value
        if self._min is None or value < self._min:
            self._min = value
        if self._max is None or value > self._max:
            self._max = value

    def count(self) -> int:
        return self._count

    def sum(self) -> int:
        return self._sum

    def minimum(self) -> Optional[int]:
        return self._min

    def maximum(self) -> Optional[int]:
        return self._max

    def average(self) -> Optional[float]:
        if self._count == 0:
            return None
        return self._sum / self._count

    def summary(self) -> str:
        if self._count == 0:
            return "No data"
        return "Count={}, Sum={}, Min={}, Max={}, Avg={:.2f}".format(
            self._count, self._sum, self._min, self._max, self.average()
        )
