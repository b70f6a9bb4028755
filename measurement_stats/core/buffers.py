from __future__ import annotations

import threading
from typing import List, Tuple


class MeasurementBuffer:
    """Thread-safe append-only buffer of measurement values.

    Position in the buffer is the arrival order of the value, which also
    serves as the X coordinate when fitting a trend line.
    """

    def __init__(self) -> None:
        self._values: List[float] = []
        self._lock = threading.RLock()

    def add(self, value: float) -> None:
        with self._lock:
            self._values.append(value)

    def size(self) -> int:
        with self._lock:
            return len(self._values)

    def snapshot(self) -> Tuple[float, ...]:
        with self._lock:
            return tuple(self._values)
