"""Runtime data of the tracker: GPS queue, last position, battery and motion state."""

from __future__ import annotations

import copy
import math
import queue
from collections import deque
from dataclasses import dataclass, field, replace
from typing import Any

DEFAULT_GPS_CAPACITY = 100
DEFAULT_VOLTAGE_SAMPLES = 10

_U32 = 0xFFFFFFFF


@dataclass
class Gps:
    """One GPS fix."""

    timestamp: int = 0
    longitude: float = 0.0
    latitude: float = 0.0
    speed: float = 0.0
    course: float = 0.0


@dataclass
class LocalGps:
    """The last known position: a GPS fix or, without one, cell information."""

    is_gps: bool = False
    gps: Gps = field(default_factory=Gps)
    cell_info: Any = None


class GpsQueue:
    """A bounded FIFO of GPS fixes that keeps one slot free, as a ring buffer does."""

    def __init__(self, capacity: int = DEFAULT_GPS_CAPACITY) -> None:
        if capacity < 2:
            raise ValueError(f"capacity must be at least 2, got {capacity}")
        self.capacity = capacity
        self._items: deque[Gps] = deque()

    def is_full(self) -> bool:
        return len(self._items) >= self.capacity - 1

    def is_empty(self) -> bool:
        return not self._items

    def enqueue(self, gps: Gps) -> None:
        """Store a copy of ``gps``; raise ``queue.Full`` when there is no room."""
        if self.is_full():
            raise queue.Full("GPS queue is full")
        self._items.append(replace(gps))

    def dequeue(self) -> Gps:
        """Remove and return the oldest fix; raise ``queue.Empty`` when there is none."""
        if self.is_empty():
            raise queue.Empty("GPS queue is empty")
        return self._items.popleft()

    def __len__(self) -> int:
        return len(self._items)


def _real_voltage(value: int) -> float:
    # 3k / 100k divider; the integer steps mirror the fixed-point arithmetic.
    return ((value * 103) & _U32) // 3 / 1000.0


class BatteryMonitor:
    """Keeps the latest voltage samples in a ring and estimates the charge."""

    def __init__(self, samples: int = DEFAULT_VOLTAGE_SAMPLES) -> None:
        if samples < 1:
            raise ValueError(f"samples must be positive, got {samples}")
        self._samples = [0] * samples
        self._next = 0

    def store_voltage(self, voltage: int) -> None:
        """Record one raw ADC voltage reading, overwriting the oldest."""
        if self._next >= len(self._samples):
            self._next = 0
        self._samples[self._next] = voltage & _U32
        self._next += 1

    def percent(self) -> int:
        """Estimate the remaining charge in percent, 0 to 100."""
        voltage = (sum(self._samples) & _U32) // len(self._samples)
        real = _real_voltage(voltage)
        if real > 55:
            voltage = ((voltage * 48) & _U32) // 60
        elif real > 40:
            pass
        elif real > 28:
            voltage = ((voltage * 48) & _U32) // 36
        estimate = math.exp((_real_voltage(voltage) - 37.873) / 2.7927)
        if estimate >= 100:
            return 100
        return int(estimate)

    def miles(self) -> int:
        """Remaining range; not estimated, always 0."""
        return 0


@dataclass
class DeviceState:
    """Last position, vibration time counter and itinerary state."""

    last_gps: LocalGps = field(default_factory=LocalGps)
    vibration_time: int = 0
    itinerary_started: bool = False

    def save_last_gps(self, gps: LocalGps) -> None:
        """Remember ``gps``: the fix if it has one, otherwise its cell information."""
        self.last_gps.is_gps = gps.is_gps
        if gps.is_gps:
            self.last_gps.gps = replace(gps.gps)
        else:
            self.last_gps.cell_info = copy.deepcopy(gps.cell_info)

    def tick_vibration(self) -> int:
        """Count one more second of vibration; return the count before it."""
        previous = self.vibration_time
        self.vibration_time += 1
        return previous

    def reset_vibration(self) -> int:
        self.vibration_time = 0
        return self.vibration_time