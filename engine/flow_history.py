# engine/flow_history.py
from collections import deque
from typing import Tuple

import numpy as np

from engine.model import FlowReading


class FlowHistory:
    """
    Rolling buffer of operating-point readings.

    Keeps the most recent `maxlen` readings; older ones fall off the front.
    The history canvas pulls numpy arrays out of it on every redraw.
    """

    def __init__(self, maxlen: int = 300):
        if maxlen < 2:
            raise ValueError(f"FlowHistory needs room for at least 2 readings, got {maxlen}")
        self.readings: deque = deque(maxlen=maxlen)

    def __len__(self) -> int:
        return len(self.readings)

    def add(self, t: float, rpm: float, fuel_flow: float, eco: bool) -> None:
        # Clock went backwards (e.g. restored session): start over
        if self.readings and t < self.readings[-1].t:
            self.readings.clear()
        self.readings.append(FlowReading(t=t, rpm=rpm, fuel_flow=fuel_flow, eco=eco))

    def clear(self) -> None:
        self.readings.clear()

    def arrays(self) -> Tuple[np.ndarray, np.ndarray, np.ndarray, np.ndarray]:
        """
        Return (t, rpm, fuel_flow, eco) arrays, time rebased so the oldest
        retained reading sits at t = 0.
        """
        if not self.readings:
            empty = np.array([], dtype=float)
            return empty, empty, empty, np.array([], dtype=bool)

        t = np.array([r.t for r in self.readings], dtype=float)
        rpm = np.array([r.rpm for r in self.readings], dtype=float)
        flow = np.array([r.fuel_flow for r in self.readings], dtype=float)
        eco = np.array([r.eco for r in self.readings], dtype=bool)
        return t - t[0], rpm, flow, eco
