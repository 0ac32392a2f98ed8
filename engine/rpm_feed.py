"""
Simulated RPM source.

Stands in for a throttle lever or a telemetry link: a QTimer on the GUI
thread produces a new rpm value every tick and emits it through
rpm_update. Connect that signal to EngineSimulation.set_current_rpm.
"""
import logging
import math
from typing import Optional

import numpy as np
from PyQt5 import QtCore

from engine.config import clamp_rpm

logger = logging.getLogger(__name__)

FEED_MODES = ("sweep", "walk")

# Sweep: idle to fast cruise and back
SWEEP_LOW_RPM = 800.0
SWEEP_HIGH_RPM = 5500.0
SWEEP_PERIOD_TICKS = 150

# Walk: bounded random steps
WALK_STEP_STD = 120.0


class SimulatedRpmFeed(QtCore.QObject):
    """
    Timer-driven rpm generator.

    Signals:
        rpm_update(float) - new rpm value
        status_update(str) - human-readable state changes
    """
    rpm_update = QtCore.pyqtSignal(float)
    status_update = QtCore.pyqtSignal(str)

    def __init__(
        self,
        mode: str = "sweep",
        interval_ms: int = 200,
        start_rpm: float = 1500.0,
        rng: Optional[np.random.Generator] = None,
        parent=None,
    ):
        super().__init__(parent)
        if mode not in FEED_MODES:
            raise ValueError(f"Unknown feed mode '{mode}'. Use one of {FEED_MODES}.")

        self.mode = mode
        self.rng = rng if rng is not None else np.random.default_rng()
        self.tick = 0
        self.rpm = clamp_rpm(start_rpm)

        self.timer = QtCore.QTimer(self)
        self.timer.setInterval(interval_ms)
        self.timer.timeout.connect(self.step)

    @property
    def running(self) -> bool:
        return self.timer.isActive()

    def start(self):
        self.timer.start()
        logger.info(f"RPM feed started ({self.mode}, every {self.timer.interval()} ms)")
        self.status_update.emit(f"Feed running: {self.mode}")

    def stop(self):
        self.timer.stop()
        logger.info("RPM feed stopped")
        self.status_update.emit("Feed stopped")

    def step(self) -> float:
        """Advance one tick, emit and return the new rpm."""
        self.tick += 1
        if self.mode == "sweep":
            phase = 2.0 * math.pi * self.tick / SWEEP_PERIOD_TICKS
            mid = (SWEEP_LOW_RPM + SWEEP_HIGH_RPM) / 2.0
            amplitude = (SWEEP_HIGH_RPM - SWEEP_LOW_RPM) / 2.0
            rpm = mid - amplitude * math.cos(phase)
        else:
            rpm = self.rpm + self.rng.normal(0.0, WALK_STEP_STD)

        self.rpm = clamp_rpm(rpm, fallback=self.rpm)
        self.rpm_update.emit(self.rpm)
        return self.rpm
