"""
Engine simulation: the sample table plus the live operating point.

One EngineSimulation is created at startup and handed to the UI. The UI
listens to its Qt signals and calls set_current_rpm() from the slider or
the simulated feed.
"""
import logging
from typing import List, Optional

import numpy as np
from PyQt5 import QtCore

from engine.config import (
    DEFAULT_RPM,
    clamp_rpm,
    MAX_FUEL_FLOW,
    MAX_RPM,
    MIN_FUEL_FLOW,
    MIN_RPM,
)
from engine.interpolation import flow_at
from engine.sample_table import SampleTable, generate_sample_table

logger = logging.getLogger(__name__)

# Symmetric multiplicative noise on the live fuel-flow reading
FLOW_NOISE = 0.15


def classify_eco_mode(fuel_flow: float, median_flow: float) -> bool:
    """Eco mode means burning strictly less than the median at this rpm."""
    return bool(fuel_flow < median_flow)


class EngineSimulation(QtCore.QObject):
    """
    Owns the generated table and the current engine state.

    Signals:
        current_rpm_changed(float)
        current_fuel_flow_changed(float)
        eco_mode_changed(bool)
        data_changed() - the sample table was regenerated
        state_changed() - emitted once after the per-field signals of an update
    """
    current_rpm_changed = QtCore.pyqtSignal(float)
    current_fuel_flow_changed = QtCore.pyqtSignal(float)
    eco_mode_changed = QtCore.pyqtSignal(bool)
    data_changed = QtCore.pyqtSignal()
    state_changed = QtCore.pyqtSignal()

    min_rpm = MIN_RPM
    max_rpm = MAX_RPM
    min_fuel_flow = MIN_FUEL_FLOW
    max_fuel_flow = MAX_FUEL_FLOW

    def __init__(
        self,
        default_rpm: float = DEFAULT_RPM,
        rng: Optional[np.random.Generator] = None,
        parent=None,
    ):
        super().__init__(parent)
        self.rng = rng if rng is not None else np.random.default_rng()
        self._table = SampleTable()
        self._current_rpm = clamp_rpm(default_rpm)
        self._current_fuel_flow = 0.0
        self._median_at_rpm = 0.0

    # ==========================================================================
    # Read-only state
    # ==========================================================================

    @property
    def samples(self) -> SampleTable:
        return self._table

    @property
    def current_rpm(self) -> float:
        return self._current_rpm

    @property
    def current_fuel_flow(self) -> float:
        return self._current_fuel_flow

    @property
    def median_at_current_rpm(self) -> float:
        return self._median_at_rpm

    @property
    def is_eco_mode(self) -> bool:
        return classify_eco_mode(self._current_fuel_flow, self._median_at_rpm)

    def data_points(self) -> List[dict]:
        return self._table.to_dicts()

    def flow_at(self, rpm: float) -> float:
        """Point query, independent of the current rpm cursor."""
        return flow_at(self._table, rpm, use_median=False)

    # ==========================================================================
    # Mutations
    # ==========================================================================

    def generate_sample_data(self):
        """Regenerate the table and refresh the operating point against it."""
        self._table = generate_sample_table(self.rng)
        self.data_changed.emit()
        self._notify(False, *self._take_reading())

    def set_current_rpm(self, rpm: float):
        """
        Move the operating point.

        The value is clamped to the rpm domain; NaN leaves it where it is.
        Setting the value already held is a no-op and emits nothing.
        """
        rpm = clamp_rpm(rpm, fallback=self._current_rpm)
        if rpm == self._current_rpm:
            return

        self._current_rpm = rpm
        logger.debug(f"Current rpm -> {rpm:.0f}")
        self._notify(True, *self._take_reading())

    def resample(self):
        """Take a new noisy fuel-flow reading at the unchanged rpm."""
        self._notify(False, *self._take_reading())

    def _take_reading(self):
        """Recompute flow and median at the current rpm; report what changed."""
        was_eco = self.is_eco_mode
        old_flow = self._current_fuel_flow

        base = flow_at(self._table, self._current_rpm, use_median=False)
        noise = self.rng.uniform(-FLOW_NOISE, FLOW_NOISE)
        self._current_fuel_flow = base * (1.0 + noise)
        self._median_at_rpm = flow_at(self._table, self._current_rpm, use_median=True)

        return self._current_fuel_flow != old_flow, self.is_eco_mode != was_eco

    def _notify(self, rpm_changed: bool, flow_changed: bool, eco_changed: bool):
        if rpm_changed:
            self.current_rpm_changed.emit(self._current_rpm)
        if flow_changed:
            self.current_fuel_flow_changed.emit(self._current_fuel_flow)
        if eco_changed:
            self.eco_mode_changed.emit(self.is_eco_mode)
        if rpm_changed or flow_changed or eco_changed:
            self.state_changed.emit()
