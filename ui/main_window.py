"""
Main window for the Boat Performance Chart.
"""
import logging
import time
from typing import Optional

from PyQt5 import QtCore
from PyQt5.QtWidgets import (
    QMainWindow,
    QWidget,
    QVBoxLayout,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QSlider,
    QGroupBox,
)

from engine.config import MAX_RPM, MIN_RPM, RPM_STEP
from engine.flow_history import FlowHistory
from engine.rpm_feed import SimulatedRpmFeed
from engine.simulation import EngineSimulation
from ui.canvases import FuelFlowChartCanvas, FlowHistoryCanvas
from ui.styles import DARK_STYLESHEET, FLOW_UNIT, mode_badge_style

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """
    Dashboard window for the fuel-flow performance chart.

    Displays:
    - Fuel flow vs RPM chart with the live operating point
    - Fuel flow history strip
    - RPM slider, simulation controls and readouts
    """

    def __init__(
        self,
        simulation: EngineSimulation,
        feed: Optional[SimulatedRpmFeed] = None,
        history_size: int = 300,
    ):
        super().__init__()

        self.simulation = simulation
        self.feed = feed
        self.history = FlowHistory(maxlen=history_size)

        self.setWindowTitle("Boat Performance Chart")
        self.resize(1100, 800)

        central = QWidget()
        self.setCentralWidget(central)

        root_layout = QHBoxLayout()
        root_layout.setContentsMargins(8, 8, 8, 8)
        root_layout.setSpacing(10)
        central.setLayout(root_layout)

        root_layout.addLayout(self._build_chart_column(), 4)
        root_layout.addLayout(self._build_control_column(), 1)

        self._connect_signals()
        self.setStyleSheet(DARK_STYLESHEET)

        # Initial paint from whatever the simulation already holds
        self.handle_data_changed()

    def _build_chart_column(self):
        """Build left column: performance chart + history strip."""
        chart_col = QVBoxLayout()
        chart_col.setSpacing(4)

        self.chart_canvas = FuelFlowChartCanvas(self)
        self.history_canvas = FlowHistoryCanvas(self)

        chart_col.addWidget(self.chart_canvas, 4)
        chart_col.addWidget(self.history_canvas, 1)

        # RPM slider
        slider_row = QHBoxLayout()
        slider_row.addWidget(QLabel("RPM"))
        self.rpm_slider = QSlider(QtCore.Qt.Horizontal)
        self.rpm_slider.setRange(int(MIN_RPM), int(MAX_RPM))
        self.rpm_slider.setSingleStep(RPM_STEP)
        self.rpm_slider.setPageStep(10 * RPM_STEP)
        self.rpm_slider.setValue(int(round(self.simulation.current_rpm)))
        slider_row.addWidget(self.rpm_slider)
        chart_col.addLayout(slider_row)

        return chart_col

    def _build_control_column(self):
        """Build right column: readouts + simulation controls."""
        control_col = QVBoxLayout()
        control_col.setSpacing(10)

        readout_group = QGroupBox("Operating Point")
        readout_layout = QVBoxLayout()
        readout_layout.setSpacing(2)
        readout_group.setLayout(readout_layout)

        self.rpm_label = QLabel("RPM: --")
        self.fuel_label = QLabel(f"Fuel: -- {FLOW_UNIT}")
        self.median_label = QLabel(f"Median: -- {FLOW_UNIT}")
        self.mode_label = QLabel("NORMAL")
        self.mode_label.setStyleSheet(mode_badge_style(False))

        readout_layout.addWidget(self.rpm_label)
        readout_layout.addWidget(self.fuel_label)
        readout_layout.addWidget(self.median_label)
        readout_layout.addWidget(self.mode_label)

        sim_group = QGroupBox("Simulation")
        sim_layout = QVBoxLayout()
        sim_group.setLayout(sim_layout)

        self.feed_button = QPushButton("Simulate")
        self.feed_button.setCheckable(True)
        self.feed_button.setEnabled(self.feed is not None)
        self.regenerate_button = QPushButton("Regenerate Data")
        self.status_label = QLabel("Status: manual")

        sim_layout.addWidget(self.feed_button)
        sim_layout.addWidget(self.regenerate_button)
        sim_layout.addWidget(self.status_label)

        control_col.addWidget(readout_group)
        control_col.addWidget(sim_group)
        control_col.addStretch()

        return control_col

    def _connect_signals(self):
        self.rpm_slider.valueChanged.connect(self.handle_slider_moved)
        self.regenerate_button.clicked.connect(self.simulation.generate_sample_data)

        self.simulation.data_changed.connect(self.handle_data_changed)
        self.simulation.current_rpm_changed.connect(self.handle_rpm_changed)
        self.simulation.current_fuel_flow_changed.connect(self.handle_fuel_flow_reading)
        self.simulation.state_changed.connect(self.handle_operating_point_changed)

        if self.feed is not None:
            self.feed_button.toggled.connect(self.handle_feed_toggled)
            self.feed.rpm_update.connect(self.simulation.set_current_rpm)
            self.feed.status_update.connect(lambda msg: self.status_label.setText(f"Status: {msg}"))

    # ==========================================================================
    # Slots
    # ==========================================================================

    def handle_slider_moved(self, value: int):
        self.simulation.set_current_rpm(float(value))

    def handle_feed_toggled(self, checked: bool):
        if checked:
            self.feed.start()
        else:
            self.feed.stop()

    def handle_data_changed(self):
        logger.debug(f"Redrawing chart with {len(self.simulation.samples)} samples")
        self.chart_canvas.set_samples(self.simulation.samples)
        self.history.clear()
        self.handle_operating_point_changed()

    def handle_rpm_changed(self, rpm: float):
        # Follow the feed without echoing the value back into the simulation
        self.rpm_slider.blockSignals(True)
        self.rpm_slider.setValue(int(round(rpm)))
        self.rpm_slider.blockSignals(False)

    def handle_operating_point_changed(self):
        """Refresh the marker and readouts from the simulation state."""
        sim = self.simulation
        rpm, flow, eco = sim.current_rpm, sim.current_fuel_flow, sim.is_eco_mode

        self.chart_canvas.set_operating_point(rpm, flow, eco)

        self.rpm_label.setText(f"RPM: {rpm:,.0f}")
        self.fuel_label.setText(f"Fuel: {flow:.1f} {FLOW_UNIT}")
        self.median_label.setText(f"Median: {sim.median_at_current_rpm:.1f} {FLOW_UNIT}")
        self.mode_label.setText("ECO MODE" if eco else "NORMAL")
        self.mode_label.setStyleSheet(mode_badge_style(eco))

    def handle_fuel_flow_reading(self, fuel_flow: float):
        sim = self.simulation
        self.history.add(time.monotonic(), sim.current_rpm, fuel_flow, sim.is_eco_mode)
        t, _rpm, flows, ecos = self.history.arrays()
        self.history_canvas.update_history(t, flows, ecos)

    def closeEvent(self, event):
        if self.feed is not None and self.feed.running:
            self.feed.stop()
        super().closeEvent(event)
