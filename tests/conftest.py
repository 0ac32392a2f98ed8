"""Shared test fixtures."""

import os

# Widgets are built without a display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import numpy as np
import pytest
from PyQt5 import QtWidgets

from engine.sample_table import generate_sample_table
from engine.simulation import EngineSimulation


@pytest.fixture(scope="session")
def qapp():
    app = QtWidgets.QApplication.instance()
    if app is None:
        app = QtWidgets.QApplication([])
    return app


@pytest.fixture
def rng():
    return np.random.default_rng(42)


@pytest.fixture
def table(rng):
    return generate_sample_table(rng)


@pytest.fixture
def simulation(rng):
    sim = EngineSimulation(rng=rng)
    sim.generate_sample_data()
    return sim


class SignalRecorder:
    """Collects emissions of Qt signals connected to it."""

    def __init__(self, *signals):
        self.calls = []
        for name, signal in signals:
            signal.connect(lambda *args, name=name: self.calls.append((name,) + args))

    def names(self):
        return [call[0] for call in self.calls]

    def clear(self):
        self.calls.clear()


@pytest.fixture
def recorder(simulation):
    return SignalRecorder(
        ("rpm", simulation.current_rpm_changed),
        ("flow", simulation.current_fuel_flow_changed),
        ("eco", simulation.eco_mode_changed),
        ("data", simulation.data_changed),
        ("state", simulation.state_changed),
    )
