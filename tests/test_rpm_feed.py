"""Tests for the simulated RPM feed."""

import numpy as np
import pytest

from engine.config import MAX_RPM, MIN_RPM
from engine.rpm_feed import SWEEP_HIGH_RPM, SWEEP_LOW_RPM, SWEEP_PERIOD_TICKS, SimulatedRpmFeed
from engine.simulation import EngineSimulation


class TestSimulatedRpmFeed:
    def test_unknown_mode_rejected(self):
        with pytest.raises(ValueError):
            SimulatedRpmFeed(mode="replay")

    def test_sweep_covers_range(self):
        feed = SimulatedRpmFeed(mode="sweep")
        values = [feed.step() for _ in range(SWEEP_PERIOD_TICKS)]
        assert min(values) == pytest.approx(SWEEP_LOW_RPM, abs=1.0)
        assert max(values) == pytest.approx(SWEEP_HIGH_RPM, abs=1.0)

    def test_walk_stays_in_domain(self):
        feed = SimulatedRpmFeed(mode="walk", start_rpm=100.0, rng=np.random.default_rng(3))
        values = [feed.step() for _ in range(2000)]
        assert all(MIN_RPM <= v <= MAX_RPM for v in values)

    def test_nan_start_rpm(self):
        feed = SimulatedRpmFeed(mode="walk", start_rpm=float("nan"))
        assert feed.rpm == 1500.0

    def test_walk_deterministic_with_seed(self):
        a = SimulatedRpmFeed(mode="walk", rng=np.random.default_rng(11))
        b = SimulatedRpmFeed(mode="walk", rng=np.random.default_rng(11))
        assert [a.step() for _ in range(20)] == [b.step() for _ in range(20)]

    def test_step_emits(self):
        feed = SimulatedRpmFeed(mode="sweep")
        received = []
        feed.rpm_update.connect(received.append)
        value = feed.step()
        assert received == [value]

    def test_drives_simulation(self):
        sim = EngineSimulation(rng=np.random.default_rng(1))
        sim.generate_sample_data()
        feed = SimulatedRpmFeed(mode="sweep")
        feed.rpm_update.connect(sim.set_current_rpm)
        value = feed.step()
        assert sim.current_rpm == value

    def test_start_stop(self, qapp):
        feed = SimulatedRpmFeed(mode="sweep", interval_ms=50)
        status = []
        feed.status_update.connect(status.append)
        feed.start()
        assert feed.running
        feed.stop()
        assert not feed.running
        assert status == ["Feed running: sweep", "Feed stopped"]
