"""Tests for the rolling fuel-flow history."""

import numpy as np
import pytest

from engine.flow_history import FlowHistory


class TestFlowHistory:
    def test_rejects_tiny_buffer(self):
        with pytest.raises(ValueError):
            FlowHistory(maxlen=1)

    def test_empty_arrays(self):
        t, rpm, flow, eco = FlowHistory().arrays()
        assert t.size == rpm.size == flow.size == eco.size == 0

    def test_bounded(self):
        history = FlowHistory(maxlen=5)
        for i in range(12):
            history.add(float(i), 1000.0 + i, 10.0 + i, i % 2 == 0)
        assert len(history) == 5
        t, rpm, flow, eco = history.arrays()
        np.testing.assert_array_equal(t, [0.0, 1.0, 2.0, 3.0, 4.0])
        np.testing.assert_array_equal(rpm, [1007.0, 1008.0, 1009.0, 1010.0, 1011.0])
        assert eco.dtype == bool

    def test_time_rebased(self):
        history = FlowHistory()
        history.add(100.0, 1500.0, 12.0, True)
        history.add(100.5, 1600.0, 13.0, False)
        t, _, flow, eco = history.arrays()
        np.testing.assert_allclose(t, [0.0, 0.5])
        np.testing.assert_array_equal(flow, [12.0, 13.0])
        np.testing.assert_array_equal(eco, [True, False])

    def test_clock_going_backwards_resets(self):
        history = FlowHistory()
        history.add(10.0, 1500.0, 12.0, True)
        history.add(11.0, 1500.0, 12.5, True)
        history.add(2.0, 1500.0, 11.0, False)
        assert len(history) == 1

    def test_clear(self):
        history = FlowHistory()
        history.add(0.0, 1500.0, 12.0, True)
        history.clear()
        assert len(history) == 0
