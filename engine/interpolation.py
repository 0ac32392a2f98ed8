"""
Fuel-flow lookup at arbitrary RPM.

Binary search for the bracketing samples followed by linear interpolation.
Queries outside the table clamp to the nearest boundary sample.
"""
import numpy as np

from engine.sample_table import SampleTable


def interpolate_series(table: SampleTable, rpm: float, series: str = "median_flow") -> float:
    """
    Linearly interpolate one series of the table at the given rpm.

    Args:
        table: Generated sample table
        rpm: Query rpm (any value; clamped to the table's range)
        series: Field name, e.g. "median_flow", "min_flow", "max_flow"

    Returns:
        Interpolated value, or 0.0 for an empty table
    """
    if table.is_empty:
        return 0.0

    rpms = table.rpm
    values = table.series(series)

    # First sample with rpm >= query
    idx = int(np.searchsorted(rpms, rpm, side="left"))

    if idx == 0:
        return float(values[0])
    if idx == len(rpms):
        return float(values[-1])

    # Lower bound gives rpm_lo < rpm <= rpm_hi, so the span is never zero
    rpm_lo, rpm_hi = rpms[idx - 1], rpms[idx]
    if rpm_hi == rpm:
        return float(values[idx])

    ratio = (rpm - rpm_lo) / (rpm_hi - rpm_lo)
    return float(values[idx - 1] + ratio * (values[idx] - values[idx - 1]))


def flow_at(table: SampleTable, rpm: float, use_median: bool = False) -> float:
    """
    Fuel flow at rpm.

    Both modes read the median series. use_median only tells the caller's
    intent apart: the "current" flow is the median curve, and live noise is
    added on top of it by EngineSimulation.
    """
    return interpolate_series(table, rpm, "median_flow")
