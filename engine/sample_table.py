"""
Synthetic fuel-flow table generation.

Produces one Sample every RPM_STEP from MIN_RPM to MAX_RPM. Each sample
carries a base consumption curve plus a randomized min/max band and a
median placed somewhere inside that band.
"""
import logging
from typing import Iterator, List, Optional, Sequence

import numpy as np

from engine.config import FLOW_SAFETY_CEILING, MAX_RPM, MIN_RPM, RPM_STEP
from engine.model import Sample

logger = logging.getLogger(__name__)

# Base curve: offset + linear * norm + quadratic * norm^2, norm = rpm / MAX_RPM
BASE_OFFSET = 0.5
BASE_LINEAR = 28.0
BASE_QUADRATIC = 4.0

# Relative jitter applied to the base value before the band is derived
BASE_JITTER = 0.03

# Band spreads as fractions of the jittered base: fixed + growth * norm + U(0, random)
LOWER_SPREAD_FIXED = 0.08
LOWER_SPREAD_GROWTH = 0.07
LOWER_SPREAD_RANDOM = 0.05
UPPER_SPREAD_FIXED = 0.10
UPPER_SPREAD_GROWTH = 0.10
UPPER_SPREAD_RANDOM = 0.05
MIN_SPREAD_GAP = 0.02         # upper spread always exceeds lower by at least this

# Efficiency bands
SWEET_SPOT_RPM = (2000.0, 3500.0)
SWEET_SPOT_TIGHTENING = 0.5   # lower spread multiplier inside the sweet spot
HIGH_RPM_START = 4500.0
HIGH_RPM_PENALTY_FIXED = 0.05
HIGH_RPM_PENALTY_GROWTH = 0.05

# Median sits at a random fraction of the band
MEDIAN_POSITION = (0.3, 0.7)

SERIES = ("rpm", "min_flow", "max_flow", "median_flow", "current_flow")


class SampleTable:
    """
    Immutable, rpm-ordered sequence of samples.

    Besides plain sequence access, every field is available as a numpy
    array (table.rpm, table.median_flow, ...) for drawing and searching.
    """

    def __init__(self, samples: Sequence[Sample] = ()):
        self._samples = tuple(samples)
        for name in SERIES:
            values = np.array([getattr(s, name) for s in self._samples], dtype=float)
            values.setflags(write=False)
            setattr(self, name, values)

    def __len__(self) -> int:
        return len(self._samples)

    def __iter__(self) -> Iterator[Sample]:
        return iter(self._samples)

    def __getitem__(self, index: int) -> Sample:
        return self._samples[index]

    @property
    def is_empty(self) -> bool:
        return not self._samples

    def series(self, name: str) -> np.ndarray:
        if name not in SERIES:
            raise KeyError(f"Unknown series '{name}'. Use one of {SERIES}.")
        return getattr(self, name)

    def to_dicts(self) -> List[dict]:
        return [s.to_dict() for s in self._samples]


def base_flow(rpm: float) -> float:
    """Smooth, monotonically increasing consumption curve."""
    norm = rpm / MAX_RPM
    return BASE_OFFSET + BASE_LINEAR * norm + BASE_QUADRATIC * norm ** 2


def peak_flow_bound() -> float:
    """
    Largest max_flow the generator can produce before clamping.

    Combines the base curve at MAX_RPM, the full positive jitter, the widest
    possible upper spread and the full high-RPM penalty.
    """
    max_lower = LOWER_SPREAD_FIXED + LOWER_SPREAD_GROWTH + LOWER_SPREAD_RANDOM
    max_upper = max(
        UPPER_SPREAD_FIXED + UPPER_SPREAD_GROWTH + UPPER_SPREAD_RANDOM,
        max_lower + MIN_SPREAD_GAP,
    )
    max_upper += HIGH_RPM_PENALTY_FIXED + HIGH_RPM_PENALTY_GROWTH
    return base_flow(MAX_RPM) * (1.0 + BASE_JITTER) * (1.0 + max_upper)


def _make_sample(rpm: float, rng: np.random.Generator) -> Sample:
    norm = rpm / MAX_RPM
    base = base_flow(rpm)
    jittered = base * (1.0 + rng.uniform(-BASE_JITTER, BASE_JITTER))

    lower = LOWER_SPREAD_FIXED + LOWER_SPREAD_GROWTH * norm + rng.uniform(0.0, LOWER_SPREAD_RANDOM)
    upper = UPPER_SPREAD_FIXED + UPPER_SPREAD_GROWTH * norm + rng.uniform(0.0, UPPER_SPREAD_RANDOM)
    if upper < lower + MIN_SPREAD_GAP:
        upper = lower + MIN_SPREAD_GAP

    # Better efficiency: the low end of the band comes up
    if SWEET_SPOT_RPM[0] <= rpm <= SWEET_SPOT_RPM[1]:
        lower *= SWEET_SPOT_TIGHTENING

    # Worse efficiency: the high end of the band opens up
    if rpm >= HIGH_RPM_START:
        high_norm = (rpm - HIGH_RPM_START) / (MAX_RPM - HIGH_RPM_START)
        upper += HIGH_RPM_PENALTY_FIXED + HIGH_RPM_PENALTY_GROWTH * high_norm

    min_flow = max(0.0, jittered * (1.0 - lower))
    max_flow = min(FLOW_SAFETY_CEILING, jittered * (1.0 + upper))

    position = rng.uniform(*MEDIAN_POSITION)
    median_flow = min_flow + (max_flow - min_flow) * position

    return Sample(
        rpm=float(rpm),
        min_flow=min_flow,
        max_flow=max_flow,
        median_flow=median_flow,
        current_flow=base,
    )


def generate_sample_table(rng: Optional[np.random.Generator] = None) -> SampleTable:
    """
    Build the full RPM table.

    Args:
        rng: Random generator; a fresh unseeded one is used when omitted.

    Returns:
        SampleTable with one sample every RPM_STEP over [MIN_RPM, MAX_RPM].
    """
    if rng is None:
        rng = np.random.default_rng()

    rpms = range(int(MIN_RPM), int(MAX_RPM) + 1, RPM_STEP)
    table = SampleTable([_make_sample(rpm, rng) for rpm in rpms])

    logger.info(
        f"Generated {len(table)} samples, max flow {table.max_flow.max():.1f} L/h "
        f"(analytic bound {peak_flow_bound():.1f} L/h)"
    )
    return table
