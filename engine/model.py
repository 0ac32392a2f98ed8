# engine/model.py
from dataclasses import dataclass


@dataclass(frozen=True)
class Sample:
    rpm: float           # engine speed
    min_flow: float      # L/h, low edge of the observed band
    max_flow: float      # L/h, high edge of the observed band
    median_flow: float   # L/h, typical consumption at this rpm
    current_flow: float  # L/h, base curve value before variation

    def to_dict(self) -> dict:
        """Mapping view keyed by the original model role names."""
        return {
            "rpm": self.rpm,
            "minFuelFlow": self.min_flow,
            "maxFuelFlow": self.max_flow,
            "medianFuelFlow": self.median_flow,
            "currentFuelFlow": self.current_flow,
        }


@dataclass(frozen=True)
class FlowReading:
    t: float             # seconds (monotonic clock)
    rpm: float
    fuel_flow: float     # L/h
    eco: bool
