"""Aircraft models and per-tick aircraft state.

Typical usage:
    from towersim.aircraft import Aircraft, AircraftCharacteristics

    aircraft = Aircraft.freight("FDX12", AircraftCharacteristics.BOEING_747_8F, tasks, 11000.0)
"""

from towersim.aircraft.aircraft import Aircraft, AircraftCategory
from towersim.aircraft.characteristics import AircraftCharacteristics, AircraftType

__all__ = [
    "Aircraft",
    "AircraftCategory",
    "AircraftCharacteristics",
    "AircraftType",
]
