"""Aircraft types and per-model characteristics.

Typical usage:
    from towersim.aircraft.characteristics import AircraftCharacteristics

    a320 = AircraftCharacteristics.AIRBUS_A320
    print(a320.fuel_capacity)  # 27200.0
"""

from enum import Enum


class AircraftType(Enum):
    """Broad kinds of aircraft, used to match aircraft to terminals."""

    AIRPLANE = "airplane"  # Powered aircraft with a fixed wing
    HELICOPTER = "helicopter"  # Lift from spinning rotors


class AircraftCharacteristics(Enum):
    """Constant characteristics of particular aircraft models.

    Attributes:
        type: Kind of aircraft
        empty_weight: Weight with no load or fuel (kg)
        fuel_capacity: Maximum fuel carried (litres)
        passenger_capacity: Maximum number of passengers
        freight_capacity: Maximum freight carried (kg)

    Examples:
        >>> AircraftCharacteristics.BOEING_747_8F.freight_capacity
        137756
        >>> AircraftCharacteristics.ROBINSON_R44.type
        <AircraftType.HELICOPTER: 'helicopter'>
    """

    AIRBUS_A320 = (AircraftType.AIRPLANE, 42600, 27200.0, 150, 0)  # Narrow-body twin-jet
    BOEING_747_8F = (AircraftType.AIRPLANE, 197131, 226117.0, 0, 137756)  # Quad-jet freighter
    ROBINSON_R44 = (AircraftType.HELICOPTER, 658, 190.0, 4, 0)  # Four-seat light helicopter
    BOEING_787 = (AircraftType.AIRPLANE, 119950, 126206.0, 242, 0)  # Long-range wide-body
    FOKKER_100 = (AircraftType.AIRPLANE, 24375, 13365.0, 97, 0)  # Regional twin-jet
    SIKORSKY_SKYCRANE = (AircraftType.HELICOPTER, 8724, 3328.0, 0, 9100)  # Heavy-lift helicopter

    def __init__(
        self,
        aircraft_type: AircraftType,
        empty_weight: int,
        fuel_capacity: float,
        passenger_capacity: int,
        freight_capacity: int,
    ) -> None:
        self.type = aircraft_type
        self.empty_weight = empty_weight
        self.fuel_capacity = fuel_capacity
        self.passenger_capacity = passenger_capacity
        self.freight_capacity = freight_capacity

    def __str__(self) -> str:
        return self.name
