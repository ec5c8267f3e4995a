"""Aircraft under tower control and their per-tick fuel and payload kinetics.

An aircraft carries either passengers or freight. Which one is a tag on the
aircraft (AircraftCategory); the category decides payload capacity, how long
loading takes and how much the payload weighs, while fuel handling and the
tick skeleton are shared.

Typical usage:
    from towersim.aircraft import Aircraft, AircraftCharacteristics
    from towersim.tasks import Task, TaskList, TaskType

    tasks = TaskList([Task(TaskType.LOAD, 60), Task(TaskType.TAKEOFF)])
    aircraft = Aircraft.passenger(
        "QFA481", AircraftCharacteristics.AIRBUS_A320, tasks, fuel_amount=10000.0, passengers=0
    )
    aircraft.tick()  # refuels and boards for one tick
"""

import logging
import math
from enum import Enum

from towersim.aircraft.characteristics import AircraftCharacteristics
from towersim.core.exceptions import ValidationError
from towersim.core.status import (
    EmergencyState,
    OccupancyLevel,
    Tickable,
    percentage,
    round_half_up,
)
from towersim.tasks.task import TaskList, TaskType

logger = logging.getLogger(__name__)

LITRE_OF_FUEL_WEIGHT = 0.8  # kg per litre of aviation fuel
AVG_PASSENGER_WEIGHT = 90.0  # kg per passenger, baggage included
AWAY_FUEL_BURN_RATIO = 0.1  # fraction of fuel capacity burnt per AWAY tick


class AircraftCategory(Enum):
    """What an aircraft carries, and the payload rules that go with it."""

    PASSENGER = "passenger"
    FREIGHT = "freight"

    def capacity(self, characteristics: AircraftCharacteristics) -> int:
        """Get the payload capacity of a model for this category.

        Args:
            characteristics: Aircraft model.

        Returns:
            Passenger capacity (people) or freight capacity (kg).
        """
        if self == AircraftCategory.PASSENGER:
            return characteristics.passenger_capacity
        return characteristics.freight_capacity

    def loading_time(self, target_payload: int) -> int:
        """Get the number of ticks needed to load a target payload.

        Freight takes 1 tick below 1000 kg, 3 ticks above 50000 kg and 2
        otherwise. Passengers take round(log10(count)) ticks, never fewer
        than 1.

        Args:
            target_payload: Passengers or freight kg to be loaded.

        Returns:
            Loading time in ticks, at least 1.

        Examples:
            >>> AircraftCategory.FREIGHT.loading_time(89541)
            3
            >>> AircraftCategory.PASSENGER.loading_time(242)
            2
            >>> AircraftCategory.PASSENGER.loading_time(0)
            1
        """
        if self == AircraftCategory.FREIGHT:
            if target_payload < 1000:
                return 1
            if target_payload > 50000:
                return 3
            return 2

        if target_payload <= 0:
            return 1
        return max(1, round_half_up(math.log10(target_payload)))

    def payload_weight(self, payload: int) -> float:
        """Get the weight of a payload in kilograms."""
        if self == AircraftCategory.PASSENGER:
            return AVG_PASSENGER_WEIGHT * payload
        return float(payload)


class Aircraft(EmergencyState, OccupancyLevel, Tickable):
    """An aircraft whose movement is managed by the control tower.

    Fuel and payload only change through tick(), which reacts to the current
    task: AWAY burns a flat tenth of fuel capacity, LOAD refuels and loads
    payload towards the task's load percentage, everything else is idle.

    Attributes:
        callsign: Unique callsign (uniqueness is up to the caller)
        characteristics: Model characteristics, shared between aircraft
        category: Passenger or freight

    Examples:
        >>> tasks = TaskList([Task(TaskType.AWAY)])
        >>> aircraft = Aircraft.freight(
        ...     "FDX12", AircraftCharacteristics.BOEING_747_8F, tasks, 226117.0, 0
        ... )
        >>> aircraft.tick()
        >>> aircraft.fuel_percent_remaining()
        90
    """

    def __init__(
        self,
        callsign: str,
        characteristics: AircraftCharacteristics,
        tasks: TaskList,
        fuel_amount: float,
        category: AircraftCategory,
        payload: int = 0,
    ) -> None:
        """Initialize aircraft.

        Args:
            callsign: Unique callsign.
            characteristics: Model characteristics.
            tasks: Task list, owned by this aircraft from now on.
            fuel_amount: Fuel onboard in litres.
            category: Passenger or freight.
            payload: Passengers onboard, or freight onboard in kg.

        Raises:
            ValidationError: If fuel or payload is negative or above capacity.
        """
        if not 0 <= fuel_amount <= characteristics.fuel_capacity:
            raise ValidationError(
                f"Fuel amount for {callsign} must be between 0 and "
                f"{characteristics.fuel_capacity}, got {fuel_amount}"
            )

        capacity = category.capacity(characteristics)
        if not 0 <= payload <= capacity:
            raise ValidationError(
                f"{category.value.capitalize()} payload for {callsign} must be between 0 "
                f"and {capacity}, got {payload}"
            )

        self.callsign = callsign
        self.characteristics = characteristics
        self.category = category
        self._tasks = tasks
        self._fuel_amount = float(fuel_amount)
        self._payload = payload
        self._emergency = False

    @classmethod
    def passenger(
        cls,
        callsign: str,
        characteristics: AircraftCharacteristics,
        tasks: TaskList,
        fuel_amount: float,
        passengers: int = 0,
    ) -> "Aircraft":
        """Create an aircraft carrying passengers.

        Args:
            callsign: Unique callsign.
            characteristics: Model characteristics.
            tasks: Task list.
            fuel_amount: Fuel onboard in litres.
            passengers: Passengers onboard.

        Returns:
            Passenger aircraft.
        """
        return cls(
            callsign, characteristics, tasks, fuel_amount, AircraftCategory.PASSENGER, passengers
        )

    @classmethod
    def freight(
        cls,
        callsign: str,
        characteristics: AircraftCharacteristics,
        tasks: TaskList,
        fuel_amount: float,
        freight_amount: int = 0,
    ) -> "Aircraft":
        """Create an aircraft carrying freight.

        Args:
            callsign: Unique callsign.
            characteristics: Model characteristics.
            tasks: Task list.
            fuel_amount: Fuel onboard in litres.
            freight_amount: Freight onboard in kg.

        Returns:
            Freight aircraft.
        """
        return cls(
            callsign, characteristics, tasks, fuel_amount, AircraftCategory.FREIGHT, freight_amount
        )

    @property
    def task_list(self) -> TaskList:
        """The aircraft's task list."""
        return self._tasks

    @property
    def fuel_amount(self) -> float:
        """Fuel onboard in litres."""
        return self._fuel_amount

    @property
    def payload(self) -> int:
        """Passengers onboard, or freight onboard in kg."""
        return self._payload

    @property
    def payload_capacity(self) -> int:
        """Maximum payload for this aircraft's model and category."""
        return self.category.capacity(self.characteristics)

    def fuel_percent_remaining(self) -> int:
        """Get fuel remaining as a whole percentage of capacity, 0 to 100."""
        return percentage(self._fuel_amount, self.characteristics.fuel_capacity)

    def total_weight(self) -> float:
        """Get the current total weight in kilograms.

        Empty weight plus fuel weight plus payload weight.
        """
        return (
            self.characteristics.empty_weight
            + LITRE_OF_FUEL_WEIGHT * self._fuel_amount
            + self.category.payload_weight(self._payload)
        )

    def target_payload(self) -> int:
        """Get the payload the current task asks to have loaded.

        Recomputed from the current task on every call; 0 unless the task
        carries a load percentage.
        """
        load_ratio = self._tasks.current_task().load_percent / 100.0
        return round_half_up(self.payload_capacity * load_ratio)

    def loading_time(self) -> int:
        """Get the number of ticks needed to load at the gate."""
        return self.category.loading_time(self.target_payload())

    def occupancy_level(self) -> int:
        """Get payload onboard as a percentage of payload capacity."""
        return percentage(self._payload, self.payload_capacity)

    def tick(self) -> None:
        """Update fuel and payload for one tick of the current task."""
        task_type = self._tasks.current_task().type
        fuel_capacity = self.characteristics.fuel_capacity

        if task_type == TaskType.AWAY:
            self._fuel_amount -= AWAY_FUEL_BURN_RATIO * fuel_capacity
            if self._fuel_amount < 0:
                self._fuel_amount = 0.0

        elif task_type == TaskType.LOAD:
            loading_time = self.loading_time()
            self._fuel_amount = min(self._fuel_amount + fuel_capacity / loading_time, fuel_capacity)

            increment = round_half_up(self.target_payload() / loading_time)
            self._payload = min(self._payload + increment, self.payload_capacity)

        else:
            return

        logger.debug(
            "%s %s tick: fuel=%.1f (%d%%), payload=%d",
            self.callsign,
            task_type.name,
            self._fuel_amount,
            self.fuel_percent_remaining(),
            self._payload,
        )

    def declare_emergency(self) -> None:
        """Declare a state of emergency for this aircraft."""
        super().declare_emergency()
        logger.warning("Emergency declared by %s", self.callsign)

    def clear_emergency(self) -> None:
        """Clear this aircraft's state of emergency."""
        super().clear_emergency()
        logger.info("Emergency cleared for %s", self.callsign)

    def __str__(self) -> str:
        summary = (
            f"{self.characteristics.type.name} {self.callsign} "
            f"{self.characteristics} {self._tasks.current_task().type.name}"
        )
        if self.has_emergency():
            return f"{summary} (EMERGENCY)"
        return summary

    def __repr__(self) -> str:
        return f"Aircraft({self.callsign!r}, {self.characteristics.name}, {self.category.name})"
