"""Aircraft gates.

A gate has facilities for exactly one parked aircraft. It only records who
is parked there; the aircraft's lifecycle belongs to the control tower.

Typical usage:
    from towersim.ground import Gate

    gate = Gate(4)
    gate.park(aircraft)
    gate.release()
"""

import logging
from typing import TYPE_CHECKING

from towersim.core.exceptions import GateOccupiedError

if TYPE_CHECKING:
    from towersim.aircraft.aircraft import Aircraft

logger = logging.getLogger(__name__)


class Gate:
    """A gate where a single aircraft can park.

    Attributes:
        gate_number: Identifying number, assigned by the caller

    Examples:
        >>> gate = Gate(1)
        >>> gate.is_occupied()
        False
        >>> str(gate)
        'Gate 1 [empty]'
    """

    def __init__(self, gate_number: int) -> None:
        """Initialize an empty gate.

        Args:
            gate_number: Identifying number of this gate.
        """
        self.gate_number = gate_number
        self._occupant: "Aircraft | None" = None

    def park(self, aircraft: "Aircraft") -> None:
        """Park an aircraft at this gate.

        Args:
            aircraft: Aircraft to park.

        Raises:
            GateOccupiedError: If another aircraft is already parked here.
        """
        if self._occupant is not None:
            raise GateOccupiedError(
                f"Gate {self.gate_number} is occupied by {self._occupant.callsign}"
            )

        self._occupant = aircraft
        logger.info("%s parked at gate %d", aircraft.callsign, self.gate_number)

    def release(self) -> None:
        """Clear the gate. Does nothing if it is already empty."""
        if self._occupant is not None:
            logger.info("%s left gate %d", self._occupant.callsign, self.gate_number)
        self._occupant = None

    def is_occupied(self) -> bool:
        """Check whether an aircraft is parked here."""
        return self._occupant is not None

    def occupant(self) -> "Aircraft | None":
        """Get the parked aircraft, or None if the gate is empty."""
        return self._occupant

    def __str__(self) -> str:
        if self._occupant is None:
            return f"Gate {self.gate_number} [empty]"
        return f"Gate {self.gate_number} [{self._occupant.callsign}]"

    def __repr__(self) -> str:
        return f"Gate({self.gate_number})"
