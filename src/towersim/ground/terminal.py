"""Airport terminals and their gates.

A terminal holds up to six gates and serves a single kind of aircraft:
airplane terminals only take airplanes, helicopter terminals only take
helicopters.

Typical usage:
    from towersim.ground import Gate, Terminal, TerminalCategory

    terminal = Terminal(1, TerminalCategory.AIRPLANE)
    terminal.add_gate(Gate(1))
    gate = terminal.find_unoccupied_gate()
"""

import logging
from enum import Enum
from typing import TYPE_CHECKING

from towersim.aircraft.characteristics import AircraftType
from towersim.core.exceptions import NoSuitableGateError, TerminalFullError
from towersim.core.status import EmergencyState, OccupancyLevel, percentage
from towersim.ground.gate import Gate

if TYPE_CHECKING:
    from towersim.aircraft.aircraft import Aircraft

logger = logging.getLogger(__name__)

MAX_NUM_GATES = 6


class TerminalCategory(Enum):
    """Kind of aircraft a terminal is built for.

    The value of each member is the aircraft type it accepts.
    """

    AIRPLANE = AircraftType.AIRPLANE
    HELICOPTER = AircraftType.HELICOPTER

    @property
    def label(self) -> str:
        """Display name of the terminal kind, e.g. "AirplaneTerminal"."""
        return f"{self.name.capitalize()}Terminal"


class Terminal(EmergencyState, OccupancyLevel):
    """An airport terminal building containing up to six gates.

    Attributes:
        terminal_number: Identifying number of this terminal
        category: Kind of aircraft this terminal accepts

    Examples:
        >>> terminal = Terminal(2, TerminalCategory.HELICOPTER)
        >>> terminal.add_gate(Gate(7))
        >>> str(terminal)
        'HelicopterTerminal 2, 1 gates'
    """

    def __init__(self, terminal_number: int, category: TerminalCategory) -> None:
        """Initialize a terminal with no gates.

        Args:
            terminal_number: Identifying number of this terminal.
            category: Kind of aircraft this terminal accepts.
        """
        self.terminal_number = terminal_number
        self.category = category
        self._gates: list[Gate] = []
        self._emergency = False

    def add_gate(self, gate: Gate) -> None:
        """Add a gate to this terminal.

        Args:
            gate: Gate to add.

        Raises:
            TerminalFullError: If the terminal already has MAX_NUM_GATES gates.
        """
        if len(self._gates) >= MAX_NUM_GATES:
            raise TerminalFullError(
                f"Terminal {self.terminal_number} already has {MAX_NUM_GATES} gates"
            )

        self._gates.append(gate)
        logger.debug("Added gate %d to terminal %d", gate.gate_number, self.terminal_number)

    def gates(self) -> list[Gate]:
        """Get all gates in insertion order.

        Returns:
            Copy of the gate list.
        """
        return list(self._gates)

    def accepts(self, aircraft: "Aircraft") -> bool:
        """Check whether this terminal can serve an aircraft's type."""
        return self.category.value == aircraft.characteristics.type

    def find_unoccupied_gate(self) -> Gate:
        """Find the first unoccupied gate, in insertion order.

        Returns:
            First gate with no aircraft parked.

        Raises:
            NoSuitableGateError: If every gate is occupied or there are none.
        """
        for gate in self._gates:
            if not gate.is_occupied():
                return gate

        raise NoSuitableGateError(f"No unoccupied gate in terminal {self.terminal_number}")

    def occupancy_level(self) -> int:
        """Get occupied gates as a percentage of all gates, 0 with no gates."""
        occupied = sum(1 for gate in self._gates if gate.is_occupied())
        return percentage(occupied, len(self._gates))

    def declare_emergency(self) -> None:
        """Declare a state of emergency for this terminal."""
        super().declare_emergency()
        logger.warning("Emergency declared at terminal %d", self.terminal_number)

    def clear_emergency(self) -> None:
        """Clear this terminal's state of emergency."""
        super().clear_emergency()
        logger.info("Emergency cleared at terminal %d", self.terminal_number)

    def __str__(self) -> str:
        summary = f"{self.category.label} {self.terminal_number}, {len(self._gates)} gates"
        if self.has_emergency():
            return f"{summary} (EMERGENCY)"
        return summary

    def __repr__(self) -> str:
        return f"Terminal({self.terminal_number}, {self.category.name})"
