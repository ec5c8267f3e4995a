"""Airport control tower.

The control tower owns every aircraft and terminal under its jurisdiction.
It admits aircraft, parking those that arrive at a gate, searches terminals
for free gates, and drives simulated time forward.

Typical usage:
    from towersim.control import ControlTower

    tower = ControlTower()
    tower.add_terminal(terminal)
    tower.add_aircraft(aircraft)
    tower.tick()
"""

import logging

from towersim.aircraft.aircraft import Aircraft
from towersim.core.exceptions import NoSuitableGateError
from towersim.core.status import Tickable
from towersim.ground.gate import Gate
from towersim.ground.terminal import Terminal

logger = logging.getLogger(__name__)


class ControlTower(Tickable):
    """Control tower managing arrivals, departures and gate allocation.

    Examples:
        >>> tower = ControlTower()
        >>> tower.add_terminal(Terminal(1, TerminalCategory.AIRPLANE))
        >>> tower.terminals()[0].terminal_number
        1
    """

    def __init__(self) -> None:
        """Initialize a tower with no aircraft and no terminals."""
        self._aircraft: list[Aircraft] = []
        self._terminals: list[Terminal] = []

    def add_terminal(self, terminal: Terminal) -> None:
        """Add a terminal to this tower's jurisdiction.

        Terminals are searched for gates in the order they were added.

        Args:
            terminal: Terminal to add.
        """
        self._terminals.append(terminal)
        logger.info("Terminal added: %s", terminal)

    def terminals(self) -> list[Terminal]:
        """Get all terminals in registration order.

        Returns:
            Copy of the terminal list.
        """
        return list(self._terminals)

    def add_aircraft(self, aircraft: Aircraft) -> None:
        """Add an aircraft to this tower's jurisdiction.

        Aircraft whose current task is WAIT or LOAD are at a gate, so they
        are parked at a suitable gate before being admitted. If no gate can
        be found the aircraft is not admitted and nothing changes.

        Args:
            aircraft: Aircraft to admit.

        Raises:
            NoSuitableGateError: If an aircraft that needs a gate cannot get one.
        """
        task_type = aircraft.task_list.current_task().type

        if task_type.at_gate:
            try:
                gate = self.find_unoccupied_gate(aircraft)
            except NoSuitableGateError:
                logger.warning(
                    "Refused %s: no suitable gate for %s", aircraft.callsign, task_type.name
                )
                raise
            gate.park(aircraft)

        self._aircraft.append(aircraft)
        logger.info("Aircraft admitted: %s", aircraft)

    def aircraft(self) -> list[Aircraft]:
        """Get all aircraft in jurisdiction order.

        Returns:
            Copy of the aircraft list.
        """
        return list(self._aircraft)

    def find_unoccupied_gate(self, aircraft: Aircraft) -> Gate:
        """Find an unoccupied gate in a terminal compatible with an aircraft.

        Terminals are tried in registration order, skipping those built for
        a different aircraft type; the first free gate of the first terminal
        that has one is returned.

        Args:
            aircraft: Aircraft needing a gate.

        Returns:
            Unoccupied gate in a compatible terminal.

        Raises:
            NoSuitableGateError: If no compatible terminal has a free gate.
        """
        for terminal in self._terminals:
            if not terminal.accepts(aircraft):
                continue
            try:
                return terminal.find_unoccupied_gate()
            except NoSuitableGateError:
                logger.debug(
                    "Terminal %d full, searching on for %s",
                    terminal.terminal_number,
                    aircraft.callsign,
                )

        raise NoSuitableGateError(
            f"No suitable gate for {aircraft.callsign} "
            f"({aircraft.characteristics.type.name.lower()})"
        )

    def find_gate_of_aircraft(self, aircraft: Aircraft) -> Gate | None:
        """Find the gate where an aircraft is parked.

        Args:
            aircraft: Aircraft to look for, matched by identity.

        Returns:
            Gate the aircraft occupies, or None if it is not parked.
        """
        for terminal in self._terminals:
            for gate in terminal.gates():
                if gate.occupant() is aircraft:
                    return gate
        return None

    def tick(self) -> None:
        """Advance every aircraft in jurisdiction by one tick."""
        for aircraft in self.aircraft():
            aircraft.tick()
