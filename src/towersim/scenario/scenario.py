"""Programmatic construction of populated control towers.

Typical usage:
    from towersim.scenario import ScenarioBuilder
    from towersim.ground import TerminalCategory

    tower = ScenarioBuilder() \\
        .with_terminal(TerminalCategory.AIRPLANE, 1, gates=3) \\
        .with_terminal(TerminalCategory.HELICOPTER, 2, gates=2) \\
        .with_aircraft(aircraft) \\
        .build()
"""

import logging
from dataclasses import dataclass

from towersim.aircraft.aircraft import Aircraft
from towersim.control.tower import ControlTower
from towersim.core.exceptions import ValidationError
from towersim.ground.gate import Gate
from towersim.ground.terminal import MAX_NUM_GATES, Terminal, TerminalCategory

logger = logging.getLogger(__name__)


@dataclass
class TerminalSpec:
    """Terminal waiting to be built.

    Attributes:
        category: Kind of aircraft the terminal accepts
        terminal_number: Identifying number
        gate_count: Number of gates to create
    """

    category: TerminalCategory
    terminal_number: int
    gate_count: int


class ScenarioBuilder:
    """Builder for a control tower with terminals, gates and aircraft.

    Gate numbers are assigned sequentially from 1 across all terminals in
    the order the terminals were added. On build(), terminals are registered
    first, then aircraft are admitted in the order they were added.

    Examples:
        >>> tower = ScenarioBuilder() \\
        ...     .with_terminal(TerminalCategory.AIRPLANE, 1, gates=2) \\
        ...     .build()
        >>> [str(g) for g in tower.terminals()[0].gates()]
        ['Gate 1 [empty]', 'Gate 2 [empty]']
    """

    def __init__(self) -> None:
        """Initialize an empty scenario."""
        self._terminals: list[TerminalSpec] = []
        self._aircraft: list[Aircraft] = []

    def with_terminal(
        self, category: TerminalCategory, terminal_number: int, gates: int = 0
    ) -> "ScenarioBuilder":
        """Add a terminal with a number of gates.

        Args:
            category: Kind of aircraft the terminal accepts.
            terminal_number: Identifying number.
            gates: Number of gates, 0 to MAX_NUM_GATES.

        Returns:
            Self for method chaining

        Raises:
            ValidationError: If gates is outside 0 to MAX_NUM_GATES.
        """
        if not 0 <= gates <= MAX_NUM_GATES:
            raise ValidationError(
                f"Terminal {terminal_number} gate count must be between 0 and "
                f"{MAX_NUM_GATES}, got {gates}"
            )
        self._terminals.append(TerminalSpec(category, terminal_number, gates))
        return self

    def with_aircraft(self, aircraft: Aircraft) -> "ScenarioBuilder":
        """Add an aircraft to be admitted to the tower.

        Args:
            aircraft: Aircraft to admit.

        Returns:
            Self for method chaining
        """
        self._aircraft.append(aircraft)
        return self

    def build(self) -> ControlTower:
        """Build the control tower.

        Returns:
            Tower with all terminals registered and all aircraft admitted.

        Raises:
            NoSuitableGateError: If an aircraft at a gate cannot be parked.
        """
        tower = ControlTower()
        next_gate_number = 1

        for spec in self._terminals:
            terminal = Terminal(spec.terminal_number, spec.category)
            for _ in range(spec.gate_count):
                terminal.add_gate(Gate(next_gate_number))
                next_gate_number += 1
            tower.add_terminal(terminal)

        for aircraft in self._aircraft:
            tower.add_aircraft(aircraft)

        logger.info(
            "Built scenario: %d terminals, %d gates, %d aircraft",
            len(self._terminals),
            next_gate_number - 1,
            len(self._aircraft),
        )
        return tower
