"""Tests for terminals."""

import pytest

from towersim.aircraft import Aircraft
from towersim.core.exceptions import NoSpaceError, NoSuitableGateError, TerminalFullError
from towersim.ground import MAX_NUM_GATES, Gate, Terminal, TerminalCategory


class TestTerminalCategory:
    """Test TerminalCategory enum."""

    def test_labels(self) -> None:
        """Test display labels."""
        assert TerminalCategory.AIRPLANE.label == "AirplaneTerminal"
        assert TerminalCategory.HELICOPTER.label == "HelicopterTerminal"


class TestTerminalGates:
    """Test adding and searching gates."""

    def test_new_terminal(self) -> None:
        """Test a new terminal has no gates."""
        terminal = Terminal(1, TerminalCategory.AIRPLANE)
        assert terminal.terminal_number == 1
        assert terminal.category == TerminalCategory.AIRPLANE
        assert terminal.gates() == []

    def test_add_gate_keeps_order(self, airplane_terminal: Terminal) -> None:
        """Test gates are kept in insertion order."""
        assert [g.gate_number for g in airplane_terminal.gates()] == [1, 2, 3]

    def test_gates_returns_copy(self, airplane_terminal: Terminal) -> None:
        """Test modifying the returned list does not change the terminal."""
        airplane_terminal.gates().clear()
        assert len(airplane_terminal.gates()) == 3

    @pytest.mark.parametrize("numbers", [[1, 2, 3, 4, 5, 6], [60, 5, 41, 2, 33, 1]])
    def test_seventh_gate_rejected(self, numbers: list[int]) -> None:
        """Test six gates fit and the seventh fails whatever the gate numbers."""
        terminal = Terminal(1, TerminalCategory.HELICOPTER)
        for number in numbers:
            terminal.add_gate(Gate(number))
        assert len(terminal.gates()) == MAX_NUM_GATES

        with pytest.raises(TerminalFullError):
            terminal.add_gate(Gate(7))

        assert len(terminal.gates()) == MAX_NUM_GATES

    def test_full_terminal_is_no_space(self) -> None:
        """Test a full terminal reports a lack of space."""
        terminal = Terminal(1, TerminalCategory.AIRPLANE)
        for number in range(MAX_NUM_GATES):
            terminal.add_gate(Gate(number))
        with pytest.raises(NoSpaceError):
            terminal.add_gate(Gate(99))

    def test_find_first_unoccupied(
        self, airplane_terminal: Terminal, passenger_jet: Aircraft
    ) -> None:
        """Test the first free gate in insertion order is found."""
        assert airplane_terminal.find_unoccupied_gate().gate_number == 1

        airplane_terminal.gates()[0].park(passenger_jet)
        assert airplane_terminal.find_unoccupied_gate().gate_number == 2

    def test_find_unoccupied_skips_middle(self, passenger_jet: Aircraft) -> None:
        """Test search follows insertion order, not gate numbers."""
        terminal = Terminal(5, TerminalCategory.AIRPLANE)
        for number in (9, 4, 7):
            terminal.add_gate(Gate(number))
        terminal.gates()[0].park(passenger_jet)
        assert terminal.find_unoccupied_gate().gate_number == 4

    def test_find_unoccupied_all_full(
        self, helicopter_terminal: Terminal, waiting_helicopter: Aircraft, passenger_jet: Aircraft
    ) -> None:
        """Test a terminal with every gate occupied has no suitable gate."""
        helicopter_terminal.gates()[0].park(waiting_helicopter)
        helicopter_terminal.gates()[1].park(passenger_jet)
        with pytest.raises(NoSuitableGateError):
            helicopter_terminal.find_unoccupied_gate()

    def test_find_unoccupied_no_gates(self) -> None:
        """Test a terminal without gates has no suitable gate."""
        with pytest.raises(NoSuitableGateError):
            Terminal(3, TerminalCategory.AIRPLANE).find_unoccupied_gate()

    def test_accepts_matching_type(
        self,
        airplane_terminal: Terminal,
        helicopter_terminal: Terminal,
        passenger_jet: Aircraft,
        waiting_helicopter: Aircraft,
    ) -> None:
        """Test terminals only accept their own kind of aircraft."""
        assert airplane_terminal.accepts(passenger_jet)
        assert not airplane_terminal.accepts(waiting_helicopter)
        assert helicopter_terminal.accepts(waiting_helicopter)
        assert not helicopter_terminal.accepts(passenger_jet)


class TestTerminalOccupancy:
    """Test terminal occupancy level."""

    def test_empty_terminal(self, airplane_terminal: Terminal) -> None:
        """Test no occupied gates gives 0."""
        assert airplane_terminal.occupancy_level() == 0

    def test_two_of_three(
        self, airplane_terminal: Terminal, passenger_jet: Aircraft, loading_freighter: Aircraft
    ) -> None:
        """Test two of three gates occupied rounds to 67."""
        gates = airplane_terminal.gates()
        gates[0].park(passenger_jet)
        gates[2].park(loading_freighter)
        assert airplane_terminal.occupancy_level() == 67

    def test_no_gates(self) -> None:
        """Test a terminal without gates reports 0 instead of dividing by zero."""
        assert Terminal(4, TerminalCategory.HELICOPTER).occupancy_level() == 0

    def test_one_of_six(self, passenger_jet: Aircraft) -> None:
        """Test one of six gates occupied rounds to 17."""
        terminal = Terminal(8, TerminalCategory.AIRPLANE)
        for number in range(6):
            terminal.add_gate(Gate(number))
        terminal.gates()[0].park(passenger_jet)
        assert terminal.occupancy_level() == 17


class TestTerminalEmergency:
    """Test terminal emergency state and summary."""

    def test_str(self, airplane_terminal: Terminal) -> None:
        """Test summary lists category, number and gate count."""
        assert str(airplane_terminal) == "AirplaneTerminal 1, 3 gates"

    def test_emergency(self, helicopter_terminal: Terminal) -> None:
        """Test emergency can be declared and cleared."""
        assert not helicopter_terminal.has_emergency()

        helicopter_terminal.declare_emergency()
        assert helicopter_terminal.has_emergency()
        assert str(helicopter_terminal) == "HelicopterTerminal 2, 2 gates (EMERGENCY)"

        helicopter_terminal.clear_emergency()
        assert not helicopter_terminal.has_emergency()
