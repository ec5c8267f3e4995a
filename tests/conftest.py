"""Pytest configuration and fixtures for all tests."""

import pytest

from towersim.aircraft import Aircraft, AircraftCharacteristics
from towersim.control import ControlTower
from towersim.ground import Gate, Terminal, TerminalCategory
from towersim.tasks import Task, TaskList, TaskType


def make_tasks(*tasks: Task) -> TaskList:
    """Build a task list from the given tasks."""
    return TaskList(list(tasks))


@pytest.fixture
def full_cycle() -> TaskList:
    """Task list covering every task type, starting with AWAY."""
    return make_tasks(
        Task(TaskType.AWAY),
        Task(TaskType.LAND),
        Task(TaskType.WAIT),
        Task(TaskType.LOAD, 65),
        Task(TaskType.TAKEOFF),
    )


@pytest.fixture
def passenger_jet(full_cycle: TaskList) -> Aircraft:
    """Airbus A320 away from the airport with some passengers onboard."""
    return Aircraft.passenger(
        "QFA481", AircraftCharacteristics.AIRBUS_A320, full_cycle, 10000.0, 100
    )


@pytest.fixture
def loading_freighter() -> Aircraft:
    """Boeing 747-8F loading freight to 65% at the gate."""
    tasks = make_tasks(Task(TaskType.LOAD, 65), Task(TaskType.TAKEOFF), Task(TaskType.AWAY))
    return Aircraft.freight("UTD010", AircraftCharacteristics.BOEING_747_8F, tasks, 11000.0, 0)


@pytest.fixture
def waiting_helicopter() -> Aircraft:
    """Robinson R44 waiting at a gate."""
    tasks = make_tasks(Task(TaskType.WAIT), Task(TaskType.LOAD, 100), Task(TaskType.TAKEOFF))
    return Aircraft.passenger("VH-HEL", AircraftCharacteristics.ROBINSON_R44, tasks, 95.0, 2)


@pytest.fixture
def airplane_terminal() -> Terminal:
    """Airplane terminal 1 with gates 1-3."""
    terminal = Terminal(1, TerminalCategory.AIRPLANE)
    for number in (1, 2, 3):
        terminal.add_gate(Gate(number))
    return terminal


@pytest.fixture
def helicopter_terminal() -> Terminal:
    """Helicopter terminal 2 with gates 4-5."""
    terminal = Terminal(2, TerminalCategory.HELICOPTER)
    for number in (4, 5):
        terminal.add_gate(Gate(number))
    return terminal


@pytest.fixture
def tower(airplane_terminal: Terminal, helicopter_terminal: Terminal) -> ControlTower:
    """Control tower with an airplane terminal followed by a helicopter terminal."""
    tower = ControlTower()
    tower.add_terminal(airplane_terminal)
    tower.add_terminal(helicopter_terminal)
    return tower
