"""Exception hierarchy for the tower simulation.

Every error raised by the simulation core derives from TowerSimError, so
callers driving a scenario can catch the whole family in one place. All of
them are recoverable: a refused admission or a full terminal never leaves the
simulation in a broken state.

Typical usage:
    from towersim.core.exceptions import NoSuitableGateError

    try:
        tower.add_aircraft(aircraft)
    except NoSuitableGateError:
        holding.append(aircraft)
"""


class TowerSimError(Exception):
    """Base class for all tower simulation errors."""


class ValidationError(TowerSimError, ValueError):
    """Raised when an entity is constructed with out-of-range values.

    Examples:
        >>> Task(TaskType.LOAD, 140)
        Traceback (most recent call last):
        ...
        ValidationError: Load percent must be between 0 and 100, got 140
    """


class NoSpaceError(TowerSimError):
    """Raised when a fixed-capacity resource cannot take another item."""


class TerminalFullError(NoSpaceError):
    """Raised when adding a gate to a terminal that already has its maximum."""


class GateOccupiedError(NoSpaceError):
    """Raised when parking an aircraft at a gate that is already occupied."""


class NoSuitableGateError(TowerSimError):
    """Raised when no compatible unoccupied gate can be found."""
