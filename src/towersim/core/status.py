"""Shared status interfaces for simulation entities.

Aircraft and terminals both carry an emergency flag and both report how full
they are; the control tower and aircraft both advance with the simulation
clock. These small interfaces capture those shared capabilities.

Typical usage:
    class Terminal(EmergencyState, OccupancyLevel):
        def occupancy_level(self) -> int:
            return percentage(self._occupied_count(), len(self._gates))
"""

import math
from abc import ABC, abstractmethod


def round_half_up(value: float) -> int:
    """Round to the nearest integer, with halves going up.

    Python's built-in round() uses banker's rounding, which would make
    0.5 -> 0 and 2.5 -> 2. Simulation quantities round half up instead.

    Args:
        value: Value to round.

    Returns:
        Nearest integer, halves rounded towards positive infinity.

    Examples:
        >>> round_half_up(2.5)
        3
        >>> round_half_up(66.666)
        67
    """
    return math.floor(value + 0.5)


def percentage(part: float, whole: float) -> int:
    """Express part as a whole-number percentage of whole.

    Args:
        part: Current amount.
        whole: Capacity the amount is measured against.

    Returns:
        round_half_up(100 * part / whole), or 0 when whole is zero.

    Examples:
        >>> percentage(2, 3)
        67
        >>> percentage(5, 0)
        0
    """
    if whole == 0:
        return 0
    return round_half_up(100 * part / whole)


class EmergencyState:
    """Mixin giving an entity a declarable state of emergency.

    The flag is purely observational: declaring an emergency changes no
    other behaviour.

    Examples:
        >>> terminal.declare_emergency()
        >>> terminal.has_emergency()
        True
    """

    _emergency: bool = False

    def declare_emergency(self) -> None:
        """Declare a state of emergency."""
        self._emergency = True

    def clear_emergency(self) -> None:
        """Clear any active state of emergency."""
        self._emergency = False

    def has_emergency(self) -> bool:
        """Check whether a state of emergency is active.

        Returns:
            True if in emergency, False otherwise.
        """
        return self._emergency


class OccupancyLevel(ABC):
    """Entity with an inherent capacity and a current level against it."""

    @abstractmethod
    def occupancy_level(self) -> int:
        """Get the current occupancy level.

        Returns:
            Occupancy as a percentage from 0 to 100.
        """


class Tickable(ABC):
    """Entity whose state advances with each discrete simulation tick."""

    @abstractmethod
    def tick(self) -> None:
        """Advance this entity's state by one tick."""
