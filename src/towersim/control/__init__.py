"""Air traffic control for the simulated airport.

Typical usage:
    from towersim.control import ControlTower

    tower = ControlTower()
"""

from towersim.control.tower import ControlTower

__all__ = ["ControlTower"]
