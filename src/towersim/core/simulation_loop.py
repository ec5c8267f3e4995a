"""Discrete-time simulation loop.

This module provides the loop that drives simulated time: each step is one
tick of the tickable it wraps, normally the control tower.

Typical usage example:
    from towersim.core.simulation_loop import SimulationLoop

    loop = SimulationLoop(tower)
    loop.run(24)
    print(loop.tick_count)
"""

import logging

from towersim.core.config import ConfigLoader
from towersim.core.status import Tickable

logger = logging.getLogger(__name__)

DEFAULT_TICKS = 10


class SimulationLoop:
    """Loop that advances a simulation one discrete tick at a time.

    There is no wall-clock timing: a tick takes as long as the work it does
    and ticks run back to back.

    Examples:
        >>> loop = SimulationLoop(tower, default_ticks=5)
        >>> loop.run()
        5
        >>> loop.pause()
        >>> loop.step()
        False
    """

    def __init__(self, clock: Tickable, default_ticks: int = DEFAULT_TICKS) -> None:
        """Initialize the simulation loop.

        Args:
            clock: Entity ticked on every step, usually a ControlTower.
            default_ticks: Ticks performed by run() when none are given.

        Raises:
            ValueError: If default_ticks is negative.
        """
        if default_ticks < 0:
            raise ValueError(f"Tick count cannot be negative: {default_ticks}")

        self.clock = clock
        self.default_ticks = default_ticks
        self.tick_count = 0
        self.running = False
        self.paused = False

    @classmethod
    def from_config(cls, clock: Tickable, config: ConfigLoader) -> "SimulationLoop":
        """Create a loop using the 'simulation' section of a configuration.

        Args:
            clock: Entity ticked on every step.
            config: Configuration; simulation.ticks sets the default run length.

        Returns:
            Configured simulation loop.
        """
        ticks = int(config.get("simulation.ticks", DEFAULT_TICKS))
        return cls(clock, default_ticks=ticks)

    def step(self) -> bool:
        """Perform a single tick unless paused.

        Returns:
            True if a tick was performed, False if the loop is paused.
        """
        if self.paused:
            return False

        self.clock.tick()
        self.tick_count += 1
        logger.debug("Tick %d complete", self.tick_count)
        return True

    def run(self, ticks: int | None = None) -> int:
        """Run the simulation for a number of ticks.

        Stops early if stop() is called from within a tick or if the loop is
        paused.

        Args:
            ticks: Number of ticks to run, default_ticks if None.

        Returns:
            Number of ticks actually performed.
        """
        if ticks is None:
            ticks = self.default_ticks

        self.running = True
        performed = 0
        logger.info("Simulation started for %d ticks", ticks)

        try:
            while self.running and performed < ticks:
                if not self.step():
                    break
                performed += 1

        except Exception:
            logger.error("Simulation error at tick %d", self.tick_count + 1, exc_info=True)
            raise

        finally:
            self.running = False
            logger.info("Simulation stopped after %d ticks", performed)

        return performed

    def stop(self) -> None:
        """Stop the loop at the end of the current tick."""
        self.running = False
        logger.info("Simulation stop requested")

    def pause(self) -> None:
        """Pause the loop; steps do nothing until resumed."""
        self.paused = True
        logger.info("Simulation paused")

    def resume(self) -> None:
        """Resume a paused loop."""
        self.paused = False
        logger.info("Simulation resumed")

    def is_running(self) -> bool:
        """Check whether run() is in progress."""
        return self.running

    def is_paused(self) -> bool:
        """Check whether the loop is paused."""
        return self.paused
