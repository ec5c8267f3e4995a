"""Scenario construction.

Typical usage:
    from towersim.scenario import ScenarioBuilder

    tower = ScenarioBuilder().with_terminal(TerminalCategory.AIRPLANE, 1, gates=4).build()
"""

from towersim.scenario.scenario import ScenarioBuilder, TerminalSpec

__all__ = [
    "ScenarioBuilder",
    "TerminalSpec",
]
