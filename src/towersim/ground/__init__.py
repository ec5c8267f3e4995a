"""Ground infrastructure: terminals and gates.

Typical usage:
    from towersim.ground import Gate, Terminal, TerminalCategory

    terminal = Terminal(1, TerminalCategory.AIRPLANE)
    terminal.add_gate(Gate(1))
"""

from towersim.ground.gate import Gate
from towersim.ground.terminal import MAX_NUM_GATES, Terminal, TerminalCategory

__all__ = [
    "MAX_NUM_GATES",
    "Gate",
    "Terminal",
    "TerminalCategory",
]
