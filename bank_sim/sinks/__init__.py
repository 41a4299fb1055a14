"""Output sinks for presenting results."""

from bank_sim.sinks.console import ConsoleSink

__all__ = ["ConsoleSink"]
