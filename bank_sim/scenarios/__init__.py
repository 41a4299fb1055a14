"""Scenarios for populating the simulated bank."""

from bank_sim.scenarios.demo import DemoBankScenario

__all__ = ["DemoBankScenario"]
