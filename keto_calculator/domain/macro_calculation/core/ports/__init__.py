"""Ports for macro calculation domain."""

from .calculators import (
    IBMRCalculator,
    IEnergyCalculator,
    IFatGramSolver,
    IRatioBuilder,
)

__all__ = [
    "IBMRCalculator",
    "IEnergyCalculator",
    "IFatGramSolver",
    "IRatioBuilder",
]
