"""Population bookkeeping and the step driver."""

from .lineage_simulator import LineageSimulator
from .population import Population

__all__ = ["LineageSimulator", "Population"]
