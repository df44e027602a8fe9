"""Intent-centric payments solver - simulated cross-chain route planning."""

from intent_solver.solver import Solver, get_default_solver

__version__ = "0.1.0"
__all__ = ["Solver", "get_default_solver", "__version__"]
