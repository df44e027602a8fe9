"""Pytest configuration and fixtures."""

import pytest

from intent_solver.markets import DEFAULT_MARKET_DATA, AmmVenue, MarketData
from intent_solver.solver import Solver
from tests.helpers import SOLANA

# =============================================================================
# Market tables
# =============================================================================


@pytest.fixture
def reference_market() -> MarketData:
    """The demo's reference market tables."""
    return DEFAULT_MARKET_DATA


@pytest.fixture
def unconnected_market() -> MarketData:
    """Reference tables plus a Solana chain that no bridge reaches."""
    return DEFAULT_MARKET_DATA.with_overrides(
        chain_latency={**DEFAULT_MARKET_DATA.chain_latency, SOLANA: 40},
        amms={**DEFAULT_MARKET_DATA.amms, SOLANA: (AmmVenue("Orca", 10),)},
    )


# =============================================================================
# Solvers
# =============================================================================


@pytest.fixture
def reference_solver(reference_market: MarketData) -> Solver:
    """A solver over the reference tables."""
    return Solver(market=reference_market)


@pytest.fixture
def unconnected_solver(unconnected_market: MarketData) -> Solver:
    """A solver over the tables with an unreachable Solana chain."""
    return Solver(market=unconnected_market)
