"""Route strategies for the intent solver.

Every strategy is run for every intent, in order:
    1. SwapThenBridgeStrategy - swap on the source chain, then bridge
    2. BridgeThenSwapStrategy - bridge, then swap on the destination chain

Each yields at most one plan; the ranker orders the plans afterwards.
"""

from intent_solver.strategies.base import LegChainStrategy, RouteStrategy
from intent_solver.strategies.bridge_then_swap import BridgeThenSwapStrategy
from intent_solver.strategies.swap_then_bridge import SwapThenBridgeStrategy

__all__ = [
    "BridgeThenSwapStrategy",
    "LegChainStrategy",
    "RouteStrategy",
    "SwapThenBridgeStrategy",
]
