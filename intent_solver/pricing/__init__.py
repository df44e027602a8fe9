"""Single-hop pricing of swaps and bridges."""

from intent_solver.pricing.legs import best_bridge, best_swap_on_chain, price_bridge, price_swap
from intent_solver.pricing.quotes import BridgeQuote, SwapQuote

__all__ = [
    "BridgeQuote",
    "SwapQuote",
    "best_bridge",
    "best_swap_on_chain",
    "price_bridge",
    "price_swap",
]
