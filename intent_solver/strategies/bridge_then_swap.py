"""Bridge the source token first, then swap on the destination chain."""

from __future__ import annotations

from intent_solver.constants import BRIDGE_THEN_SWAP_ETA_BONUS_SEC, BRIDGE_THEN_SWAP_SOLVER
from intent_solver.models.intent import Intent
from intent_solver.models.plan import Leg
from intent_solver.pricing import best_bridge, best_swap_on_chain
from intent_solver.strategies.base import LegChainStrategy


class BridgeThenSwapStrategy(LegChainStrategy):
    """Move the source token across chains, then convert it at destination.

    Unlike ``SwapThenBridgeStrategy``, a missing bridge does not abandon the
    route: the plan is built from whichever legs could be priced.
    Privacy is not offered when the destination is the market's
    least-private chain.
    """

    name = BRIDGE_THEN_SWAP_SOLVER
    eta_bonus_sec = BRIDGE_THEN_SWAP_ETA_BONUS_SEC

    def build_legs(self, intent: Intent) -> list[Leg] | None:
        legs: list[Leg] = []
        amount = intent.amount

        if intent.is_cross_chain:
            bridge = best_bridge(
                intent.src_chain, intent.dst_chain, amount, intent.src_token, self.market
            )
            if bridge is not None:
                legs.append(bridge)
                amount = bridge.est_out

        if intent.needs_swap:
            swap = best_swap_on_chain(
                intent.dst_chain, amount, intent.src_token, intent.dst_token, self.market
            )
            legs.append(swap)

        return legs

    def privacy_supported(self, intent: Intent) -> bool:
        return intent.dst_chain != self.market.least_private_chain


__all__ = ["BridgeThenSwapStrategy"]
