"""Swap on the source chain, then bridge to the destination chain."""

from __future__ import annotations

import structlog

from intent_solver.constants import SWAP_THEN_BRIDGE_SOLVER
from intent_solver.models.intent import Intent
from intent_solver.models.plan import Leg
from intent_solver.pricing import best_bridge, best_swap_on_chain
from intent_solver.strategies.base import LegChainStrategy

logger = structlog.get_logger()


class SwapThenBridgeStrategy(LegChainStrategy):
    """Convert to the destination token first, then move it across chains.

    If a bridge is needed and none connects the chains, the whole route is
    abandoned, including an already priced swap. A partial route is never
    surfaced.
    """

    name = SWAP_THEN_BRIDGE_SOLVER

    def build_legs(self, intent: Intent) -> list[Leg] | None:
        legs: list[Leg] = []
        amount = intent.amount

        if intent.needs_swap:
            swap = best_swap_on_chain(
                intent.src_chain, amount, intent.src_token, intent.dst_token, self.market
            )
            legs.append(swap)
            amount = swap.est_out

        if intent.is_cross_chain:
            bridge = best_bridge(
                intent.src_chain, intent.dst_chain, amount, intent.dst_token, self.market
            )
            if bridge is None:
                logger.debug(
                    "route_abandoned",
                    strategy=self.name,
                    src_chain=intent.src_chain,
                    dst_chain=intent.dst_chain,
                )
                return None
            legs.append(bridge)

        return legs


__all__ = ["SwapThenBridgeStrategy"]
