"""Pricing of individual swap and bridge legs.

All functions are pure: outputs depend only on their arguments and the
injected market tables.

Swap pricing converts the input to the reference unit with the from-token's
mid-price, deducts the AMM fee and a fixed simulated slippage, floors the
remainder at zero and converts it to the to-token. Bridges take a flat
percentage fee and move the same token across chains.
"""

from __future__ import annotations

import structlog

from intent_solver.constants import SIMULATED_SLIPPAGE_BPS, bps_to_fraction
from intent_solver.markets import MarketData
from intent_solver.models.plan import Leg
from intent_solver.models.types import LegKind
from intent_solver.pricing.quotes import BridgeQuote, SwapQuote

logger = structlog.get_logger()


def price_swap(
    amount: float,
    from_token: str,
    to_token: str,
    fee_bps: int,
    market: MarketData,
    slippage_bps: int = SIMULATED_SLIPPAGE_BPS,
) -> SwapQuote:
    """Simulate swapping ``amount`` of ``from_token`` into ``to_token``.

    Args:
        amount: Input amount, in from-token units
        from_token: Token sold
        to_token: Token bought
        fee_bps: AMM fee in basis points
        market: Market tables supplying mid-prices
        slippage_bps: Simulated slippage in basis points

    Returns:
        SwapQuote with the output in to-token units and the fee in
        from-token units
    """
    price_from = market.price(from_token)
    price_to = market.price(to_token)

    reference_amount = amount * price_from
    fee = reference_amount * bps_to_fraction(fee_bps)
    slippage = reference_amount * bps_to_fraction(slippage_bps)
    reference_out = max(reference_amount - fee - slippage, 0.0)

    return SwapQuote(amount_out=reference_out / price_to, fee=fee / price_from)


def price_bridge(amount: float, fee_bps: int) -> BridgeQuote:
    """Simulate bridging ``amount`` with a flat ``fee_bps`` fee."""
    fee = amount * bps_to_fraction(fee_bps)
    return BridgeQuote(amount_out=max(amount - fee, 0.0), fee=fee)


def best_swap_on_chain(
    chain: str,
    amount: float,
    from_token: str,
    to_token: str,
    market: MarketData,
) -> Leg:
    """Price the swap on every AMM of ``chain`` and keep the best output.

    AMMs are evaluated in table order; a later AMM replaces the current best
    only with a strictly greater output, so the first one wins ties.

    Raises:
        LookupError: If no AMM is registered for the chain
    """
    best: Leg | None = None
    for amm in market.amms_on(chain):
        quote = price_swap(amount, from_token, to_token, amm.fee_bps, market)
        leg = Leg(
            kind=LegKind.SWAP,
            chain=chain,
            from_token=from_token,
            to_token=to_token,
            est_in=amount,
            est_out=quote.amount_out,
            fee=quote.fee,
            provider=f"{amm.name}@{chain}",
        )
        if best is None or leg.est_out > best.est_out:
            best = leg

    if best is None:
        raise LookupError(f"No AMM registered for chain {chain}")
    return best


def best_bridge(
    chain_a: str,
    chain_b: str,
    amount: float,
    token: str,
    market: MarketData,
) -> Leg | None:
    """Pick the bridge from ``chain_a`` to ``chain_b`` with the best output.

    Returns:
        The best bridge leg, or None if no bridge connects the two chains.
        An unreachable pair is a normal outcome, not an error.
    """
    routes = market.bridges_between(chain_a, chain_b)
    if not routes:
        logger.debug("no_bridge_route", src_chain=chain_a, dst_chain=chain_b)
        return None

    best: Leg | None = None
    for bridge in routes:
        quote = price_bridge(amount, bridge.fee_bps)
        leg = Leg(
            kind=LegKind.BRIDGE,
            chain=chain_a,
            bridge_to_chain=chain_b,
            token=token,
            est_in=amount,
            est_out=quote.amount_out,
            fee=quote.fee,
            provider=bridge.name,
        )
        if best is None or leg.est_out > best.est_out:
            best = leg
    return best
