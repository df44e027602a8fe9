"""Result types of single-hop pricing."""

from dataclasses import dataclass


@dataclass(frozen=True)
class SwapQuote:
    """Simulated outcome of one swap.

    Attributes:
        amount_out: Output amount, in to-token units
        fee: AMM fee, in from-token units
    """

    amount_out: float
    fee: float


@dataclass(frozen=True)
class BridgeQuote:
    """Simulated outcome of one bridge transfer (same token both sides)."""

    amount_out: float
    fee: float
