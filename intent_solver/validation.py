"""Fail-fast validation of intents against the market tables.

The ``Intent`` model enforces shape and numeric bounds when it is parsed.
This module re-checks those bounds for instances built without validation,
checks chains and tokens against the solver's tables, rejects amounts too
large to price, and rejects no-op intents, so the pricing code only ever sees
finite values.
"""

from __future__ import annotations

import math

from intent_solver.constants import MAX_SLIPPAGE_BPS
from intent_solver.markets import MarketData
from intent_solver.models.intent import Intent


class IntentValidationError(ValueError):
    """Raised when an intent cannot be solved against the market tables.

    Attributes:
        field: Name of the offending intent field, if a single one
    """

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message)
        self.field = field


class NoOpIntentError(IntentValidationError):
    """Raised when source and destination chain and token are identical."""


def validate_intent(intent: Intent, market: MarketData) -> Intent:
    """Check an intent against the market tables.

    Args:
        intent: Intent to validate
        market: Tables the intent will be solved against

    Returns:
        The same intent, for chaining

    Raises:
        IntentValidationError: On the first problem found
        NoOpIntentError: If the intent would move nothing anywhere
    """
    if not math.isfinite(intent.amount) or intent.amount <= 0:
        raise IntentValidationError(f"Amount must be positive, got {intent.amount}", "amount")

    if not 0 <= intent.max_slippage_bps <= MAX_SLIPPAGE_BPS:
        raise IntentValidationError(
            f"Slippage must be within 0..{MAX_SLIPPAGE_BPS} bps, got {intent.max_slippage_bps}",
            "max_slippage_bps",
        )

    if intent.deadline_sec <= 0:
        raise IntentValidationError(
            f"Deadline must be positive, got {intent.deadline_sec}", "deadline_sec"
        )

    for field, chain in (("src_chain", intent.src_chain), ("dst_chain", intent.dst_chain)):
        if chain not in market.chain_latency:
            raise IntentValidationError(f"Unknown chain: {chain}", field)

    for field, token in (
        ("src_token", intent.src_token),
        ("dst_token", intent.dst_token),
        ("prefer_fee_token", intent.prefer_fee_token),
    ):
        if token not in market.mid_prices:
            raise IntentValidationError(f"Unknown token: {token}", field)

    # Value in the reference unit and in the destination token must stay finite
    reference_value = intent.amount * market.price(intent.src_token)
    if not (
        math.isfinite(reference_value)
        and math.isfinite(reference_value / market.price(intent.dst_token))
    ):
        raise IntentValidationError(
            f"Amount {intent.amount} {intent.src_token} is too large to price", "amount"
        )

    if not intent.is_cross_chain and not intent.needs_swap:
        raise NoOpIntentError(
            f"Nothing to do: {intent.src_token} on {intent.src_chain} is already the destination"
        )

    return intent


__all__ = ["IntentValidationError", "NoOpIntentError", "validate_intent"]
