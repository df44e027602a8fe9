"""Base protocol and shared plan assembly for route strategies."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

import structlog

from intent_solver.constants import HIGH_FEE_RATIO
from intent_solver.markets import DEFAULT_MARKET_DATA, MarketData
from intent_solver.models.intent import Intent
from intent_solver.models.plan import Leg, Plan
from intent_solver.models.types import FeeGrade

logger = structlog.get_logger()


class RouteStrategy(Protocol):
    """Protocol for route strategies.

    A strategy maps an intent to at most one plan. Returning None is a
    normal outcome (e.g. no bridge connects the required chains).
    """

    name: str

    def try_solve(self, intent: Intent) -> Plan | None:
        """Attempt to build a plan for the intent.

        Args:
            intent: A validated intent

        Returns:
            A Plan with score 0 (scoring happens in the ranker), or None
        """
        ...


class LegChainStrategy:
    """Base class for strategies that chain swap and bridge legs.

    Provides market table injection and the plan assembly shared by all
    fixed-topology strategies: fee grading, ETA estimation and aggregate
    amounts.

    Args:
        market: Market tables to price legs with. Defaults to the reference
                tables.
        high_fee_ratio: Fee-to-input value ratio above which fees are graded
                "high".
    """

    name: str = "unnamed"
    eta_bonus_sec: int = 0

    def __init__(
        self,
        market: MarketData | None = None,
        high_fee_ratio: float = HIGH_FEE_RATIO,
    ) -> None:
        self.market = market if market is not None else DEFAULT_MARKET_DATA
        self.high_fee_ratio = high_fee_ratio

    def try_solve(self, intent: Intent) -> Plan | None:
        legs = self.build_legs(intent)
        if not legs:
            logger.debug("strategy_no_plan", strategy=self.name, reason="no_legs")
            return None
        plan = self.assemble_plan(intent, legs)
        logger.debug(
            "strategy_built_plan",
            strategy=self.name,
            legs=[leg.provider for leg in legs],
            total_out=plan.total_out,
            eta_sec=plan.eta_sec,
        )
        return plan

    def build_legs(self, intent: Intent) -> list[Leg] | None:
        """Return the legs of this strategy's route, or None to abandon it."""
        raise NotImplementedError

    def privacy_supported(self, intent: Intent) -> bool:  # noqa: ARG002
        return True

    def assemble_plan(self, intent: Intent, legs: Sequence[Leg]) -> Plan:
        """Aggregate resolved legs into an unscored plan.

        The last leg's output is the plan's total output; the first leg
        consumes the intent's full amount.
        """
        total_in = intent.amount
        total_out = legs[-1].est_out
        return Plan(
            solver=self.name,
            legs=tuple(legs),
            total_in=total_in,
            total_out=total_out,
            effective_rate=total_out / total_in,
            fee_grade=self.grade_fees(intent, legs),
            eta_sec=self.estimate_eta(intent),
            privacy_supported=self.privacy_supported(intent),
            gas_token=intent.prefer_fee_token,
            atomic=True,
        )

    def grade_fees(self, intent: Intent, legs: Sequence[Leg]) -> FeeGrade:
        """Grade total fees against the intent's input value.

        Each fee is valued at the price of its leg's from-token. Bridge legs
        carry no from-token, so their fee is valued at the source token price.
        """
        fees_value = sum(
            leg.fee * self.market.price(leg.from_token or intent.src_token) for leg in legs
        )
        input_value = intent.amount * self.market.price(intent.src_token)
        if fees_value / input_value > self.high_fee_ratio:
            return FeeGrade.HIGH
        return FeeGrade.LOW

    def estimate_eta(self, intent: Intent) -> int:
        """Source latency, plus destination latency when crossing chains."""
        eta = self.market.latency(intent.src_chain)
        if intent.is_cross_chain:
            eta += self.market.latency(intent.dst_chain)
        return max(eta - self.eta_bonus_sec, 0)


__all__ = ["LegChainStrategy", "RouteStrategy"]
