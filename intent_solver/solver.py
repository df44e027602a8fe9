"""Main solver that turns an intent into ranked settlement plans.

The Solver validates the intent, runs every route strategy, and ranks the
plans they produce. It is a pure function of the intent and the injected
market tables: no I/O, no timers, no shared mutable state.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

from intent_solver.markets import DEFAULT_MARKET_DATA, MarketData
from intent_solver.models.intent import Intent
from intent_solver.models.plan import Plan
from intent_solver.scoring import DEFAULT_SCORING_CONFIG, ScoringConfig, rank_plans
from intent_solver.validation import IntentValidationError, validate_intent

if TYPE_CHECKING:
    from intent_solver.strategies.base import RouteStrategy

logger = structlog.get_logger()


class Solver:
    """Solve intents by running every strategy and ranking the plans.

    Unlike a fallback chain, all strategies are evaluated for every intent;
    their order only decides how equal scores are ranked.

    Default strategies (in evaluation order):
    1. SwapThenBridgeStrategy
    2. BridgeThenSwapStrategy

    Args:
        market: Market tables. Defaults to the reference tables.
        strategies: Strategies to evaluate in order. If None, the defaults
                    are built on ``market``.
        scoring: Score weights. Defaults to DEFAULT_SCORING_CONFIG.
    """

    def __init__(
        self,
        market: MarketData | None = None,
        strategies: list[RouteStrategy] | None = None,
        scoring: ScoringConfig | None = None,
    ) -> None:
        self.market = market if market is not None else DEFAULT_MARKET_DATA
        self.scoring = scoring if scoring is not None else DEFAULT_SCORING_CONFIG

        if strategies is not None:
            self.strategies = strategies
        else:
            from intent_solver.strategies import BridgeThenSwapStrategy, SwapThenBridgeStrategy

            self.strategies = [
                SwapThenBridgeStrategy(self.market),
                BridgeThenSwapStrategy(self.market),
            ]

    def solve(self, intent: Intent) -> list[Plan]:
        """Propose plans for an intent, best first.

        Args:
            intent: The intent to solve

        Returns:
            Ranked plans; empty if no strategy found a route

        Raises:
            IntentValidationError: If the intent does not fit the market tables
        """
        try:
            validate_intent(intent, self.market)
        except IntentValidationError as err:
            logger.warning("intent_rejected", reason=str(err), field=err.field)
            raise

        plans: list[Plan] = []
        for strategy in self.strategies:
            plan = strategy.try_solve(intent)
            if plan is not None:
                plans.append(plan)

        ranked = rank_plans(plans, intent, self.scoring)

        if not ranked:
            logger.info(
                "no_strategy_found_plan",
                src_chain=intent.src_chain,
                dst_chain=intent.dst_chain,
                strategies_tried=[s.name for s in self.strategies],
            )
        else:
            logger.info(
                "intent_solved",
                src=f"{intent.src_token}@{intent.src_chain}",
                dst=f"{intent.dst_token}@{intent.dst_chain}",
                plan_count=len(ranked),
                best_solver=ranked[0].solver,
                best_score=round(ranked[0].score, 4),
            )
        return ranked


solver = Solver()


def get_default_solver() -> Solver:
    """Return the module-level solver built on the reference tables."""
    return solver
