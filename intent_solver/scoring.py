"""Heuristic scoring and ranking of candidate plans."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

import structlog

from intent_solver.constants import SIMULATED_SLIPPAGE_BPS
from intent_solver.models.intent import Intent
from intent_solver.models.plan import Plan
from intent_solver.models.types import FeeGrade

logger = structlog.get_logger()


@dataclass(frozen=True)
class ScoringConfig:
    """Weights of the plan score.

    Attributes:
        rate_weight: Multiplier applied to the plan's effective rate
        high_fee_penalty: Subtracted when the plan's fee grade is high
        privacy_bonus: Added when privacy is requested and supported
        latency_free_sec: ETA below which no latency penalty applies
        latency_divisor: Seconds of ETA above the free allowance per point
        tight_slippage_penalty: Subtracted from every plan when the intent
            tolerates less slippage than the simulated swap slippage
        assumed_slippage_bps: Slippage baked into swap pricing
    """

    rate_weight: float = 1000.0
    high_fee_penalty: float = 20.0
    privacy_bonus: float = 15.0
    latency_free_sec: float = 45.0
    latency_divisor: float = 5.0
    tight_slippage_penalty: float = 5.0
    assumed_slippage_bps: int = SIMULATED_SLIPPAGE_BPS


DEFAULT_SCORING_CONFIG = ScoringConfig()


def score_plan(plan: Plan, intent: Intent, config: ScoringConfig = DEFAULT_SCORING_CONFIG) -> float:
    """Score a single plan; higher is better.

    Does not include the intent-wide slippage adjustment, which
    ``rank_plans`` applies once to every plan.
    """
    score = plan.effective_rate * config.rate_weight
    if plan.fee_grade == FeeGrade.HIGH:
        score -= config.high_fee_penalty
    if intent.privacy and plan.privacy_supported:
        score += config.privacy_bonus
    score -= max(0.0, (plan.eta_sec - config.latency_free_sec) / config.latency_divisor)
    return score


def slippage_adjustment(intent: Intent, config: ScoringConfig = DEFAULT_SCORING_CONFIG) -> float:
    """Adjustment applied to every plan of an intent."""
    if intent.max_slippage_bps < config.assumed_slippage_bps:
        return -config.tight_slippage_penalty
    return 0.0


def rank_plans(
    plans: Iterable[Plan],
    intent: Intent,
    config: ScoringConfig = DEFAULT_SCORING_CONFIG,
) -> list[Plan]:
    """Score plans and sort them by descending score.

    The sort is stable: plans with equal scores keep the order in which
    they were produced.

    Returns:
        Scored copies of the plans; the inputs are not modified
    """
    adjustment = slippage_adjustment(intent, config)
    scored = [plan.with_score(score_plan(plan, intent, config) + adjustment) for plan in plans]
    ranked = sorted(scored, key=lambda p: p.score, reverse=True)

    if ranked:
        logger.debug(
            "plans_ranked",
            order=[p.solver for p in ranked],
            scores=[round(p.score, 4) for p in ranked],
            slippage_adjustment=adjustment,
        )
    return ranked


__all__ = [
    "DEFAULT_SCORING_CONFIG",
    "ScoringConfig",
    "rank_plans",
    "score_plan",
    "slippage_adjustment",
]
