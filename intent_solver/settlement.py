"""Simulated atomic settlement of a chosen plan.

Nothing is executed: the receipt reports what the receiver would hold, and
where, if the plan settled as quoted. Chain and token come from the plan's
last leg, so a plan that stops short of the destination chain says so.
"""

from __future__ import annotations

import structlog

from intent_solver.models.intent import Intent
from intent_solver.models.plan import Plan
from intent_solver.models.settlement import SettlementReceipt, SettlementStatus

logger = structlog.get_logger()


def settle(intent: Intent, plan: Plan) -> SettlementReceipt:
    """Settle ``plan`` for ``intent`` and return the receipt."""
    last = plan.legs[-1]
    chain = last.output_chain
    token = (last.to_token if last.is_swap else last.token) or intent.dst_token
    receipt = SettlementReceipt(
        status=SettlementStatus.SETTLED,
        solver=plan.solver,
        sender=intent.sender,
        receiver=intent.receiver,
        chain=chain,
        token=token,
        amount_in=plan.total_in,
        amount_delivered=plan.total_out,
        atomic=plan.atomic,
        leg_count=len(plan.legs),
        eta_sec=plan.eta_sec,
        notes=intent.notes,
    )
    logger.info(
        "settlement_simulated",
        solver=plan.solver,
        receiver=intent.receiver,
        amount_delivered=plan.total_out,
        token=token,
        chain=chain,
    )
    return receipt


__all__ = ["settle"]
