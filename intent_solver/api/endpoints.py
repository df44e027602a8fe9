"""API endpoints for the intent solver."""

import asyncio

import structlog
from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field

from intent_solver.models.intent import Intent
from intent_solver.models.plan import Plan, QuoteResponse
from intent_solver.models.settlement import SettlementReceipt
from intent_solver.settlement import settle
from intent_solver.solver import Solver, get_default_solver
from intent_solver.validation import IntentValidationError

logger = structlog.get_logger()

router = APIRouter()


class ExecuteRequest(BaseModel):
    """Request body for POST /execute."""

    intent: Intent
    selected: int = Field(default=0, ge=0, description="Index into the ranked plans.")


def get_solver() -> Solver:
    """Return the process-wide solver.

    Endpoints take the solver through this dependency so a test can route
    requests to a solver built over its own market tables.
    """
    return get_default_solver()


async def _solve(solver_instance: Solver, intent: Intent) -> list[Plan]:
    """Solve in the default executor; pricing is CPU-bound and synchronous."""
    loop = asyncio.get_event_loop()
    return await loop.run_in_executor(None, solver_instance.solve, intent)


@router.get("/markets")
async def markets(solver_instance: Solver = Depends(get_solver)) -> dict[str, object]:
    """List the chains, tokens, bridges and AMMs the solver can route through."""
    market = solver_instance.market
    return {
        "chains": list(market.chains),
        "tokens": list(market.tokens),
        "bridges": [
            {
                "name": bridge.name,
                "chains": [c for c in market.chains if c in bridge.chains],
                "feeBps": bridge.fee_bps,
                "latencySec": bridge.latency_sec,
            }
            for bridge in market.bridges
        ],
        "amms": {
            chain: [{"name": amm.name, "feeBps": amm.fee_bps} for amm in venues]
            for chain, venues in market.amms.items()
        },
    }


@router.post("/quotes", response_model_exclude_none=True)
async def quotes(
    intent: Intent,
    solver_instance: Solver = Depends(get_solver),
) -> QuoteResponse:
    """Propose ranked settlement plans for an intent.

    Error Handling:
        - Invalid request schema: 422 Validation Error (Pydantic)
        - Intent not solvable against the market tables: 422 with detail
        - Solver exception: logged, returns empty plans
    """
    logger.info(
        "received_intent",
        src=f"{intent.src_token}@{intent.src_chain}",
        dst=f"{intent.dst_token}@{intent.dst_chain}",
        amount=intent.amount,
        privacy=intent.privacy,
    )

    try:
        plans = await _solve(solver_instance, intent)
    except IntentValidationError as err:
        raise HTTPException(status_code=422, detail=str(err)) from err
    except Exception:
        logger.exception(
            "solver_error",
            src_chain=intent.src_chain,
            dst_chain=intent.dst_chain,
            message="Solver raised an exception, returning empty plans",
        )
        return QuoteResponse.empty()

    logger.info("returning_plans", plan_count=len(plans))
    return QuoteResponse(plans=plans)


@router.post("/execute", response_model_exclude_none=True)
async def execute(
    request: ExecuteRequest,
    solver_instance: Solver = Depends(get_solver),
) -> SettlementReceipt:
    """Re-solve the intent and settle the selected plan.

    Returns 404 if there is no plan at the selected index.
    """
    try:
        plans = await _solve(solver_instance, request.intent)
    except IntentValidationError as err:
        raise HTTPException(status_code=422, detail=str(err)) from err

    if request.selected >= len(plans):
        logger.warning(
            "plan_not_found",
            selected=request.selected,
            plan_count=len(plans),
        )
        raise HTTPException(
            status_code=404,
            detail=f"No plan at index {request.selected} ({len(plans)} available)",
        )

    return settle(request.intent, plans[request.selected])
