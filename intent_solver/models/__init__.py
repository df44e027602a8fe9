"""Pydantic models for intents, plans and settlement receipts."""

from intent_solver.models.intent import Intent
from intent_solver.models.plan import Leg, Plan, QuoteResponse
from intent_solver.models.settlement import SettlementReceipt, SettlementStatus
from intent_solver.models.types import Amount, BasisPoints, FeeGrade, LegKind, PositiveAmount

__all__ = [
    # Types
    "Amount",
    "BasisPoints",
    "FeeGrade",
    "LegKind",
    "PositiveAmount",
    # Request
    "Intent",
    # Response
    "Leg",
    "Plan",
    "QuoteResponse",
    "SettlementReceipt",
    "SettlementStatus",
]
