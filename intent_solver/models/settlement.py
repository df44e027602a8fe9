"""Pydantic model for the receipt of a simulated settlement."""

from enum import Enum

from pydantic import BaseModel, Field

from intent_solver.models.types import Amount


class SettlementStatus(str, Enum):
    """Outcome of a simulated settlement."""

    SETTLED = "settled"


class SettlementReceipt(BaseModel):
    """What the receiver ends up with once a plan is executed."""

    status: SettlementStatus = SettlementStatus.SETTLED
    solver: str
    sender: str
    receiver: str
    chain: str = Field(description="Destination chain holding the delivered funds.")
    token: str = Field(description="Token delivered to the receiver.")
    amount_in: Amount = Field(alias="amountIn")
    amount_delivered: Amount = Field(alias="amountDelivered")
    atomic: bool
    leg_count: int = Field(alias="legCount", ge=0)
    eta_sec: int = Field(alias="etaSec", ge=0)
    notes: str | None = None

    model_config = {"populate_by_name": True, "frozen": True}
