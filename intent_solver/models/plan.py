"""Pydantic models for legs and plans proposed by the solver."""

from pydantic import BaseModel, Field

from intent_solver.models.types import Amount, FeeGrade, LegKind


class Leg(BaseModel):
    """One execution step of a plan.

    Swaps set ``from_token``/``to_token``; bridges set ``bridge_to_chain``
    and the bridged ``token``. ``fee`` is denominated in the leg's input token.
    """

    kind: LegKind
    chain: str = Field(description="Chain the leg executes on.")
    from_token: str | None = Field(default=None, alias="fromToken")
    to_token: str | None = Field(default=None, alias="toToken")
    bridge_to_chain: str | None = Field(default=None, alias="bridgeToChain")
    token: str | None = Field(default=None, description="Token moved by a bridge leg.")
    est_in: Amount = Field(alias="estIn")
    est_out: Amount = Field(alias="estOut")
    fee: Amount
    provider: str

    model_config = {"populate_by_name": True, "frozen": True}

    @property
    def is_swap(self) -> bool:
        return self.kind == LegKind.SWAP

    @property
    def is_bridge(self) -> bool:
        return self.kind == LegKind.BRIDGE

    @property
    def output_chain(self) -> str:
        """Chain holding the funds once this leg has executed."""
        if self.is_bridge and self.bridge_to_chain is not None:
            return self.bridge_to_chain
        return self.chain


class Plan(BaseModel):
    """A complete candidate route produced by one strategy.

    Plans are immutable; ranking produces scored copies.
    """

    solver: str = Field(description="Name of the strategy that produced this plan.")
    legs: tuple[Leg, ...] = Field(description="Legs in execution order.")
    total_in: Amount = Field(alias="totalIn")
    total_out: Amount = Field(alias="totalOut")
    effective_rate: Amount = Field(alias="effectiveRate")
    fee_grade: FeeGrade = Field(alias="feeGrade")
    eta_sec: int = Field(alias="etaSec", ge=0)
    privacy_supported: bool = Field(alias="privacySupported")
    gas_token: str = Field(alias="gasToken")
    atomic: bool = True
    score: float = 0.0

    model_config = {"populate_by_name": True, "frozen": True}

    def with_score(self, score: float) -> "Plan":
        """Return a copy of this plan carrying the given score."""
        return self.model_copy(update={"score": score})


class QuoteResponse(BaseModel):
    """Ranked plans returned for an intent."""

    plans: list[Plan] = Field(
        default_factory=list,
        description="Plans ordered by descending score.",
    )

    @classmethod
    def empty(cls) -> "QuoteResponse":
        """Create an empty response (no plans)."""
        return cls(plans=[])
