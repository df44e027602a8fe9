"""Pydantic model for a user's payment intent.

Field aliases follow the camelCase JSON of the payment client
(``srcChain``, ``maxSlippageBps``, ...).
"""

from pydantic import BaseModel, Field

from intent_solver.models.types import BasisPoints, PositiveAmount


class Intent(BaseModel):
    """A desired cross-chain transfer, without an execution path.

    Chains and tokens are plain names; whether they exist is checked against
    the solver's market tables by ``intent_solver.validation``.
    """

    sender: str = Field(description="Opaque sender identifier.")
    receiver: str = Field(description="Opaque receiver identifier.")
    amount: PositiveAmount = Field(description="Amount to send, in source-token units.")
    src_chain: str = Field(alias="srcChain")
    src_token: str = Field(alias="srcToken")
    dst_chain: str = Field(alias="dstChain")
    dst_token: str = Field(alias="dstToken")
    max_slippage_bps: BasisPoints = Field(
        alias="maxSlippageBps",
        description="Maximum slippage the user tolerates, in basis points.",
    )
    deadline_sec: int = Field(alias="deadlineSec", gt=0)
    prefer_fee_token: str = Field(
        alias="preferFeeToken",
        description="Token the user prefers to pay gas/fees in.",
    )
    privacy: bool = Field(description="Whether private settlement is requested.")
    notes: str | None = None

    model_config = {"populate_by_name": True, "frozen": True}

    @property
    def is_cross_chain(self) -> bool:
        return self.src_chain != self.dst_chain

    @property
    def needs_swap(self) -> bool:
        return self.src_token != self.dst_token
