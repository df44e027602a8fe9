"""Shared type definitions for intent and plan models."""

from enum import Enum
from typing import Annotated

from pydantic import Field

from intent_solver.constants import MAX_SLIPPAGE_BPS

# Basis points tolerance (0..10000)
BasisPoints = Annotated[int, Field(ge=0, le=MAX_SLIPPAGE_BPS)]

# Strictly positive, finite token amount
PositiveAmount = Annotated[float, Field(gt=0, allow_inf_nan=False)]

# Non-negative, finite token amount
Amount = Annotated[float, Field(ge=0, allow_inf_nan=False)]


class LegKind(str, Enum):
    """Whether a leg swaps tokens or moves them across chains."""

    SWAP = "swap"
    BRIDGE = "bridge"


class FeeGrade(str, Enum):
    """Coarse grade of a plan's total fees relative to its input value."""

    LOW = "low"
    HIGH = "high"
