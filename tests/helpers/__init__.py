"""Test helpers module for shared test utilities.

- constants: Chain and token names
- factories: Intent, leg and plan factory functions
- stubs: Strategy stubs for solver tests
"""

from tests.helpers.constants import (
    ARBITRUM,
    BASE,
    CHAINS,
    DAI,
    ETH,
    ETHEREUM,
    POLYGON,
    SOLANA,
    STABLECOINS,
    USDC,
    USDT,
)
from tests.helpers.factories import make_intent, make_intent_payload, make_plan, make_swap_leg
from tests.helpers.stubs import FixedPlanStrategy

__all__ = [
    # Constants
    "ETHEREUM",
    "BASE",
    "ARBITRUM",
    "POLYGON",
    "CHAINS",
    "SOLANA",
    "ETH",
    "USDC",
    "USDT",
    "DAI",
    "STABLECOINS",
    # Factories
    "make_intent",
    "make_intent_payload",
    "make_plan",
    "make_swap_leg",
    # Stubs
    "FixedPlanStrategy",
]
