"""Static market data tables used to simulate swaps and bridges.

The solver never reads these tables as globals: a ``MarketData`` instance is
injected into every strategy, so tests can swap in alternate fixtures.
``DEFAULT_MARKET_DATA`` holds the reference tables of the demo.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from intent_solver.constants import BPS_BASE


def _validate_fee_bps(owner: str, fee_bps: int) -> int:
    """Validate and return a fee in basis points.

    Raises:
        ValueError: If the fee is outside 0..10000 bps
    """
    if not 0 <= fee_bps <= BPS_BASE:
        raise ValueError(f"Invalid fee for {owner}: {fee_bps} bps (must be 0..{BPS_BASE})")
    return fee_bps


@dataclass(frozen=True)
class Bridge:
    """A bridge that moves a token between any two chains of its set.

    Attributes:
        name: Provider name reported on bridge legs
        chains: Chains this bridge connects (any pair within the set)
        fee_bps: Flat fee taken from the bridged amount
        latency_sec: Advertised transfer latency (informational)
    """

    name: str
    chains: frozenset[str]
    fee_bps: int
    latency_sec: int = 0

    def __post_init__(self) -> None:
        # Accept any iterable of chains but store a frozenset
        object.__setattr__(self, "chains", frozenset(self.chains))
        _validate_fee_bps(self.name, self.fee_bps)

    def connects(self, chain_a: str, chain_b: str) -> bool:
        """True if both chains are in this bridge's chain set."""
        return chain_a in self.chains and chain_b in self.chains


@dataclass(frozen=True)
class AmmVenue:
    """An automated market maker available on one chain."""

    name: str
    fee_bps: int

    def __post_init__(self) -> None:
        _validate_fee_bps(self.name, self.fee_bps)


@dataclass(frozen=True)
class MarketData:
    """Read-only market tables for one solver instance.

    Attributes:
        mid_prices: Token mid-price in the reference unit (USDC)
        chain_latency: Estimated settlement latency per chain, in seconds
        bridges: Available bridges, in evaluation order
        amms: AMMs per chain, in evaluation order
        least_private_chain: Chain on which bridge-then-swap plans report
            no privacy support
    """

    mid_prices: Mapping[str, float]
    chain_latency: Mapping[str, int]
    bridges: tuple[Bridge, ...]
    amms: Mapping[str, tuple[AmmVenue, ...]]
    least_private_chain: str | None = None
    _chain_order: tuple[str, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "mid_prices", MappingProxyType(dict(self.mid_prices)))
        object.__setattr__(self, "chain_latency", MappingProxyType(dict(self.chain_latency)))
        object.__setattr__(self, "bridges", tuple(self.bridges))
        object.__setattr__(
            self,
            "amms",
            MappingProxyType({chain: tuple(venues) for chain, venues in self.amms.items()}),
        )
        object.__setattr__(self, "_chain_order", tuple(self.chain_latency))
        self._validate()

    def _validate(self) -> None:
        """Check the tables are internally consistent.

        Raises:
            ValueError: On the first inconsistency found
        """
        if not self.mid_prices:
            raise ValueError("Market data needs at least one token price")
        for token, price in self.mid_prices.items():
            if price <= 0:
                raise ValueError(f"Mid-price for {token} must be positive, got {price}")

        for chain, latency in self.chain_latency.items():
            if latency < 0:
                raise ValueError(f"Latency for {chain} cannot be negative, got {latency}")

        for chain in self.chain_latency:
            if not self.amms.get(chain):
                raise ValueError(f"No AMM registered for chain {chain}")
        for chain in self.amms:
            if chain not in self.chain_latency:
                raise ValueError(f"AMM table references unknown chain {chain}")

        for bridge in self.bridges:
            unknown = sorted(c for c in bridge.chains if c not in self.chain_latency)
            if unknown:
                raise ValueError(f"Bridge {bridge.name} references unknown chains {unknown}")

        if self.least_private_chain is not None and (
            self.least_private_chain not in self.chain_latency
        ):
            raise ValueError(f"Unknown least-private chain {self.least_private_chain}")

    @property
    def chains(self) -> tuple[str, ...]:
        """Known chains, in table order."""
        return self._chain_order

    @property
    def tokens(self) -> tuple[str, ...]:
        """Known tokens, in table order."""
        return tuple(self.mid_prices)

    def price(self, token: str) -> float:
        """Mid-price of a token in the reference unit.

        Raises:
            KeyError: If the token has no price
        """
        return self.mid_prices[token]

    def latency(self, chain: str) -> int:
        """Latency estimate of a chain, in seconds."""
        return self.chain_latency[chain]

    def amms_on(self, chain: str) -> tuple[AmmVenue, ...]:
        """AMMs registered on a chain (empty if none)."""
        return self.amms.get(chain, ())

    def bridges_between(self, chain_a: str, chain_b: str) -> list[Bridge]:
        """Bridges connecting two chains, in table order."""
        return [bridge for bridge in self.bridges if bridge.connects(chain_a, chain_b)]

    def with_overrides(
        self,
        *,
        bridges: Iterable[Bridge] | None = None,
        amms: Mapping[str, Iterable[AmmVenue]] | None = None,
        chain_latency: Mapping[str, int] | None = None,
        mid_prices: Mapping[str, float] | None = None,
    ) -> MarketData:
        """Return a copy with some tables replaced."""
        return MarketData(
            mid_prices=mid_prices if mid_prices is not None else self.mid_prices,
            chain_latency=chain_latency if chain_latency is not None else self.chain_latency,
            bridges=tuple(bridges) if bridges is not None else self.bridges,
            amms=(
                {chain: tuple(venues) for chain, venues in amms.items()}
                if amms is not None
                else self.amms
            ),
            least_private_chain=self.least_private_chain,
        )


# Reference tables of the demo (prices in USDC)
DEFAULT_MARKET_DATA = MarketData(
    mid_prices={"ETH": 3200.0, "USDC": 1.0, "USDT": 1.0, "DAI": 1.0},
    chain_latency={"Ethereum": 50, "Base": 20, "Arbitrum": 25, "Polygon": 15},
    bridges=(
        Bridge("ConnextX", frozenset({"Ethereum", "Base", "Arbitrum", "Polygon"}), 8, 30),
        Bridge("HyperLoop", frozenset({"Ethereum", "Base"}), 5, 18),
        Bridge("ZKPort", frozenset({"Arbitrum", "Polygon", "Base"}), 6, 16),
    ),
    amms={
        "Ethereum": (AmmVenue("UniV3", 6), AmmVenue("Sushi", 25)),
        "Base": (AmmVenue("Aerodrome", 8), AmmVenue("UniV3", 6)),
        "Arbitrum": (AmmVenue("Camelot", 10), AmmVenue("UniV3", 6)),
        "Polygon": (AmmVenue("QuickSwap", 24), AmmVenue("UniV3", 6)),
    },
    least_private_chain="Ethereum",
)
