"""Tests for single-hop swap and bridge pricing."""

import pytest

from intent_solver.markets import DEFAULT_MARKET_DATA, AmmVenue, Bridge
from intent_solver.models.types import LegKind
from intent_solver.pricing import best_bridge, best_swap_on_chain, price_bridge, price_swap
from tests.helpers import ARBITRUM, BASE, DAI, ETH, ETHEREUM, POLYGON, SOLANA, USDC, USDT


class TestPriceSwap:
    """price_swap deducts the AMM fee and 20 bps slippage in reference units."""

    def test_stablecoin_swap(self):
        quote = price_swap(100.0, USDC, USDT, 6, DEFAULT_MARKET_DATA)

        # 100 - 0.06 fee - 0.20 slippage
        assert quote.amount_out == pytest.approx(99.74)
        assert quote.fee == pytest.approx(0.06)

    def test_fee_returned_in_from_token_units(self):
        quote = price_swap(1.0, ETH, USDC, 6, DEFAULT_MARKET_DATA)

        # 3200 - 1.92 fee - 6.40 slippage
        assert quote.amount_out == pytest.approx(3191.68)
        assert quote.fee == pytest.approx(0.0006)

    def test_converts_into_to_token(self):
        quote = price_swap(3200.0, USDC, ETH, 6, DEFAULT_MARKET_DATA)

        assert quote.amount_out == pytest.approx(3191.68 / 3200)
        assert quote.fee == pytest.approx(1.92)

    def test_zero_fee_still_pays_slippage(self):
        quote = price_swap(100.0, USDC, DAI, 0, DEFAULT_MARKET_DATA)

        assert quote.amount_out == pytest.approx(99.8)
        assert quote.fee == 0

    def test_output_floored_at_zero(self):
        """A fee plus slippage above the input value yields zero, never negative."""
        quote = price_swap(100.0, USDC, USDT, 10_000, DEFAULT_MARKET_DATA)

        assert quote.amount_out == 0
        assert quote.fee == pytest.approx(100.0)

    def test_unknown_token_raises(self):
        with pytest.raises(KeyError):
            price_swap(100.0, "DOGE", USDT, 6, DEFAULT_MARKET_DATA)


class TestPriceBridge:
    """price_bridge takes a flat fee and converts nothing."""

    def test_flat_fee(self):
        quote = price_bridge(100.0, 8)

        assert quote.fee == pytest.approx(0.08)
        assert quote.amount_out == pytest.approx(99.92)

    def test_zero_fee(self):
        quote = price_bridge(42.0, 0)

        assert quote.fee == 0
        assert quote.amount_out == 42.0

    def test_full_fee_leaves_nothing(self):
        quote = price_bridge(10.0, 10_000)

        assert quote.amount_out == 0


class TestBestSwapOnChain:
    """best_swap_on_chain keeps the AMM with the strictly greatest output."""

    def test_picks_cheapest_amm(self):
        leg = best_swap_on_chain(ETHEREUM, 100.0, USDC, USDT, DEFAULT_MARKET_DATA)

        assert leg.kind == LegKind.SWAP
        assert leg.provider == "UniV3@Ethereum"
        assert leg.chain == ETHEREUM
        assert leg.from_token == USDC
        assert leg.to_token == USDT
        assert leg.est_in == 100.0
        assert leg.est_out == pytest.approx(99.74)
        assert leg.fee == pytest.approx(0.06)

    def test_best_amm_not_first_in_table(self):
        """On Base, UniV3 (6 bps) beats Aerodrome (8 bps) listed before it."""
        leg = best_swap_on_chain(BASE, 100.0, USDC, USDT, DEFAULT_MARKET_DATA)

        assert leg.provider == "UniV3@Base"

    def test_tie_keeps_first_evaluated(self):
        market = DEFAULT_MARKET_DATA.with_overrides(
            amms={
                **DEFAULT_MARKET_DATA.amms,
                POLYGON: (AmmVenue("First", 10), AmmVenue("Second", 10)),
            }
        )

        leg = best_swap_on_chain(POLYGON, 100.0, USDC, DAI, market)

        assert leg.provider == "First@Polygon"

    def test_chain_without_amm_raises(self):
        with pytest.raises(LookupError):
            best_swap_on_chain(SOLANA, 100.0, USDC, USDT, DEFAULT_MARKET_DATA)


class TestBestBridge:
    """best_bridge filters by chain pair and keeps the greatest output."""

    def test_picks_cheapest_connecting_bridge(self):
        leg = best_bridge(ETHEREUM, BASE, 100.0, USDC, DEFAULT_MARKET_DATA)

        assert leg is not None
        assert leg.kind == LegKind.BRIDGE
        assert leg.provider == "HyperLoop"
        assert leg.chain == ETHEREUM
        assert leg.bridge_to_chain == BASE
        assert leg.token == USDC
        assert leg.from_token is None
        assert leg.est_out == pytest.approx(99.95)
        assert leg.fee == pytest.approx(0.05)

    def test_only_bridges_covering_both_chains(self):
        """ZKPort is cheaper but does not reach Ethereum."""
        leg = best_bridge(ETHEREUM, POLYGON, 100.0, USDC, DEFAULT_MARKET_DATA)

        assert leg is not None
        assert leg.provider == "ConnextX"

    def test_zkport_between_l2s(self):
        leg = best_bridge(ARBITRUM, POLYGON, 100.0, USDC, DEFAULT_MARKET_DATA)

        assert leg is not None
        assert leg.provider == "ZKPort"
        assert leg.est_out == pytest.approx(99.94)

    def test_no_route_returns_none(self, unconnected_market):
        assert best_bridge(ETHEREUM, SOLANA, 100.0, USDC, unconnected_market) is None

    def test_tie_keeps_first_evaluated(self):
        market = DEFAULT_MARKET_DATA.with_overrides(
            bridges=[
                Bridge("Alpha", frozenset({ETHEREUM, BASE}), 5),
                Bridge("Beta", frozenset({ETHEREUM, BASE}), 5),
            ]
        )

        leg = best_bridge(ETHEREUM, BASE, 100.0, USDC, market)

        assert leg is not None
        assert leg.provider == "Alpha"
