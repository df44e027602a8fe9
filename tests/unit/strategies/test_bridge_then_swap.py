"""Tests for the bridge-then-swap strategy."""

import pytest

from intent_solver.constants import BRIDGE_THEN_SWAP_SOLVER
from intent_solver.models.types import LegKind
from intent_solver.strategies import BridgeThenSwapStrategy
from tests.helpers import ARBITRUM, BASE, DAI, ETHEREUM, POLYGON, SOLANA, USDC, USDT, make_intent


class TestBridgeThenSwapRoute:
    """Leg construction over the reference tables."""

    def test_bridge_then_swap_legs(self, reference_market):
        plan = BridgeThenSwapStrategy(reference_market).try_solve(make_intent())

        assert plan is not None
        assert plan.solver == BRIDGE_THEN_SWAP_SOLVER
        bridge, swap = plan.legs
        assert bridge.kind == LegKind.BRIDGE
        assert bridge.provider == "HyperLoop"
        assert bridge.token == USDC
        assert swap.kind == LegKind.SWAP
        assert swap.chain == BASE
        assert swap.provider == "UniV3@Base"
        assert (swap.from_token, swap.to_token) == (USDC, USDT)

    def test_swap_consumes_bridge_output(self, reference_market):
        plan = BridgeThenSwapStrategy(reference_market).try_solve(make_intent())

        assert plan is not None
        bridge, swap = plan.legs
        assert bridge.est_in == 100.0
        assert swap.est_in == bridge.est_out
        assert plan.total_out == swap.est_out
        assert plan.total_out == pytest.approx(99.95 * 0.9974)

    def test_same_chain_swaps_only(self, reference_market):
        intent = make_intent(src_chain=POLYGON, dst_chain=POLYGON, dst_token=DAI)

        plan = BridgeThenSwapStrategy(reference_market).try_solve(intent)

        assert plan is not None
        assert [leg.kind for leg in plan.legs] == [LegKind.SWAP]
        assert plan.legs[0].provider == "UniV3@Polygon"

    def test_noop_intent_yields_no_plan(self, reference_market):
        intent = make_intent(dst_chain=ETHEREUM, dst_token=USDC)

        assert BridgeThenSwapStrategy(reference_market).try_solve(intent) is None


class TestBridgeThenSwapMissingBridge:
    """A missing bridge does not abandon the route (unlike swap-then-bridge)."""

    def test_unreachable_pair_keeps_destination_swap(self, unconnected_market):
        intent = make_intent(dst_chain=SOLANA, dst_token=USDT)

        plan = BridgeThenSwapStrategy(unconnected_market).try_solve(intent)

        assert plan is not None
        (swap,) = plan.legs
        assert swap.kind == LegKind.SWAP
        assert swap.provider == "Orca@Solana"
        assert swap.est_in == 100.0

    def test_unreachable_pair_same_token_yields_no_plan(self, unconnected_market):
        intent = make_intent(dst_chain=SOLANA, dst_token=USDC)

        assert BridgeThenSwapStrategy(unconnected_market).try_solve(intent) is None


class TestBridgeThenSwapMetrics:
    """Plan-level metrics."""

    def test_eta_includes_four_second_bonus(self, reference_market):
        plan = BridgeThenSwapStrategy(reference_market).try_solve(make_intent())

        assert plan is not None
        assert plan.eta_sec == 50 + 20 - 4

    def test_same_chain_eta(self, reference_market):
        intent = make_intent(src_chain=POLYGON, dst_chain=POLYGON, dst_token=DAI)

        plan = BridgeThenSwapStrategy(reference_market).try_solve(intent)

        assert plan is not None
        assert plan.eta_sec == 15 - 4

    def test_eta_never_negative(self, reference_market):
        market = reference_market.with_overrides(
            chain_latency={**reference_market.chain_latency, POLYGON: 1}
        )
        intent = make_intent(src_chain=POLYGON, dst_chain=POLYGON, dst_token=DAI)

        plan = BridgeThenSwapStrategy(market).try_solve(intent)

        assert plan is not None
        assert plan.eta_sec == 0

    def test_privacy_supported_off_ethereum(self, reference_market):
        intent = make_intent(src_chain=ETHEREUM, dst_chain=ARBITRUM)

        plan = BridgeThenSwapStrategy(reference_market).try_solve(intent)

        assert plan is not None
        assert plan.privacy_supported is True

    def test_no_privacy_into_ethereum(self, reference_market):
        intent = make_intent(src_chain=BASE, dst_chain=ETHEREUM)

        plan = BridgeThenSwapStrategy(reference_market).try_solve(intent)

        assert plan is not None
        assert plan.privacy_supported is False
