"""Constants shared by the pricer, strategies and scorer."""

# Basis points per unit (1 bps = 1/10000)
BPS_BASE = 10_000

# Fixed slippage assumed by every simulated swap (20 bps)
SIMULATED_SLIPPAGE_BPS = 20

# Upper bound accepted for an intent's slippage tolerance (100%)
MAX_SLIPPAGE_BPS = BPS_BASE

# Solver names reported on plans
SWAP_THEN_BRIDGE_SOLVER = "RouteCraft v1"
BRIDGE_THEN_SWAP_SOLVER = "TeleportX v2"

# Seconds shaved off the ETA of bridge-then-swap plans
BRIDGE_THEN_SWAP_ETA_BONUS_SEC = 4


def bps_to_fraction(bps: float) -> float:
    """Convert basis points to a fraction (25 -> 0.0025)."""
    return bps / BPS_BASE


# Fee-to-input value ratio above which a plan's fees are graded "high" (0.04%)
HIGH_FEE_RATIO = 0.0004
