import math
from decimal import Decimal, ROUND_HALF_UP, localcontext

from pydantic import BaseModel, Field

from . import config

QUANTUM = Decimal(1).scaleb(-config.DECIMAL_PLACES)

class StakeSplit(BaseModel):
    multiplier: float = Field(..., description="Payout multiplier for the outcome (0 = unset)")
    stake: float = Field(..., description="Amount to place on the outcome")
    returns: float = Field(..., description="Payout if the outcome wins")
    net_profit: float = Field(..., description="Payout minus the amount placed on the outcome")

def round_half_up(value: float) -> float:
    """
    Round to the fixed number of decimal places, ties away from zero.

    Works on the exact binary value of the float, so 666.67 * 1.5
    (stored as 1000.00499...) rounds down to 1000.0. Non-finite values
    are returned unchanged.
    """
    if not math.isfinite(value):
        return value
    with localcontext() as ctx:
        # Enough digits for the integer part of any finite double
        ctx.prec = 400
        rounded = Decimal(value).quantize(QUANTUM, rounding=ROUND_HALF_UP)
    return float(rounded)

def round2(value: float) -> float:
    """Fixed-decimal rounding where anything non-finite collapses to 0."""
    if not math.isfinite(value):
        return config.FALLBACK_AMOUNT
    result = round_half_up(value)
    return result if math.isfinite(result) else config.FALLBACK_AMOUNT

def safe_divide(numerator: float, denominator: float) -> float:
    if denominator == 0 or not math.isfinite(denominator) or not math.isfinite(numerator):
        return config.FALLBACK_AMOUNT
    return round2(numerator / denominator)

def per_outcome_stake(target_stake: float, multiplier: float) -> float:
    """
    Stake to place on one outcome so every configured outcome pays the same.

    Formula: stake = target_stake / multiplier

    The outcome with the larger multiplier gets the smaller stake. An
    unset multiplier (<= 0) gets nothing.
    """
    if multiplier <= 0:
        return config.FALLBACK_AMOUNT
    return safe_divide(target_stake, multiplier)

def outcome_return(target_stake: float, multiplier: float) -> float:
    stake = per_outcome_stake(target_stake, multiplier)
    return round2(stake * multiplier)

def net_profit(target_stake: float, multiplier: float) -> float:
    """Payout of one outcome minus what was placed on that outcome."""
    return round2(outcome_return(target_stake, multiplier) - per_outcome_stake(target_stake, multiplier))

def aggregate_stake(stake_a: float, stake_b: float) -> float:
    """
    Total committed across both outcomes.

    Unlike round2, a non-finite sum is passed through so the caller can
    decide to keep its previous value.
    """
    return round_half_up(stake_a + stake_b)

def split_stake(target_stake: float, multiplier: float) -> StakeSplit:
    return StakeSplit(
        multiplier=multiplier,
        stake=per_outcome_stake(target_stake, multiplier),
        returns=outcome_return(target_stake, multiplier),
        net_profit=net_profit(target_stake, multiplier),
    )
